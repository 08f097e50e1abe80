# contribkit/integrity/parser.py
"""
Parse contributing guides into the facts the integrity checks compare:

- script references   `./scripts/test -k foo` -> ScriptReference("test", ["-k", "foo"])
- coverage thresholds  "coverage above 98.35%" / `--fail-under=98.35`
- project structure    top-level entries of the "Project Structure" tree
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from contribkit.core.exceptions import DocumentError

SCRIPT_RE = re.compile(r"(?<![\w/.-])(?:\./)?scripts/([A-Za-z0-9][\w-]*)")
PERCENT_RE = re.compile(r"(?<![\d.])(\d{1,3}(?:\.\d+)?)\s*%")
FAIL_UNDER_RE = re.compile(r"--fail-under[= ](\d{1,3}(?:\.\d+)?)")
STRUCTURE_HEADING_RE = re.compile(r"^#{1,6}\s+.*project structure", re.IGNORECASE)
TREE_ENTRY_RE = re.compile(r"^(?:├──|└──|\|--|`--|\+--)\s*([^\s#]+)")
FENCE_RE = re.compile(r"^\s*(```|~~~)")


@dataclass
class ScriptReference:
    """One mention of a workflow script in a document."""

    name: str
    path: Path
    line: int
    args: list[str] = field(default_factory=list)


@dataclass
class ThresholdMention:
    value: float
    line: int


@dataclass
class StructureEntry:
    name: str
    line: int


@dataclass
class ContributingDoc:
    """Everything the integrity checks need from one document."""

    path: Path
    script_refs: list[ScriptReference] = field(default_factory=list)
    coverage_thresholds: list[ThresholdMention] = field(default_factory=list)
    structure_entries: list[StructureEntry] = field(default_factory=list)

    @property
    def script_names(self) -> set[str]:
        return {ref.name for ref in self.script_refs}

    @property
    def threshold_values(self) -> set[float]:
        return {t.value for t in self.coverage_thresholds}

    def first_reference(self, name: str) -> Optional[ScriptReference]:
        return next((ref for ref in self.script_refs if ref.name == name), None)


# =============================================================================
# Extraction
# =============================================================================


def _in_inline_code(line: str, pos: int) -> bool:
    return line.count("`", 0, pos) % 2 == 1


def _reference_args(line: str, end: int, in_fence: bool) -> list[str]:
    """Arguments following a script name, up to the end of its code span."""
    tail = line[end:]
    if not in_fence:
        if not _in_inline_code(line, end):
            return []
        tail = tail.split("`", 1)[0]
    # Shell comments in code blocks are not arguments
    tail = tail.split(" #", 1)[0]
    return tail.split()


def extract_script_refs(text: str, path: Path) -> list[ScriptReference]:
    refs: list[ScriptReference] = []
    in_fence = False

    for lineno, line in enumerate(text.splitlines(), start=1):
        if FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        for match in SCRIPT_RE.finditer(line):
            refs.append(
                ScriptReference(
                    name=match.group(1),
                    path=path,
                    line=lineno,
                    args=_reference_args(line, match.end(), in_fence),
                )
            )

    return refs


def extract_coverage_thresholds(text: str) -> list[ThresholdMention]:
    """
    The first percentage on each line that talks about coverage, plus any
    --fail-under values.

    Only the first percentage counts: "Required test coverage of 98.35% not
    reached. Total coverage: 96.53%" states one threshold, not two.
    """
    mentions: list[ThresholdMention] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        values = [float(v) for v in FAIL_UNDER_RE.findall(line)]
        if "coverage" in line.lower():
            match = PERCENT_RE.search(line)
            if match:
                values.append(float(match.group(1)))
        for value in dict.fromkeys(values):
            mentions.append(ThresholdMention(value=value, line=lineno))

    return mentions


def extract_structure(text: str) -> list[StructureEntry]:
    """Top-level entries of the first fenced tree under a "Project Structure" heading."""
    lines = text.splitlines()
    entries: list[StructureEntry] = []

    heading = next((i for i, line in enumerate(lines) if STRUCTURE_HEADING_RE.match(line)), None)
    if heading is None:
        return entries

    in_fence = False
    for i in range(heading + 1, len(lines)):
        line = lines[i]
        if FENCE_RE.match(line):
            if in_fence:
                break
            in_fence = True
            continue
        if not in_fence:
            if line.startswith("#"):
                # Next section started without a tree
                break
            continue
        match = TREE_ENTRY_RE.match(line)
        if match:
            entries.append(StructureEntry(name=match.group(1).rstrip("/"), line=i + 1))

    return entries


def parse_document(path: Path) -> ContributingDoc:
    """
    Parse a contributing guide.

    Raises:
        DocumentError: If the file can't be read
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"Cannot read document: {e}", path=path) from e

    return ContributingDoc(
        path=path,
        script_refs=extract_script_refs(text, path),
        coverage_thresholds=extract_coverage_thresholds(text),
        structure_entries=extract_structure(text),
    )
