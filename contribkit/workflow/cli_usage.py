# contribkit/workflow/cli_usage.py
"""
CLI usage docs - keep the `--help` output embedded in the docs current.

Each target document carries a marker line followed by a fenced block:

    <!-- :cli_usage: -->
    ```
    $ contrib --help
    ...help text...
    ```

`generate` rewrites the fenced block with fresh help output (scripts/lint).
`check` only reports stale documents (scripts/check).
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from contribkit.config.schema import CliUsageConfig
from contribkit.core.exceptions import DocumentError
from contribkit.core.paths import ProjectPaths
from contribkit.logging.logger import get_logger

logger = get_logger(__name__)

FENCE = "```"


@dataclass
class UsageUpdate:
    """Outcome for one target document."""

    path: Path
    stale: bool
    written: bool = False


# =============================================================================
# Help Output
# =============================================================================


def get_usage_lines(config: CliUsageConfig) -> list[str]:
    """
    Run the CLI help command and render it as a fenced block.

    Colors are disabled and the width pinned so output is stable
    across terminals.
    """
    env = {
        **os.environ,
        "NO_COLOR": "1",
        "TERM": "dumb",
        "COLUMNS": str(config.width),
    }
    cmd = [_resolve_executable(config.command[0]), *config.command[1:]]
    try:
        result = subprocess.run(
            cmd,
            cwd=ProjectPaths.root(),
            env=env,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise DocumentError(f"CLI command not found: {config.command[0]}") from e

    if result.returncode != 0:
        raise DocumentError(
            f"`{' '.join(config.command)}` exited with code {result.returncode}: "
            f"{result.stderr.strip()}"
        )

    help_lines = [line.rstrip() for line in result.stdout.splitlines()]
    while help_lines and not help_lines[-1]:
        help_lines.pop()

    return [FENCE, f"$ {' '.join(config.command)}", *help_lines, FENCE]


def _resolve_executable(name: str) -> str:
    """Prefer the executable installed next to the running interpreter (the venv)."""
    search = os.pathsep.join([os.path.dirname(sys.executable), os.environ.get("PATH", "")])
    return shutil.which(name, path=search) or name


# =============================================================================
# Document Rewriting
# =============================================================================


def find_usage_block(lines: list[str], marker: str, path: Optional[Path] = None) -> tuple[int, int]:
    """
    Locate the fenced block after the marker.

    Returns:
        (start, end) - index of the opening fence and of the closing fence

    Raises:
        DocumentError: If the marker, the opening fence or the closing fence is missing
    """
    try:
        marker_index = next(i for i, line in enumerate(lines) if line.strip() == marker)
    except StopIteration:
        raise DocumentError(f"Missing CLI usage marker {marker!r}", path=path) from None

    start = marker_index + 1
    if start >= len(lines) or not lines[start].strip().startswith(FENCE):
        raise DocumentError(f"Expected a code fence right after {marker!r}", path=path)

    for i in range(start + 1, len(lines)):
        if lines[i].strip() == FENCE:
            return start, i

    raise DocumentError(f"Unclosed code fence after {marker!r}", path=path)


def render_document(content: str, usage_lines: list[str], marker: str, path: Optional[Path] = None) -> str:
    """
    Return `content` with the usage block replaced.

    Everything outside the block is kept byte for byte; the block uses the
    line ending of its opening fence.
    """
    lines = content.splitlines(keepends=True)
    start, end = find_usage_block(lines, marker, path=path)

    newline = _line_ending(lines[start]) or "\n"
    block = [line + newline for line in usage_lines]
    if not _line_ending(lines[end]):
        # Closing fence was the last line, without a newline
        block[-1] = block[-1].rstrip("\r\n")

    return "".join(lines[:start] + block + lines[end + 1 :])


def _line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith(("\n", "\r")):
        return line[-1]
    return ""


def _read(path: Path) -> str:
    # newline="" keeps CRLF documents intact
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"Cannot read CLI usage target: {e}", path=path) from e


def _write(path: Path, content: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)


def update_cli_usage(config: CliUsageConfig, check: bool = False) -> list[UsageUpdate]:
    """
    Regenerate (or, with check=True, verify) every target document.

    The help command runs once and is shared by all targets.
    """
    usage_lines = get_usage_lines(config)
    updates: list[UsageUpdate] = []

    for target in config.targets:
        path = ProjectPaths.resolve(target)
        if not path.exists():
            raise DocumentError("CLI usage target not found", path=path)

        content = _read(path)
        output = render_document(content, usage_lines, config.marker, path=path)
        stale = output != content

        written = False
        if stale and not check:
            _write(path, output)
            written = True
            logger.debug(f"Rewrote CLI usage in {path}")

        updates.append(UsageUpdate(path=path, stale=stale, written=written))

    return updates


def check_cli_usage(config: CliUsageConfig) -> tuple[bool, str]:
    """In-process check step for scripts/check."""
    try:
        updates = update_cli_usage(config, check=True)
    except DocumentError as e:
        return False, str(e)

    stale = [u.path for u in updates if u.stale]
    if stale:
        names = ", ".join(_display(p) for p in stale)
        return False, f"CLI usage out of date in {names}. Run `scripts/lint` to fix."
    return True, "CLI usage docs are up to date"


def generate_cli_usage(config: CliUsageConfig) -> tuple[bool, str]:
    """In-process step for scripts/lint."""
    try:
        updates = update_cli_usage(config, check=False)
    except DocumentError as e:
        return False, str(e)

    written = [u for u in updates if u.written]
    if written:
        return True, f"Updated CLI usage in {len(written)} file(s)"
    return True, "CLI usage docs already up to date"


def _display(path: Path) -> str:
    root = ProjectPaths.root()
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
