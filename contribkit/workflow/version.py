# contribkit/workflow/version.py
"""
Version consistency check (`scripts/sync-version`).

The first semantic version found in the changelog must equal the first one
found in the version file. Releases are cut from the changelog, so a
mismatch means one of the two was not bumped.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from contribkit.config.schema import WorkflowConfig
from contribkit.core.exceptions import DocumentError
from contribkit.core.paths import ProjectPaths
from contribkit.logging.logger import get_logger

logger = get_logger(__name__)

SEMVER_RE = re.compile(
    r"(?<![\d.])"
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:(?:a|b|rc)(?:0|[1-9]\d*))?(?:\.post\d+)?(?:\.dev\d+)?"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)


def find_version(text: str) -> Optional[str]:
    """Return the first semantic version in `text` (PEP 440 "1.0.0rc1" included), or None."""
    match = SEMVER_RE.search(text)
    return match.group(0) if match else None


def read_version(path: Path) -> Optional[str]:
    """First semantic version in a file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(f"Cannot read file: {e}", path=path) from e
    return find_version(text)


def check_version(config: WorkflowConfig) -> tuple[bool, str]:
    """
    Compare the changelog and package versions.

    Returns:
        (ok, message)
    """
    version_path = ProjectPaths.resolve(config.project.version_file)
    changelog_path = ProjectPaths.resolve(config.project.changelog)

    for path in (version_path, changelog_path):
        if not path.exists():
            return False, f"File not found: {path}"

    version = read_version(version_path)
    changelog_version = read_version(changelog_path)
    logger.debug(f"version file={version!r} changelog={changelog_version!r}")

    if version is None:
        return False, f"No version found in {config.project.version_file}"
    if changelog_version is None:
        return False, f"No version found in {config.project.changelog}"

    if version != changelog_version:
        return False, (
            f"Version in {config.project.changelog} ({changelog_version}) does not match "
            f"version in {config.project.version_file} ({version})"
        )

    return True, f"Version {version} is consistent"


def current_version(config: WorkflowConfig) -> Optional[str]:
    """The package version from the version file, if it can be found."""
    path = ProjectPaths.resolve(config.project.version_file)
    if not path.exists():
        return None
    return read_version(path)
