# contribkit/logging/logger.py
"""
Unified logging setup for contribkit.

All modules use:
    from contribkit.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in the CLI entrypoint (see contribkit.cli.cli).
User-facing output goes through contribkit.cli.ui; logging is for diagnostics.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """
    Configure the contribkit logger hierarchy.

    Safe to call multiple times - handler duplication is prevented,
    only the level is updated.
    """
    root = logging.getLogger("contribkit")
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here - configuration happens in configure_logging().
    """
    return logging.getLogger(name)
