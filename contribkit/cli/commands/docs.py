# contribkit/cli/commands/docs.py
"""
Serve or build the documentation site.

Usage:
    contrib docs serve
    contrib docs build --strict
"""

from __future__ import annotations

from typing import Optional

from contribkit.cli.utils import execute, load_config
from contribkit.workflow.docs import DocsMode, build_docs_steps


def command(mode: DocsMode, dev_addr: Optional[str] = None, strict: bool = False) -> None:
    config = load_config()
    execute(
        f"contrib docs {mode.value}",
        build_docs_steps(config, mode, dev_addr=dev_addr, strict=strict),
    )
