# contribkit/workflow/docs.py
"""`scripts/docs {serve|build}` - MkDocs wrapper."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from contribkit.config.schema import WorkflowConfig
from contribkit.core.paths import ProjectPaths
from contribkit.core.runner import Step, command_step, python_module


class DocsMode(str, Enum):
    """What scripts/docs should do."""

    SERVE = "serve"
    BUILD = "build"


def build_docs_steps(
    config: WorkflowConfig,
    mode: DocsMode,
    dev_addr: Optional[str] = None,
    strict: bool = False,
) -> list[Step]:
    """A single mkdocs step for the requested mode."""
    venv = config.install.venv
    args = ["--config-file", config.docs.config_file]

    if mode == DocsMode.SERVE:
        if dev_addr:
            args += ["--dev-addr", dev_addr]
        return [command_step("MkDocs Serve", python_module("mkdocs", "serve", *args, venv=venv))]

    args += ["--site-dir", str(ProjectPaths.site_dir(config.docs.site_dir))]
    if strict:
        args.append("--strict")
    return [command_step("MkDocs Build", python_module("mkdocs", "build", *args, venv=venv))]
