# contribkit/cli/commands/config.py
"""
Show the resolved workflow configuration (defaults + contribkit.yaml).

Usage:
    contrib config
    contrib config --json
"""

from __future__ import annotations

import json

import yaml

from contribkit.cli.ui import console, ui
from contribkit.cli.utils import load_config
from contribkit.core.paths import ProjectPaths


def command(as_json: bool = False) -> None:
    config = load_config()
    data = config.model_dump(mode="json")

    if as_json:
        console.print_json(json.dumps(data))
        return

    path = ProjectPaths.config()
    source = str(path) if path.exists() else "package defaults"
    ui.header("contrib config", source)
    ui.print(yaml.safe_dump(data, sort_keys=False).rstrip())
