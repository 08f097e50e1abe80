# tests/helpers.py
"""Plain helpers shared by test modules (fixtures live in conftest.py)."""

from __future__ import annotations

import subprocess
from typing import Callable

HELP_OUTPUT = "Usage: demo [OPTIONS] COMMAND [ARGS]...\n\n  Demo server.\n"

SCRIPT_NAMES = ["install", "check", "lint", "test", "coverage", "docs", "build", "publish"]

CONTRIBUTING = """\
# Contributing

## Development

```shell
$ ./scripts/install
```

## Project Structure

```
demo/
├── demo/      # Main package
├── tests/     # Test suite
└── scripts/   # Development scripts
```

## Testing and Linting

Run the tests with `./scripts/test`, or a subset with `./scripts/test -k name`.

```shell
$ ./scripts/lint
$ ./scripts/check
$ ./scripts/coverage
```

Coverage must stay above 98.35%.

## Documenting

Preview with `./scripts/docs serve`. Release with `./scripts/build` and `./scripts/publish`.
"""

INDEX = """\
# demo

<!-- :cli_usage: -->
```
$ demo --help
Usage: demo [OPTIONS] COMMAND [ARGS]...

  Demo server.
```

More text.
"""

CONFIG = """\
project:
  name: demo
  package: demo
  version_file: demo/__init__.py
  changelog: docs/release-notes.md
lint:
  paths: [demo, tests]
typecheck:
  paths: [demo]
docs:
  cli_usage:
    command: [demo, --help]
"""


def completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> Callable:
    """side_effect for subprocess.run returning a fixed CompletedProcess."""

    def _run(cmd, *args, **kwargs):
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

    return _run


def failing_on(fragment: str) -> Callable:
    """side_effect for subprocess.run: fail any command containing `fragment`."""

    def _run(cmd, *args, **kwargs):
        returncode = 1 if fragment in cmd else 0
        stdout = HELP_OUTPUT if "--help" in cmd else ""
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")

    return _run


def commands_run(mock) -> list[list[str]]:
    """The argv of every subprocess.run call, in order."""
    return [list(c.args[0]) for c in mock.call_args_list]
