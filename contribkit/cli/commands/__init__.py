# contribkit/cli/commands/__init__.py
"""CLI command implementations, imported lazily by contribkit.cli.cli."""
