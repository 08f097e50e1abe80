# contribkit/cli/__init__.py
"""
contrib CLI.

Usage:
    contrib install        # Set up the dev environment
    contrib check          # Read-only checks
    contrib lint           # Auto-fix
    contrib test -k name   # Tests under coverage
    contrib verify-docs    # Contributing guide integrity
"""

from contribkit.cli.cli import app

__all__ = ["app"]
