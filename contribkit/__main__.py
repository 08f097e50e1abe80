# contribkit/__main__.py
"""python -m contribkit <command> - used by the scripts/ wrappers."""

from contribkit.cli.cli import app

if __name__ == "__main__":
    app(prog_name="contrib")
