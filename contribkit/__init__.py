# contribkit/__init__.py
"""
contribkit - the contributor workflow behind scripts/.

Every script a contributor runs is a thin wrapper around one command:

    ./scripts/install [-p python3.12]   contrib install
    ./scripts/check                     contrib check
    ./scripts/lint                      contrib lint
    ./scripts/test [pytest-args...]     contrib test
    ./scripts/coverage                  contrib coverage
    ./scripts/docs {serve|build}        contrib docs
    ./scripts/build                     contrib build
    ./scripts/publish                   contrib publish
    ./scripts/sync-version              contrib sync-version

Architecture:
    contribkit/
    ├── cli/          # Typer app + one module per command
    ├── workflow/     # Step lists for each script
    ├── integrity/    # Contributing guide checks
    ├── config/       # defaults.yaml + contribkit.yaml -> WorkflowConfig
    ├── core/         # paths, step runner, exceptions
    └── logging/      # configure_logging / get_logger
"""

__version__ = "0.1.0"
