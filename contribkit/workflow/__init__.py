# contribkit/workflow/__init__.py
"""
Contributor workflows, one module per `scripts/<name>` entry point.

Each module builds a list of Steps from the WorkflowConfig; running and
reporting them is the CLI's job (see contribkit.cli.commands).
"""
