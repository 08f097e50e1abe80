# contribkit/config/__init__.py
"""
Workflow configuration.

Usage:
    from contribkit.config import load_workflow_config

    config = load_workflow_config()
"""

from contribkit.config.loader import deep_merge, load_workflow_config, load_yaml
from contribkit.config.schema import WorkflowConfig

__all__ = ["WorkflowConfig", "deep_merge", "load_workflow_config", "load_yaml"]
