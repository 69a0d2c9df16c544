"""Domain port definitions for adapters."""

from __future__ import annotations

from .project_graph import (
    BuildConfiguration,
    ConsumingNode,
    FileReference,
    ProjectGraph,
    ProjectGraphError,
    ProjectGraphLoader,
    ShellScriptPhase,
)
from .reporting import IntegrationReporter

__all__ = [
    "BuildConfiguration",
    "ConsumingNode",
    "FileReference",
    "IntegrationReporter",
    "ProjectGraph",
    "ProjectGraphError",
    "ProjectGraphLoader",
    "ShellScriptPhase",
]
