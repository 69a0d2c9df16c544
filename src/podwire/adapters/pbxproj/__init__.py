"""Adapter binding the project graph ports to ``pbxproj``."""

from __future__ import annotations

from .graph import (
    FRAMEWORKS_GROUP_NAME,
    PODS_GROUP_NAME,
    PbxprojConsumingNode,
    PbxprojFileReference,
    PbxprojProjectGraph,
    load_project_graph,
)

__all__ = [
    "FRAMEWORKS_GROUP_NAME",
    "PODS_GROUP_NAME",
    "PbxprojConsumingNode",
    "PbxprojFileReference",
    "PbxprojProjectGraph",
    "load_project_graph",
]
