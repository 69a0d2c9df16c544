"""JSON manifest describing the targets to integrate."""

from __future__ import annotations

from .loader import ManifestError, load_targets, parse_targets
from .schema import Manifest, ManifestTarget

__all__ = ["Manifest", "ManifestError", "ManifestTarget", "load_targets", "parse_targets"]
