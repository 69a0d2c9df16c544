"""Integration of a generated Pods product into a user project.

Each manager module owns one idempotent mutation and reports whether it
changed the graph; :mod:`.integrator` runs them in a fixed order and decides
how to persist the outcome.
"""

from __future__ import annotations

from .build_phases import (
    ensure_check_manifest_lock_phase,
    ensure_copy_resources_phase,
    ensure_shell_script_phase,
)
from .context import IntegrationContext
from .file_references import ensure_product_reference, node_references_product
from .integrator import (
    DEFAULT_STEPS,
    IntegrationError,
    IntegrationResult,
    IntegrationStep,
    TargetIntegrator,
)
from .legacy import normalize_legacy_copy_script
from .xcconfig import integrate_xcconfigs

__all__ = [
    "DEFAULT_STEPS",
    "IntegrationContext",
    "IntegrationError",
    "IntegrationResult",
    "IntegrationStep",
    "TargetIntegrator",
    "ensure_check_manifest_lock_phase",
    "ensure_copy_resources_phase",
    "ensure_product_reference",
    "ensure_shell_script_phase",
    "integrate_xcconfigs",
    "node_references_product",
    "normalize_legacy_copy_script",
]
