"""Load :class:`~podwire.domain.model.Target` definitions from a manifest file."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from podwire.domain.model import Target

from .schema import Manifest, ManifestTarget

if TYPE_CHECKING:
    from collections.abc import Mapping

log = getLogger(__name__)


class ManifestError(ValueError):
    """Raised when a manifest cannot be read or does not validate."""


def translate_target(entry: ManifestTarget, *, base_dir: Path) -> Target:
    user_project = Path(entry.user_project).expanduser()
    if not user_project.is_absolute():
        user_project = base_dir / user_project
    return Target(
        name=entry.name,
        product_basename=entry.product_basename or entry.name,
        requires_framework=entry.requires_framework,
        copy_resources_script_relative_path=entry.copy_resources_script,
        user_project_path=user_project,
        user_target_names=tuple(entry.user_targets),
        xcconfig_relative_paths=dict(entry.xcconfigs),
    )


def parse_targets(payload: str | bytes | Mapping[str, object], *, base_dir: Path) -> list[Target]:
    """Validate ``payload`` (raw JSON or an already decoded mapping) into targets."""

    try:
        if isinstance(payload, str | bytes):
            manifest = Manifest.model_validate_json(payload)
        else:
            manifest = Manifest.model_validate(payload)
    except ValidationError as exc:
        raise ManifestError(f"Invalid manifest: {exc}") from exc
    return [translate_target(entry, base_dir=base_dir) for entry in manifest.targets]


def load_targets(path: Path) -> list[Target]:
    """Read the manifest at ``path``; relative project paths resolve against its folder."""

    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise ManifestError(f"Unable to read manifest {path}: {exc}") from exc
    targets = parse_targets(payload, base_dir=path.parent)
    log.debug("Loaded %d target(s) from %s", len(targets), path)
    return targets
