"""Migration of copy-resources phases written by older tool versions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from podwire.domain.model import COPY_RESOURCES_PHASE_NAME, copy_resources_script

if TYPE_CHECKING:
    from podwire.domain.model import Target
    from podwire.domain.ports import ConsumingNode


def normalize_legacy_copy_script(node: ConsumingNode, target: Target) -> bool:
    """Rewrite every copy-resources phase of ``node`` to the quoted script path.

    Applies to already-integrated nodes as well. Returns whether any phase changed.
    """

    script = copy_resources_script(target.copy_resources_script_relative_path)
    changes = False
    for phase in node.shell_script_phases():
        if phase.name != COPY_RESOURCES_PHASE_NAME:
            continue
        if phase.script != script:
            phase.script = script
            changes = True
    return changes
