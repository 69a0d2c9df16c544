"""Shell-script build phases installed into consuming nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from podwire.domain.model import (
    CHECK_MANIFEST_LOCK_PHASE_NAME,
    CHECK_MANIFEST_LOCK_SCRIPT,
    COPY_RESOURCES_PHASE_NAME,
    copy_resources_script,
)

if TYPE_CHECKING:
    from podwire.domain.model import Target
    from podwire.domain.ports import ConsumingNode, ShellScriptPhase

HIDE_ENV_VARS = "0"


def find_shell_script_phase(node: ConsumingNode, phase_name: str) -> ShellScriptPhase | None:
    return next((phase for phase in node.shell_script_phases() if phase.name == phase_name), None)


def ensure_shell_script_phase(
    node: ConsumingNode,
    phase_name: str,
    script: str,
    *,
    insert_at_front: bool,
) -> bool:
    """Make sure ``node`` has a phase named ``phase_name`` running ``script``.

    A missing phase is created at the front of the phase list when
    ``insert_at_front`` is set and appended otherwise. An existing phase keeps
    its position; only its script text is brought up to date. Returns whether
    the node was mutated.
    """

    phase = find_shell_script_phase(node, phase_name)
    if phase is None:
        phase = node.add_shell_script_phase(phase_name, at_front=insert_at_front)
        phase.script = script
        phase.show_env_vars_in_log = HIDE_ENV_VARS
        return True

    if phase.script == script:
        return False
    phase.script = script
    return True


def ensure_copy_resources_phase(node: ConsumingNode, target: Target) -> bool:
    script = copy_resources_script(target.copy_resources_script_relative_path)
    return ensure_shell_script_phase(
        node, COPY_RESOURCES_PHASE_NAME, script, insert_at_front=False
    )


def ensure_check_manifest_lock_phase(node: ConsumingNode) -> bool:
    # Runs before every other phase so a stale sandbox fails the build early.
    return ensure_shell_script_phase(
        node, CHECK_MANIFEST_LOCK_PHASE_NAME, CHECK_MANIFEST_LOCK_SCRIPT, insert_at_front=True
    )
