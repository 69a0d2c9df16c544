from __future__ import annotations

from typing import TYPE_CHECKING

from podwire.domain.integration import (
    ensure_check_manifest_lock_phase,
    ensure_copy_resources_phase,
    ensure_shell_script_phase,
)
from podwire.domain.model import (
    CHECK_MANIFEST_LOCK_PHASE_NAME,
    CHECK_MANIFEST_LOCK_SCRIPT,
    COPY_RESOURCES_PHASE_NAME,
)
from tests.helpers.project_graph import (
    FakeConsumingNode,
    FakeFrameworksPhase,
    FakeShellScriptPhase,
    make_target,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_missing_phase_is_appended() -> None:
    node = FakeConsumingNode("App")

    mutated = ensure_shell_script_phase(node, "Lint", "lint\n", insert_at_front=False)

    assert mutated is True
    assert isinstance(node.phases[0], FakeFrameworksPhase)
    last = node.phases[-1]
    assert isinstance(last, FakeShellScriptPhase)
    assert (last.name, last.script, last.show_env_vars_in_log) == ("Lint", "lint\n", "0")


def test_missing_phase_is_inserted_at_front() -> None:
    node = FakeConsumingNode("App", phases=[FakeShellScriptPhase("Existing")])

    ensure_shell_script_phase(node, "Check", "check\n", insert_at_front=True)

    assert [getattr(phase, "name", None) for phase in node.phases] == ["Check", "Existing", None]


def test_existing_phase_with_same_script_is_untouched() -> None:
    phase = FakeShellScriptPhase("Lint", script="lint\n", show_env_vars_in_log="1")
    node = FakeConsumingNode("App", phases=[phase])

    mutated = ensure_shell_script_phase(node, "Lint", "lint\n", insert_at_front=False)

    assert mutated is False
    assert phase.show_env_vars_in_log == "1"
    assert node.mutations == 0


def test_existing_phase_script_is_overwritten_in_place() -> None:
    phase = FakeShellScriptPhase("Check", script="old\n")
    node = FakeConsumingNode("App", phases=[FakeShellScriptPhase("First"), phase])

    mutated = ensure_shell_script_phase(node, "Check", "new\n", insert_at_front=True)

    assert mutated is True
    assert phase.script == "new\n"
    assert node.phases.index(phase) == 1


def test_copy_resources_phase_uses_quoted_script_path(project_path: Path) -> None:
    node = FakeConsumingNode("App")

    ensure_copy_resources_phase(node, make_target(project_path))

    (phase,) = node.shell_script_phases()
    assert phase.name == COPY_RESOURCES_PHASE_NAME
    assert phase.script == '"Target Support Files/MathKit/MathKit-resources.sh"\n'


def test_check_manifest_lock_phase_script() -> None:
    node = FakeConsumingNode("App")

    assert ensure_check_manifest_lock_phase(node) is True
    assert ensure_check_manifest_lock_phase(node) is False

    phase = node.phases[0]
    assert isinstance(phase, FakeShellScriptPhase)
    assert phase.name == CHECK_MANIFEST_LOCK_PHASE_NAME
    assert phase.script == CHECK_MANIFEST_LOCK_SCRIPT
    assert phase.script.startswith(
        'diff "${PODS_ROOT}/../Podfile.lock" "${PODS_ROOT}/Manifest.lock" > /dev/null\n'
    )
    assert (
        "error: The sandbox is not in sync with the Podfile.lock. "
        "Run 'pod install' or update your CocoaPods installation.\n"
    ) in phase.script
    assert phase.script.endswith("    exit 1\nfi\n")
