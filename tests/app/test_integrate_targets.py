from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from podwire.app import integrate_targets
from podwire.domain.integration import IntegrationError
from tests.helpers.project_graph import make_target

if TYPE_CHECKING:
    from pathlib import Path

    from tests.helpers.project_graph import (
        FakeProjectGraph,
        FakeProjectGraphLoader,
        RecordingReporter,
    )


def test_targets_sharing_a_project_are_integrated_in_sequence(
    graph: FakeProjectGraph,
    loader: FakeProjectGraphLoader,
    reporter: RecordingReporter,
    project_path: Path,
) -> None:
    targets = [make_target(project_path), make_target(project_path, name="Charts")]

    results = integrate_targets(targets, loader=loader, reporter=reporter)

    assert [result.target_name for result in results] == ["MathKit", "Charts"]
    assert all(result.dirty for result in results)
    assert loader.loads == [project_path, project_path]
    assert [ref.path for ref in graph.node("App").framework_references()] == [
        "MathKit.framework",
        "Charts.framework",
    ]


def test_first_failure_aborts_remaining_targets(
    loader: FakeProjectGraphLoader,
    reporter: RecordingReporter,
    project_path: Path,
    tmp_path: Path,
) -> None:
    missing = make_target(tmp_path / "Missing.xcodeproj")

    with pytest.raises(IntegrationError):
        integrate_targets([missing, make_target(project_path)], loader=loader, reporter=reporter)

    assert loader.loads == [tmp_path / "Missing.xcodeproj"]
