from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from podwire.domain.model import PROJECT_ROOT_FILENAME
from tests.helpers.project_graph import (
    FakeConsumingNode,
    FakeProjectGraph,
    FakeProjectGraphLoader,
    RecordingReporter,
)

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def project_path(tmp_path: Path) -> Path:
    path = tmp_path / "App.xcodeproj"
    path.mkdir()
    (path / PROJECT_ROOT_FILENAME).write_text("// !$*UTF8*$!\n")
    return path


@pytest.fixture
def graph(project_path: Path) -> FakeProjectGraph:
    return FakeProjectGraph(path=project_path, nodes=[FakeConsumingNode("App")])


@pytest.fixture
def loader(graph: FakeProjectGraph) -> FakeProjectGraphLoader:
    return FakeProjectGraphLoader(graph)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
