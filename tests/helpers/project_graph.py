"""In-memory implementation of the project graph ports for testing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

from podwire.domain.model import PROJECT_ROOT_FILENAME, ProductType, Target

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(eq=False)
class FakeFileReference:
    path: str
    product_type: ProductType | None = None


@dataclass(eq=False)
class FakeShellScriptPhase:
    name: str
    script: str = ""
    show_env_vars_in_log: str = "1"


@dataclass(eq=False)
class FakeFrameworksPhase:
    references: list[FakeFileReference] = field(default_factory=list[FakeFileReference])


@dataclass(eq=False)
class FakeBuildConfiguration:
    name: str
    base_configuration: FakeFileReference | None = None


FakePhase: TypeAlias = "FakeShellScriptPhase | FakeFrameworksPhase"


@dataclass(eq=False)
class FakeConsumingNode:
    name: str
    phases: list[FakePhase] = field(default_factory=list[FakePhase])
    configurations: list[FakeBuildConfiguration] = field(
        default_factory=lambda: [FakeBuildConfiguration("Debug"), FakeBuildConfiguration("Release")]
    )
    mutations: int = 0

    def __post_init__(self) -> None:
        if not any(isinstance(phase, FakeFrameworksPhase) for phase in self.phases):
            self.phases.append(FakeFrameworksPhase())

    @property
    def frameworks_phase(self) -> FakeFrameworksPhase:
        return next(phase for phase in self.phases if isinstance(phase, FakeFrameworksPhase))

    def shell_script_phases(self) -> Sequence[FakeShellScriptPhase]:
        return [phase for phase in self.phases if isinstance(phase, FakeShellScriptPhase)]

    def framework_references(self) -> Sequence[FakeFileReference]:
        return list(self.frameworks_phase.references)

    def add_framework_reference(self, reference: FakeFileReference) -> None:
        self.frameworks_phase.references.append(reference)
        self.mutations += 1

    def remove_framework_reference(self, reference: FakeFileReference) -> None:
        self.frameworks_phase.references[:] = [
            existing for existing in self.frameworks_phase.references if existing is not reference
        ]
        self.mutations += 1

    def add_shell_script_phase(self, name: str, *, at_front: bool) -> FakeShellScriptPhase:
        phase = FakeShellScriptPhase(name=name)
        if at_front:
            self.phases.insert(0, phase)
        else:
            self.phases.append(phase)
        self.mutations += 1
        return phase

    def build_configurations(self) -> Sequence[FakeBuildConfiguration]:
        return list(self.configurations)


@dataclass(eq=False)
class FakeProjectGraph:
    path: Path
    nodes: list[FakeConsumingNode] = field(default_factory=list[FakeConsumingNode])
    frameworks_group: list[FakeFileReference] = field(default_factory=list[FakeFileReference])
    pods_group: list[FakeFileReference] = field(default_factory=list[FakeFileReference])
    saves: int = 0
    fail_on_save: bool = False

    @property
    def root_file(self) -> Path:
        return self.path / PROJECT_ROOT_FILENAME

    def node(self, name: str) -> FakeConsumingNode:
        return next(node for node in self.nodes if node.name == name)

    def nodes_for_target(self, names: Sequence[str]) -> list[FakeConsumingNode]:
        return [node for node in self.nodes if node.name in names]

    def find_reference(self, path: str) -> FakeFileReference | None:
        return next((ref for ref in self.frameworks_group if ref.path == path), None)

    def new_product_reference(self, basename: str, product_type: ProductType) -> FakeFileReference:
        if product_type is ProductType.FRAMEWORK:
            path = f"{basename}.framework"
        else:
            path = f"lib{basename}.a"
        reference = FakeFileReference(path=path, product_type=product_type)
        self.frameworks_group.append(reference)
        return reference

    def remove_reference(self, reference: FakeFileReference) -> None:
        self.frameworks_group[:] = [ref for ref in self.frameworks_group if ref is not reference]
        for node in self.nodes:
            node.frameworks_phase.references[:] = [
                ref for ref in node.frameworks_phase.references if ref is not reference
            ]

    def find_or_create_config_reference(self, path: str) -> FakeFileReference:
        existing = next((ref for ref in self.pods_group if ref.path == path), None)
        if existing is not None:
            return existing
        reference = FakeFileReference(path=path)
        self.pods_group.append(reference)
        return reference

    def save(self) -> None:
        if self.fail_on_save:
            raise PermissionError(f"Permission denied: {self.root_file}")
        self.saves += 1


class FakeProjectGraphLoader:
    """Loader returning prepared graphs by path and counting loads."""

    def __init__(self, *graphs: FakeProjectGraph) -> None:
        self.graphs = {graph.path: graph for graph in graphs}
        self.loads: list[Path] = []

    def __call__(self, path: Path) -> FakeProjectGraph:
        self.loads.append(path)
        try:
            return self.graphs[path]
        except KeyError:
            raise FileNotFoundError(f"No project file at {path / PROJECT_ROOT_FILENAME}") from None


class RecordingReporter:
    """Reporter collecting sections, messages and warnings."""

    def __init__(self) -> None:
        self.sections: list[str] = []
        self.messages: list[str] = []
        self.warnings: list[str] = []

    def section(self, title: str) -> _Section:
        self.sections.append(title)
        return _Section()

    def message(self, text: str) -> None:
        self.messages.append(text)

    def warning(self, text: str) -> None:
        self.warnings.append(text)


class _Section:
    def __enter__(self) -> None:
        return None

    def __exit__(self, *_exc: object) -> None:
        return None


def make_target(
    project_path: Path,
    *,
    name: str = "MathKit",
    requires_framework: bool = True,
    user_targets: tuple[str, ...] = ("App",),
    xcconfigs: dict[str, str] | None = None,
) -> Target:
    return Target(
        name=name,
        product_basename=name,
        requires_framework=requires_framework,
        copy_resources_script_relative_path=f"Target Support Files/{name}/{name}-resources.sh",
        user_project_path=project_path,
        user_target_names=user_targets,
        xcconfig_relative_paths=dict(xcconfigs or {}),
    )
