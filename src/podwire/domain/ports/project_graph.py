"""Ports over the externally-owned, file-persisted project graph.

The integration managers only ever talk to these protocols. Concrete adapters
(for example :mod:`podwire.adapters.pbxproj`) translate them onto a real
project-model library.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from podwire.domain.model import ProductType


class ProjectGraphError(RuntimeError):
    """Raised when a persisted project graph cannot be read or written."""


@runtime_checkable
class FileReference(Protocol):
    """A reference living in one of the graph's shared groups."""

    @property
    def path(self) -> str: ...


@runtime_checkable
class ShellScriptPhase(Protocol):
    """A named shell-script build phase of a consuming node."""

    @property
    def name(self) -> str: ...

    script: str
    show_env_vars_in_log: str


@runtime_checkable
class BuildConfiguration(Protocol):
    """A build configuration of a consuming node (Debug, Release, ...)."""

    @property
    def name(self) -> str: ...

    base_configuration: FileReference | None


@runtime_checkable
class ConsumingNode(Protocol):
    """A user target that links the produced artifact.

    Every node owns exactly one frameworks-link phase; adapters create it on
    first access when the persisted node lacks one.
    """

    @property
    def name(self) -> str: ...

    def shell_script_phases(self) -> Sequence[ShellScriptPhase]: ...

    def framework_references(self) -> Sequence[FileReference]: ...

    def add_framework_reference(self, reference: FileReference) -> None: ...

    def remove_framework_reference(self, reference: FileReference) -> None: ...

    def add_shell_script_phase(self, name: str, *, at_front: bool) -> ShellScriptPhase: ...

    def build_configurations(self) -> Sequence[BuildConfiguration]: ...


@runtime_checkable
class ProjectGraph(Protocol):
    """Root aggregate of one persisted project."""

    @property
    def path(self) -> Path: ...

    @property
    def root_file(self) -> Path: ...

    def nodes_for_target(self, names: Sequence[str]) -> list[ConsumingNode]: ...

    def find_reference(self, path: str) -> FileReference | None: ...

    def new_product_reference(self, basename: str, product_type: ProductType) -> FileReference: ...

    def remove_reference(self, reference: FileReference) -> None:
        """Drop ``reference`` from its group and from every frameworks-link phase."""
        ...

    def find_or_create_config_reference(self, path: str) -> FileReference: ...

    def save(self) -> None: ...


ProjectGraphLoader: TypeAlias = "Callable[[Path], ProjectGraph]"
