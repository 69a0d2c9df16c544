"""Project graph adapter over the ``pbxproj`` (mod-pbxproj) library."""

from __future__ import annotations

import posixpath
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, TypeAlias

from pbxproj import XcodeProject
from pbxproj.pbxsections import (
    PBXBuildFile,
    PBXFileReference,
    PBXFrameworksBuildPhase,
    PBXShellScriptBuildPhase,
)

from podwire.domain.model import PROJECT_ROOT_FILENAME, ProductType
from podwire.domain.ports import ProjectGraphError

if TYPE_CHECKING:
    from collections.abc import Sequence

log = getLogger(__name__)

FRAMEWORKS_GROUP_NAME: Final[str] = "Frameworks"
PODS_GROUP_NAME: Final[str] = "Pods"
BUILD_ACTION_MASK: Final[int] = 0x7FFFFFFF

_EXPLICIT_FILE_TYPES: Final[dict[ProductType, str]] = {
    ProductType.FRAMEWORK: "wrapper.framework",
    ProductType.STATIC_LIBRARY: "archive.ar",
}

PbxObject: TypeAlias = "Any"


def _product_name(basename: str, product_type: ProductType) -> str:
    if product_type is ProductType.FRAMEWORK:
        return f"{basename}.framework"
    return f"lib{basename}.a"


class PbxprojFileReference:
    def __init__(self, obj: PbxObject) -> None:
        self.obj = obj

    @property
    def id(self) -> str:
        return str(self.obj.get_id())

    @property
    def path(self) -> str:
        return str(getattr(self.obj, "path", "") or "")

    @property
    def name(self) -> str:
        name = getattr(self.obj, "name", None)
        return str(name) if name else posixpath.basename(self.path)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PbxprojFileReference) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)


class PbxprojShellScriptPhase:
    def __init__(self, obj: PbxObject) -> None:
        self.obj = obj

    @property
    def name(self) -> str:
        return str(getattr(self.obj, "name", "") or "")

    @property
    def script(self) -> str:
        return str(getattr(self.obj, "shellScript", "") or "")

    @script.setter
    def script(self, value: str) -> None:
        self.obj.shellScript = value

    @property
    def show_env_vars_in_log(self) -> str:
        return str(getattr(self.obj, "showEnvVarsInLog", "1"))

    @show_env_vars_in_log.setter
    def show_env_vars_in_log(self, value: str) -> None:
        self.obj.showEnvVarsInLog = value


class PbxprojBuildConfiguration:
    def __init__(self, graph: PbxprojProjectGraph, obj: PbxObject) -> None:
        self.graph = graph
        self.obj = obj

    @property
    def name(self) -> str:
        return str(getattr(self.obj, "name", "") or "")

    @property
    def base_configuration(self) -> PbxprojFileReference | None:
        key = getattr(self.obj, "baseConfigurationReference", None)
        if key is None:
            return None
        obj = self.graph.lookup(key)
        return PbxprojFileReference(obj) if obj is not None else None

    @base_configuration.setter
    def base_configuration(self, reference: PbxprojFileReference | None) -> None:
        if reference is None:
            if hasattr(self.obj, "baseConfigurationReference"):
                del self.obj.baseConfigurationReference
            return
        self.obj.baseConfigurationReference = reference.id


class PbxprojConsumingNode:
    """A ``PBXNativeTarget`` seen as a consuming node."""

    def __init__(self, graph: PbxprojProjectGraph, obj: PbxObject) -> None:
        self.graph = graph
        self.obj = obj

    @property
    def name(self) -> str:
        return str(getattr(self.obj, "name", "") or "")

    def _phases(self) -> list[PbxObject]:
        phases = (self.graph.lookup(key) for key in getattr(self.obj, "buildPhases", []))
        return [phase for phase in phases if phase is not None]

    def _frameworks_phase(self) -> PbxObject:
        for phase in self._phases():
            if phase.isa == "PBXFrameworksBuildPhase":
                return phase
        phase = PBXFrameworksBuildPhase().parse(
            {
                "_id": PBXFrameworksBuildPhase._generate_id(),  # noqa: SLF001
                "isa": "PBXFrameworksBuildPhase",
                "buildActionMask": BUILD_ACTION_MASK,
                "files": [],
                "runOnlyForDeploymentPostprocessing": 0,
            }
        )
        self.graph.register(phase)
        self.obj.buildPhases.append(phase.get_id())
        log.debug("Created frameworks phase for %s", self.name)
        return phase

    def shell_script_phases(self) -> Sequence[PbxprojShellScriptPhase]:
        return [
            PbxprojShellScriptPhase(phase)
            for phase in self._phases()
            if phase.isa == "PBXShellScriptBuildPhase"
        ]

    def framework_references(self) -> Sequence[PbxprojFileReference]:
        references: list[PbxprojFileReference] = []
        for key in self._frameworks_phase().files:
            build_file = self.graph.lookup(key)
            file_ref_key = getattr(build_file, "fileRef", None) if build_file else None
            if file_ref_key is None:
                continue
            file_ref = self.graph.lookup(file_ref_key)
            if file_ref is not None and file_ref.isa == "PBXFileReference":
                references.append(PbxprojFileReference(file_ref))
        return references

    def add_framework_reference(self, reference: PbxprojFileReference) -> None:
        build_file = PBXBuildFile().parse(
            {
                "_id": PBXBuildFile._generate_id(),  # noqa: SLF001
                "isa": "PBXBuildFile",
                "fileRef": reference.id,
            }
        )
        self.graph.register(build_file)
        self._frameworks_phase().files.append(build_file.get_id())

    def remove_framework_reference(self, reference: PbxprojFileReference) -> None:
        self.graph.drop_build_files(self._frameworks_phase(), reference.id)

    def add_shell_script_phase(self, name: str, *, at_front: bool) -> PbxprojShellScriptPhase:
        phase = PBXShellScriptBuildPhase().parse(
            {
                "_id": PBXShellScriptBuildPhase._generate_id(),  # noqa: SLF001
                "isa": "PBXShellScriptBuildPhase",
                "buildActionMask": BUILD_ACTION_MASK,
                "files": [],
                "inputPaths": [],
                "name": name,
                "outputPaths": [],
                "runOnlyForDeploymentPostprocessing": 0,
                "shellPath": "/bin/sh",
                "shellScript": "",
                "showEnvVarsInLog": "0",
            }
        )
        self.graph.register(phase)
        if at_front:
            self.obj.buildPhases.insert(0, phase.get_id())
        else:
            self.obj.buildPhases.append(phase.get_id())
        return PbxprojShellScriptPhase(phase)

    def build_configurations(self) -> Sequence[PbxprojBuildConfiguration]:
        configuration_list = self.graph.lookup(getattr(self.obj, "buildConfigurationList", None))
        if configuration_list is None:
            return []
        configurations = (
            self.graph.lookup(key) for key in configuration_list.buildConfigurations
        )
        return [PbxprojBuildConfiguration(self.graph, obj) for obj in configurations if obj]


class PbxprojProjectGraph:
    """Project graph backed by a loaded :class:`pbxproj.XcodeProject`."""

    def __init__(self, path: Path, project: XcodeProject) -> None:
        self._path = path
        self.project = project

    @property
    def path(self) -> Path:
        return self._path

    @property
    def root_file(self) -> Path:
        return self._path / PROJECT_ROOT_FILENAME

    def lookup(self, key: object) -> PbxObject | None:
        if key is None:
            return None
        try:
            return self.project.objects[key]
        except KeyError:
            return None

    def register(self, obj: PbxObject) -> None:
        self.project.objects[obj.get_id()] = obj

    def _group(self, name: str, *, create: bool) -> PbxObject | None:
        groups = self.project.get_groups_by_name(name)
        if groups:
            return groups[0]
        if not create:
            return None
        return self.project.get_or_create_group(name)

    def _group_references(self, group: PbxObject | None) -> list[PbxObject]:
        if group is None:
            return []
        children = (self.lookup(key) for key in group.children)
        return [
            child for child in children if child is not None and child.isa == "PBXFileReference"
        ]

    def nodes_for_target(self, names: Sequence[str]) -> list[PbxprojConsumingNode]:
        wanted = set(names)
        return [
            PbxprojConsumingNode(self, obj)
            for obj in self.project.objects.get_objects_in_section("PBXNativeTarget")
            if getattr(obj, "name", None) in wanted
        ]

    def find_reference(self, path: str) -> PbxprojFileReference | None:
        group = self._group(FRAMEWORKS_GROUP_NAME, create=False)
        for obj in self._group_references(group):
            if getattr(obj, "path", None) == path:
                return PbxprojFileReference(obj)
        return None

    def new_product_reference(
        self, basename: str, product_type: ProductType
    ) -> PbxprojFileReference:
        obj = PBXFileReference().parse(
            {
                "_id": PBXFileReference._generate_id(),  # noqa: SLF001
                "isa": "PBXFileReference",
                "explicitFileType": _EXPLICIT_FILE_TYPES[product_type],
                "includeInIndex": 0,
                "path": _product_name(basename, product_type),
                "sourceTree": "BUILT_PRODUCTS_DIR",
            }
        )
        self.register(obj)
        self._group(FRAMEWORKS_GROUP_NAME, create=True).children.append(obj.get_id())
        return PbxprojFileReference(obj)

    def remove_reference(self, reference: PbxprojFileReference) -> None:
        for group in self.project.objects.get_objects_in_section("PBXGroup"):
            while reference.id in group.children:
                group.children.remove(reference.id)
        for phase in self.project.objects.get_objects_in_section("PBXFrameworksBuildPhase"):
            self.drop_build_files(phase, reference.id)
        del self.project.objects[reference.id]

    def drop_build_files(self, phase: PbxObject, file_ref_id: str) -> None:
        for key in list(phase.files):
            build_file = self.lookup(key)
            if build_file is not None and getattr(build_file, "fileRef", None) == file_ref_id:
                phase.files.remove(key)
                del self.project.objects[key]

    def find_or_create_config_reference(self, path: str) -> PbxprojFileReference:
        group = self._group(PODS_GROUP_NAME, create=True)
        for obj in self._group_references(group):
            if getattr(obj, "path", None) == path:
                return PbxprojFileReference(obj)
        obj = PBXFileReference().parse(
            {
                "_id": PBXFileReference._generate_id(),  # noqa: SLF001
                "isa": "PBXFileReference",
                "includeInIndex": 1,
                "lastKnownFileType": "text.xcconfig",
                "name": posixpath.basename(path),
                "path": path,
                "sourceTree": "<group>",
            }
        )
        self.register(obj)
        group.children.append(obj.get_id())
        return PbxprojFileReference(obj)

    def save(self) -> None:
        self.project.save()


def load_project_graph(path: Path) -> PbxprojProjectGraph:
    """Open the ``.xcodeproj`` bundle at ``path``.

    A missing project file propagates as ``OSError``; any other failure to
    parse it becomes a :class:`ProjectGraphError`.
    """

    root_file = Path(path) / PROJECT_ROOT_FILENAME
    if not root_file.is_file():
        raise FileNotFoundError(f"No project file at {root_file}")
    try:
        project = XcodeProject.load(str(root_file))
    except OSError:
        raise
    except Exception as exc:  # noqa: BLE001
        raise ProjectGraphError(f"Unable to parse {root_file}: {exc}") from exc
    log.debug("Loaded project graph %s", root_file)
    return PbxprojProjectGraph(Path(path), project)
