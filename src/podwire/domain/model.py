"""Domain model for integrating a generated Pods product into a user project."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Final

COPY_RESOURCES_PHASE_NAME: Final[str] = "Copy Pods Resources"
CHECK_MANIFEST_LOCK_PHASE_NAME: Final[str] = "Check Pods Manifest.lock"
PROJECT_ROOT_FILENAME: Final[str] = "project.pbxproj"
SUPPORT_FILES_DIR: Final[str] = "Target Support Files"

CHECK_MANIFEST_LOCK_SCRIPT: Final[str] = (
    'diff "${PODS_ROOT}/../Podfile.lock" "${PODS_ROOT}/Manifest.lock" > /dev/null\n'
    "if [[ $? != 0 ]] ; then\n"
    "    cat << EOM\n"
    "error: The sandbox is not in sync with the Podfile.lock. "
    "Run 'pod install' or update your CocoaPods installation.\n"
    "EOM\n"
    "    exit 1\n"
    "fi\n"
)


def copy_resources_script(script_path: str) -> str:
    """Return the canonical copy-resources phase body for ``script_path``."""

    return f'"{script_path}"\n'


class ProductType(StrEnum):
    """Xcode product type identifiers for the two supported linking modes."""

    FRAMEWORK = "com.apple.product-type.framework"
    STATIC_LIBRARY = "com.apple.product-type.library.static"


@dataclass(frozen=True, slots=True, kw_only=True)
class Target:
    """An aggregate Pods target produced upstream and linked by user targets.

    ``user_target_names`` is the mapping onto the consuming nodes of the user
    project; ``xcconfig_relative_paths`` maps build-configuration names to the
    generated xcconfig files (relative to the user project directory).
    """

    name: str
    product_basename: str
    requires_framework: bool
    copy_resources_script_relative_path: str
    user_project_path: Path
    user_target_names: tuple[str, ...] = ()
    xcconfig_relative_paths: dict[str, str] = field(default_factory=dict[str, str])

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Target name must not be blank")
        if not self.product_basename.strip():
            raise ValueError("Target product basename must not be blank")

    @property
    def label(self) -> str:
        return self.name

    @property
    def framework_name(self) -> str:
        return f"{self.product_basename}.framework"

    @property
    def static_library_name(self) -> str:
        return f"lib{self.product_basename}.a"

    @property
    def product_name(self) -> str:
        return self.framework_name if self.requires_framework else self.static_library_name

    @property
    def alternate_product_name(self) -> str:
        """Product name this target would have under the other linking mode."""

        return self.static_library_name if self.requires_framework else self.framework_name

    @property
    def product_type(self) -> ProductType:
        return ProductType.FRAMEWORK if self.requires_framework else ProductType.STATIC_LIBRARY

    @property
    def user_project_root_file(self) -> Path:
        return self.user_project_path / PROJECT_ROOT_FILENAME
