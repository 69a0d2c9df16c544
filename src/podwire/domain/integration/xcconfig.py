"""Base-configuration wiring of the generated xcconfig files."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from podwire.domain.model import SUPPORT_FILES_DIR

if TYPE_CHECKING:
    from podwire.domain.ports import BuildConfiguration, FileReference, IntegrationReporter

    from .context import IntegrationContext

log = getLogger(__name__)


def is_generated_xcconfig(reference: FileReference) -> bool:
    return SUPPORT_FILES_DIR in reference.path.split("/")


def integrate_xcconfigs(context: IntegrationContext, *, reporter: IntegrationReporter) -> bool:
    """Set the generated xcconfig as base configuration of every consuming node.

    Configurations already based on a user-provided xcconfig are left alone and
    reported. Returns whether any base configuration changed.
    """

    paths = context.target.xcconfig_relative_paths
    if not paths:
        return False

    changes = False
    for node in context.consuming_nodes:
        for configuration in node.build_configurations():
            path = paths.get(configuration.name)
            if path is None:
                log.debug("No xcconfig for %s (%s)", node.name, configuration.name)
                continue
            changed = _set_base_configuration(
                context, configuration, path, node_name=node.name, reporter=reporter
            )
            changes = changes or changed
    return changes


def _set_base_configuration(
    context: IntegrationContext,
    configuration: BuildConfiguration,
    path: str,
    *,
    node_name: str,
    reporter: IntegrationReporter,
) -> bool:
    current = configuration.base_configuration
    if current is not None and current.path == path:
        return False
    if current is not None and not is_generated_xcconfig(current):
        reporter.warning(
            f"The target `{node_name}` already has a base configuration set for "
            f"`{configuration.name}` ({current.path}); the Pods xcconfig `{path}` "
            "was not applied. Include it from your own xcconfig instead."
        )
        return False
    configuration.base_configuration = context.graph.find_or_create_config_reference(path)
    return True
