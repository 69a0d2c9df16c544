"""Target integrator: wires a generated product into its user project.

The integrator loads the project graph fresh for every run, resolves the
consuming nodes into an :class:`IntegrationContext`, then runs an ordered list
of named steps. Each step reports whether it mutated the graph; the decision
to save or merely touch the project file is taken once, after all steps ran.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

from podwire.domain.ports import ProjectGraphError

from .build_phases import ensure_check_manifest_lock_phase, ensure_copy_resources_phase
from .context import IntegrationContext
from .file_references import ensure_product_reference
from .legacy import normalize_legacy_copy_script
from .xcconfig import integrate_xcconfigs

if TYPE_CHECKING:
    from pathlib import Path

    from podwire.domain.model import Target
    from podwire.domain.ports import IntegrationReporter, ProjectGraph, ProjectGraphLoader

log = getLogger(__name__)


class IntegrationError(RuntimeError):
    """Raised when the user project of a target cannot be opened or persisted."""

    def __init__(self, message: str, *, target_name: str, project_path: Path) -> None:
        super().__init__(f"{message} (target `{target_name}`, project {project_path})")
        self.target_name = target_name
        self.project_path = project_path


StepAction: TypeAlias = "Callable[[IntegrationContext, IntegrationReporter], bool]"


@dataclass(frozen=True, slots=True)
class IntegrationStep:
    """A named mutation step returning whether it changed the graph."""

    name: str
    action: StepAction

    def __call__(self, context: IntegrationContext, reporter: IntegrationReporter) -> bool:
        return self.action(context, reporter)


@dataclass(slots=True)
class IntegrationResult:
    """Summary of one integration run."""

    target_name: str
    dirty: bool
    saved: bool
    step_results: dict[str, bool] = field(default_factory=dict[str, bool])
    integrated_nodes: tuple[str, ...] = ()


def _xcconfig_step(context: IntegrationContext, reporter: IntegrationReporter) -> bool:
    return integrate_xcconfigs(context, reporter=reporter)


def _legacy_copy_resources_step(
    context: IntegrationContext, _reporter: IntegrationReporter
) -> bool:
    results = [
        normalize_legacy_copy_script(node, context.target) for node in context.consuming_nodes
    ]
    return any(results)


def _integrate_new_nodes_step(context: IntegrationContext, reporter: IntegrationReporter) -> bool:
    if not context.nodes_to_integrate:
        return False
    for node in context.nodes_to_integrate:
        ensure_product_reference(context.graph, context.target, node, reporter=reporter)
    for node in context.nodes_to_integrate:
        ensure_copy_resources_phase(node, context.target)
    for node in context.nodes_to_integrate:
        ensure_check_manifest_lock_phase(node)
    return True


DEFAULT_STEPS: tuple[IntegrationStep, ...] = (
    IntegrationStep("xcconfig", _xcconfig_step),
    IntegrationStep("legacy-copy-resources", _legacy_copy_resources_step),
    IntegrationStep("integrate-new-nodes", _integrate_new_nodes_step),
)


def integration_message(target: Target) -> str:
    return f"Integrating target `{target.name}` ({target.user_project_path} project)"


class TargetIntegrator:
    """Integrates the product of one :class:`Target` with its user project."""

    def __init__(
        self,
        target: Target,
        *,
        loader: ProjectGraphLoader,
        reporter: IntegrationReporter,
        steps: Sequence[IntegrationStep] = DEFAULT_STEPS,
    ) -> None:
        self.target = target
        self.loader = loader
        self.reporter = reporter
        self.steps = tuple(steps)

    def __repr__(self) -> str:
        return f"#<{type(self).__name__} for target `{self.target.label}'>"

    def integrate(self) -> IntegrationResult:
        """Run every step once and persist the graph if any of them changed it."""

        with self.reporter.section(integration_message(self.target)):
            graph = self._open_graph()
            context = IntegrationContext.build(self.target, graph)
            log.debug(
                "Target %s: %d consuming node(s), %d to integrate",
                self.target.name,
                len(context.consuming_nodes),
                len(context.nodes_to_integrate),
            )

            step_results: dict[str, bool] = {}
            for step in self.steps:
                step_results[step.name] = step(context, self.reporter)

            dirty = any(step_results.values())
            if dirty:
                self._save(graph)
            else:
                self._touch(graph)

        return IntegrationResult(
            target_name=self.target.name,
            dirty=dirty,
            saved=dirty,
            step_results=step_results,
            integrated_nodes=tuple(node.name for node in context.nodes_to_integrate),
        )

    def _open_graph(self) -> ProjectGraph:
        try:
            return self.loader(self.target.user_project_path)
        except (OSError, ProjectGraphError) as exc:
            raise self._error("Unable to open user project") from exc

    def _save(self, graph: ProjectGraph) -> None:
        try:
            graph.save()
        except (OSError, ProjectGraphError) as exc:
            raise self._error("Unable to save user project") from exc
        log.debug("Saved %s", graph.path)

    def _touch(self, graph: ProjectGraph) -> None:
        # Xcode keeps using stale xcconfig files until the project is reloaded;
        # bumping the mtime of the project file forces that reload.
        try:
            graph.root_file.touch(exist_ok=True)
        except OSError as exc:
            raise self._error("Unable to touch user project") from exc
        log.debug("Touched %s", graph.root_file)

    def _error(self, message: str) -> IntegrationError:
        return IntegrationError(
            message,
            target_name=self.target.name,
            project_path=self.target.user_project_path,
        )
