"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from podwire.adapters.reporting import LoggingReporter
from podwire.domain.integration import TargetIntegrator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from podwire.domain.integration import IntegrationResult
    from podwire.domain.model import Target
    from podwire.domain.ports import IntegrationReporter, ProjectGraphLoader


log = getLogger(__name__)


def _default_loader() -> ProjectGraphLoader:
    from podwire.adapters.pbxproj import load_project_graph  # noqa: PLC0415

    return load_project_graph


def integrate_targets(
    targets: Iterable[Target],
    *,
    loader: ProjectGraphLoader | None = None,
    reporter: IntegrationReporter | None = None,
) -> list[IntegrationResult]:
    """Integrate ``targets`` one after another.

    Every target gets its own integrator, which reloads the user project from
    disk, so targets sharing a project see each other's saved changes. The
    first fatal error aborts the remaining targets.
    """

    effective_loader = loader or _default_loader()
    effective_reporter = reporter or LoggingReporter()

    results: list[IntegrationResult] = []
    for target in targets:
        integrator = TargetIntegrator(
            target, loader=effective_loader, reporter=effective_reporter
        )
        results.append(integrator.integrate())

    saved = sum(1 for result in results if result.saved)
    log.info(
        "Finished integration: targets=%s, saved=%s, touched=%s",
        len(results),
        saved,
        len(results) - saved,
    )
    return results
