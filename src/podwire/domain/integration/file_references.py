"""Product reference wiring for consuming nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from podwire.domain.model import Target
    from podwire.domain.ports import ConsumingNode, IntegrationReporter, ProjectGraph


def node_references_product(node: ConsumingNode, product_name: str) -> bool:
    """Return whether ``node`` already links a reference whose path is ``product_name``."""

    return any(reference.path == product_name for reference in node.framework_references())


def ensure_product_reference(
    graph: ProjectGraph,
    target: Target,
    node: ConsumingNode,
    *,
    reporter: IntegrationReporter,
) -> bool:
    """Link the current product of ``target`` into the frameworks phase of ``node``.

    A reference left behind by the other linking mode (``libFoo.a`` versus
    ``Foo.framework``) is removed from the graph first. Returns whether the
    graph was mutated.
    """

    mutated = False

    old_product_name = target.alternate_product_name
    old_reference = graph.find_reference(old_product_name)
    if old_reference is not None:
        reporter.message(f"Remove old Pod product reference {old_product_name} from project.")
        node.remove_framework_reference(old_reference)
        graph.remove_reference(old_reference)
        mutated = True

    reference = graph.find_reference(target.product_name)
    if reference is None:
        reference = graph.new_product_reference(target.product_basename, target.product_type)
        mutated = True

    if not any(existing.path == reference.path for existing in node.framework_references()):
        node.add_framework_reference(reference)
        mutated = True

    return mutated
