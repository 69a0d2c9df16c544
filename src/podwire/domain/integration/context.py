"""Per-run integration context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .file_references import node_references_product

if TYPE_CHECKING:
    from podwire.domain.model import Target
    from podwire.domain.ports import ConsumingNode, ProjectGraph


@dataclass(frozen=True, slots=True)
class IntegrationContext:
    """Everything one integration run resolves up front.

    ``nodes_to_integrate`` is computed once, before any step runs, so later
    steps see the same subset even after earlier ones added references.
    """

    target: Target
    graph: ProjectGraph
    consuming_nodes: tuple[ConsumingNode, ...]
    nodes_to_integrate: tuple[ConsumingNode, ...]

    @classmethod
    def build(cls, target: Target, graph: ProjectGraph) -> IntegrationContext:
        consuming_nodes = tuple(graph.nodes_for_target(target.user_target_names))
        nodes_to_integrate = tuple(
            node
            for node in consuming_nodes
            if not node_references_product(node, target.product_name)
        )
        return cls(
            target=target,
            graph=graph,
            consuming_nodes=consuming_nodes,
            nodes_to_integrate=nodes_to_integrate,
        )
