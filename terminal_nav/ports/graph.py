"""Graph ports - Abstractions for layout loading and routing.

These protocols define the contracts for graph operations: loading a
facility layout into a validated graph and computing constrained
shortest paths over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import NodeDescriptor, RouteResult
    from ..domain.profiles import TravelerProfile
    from ..graph.graph import Graph


class LayoutRepositoryPort(Protocol):
    """Port for loading layout data.

    Implementation: adapters/layout/json_repository.py

    The repository is responsible for loading the raw layout from
    storage, building the graph once and caching it.
    """

    def load(self) -> Graph:
        """Load and build the routing graph.

        Returns:
            The validated, immutable graph.
        """
        ...

    def get_node(self, node_id: str) -> Optional[NodeDescriptor]:
        """Get the raw descriptor of a node.

        Args:
            node_id: The node id to look up.

        Returns:
            The descriptor, or None if not found.
        """
        ...

    def list_nodes(self) -> Sequence[NodeDescriptor]:
        """List all node descriptors of the layout.

        Returns:
            Sequence of node descriptors in layout order.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: graph/dijkstra.py (DijkstraRouter)
    """

    def shortest_path(
        self,
        graph: Graph,
        source: str,
        target: str,
        profile: TravelerProfile = ...,
    ) -> RouteResult:
        """Find the shortest admissible path between two nodes.

        Args:
            graph: The routing graph.
            source: Start node id.
            target: Destination node id.
            profile: Traveler profile constraining the route.

        Returns:
            RouteResult with path and total cost.
        """
        ...
