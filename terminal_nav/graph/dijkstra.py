"""Profile-aware shortest-path computation using Dijkstra's algorithm.

The router operates on an already validated, immutable ``Graph``. It
performs no layout validation and no I/O. Admissibility of a connection
and its effective cost are delegated to the ``TravelerProfile`` given
with each query.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from ..domain.errors import DisabledNodeError, NoRouteError, UnknownNodeError
from ..domain.models import RouteResult
from ..domain.profiles import TravelerProfile
from .graph import Graph


@dataclass
class DijkstraRouter:
    """Constrained shortest-path router.

    The router keeps no state between calls: every query allocates its
    own distance table, predecessor map and frontier, so one instance can
    serve concurrent queries against a shared graph.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def shortest_path(
        self,
        graph: Graph,
        source: str,
        target: str,
        profile: TravelerProfile = TravelerProfile.STANDARD,
    ) -> RouteResult:
        """Find the cheapest admissible path between two nodes.

        Args:
            graph: Validated terminal graph.
            source: Start node id.
            target: Destination node id.
            profile: Traveler profile restricting categories and
                penalising costs.

        Returns:
            RouteResult with the path (endpoints included) and total cost.

        Raises:
            UnknownNodeError: If source or target is not in the graph.
            DisabledNodeError: If source or target is disabled.
            NoRouteError: If no admissible path exists for the profile.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "target": target, "profile": profile.key},
        )

        self._check_endpoint(graph, source, "start")
        self._check_endpoint(graph, target, "destination")

        if source == target:
            return RouteResult(
                source=source,
                target=target,
                path=(source,),
                total_cost=0.0,
                profile=profile,
            )

        distances, previous = self._search(graph, source, target, profile)

        if math.isinf(distances.get(target, math.inf)):
            self._logger.warning(
                "No route found",
                extra={"source": source, "target": target, "profile": profile.key},
            )
            raise NoRouteError(
                f"No route found from {source} to {target} for profile {profile.key}",
                source=source,
                target=target,
                profile=profile.key,
            )

        path = self._reconstruct(previous, source, target)
        total_cost = distances[target]

        self._logger.info(
            "Route found",
            extra={
                "source": source,
                "target": target,
                "profile": profile.key,
                "stops": len(path),
                "cost": total_cost,
            },
        )

        return RouteResult(
            source=source,
            target=target,
            path=tuple(path),
            total_cost=total_cost,
            profile=profile,
        )

    @staticmethod
    def _check_endpoint(graph: Graph, node_id: str, role: str) -> None:
        if not graph.has_node(node_id):
            raise UnknownNodeError(f"Unknown {role} node: {node_id}", node_id=node_id)
        if not graph.is_enabled(node_id):
            raise DisabledNodeError(
                f"{role.capitalize()} node is disabled: {node_id}", node_id=node_id
            )

    @staticmethod
    def _search(
        graph: Graph, source: str, target: str, profile: TravelerProfile
    ) -> Tuple[Dict[str, float], Dict[str, str]]:
        """Run the search and return best distances and predecessors."""
        distances: Dict[str, float] = {node: math.inf for node in graph.node_ids()}
        previous: Dict[str, str] = {}
        distances[source] = 0.0

        # The counter keeps heap entries with equal distance from comparing ids.
        counter = itertools.count()
        heap: List[Tuple[float, int, str]] = [(0.0, next(counter), source)]

        while heap:
            current_distance, _, u = heapq.heappop(heap)

            # Stale entry, a shorter distance was pushed later.
            if current_distance != distances[u]:
                continue

            if u == target:
                break

            for connection in graph.connections_from(u):
                if not connection.enabled or not graph.is_enabled(connection.target):
                    continue
                if not profile.is_allowed(connection.category):
                    continue

                cost = profile.effective_cost(connection.category, connection.cost)
                new_distance = current_distance + cost
                if new_distance < distances[connection.target]:
                    distances[connection.target] = new_distance
                    previous[connection.target] = u
                    heapq.heappush(heap, (new_distance, next(counter), connection.target))

        return distances, previous

    @staticmethod
    def _reconstruct(previous: Dict[str, str], source: str, target: str) -> List[str]:
        path: List[str] = [target]
        current = target
        while current != source:
            predecessor = previous.get(current)
            if predecessor is None:
                raise AssertionError(
                    f"Broken predecessor chain at {current} while rebuilding "
                    f"route {source} -> {target}"
                )
            path.append(predecessor)
            current = predecessor

        path.reverse()
        return path
