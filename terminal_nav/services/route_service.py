"""Route service - Main orchestrator.

This service ties the layout repository and the router together and is
the single entry point used by the HTTP API and the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..domain.errors import NoRouteError
from ..domain.models import (
    FloorChange,
    NodeDescriptor,
    RouteDescription,
    RouteResult,
    RouteStep,
)
from ..domain.profiles import TravelerProfile
from ..ports.graph import LayoutRepositoryPort, RouteSolverPort


@dataclass(frozen=True)
class ProfileOutcome:
    """Outcome of routing one profile in a comparison.

    Exactly one of ``result`` and ``error`` is set.
    """

    profile: TravelerProfile
    result: Optional[RouteResult] = None
    error: Optional[str] = None

    @property
    def is_accessible(self) -> bool:
        return self.result is not None


@dataclass
class RouteService:
    """Service computing and describing routes.

    Attributes:
        repository: Provides the graph and node metadata
        router: Computes shortest paths
        default_profile: Profile name used when a query names none
    """

    repository: LayoutRepositoryPort
    router: RouteSolverPort
    default_profile: str = TravelerProfile.STANDARD.key

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def resolve_profile(self, profile_name: Optional[str] = None) -> TravelerProfile:
        """Resolve a profile name, falling back to the default profile.

        Raises:
            UnknownProfileError: If the name matches no profile.
        """
        return TravelerProfile.from_name(profile_name or self.default_profile)

    def route(
        self,
        source: str,
        target: str,
        profile_name: Optional[str] = None,
    ) -> RouteResult:
        """Compute the shortest route between two nodes.

        Args:
            source: Start node id.
            target: Destination node id.
            profile_name: Traveler profile name, default profile if None.

        Returns:
            RouteResult with the computed route.

        Raises:
            UnknownProfileError: If the profile name is not recognised.
            UnknownNodeError: If either endpoint is unknown.
            DisabledNodeError: If either endpoint is disabled.
            NoRouteError: If no admissible path exists.
        """
        profile = self.resolve_profile(profile_name)
        graph = self.repository.load()
        return self.router.shortest_path(graph, source, target, profile)

    def compare_profiles(self, source: str, target: str) -> List[ProfileOutcome]:
        """Route the same query once per traveler profile.

        Profiles for which no route exists are reported as inaccessible;
        any other error (unknown or disabled endpoint) propagates.
        """
        graph = self.repository.load()
        outcomes: List[ProfileOutcome] = []
        for profile in TravelerProfile:
            try:
                result = self.router.shortest_path(graph, source, target, profile)
            except NoRouteError as e:
                outcomes.append(ProfileOutcome(profile=profile, error=e.message))
            else:
                outcomes.append(ProfileOutcome(profile=profile, result=result))

        self._logger.info(
            "Profiles compared",
            extra={
                "source": source,
                "target": target,
                "accessible": sum(1 for o in outcomes if o.is_accessible),
            },
        )
        return outcomes

    def describe(self, result: RouteResult) -> RouteDescription:
        """Decorate a route with node labels and floor changes."""
        graph = self.repository.load()

        steps: List[RouteStep] = []
        changes: List[FloorChange] = []
        for node_id in result.path:
            floor = graph.floor_of(node_id)
            node = self.repository.get_node(node_id)
            label = node.label if node is not None and node.label else node_id
            if steps and steps[-1].floor != floor:
                changes.append(
                    FloorChange(from_floor=steps[-1].floor, to_floor=floor, at_node=node_id)
                )
            steps.append(RouteStep(node_id=node_id, label=label, floor=floor))

        return RouteDescription(
            result=result, steps=tuple(steps), floor_changes=tuple(changes)
        )

    def list_nodes(self) -> Sequence[NodeDescriptor]:
        """List the layout's nodes."""
        return self.repository.list_nodes()

    def list_profiles(self) -> List[TravelerProfile]:
        """List all traveler profiles."""
        return list(TravelerProfile)
