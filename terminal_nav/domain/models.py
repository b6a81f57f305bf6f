"""Immutable domain models for terminal navigation.

Descriptors are the raw, untrusted records handed over by a layout
loader; every field that a layout may omit is Optional here. Values are
kept as the loader read them and are only checked by the graph builder.
Connections and route results are the validated, immutable counterparts
used by the router and its callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .profiles import TravelerProfile


class Category(Enum):
    """Kind of connector between two locations."""

    CORRIDOR = "corridor"
    STAIRS = "stairs"
    ESCALATOR = "escalator"
    ELEVATOR = "elevator"

    @classmethod
    def parse(cls, value: Union[str, Category]) -> Category:
        """Resolve a category from its name, case-insensitively.

        ``lift`` is accepted as an alias of ``elevator``.

        Raises:
            ValueError: If the name is not a known category.
        """
        if isinstance(value, Category):
            return value
        key = str(value).strip().lower()
        if key == "lift":
            key = "elevator"
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown edge category: {value!r}")


@dataclass(frozen=True, slots=True)
class NodeDescriptor:
    """A location as described by the raw layout.

    Attributes:
        id: Node identifier (must be unique and non-blank once validated)
        label: Display name, opaque to routing
        description: Display text, opaque to routing
        enabled: Administrative status, defaults to True when absent
        floor: Floor number, defaults to 1 when absent
    """

    id: Optional[str]
    label: str = ""
    description: str = ""
    enabled: Optional[bool] = None
    floor: Optional[float] = None


@dataclass(frozen=True, slots=True)
class EdgeDescriptor:
    """A connection as described by the raw layout.

    Attributes:
        source: Id of the node the edge starts from
        target: Id of the node the edge leads to
        cost: Traversal cost, must be strictly positive
        category: Connector kind or its raw name, required
        bidirectional: Whether a mirrored edge is materialised, required
        enabled: Administrative status, defaults to True when absent
    """

    source: Optional[str]
    target: Optional[str]
    cost: Optional[float]
    category: Union[Category, str, None]
    bidirectional: Optional[bool]
    enabled: Optional[bool] = None


@dataclass(frozen=True, slots=True)
class LayoutDescriptor:
    """Complete raw layout: node and edge descriptors."""

    nodes: Optional[tuple[Optional[NodeDescriptor], ...]] = None
    edges: Optional[tuple[Optional[EdgeDescriptor], ...]] = None


@dataclass(frozen=True, slots=True)
class Connection:
    """Directed, validated edge stored in a graph's adjacency."""

    target: str
    cost: float
    category: Category
    enabled: bool = True


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        source: Start node id
        target: Destination node id
        path: Ordered node ids, endpoints included
        total_cost: Sum of effective edge costs along ``path``
        profile: Traveler profile the route was computed for
    """

    source: str
    target: str
    path: tuple[str, ...]
    total_cost: float
    profile: Optional[TravelerProfile] = None

    @property
    def is_trivial(self) -> bool:
        """Check if start and destination are the same node."""
        return len(self.path) == 1


@dataclass(frozen=True, slots=True)
class RouteStep:
    """A visited node decorated with its display metadata."""

    node_id: str
    label: str
    floor: float


@dataclass(frozen=True, slots=True)
class FloorChange:
    """A change of floor between two consecutive steps of a route."""

    from_floor: float
    to_floor: float
    at_node: str


@dataclass(frozen=True, slots=True)
class RouteDescription:
    """Display-oriented view of a route."""

    result: RouteResult
    steps: tuple[RouteStep, ...] = field(default_factory=tuple)
    floor_changes: tuple[FloorChange, ...] = field(default_factory=tuple)
