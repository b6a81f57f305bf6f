"""Graph construction from raw layout descriptors.

``GraphBuilder`` turns an untrusted ``LayoutDescriptor`` into a validated,
immutable ``Graph``. It checks that node ids are present and unique, that
every edge references known nodes, and that every edge carries a positive
cost, a known category and a directionality flag. Values arrive as the
loader read them, so flags must be booleans and floors finite numbers.

Validation fails fast: the first violation is raised as a ``ConfigError``
and no graph is produced. Absent optional fields follow a single lenient
policy: nodes default to enabled on floor 1 and edges default to enabled.
Disabled edges are kept in the adjacency with ``enabled=False``; the
router is responsible for skipping them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Dict, List, Optional

from ..domain.errors import ConfigError
from ..domain.models import Category, Connection, EdgeDescriptor, LayoutDescriptor
from .graph import Graph

DEFAULT_FLOOR = 1
DEFAULT_ENABLED = True


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _is_finite_number(value: object) -> bool:
    if value is None or isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def _is_valid_cost(cost: object) -> bool:
    return _is_finite_number(cost) and cost > 0


def _is_valid_flag(value: object) -> bool:
    return value is None or isinstance(value, bool)


@dataclass
class GraphBuilder:
    """Builds validated graphs from layout descriptors.

    The builder holds no state between calls; the same instance may be
    reused to build several graphs.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def build(self, layout: Optional[LayoutDescriptor]) -> Graph:
        """Validate a layout and build its graph.

        Args:
            layout: Raw node and edge descriptors.

        Returns:
            The immutable graph for the layout.

        Raises:
            ConfigError: On the first structural or semantic defect found.
        """
        try:
            graph = self._build(layout)
        except ConfigError as e:
            self._logger.warning("Layout rejected", extra={"reason": e.message})
            raise

        self._logger.info(
            "Graph built",
            extra={
                "nodes": len(graph),
                "connections": graph.connection_count,
            },
        )
        return graph

    def _build(self, layout: Optional[LayoutDescriptor]) -> Graph:
        if layout is None:
            raise ConfigError("missing input")
        if not layout.nodes:
            raise ConfigError("no nodes defined")
        if not layout.edges:
            raise ConfigError("no edges defined")

        node_enabled: Dict[str, bool] = {}
        node_floors: Dict[str, float] = {}
        for node in layout.nodes:
            if node is None or _is_blank(node.id):
                raise ConfigError("node missing or empty id")
            if node.id in node_enabled:
                raise ConfigError(f"duplicate node id: {node.id}")
            if not _is_valid_flag(node.enabled):
                raise ConfigError(
                    f"invalid enabled flag for node {node.id}: {node.enabled!r}"
                )
            if node.floor is not None and not _is_finite_number(node.floor):
                raise ConfigError(f"invalid floor for node: {node.id}")
            node_enabled[node.id] = (
                DEFAULT_ENABLED if node.enabled is None else node.enabled
            )
            node_floors[node.id] = DEFAULT_FLOOR if node.floor is None else node.floor

        adj: Dict[str, List[Connection]] = {node_id: [] for node_id in node_enabled}
        for edge in layout.edges:
            category = self._validate_edge(edge, adj)

            cost = float(edge.cost)
            enabled = DEFAULT_ENABLED if edge.enabled is None else edge.enabled
            adj[edge.source].append(Connection(edge.target, cost, category, enabled))
            if edge.bidirectional:
                adj[edge.target].append(
                    Connection(edge.source, cost, category, enabled)
                )

        return Graph(adj, node_enabled, node_floors)

    @staticmethod
    def _validate_edge(
        edge: Optional[EdgeDescriptor], known: Dict[str, List[Connection]]
    ) -> Category:
        if edge is None:
            raise ConfigError("null edge definition")
        if _is_blank(edge.source) or edge.source not in known:
            raise ConfigError(f"edge references unknown source node: {edge.source}")
        if _is_blank(edge.target) or edge.target not in known:
            raise ConfigError(
                f"edge references unknown destination node: {edge.target}"
            )

        label = f"{edge.source}->{edge.target}"
        if not _is_valid_cost(edge.cost):
            raise ConfigError(f"invalid edge cost: {label}")
        if edge.category is None:
            raise ConfigError(f"missing edge type: {label}")
        try:
            category = Category.parse(edge.category)
        except ValueError as e:
            raise ConfigError(f"unknown edge type: {label}", cause=e) from e
        if edge.bidirectional is None:
            raise ConfigError(f"missing directionality: {label}")
        if not isinstance(edge.bidirectional, bool):
            raise ConfigError(
                f"invalid directionality for edge {label}: {edge.bidirectional!r}"
            )
        if not _is_valid_flag(edge.enabled):
            raise ConfigError(
                f"invalid enabled flag for edge {label}: {edge.enabled!r}"
            )
        return category
