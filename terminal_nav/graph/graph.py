"""Immutable routing graph.

A Graph holds the adjacency of a facility layout together with the
per-node metadata the router needs (enabled flag and floor). Graphs are
produced by ``GraphBuilder``; once constructed nothing in them changes,
so a single instance can be shared by any number of concurrent queries.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from ..domain.errors import UnknownNodeError
from ..domain.models import Connection

Adjacency = Mapping[str, Iterable[Connection]]


class Graph:
    """Read-only adjacency structure plus node metadata.

    The constructor re-checks the consistency of what it is given and
    raises ``ValueError`` on any mismatch; a failure here means the
    caller bypassed or broke the builder, not that the layout is bad.
    """

    __slots__ = ("_adj", "_enabled", "_floors", "_connection_count")

    def __init__(
        self,
        adj: Adjacency,
        node_enabled: Mapping[str, bool],
        node_floors: Mapping[str, float],
    ) -> None:
        if not adj:
            raise ValueError("Graph adjacency map must not be null or empty")
        if not node_enabled:
            raise ValueError("node_enabled map must not be null or empty")
        if not node_floors:
            raise ValueError("node_floors map must not be null or empty")

        frozen: Dict[str, Tuple[Connection, ...]] = {}
        for node_id, connections in adj.items():
            if not isinstance(node_id, str) or not node_id.strip():
                raise ValueError("Graph contains null/blank node id")
            if connections is None:
                raise ValueError(f"Adjacency list is null for node: {node_id}")
            frozen[node_id] = tuple(connections)

        for node_id in frozen:
            if node_enabled.get(node_id) is None:
                raise ValueError(f"Missing enabled metadata for node: {node_id}")
            if node_floors.get(node_id) is None:
                raise ValueError(f"Missing floor metadata for node: {node_id}")

        count = 0
        for node_id, connections in frozen.items():
            for connection in connections:
                if connection.target not in frozen:
                    raise ValueError(
                        f"Connection from {node_id} targets unknown node: "
                        f"{connection.target}"
                    )
                count += 1

        object.__setattr__(self, "_adj", MappingProxyType(frozen))
        object.__setattr__(
            self,
            "_enabled",
            MappingProxyType({n: bool(node_enabled[n]) for n in frozen}),
        )
        object.__setattr__(
            self,
            "_floors",
            MappingProxyType({n: node_floors[n] for n in frozen}),
        )
        object.__setattr__(self, "_connection_count", count)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self)}, connections={self._connection_count})"

    @property
    def connection_count(self) -> int:
        """Total number of directed connections."""
        return self._connection_count

    def has_node(self, node_id: str) -> bool:
        return node_id in self._adj

    def node_ids(self) -> FrozenSet[str]:
        """Return a copy of all node ids in the graph."""
        return frozenset(self._adj)

    def connections_from(self, node_id: str) -> Tuple[Connection, ...]:
        """Return outgoing connections, or an empty tuple if there are none."""
        return self._adj.get(node_id, ())

    def is_enabled(self, node_id: str) -> bool:
        """Return whether the node is enabled.

        Raises:
            UnknownNodeError: If the node is not in the graph.
        """
        try:
            return self._enabled[node_id]
        except KeyError:
            raise UnknownNodeError(
                f"Unknown node id: {node_id}", node_id=node_id
            ) from None

    def floor_of(self, node_id: str) -> float:
        """Return the floor the node is on.

        Raises:
            UnknownNodeError: If the node is not in the graph.
        """
        try:
            return self._floors[node_id]
        except KeyError:
            raise UnknownNodeError(
                f"Unknown node id: {node_id}", node_id=node_id
            ) from None
