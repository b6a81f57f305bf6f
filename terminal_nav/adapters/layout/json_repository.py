"""JSON layout repository adapter.

This adapter reads a terminal layout from a JSON document, turns it into
raw descriptors and hands them to ``GraphBuilder``. It adds:
- Configuration injection (path from config)
- Caching of the built graph and node metadata
- Typed errors for unreadable files and malformed documents

Expected document shape::

    {
      "nodes": [{"id": "A1", "label": "Gate A1", "floor": 1, "enabled": true}],
      "edges": [{"from": "A1", "to": "A2", "cost": 4, "type": "CORRIDOR",
                 "bidirectional": true, "enabled": true}]
    }
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Sequence

from ...config import LayoutConfig, get_config
from ...domain.errors import ConfigError, LayoutLoadError
from ...domain.models import EdgeDescriptor, LayoutDescriptor, NodeDescriptor
from ...graph.builder import GraphBuilder
from ...graph.graph import Graph


def _optional_id(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _number_or_raw(value: Any) -> Any:
    """Convert numeric strings; anything else is handed on unchanged."""
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def _parse_node(entry: Any) -> Optional[NodeDescriptor]:
    if not isinstance(entry, Mapping):
        return None

    return NodeDescriptor(
        id=_optional_id(entry.get("id")),
        label=str(entry.get("label") or ""),
        description=str(entry.get("description") or ""),
        enabled=entry.get("enabled"),
        floor=_number_or_raw(entry.get("floor")),
    )


def _parse_edge(entry: Any) -> Optional[EdgeDescriptor]:
    if not isinstance(entry, Mapping):
        return None

    category = entry.get("type")
    if category is None:
        category = entry.get("category")
    return EdgeDescriptor(
        source=_optional_id(entry.get("from")),
        target=_optional_id(entry.get("to")),
        cost=_number_or_raw(entry.get("cost")),
        category=category,
        bidirectional=entry.get("bidirectional"),
        enabled=entry.get("enabled"),
    )


def _parse_list(data: Mapping[str, Any], key: str) -> Optional[list]:
    entries = data.get(key)
    if entries is None:
        return None
    if not isinstance(entries, list):
        raise ConfigError(f"'{key}' must be a list")
    return entries


def parse_layout(data: Any) -> Optional[LayoutDescriptor]:
    """Convert a decoded JSON document into a raw layout descriptor.

    Entries are mapped field by field without judging their values, so
    that ``GraphBuilder`` reports the first defect in its own order. A
    ``null`` document yields ``None`` and an entry that is not an object
    becomes a missing node or edge.

    Raises:
        ConfigError: If the document or its lists have the wrong shape.
    """
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ConfigError("layout must be a JSON object")

    nodes = _parse_list(data, "nodes")
    edges = _parse_list(data, "edges")
    return LayoutDescriptor(
        nodes=None if nodes is None else tuple(_parse_node(n) for n in nodes),
        edges=None if edges is None else tuple(_parse_edge(e) for e in edges),
    )


@dataclass
class JSONLayoutRepository:
    """Layout repository that loads from a JSON file.

    This adapter implements LayoutRepositoryPort. The graph is built on
    first use and cached; concurrent first calls build it only once.

    Attributes:
        config: Layout configuration (data directory, file name)
        builder: Graph builder used to validate the layout
    """

    config: LayoutConfig = field(default_factory=lambda: get_config().layout)
    builder: GraphBuilder = field(default_factory=GraphBuilder)
    _logger: logging.Logger = field(init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)
    _nodes: Optional[Dict[str, NodeDescriptor]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the layout file and build its graph.

        Returns:
            The validated, immutable graph.

        Raises:
            LayoutLoadError: If the file cannot be read or decoded.
            ConfigError: If the layout is invalid.
        """
        if self._graph is not None:
            return self._graph

        with self._lock:
            if self._graph is None:
                layout = self._read_layout()
                graph = self.builder.build(layout)
                self._nodes = {
                    node.id: node for node in layout.nodes if node is not None
                }
                self._graph = graph
                self._logger.info(
                    "Layout loaded",
                    extra={"layout_path": str(self.config.layout_path), "nodes": len(graph)},
                )
        return self._graph

    def _read_layout(self) -> Optional[LayoutDescriptor]:
        path = self.config.layout_path
        self._logger.debug("Reading layout", extra={"layout_path": str(path)})
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise LayoutLoadError(
                f"Failed to read layout {path}",
                file_path=str(path),
                cause=e,
            ) from e
        return parse_layout(data)

    def get_node(self, node_id: str) -> Optional[NodeDescriptor]:
        """Get a node descriptor by id.

        Args:
            node_id: The node id to look up.

        Returns:
            The descriptor, or None if not found.
        """
        self.load()
        assert self._nodes is not None
        return self._nodes.get(node_id)

    def list_nodes(self) -> Sequence[NodeDescriptor]:
        """List all node descriptors in layout order.

        Returns:
            Sequence of node descriptors.
        """
        self.load()
        assert self._nodes is not None
        return list(self._nodes.values())

    def clear_cache(self) -> None:
        """Clear cached graph and node data."""
        with self._lock:
            self._graph = None
            self._nodes = None
        self._logger.debug("Layout cache cleared")
