"""Top-level package for terminal indoor navigation.

The package turns a facility layout into a validated, immutable graph
and computes shortest routes through it that respect a traveler's
mobility restrictions (no stairs, escalator penalties, ...).
"""

from .domain import (
    Category,
    ConfigError,
    DisabledNodeError,
    NoRouteError,
    RouteResult,
    TravelerProfile,
    UnknownNodeError,
)
from .graph import DijkstraRouter, Graph, GraphBuilder

__all__ = [
    "Category",
    "TravelerProfile",
    "RouteResult",
    "Graph",
    "GraphBuilder",
    "DijkstraRouter",
    "ConfigError",
    "UnknownNodeError",
    "DisabledNodeError",
    "NoRouteError",
]
