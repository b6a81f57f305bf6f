"""Domain layer - Core models, profiles and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigError,
    DisabledNodeError,
    InvalidQueryError,
    LayoutLoadError,
    NavigationError,
    NoRouteError,
    UnknownNodeError,
    UnknownProfileError,
)
from .models import (
    Category,
    Connection,
    EdgeDescriptor,
    FloorChange,
    LayoutDescriptor,
    NodeDescriptor,
    RouteDescription,
    RouteResult,
    RouteStep,
)
from .profiles import TravelerProfile

__all__ = [
    # Models
    "Category",
    "NodeDescriptor",
    "EdgeDescriptor",
    "LayoutDescriptor",
    "Connection",
    "RouteResult",
    "RouteStep",
    "FloorChange",
    "RouteDescription",
    "TravelerProfile",
    # Errors
    "NavigationError",
    "ConfigError",
    "LayoutLoadError",
    "InvalidQueryError",
    "UnknownNodeError",
    "DisabledNodeError",
    "UnknownProfileError",
    "NoRouteError",
]
