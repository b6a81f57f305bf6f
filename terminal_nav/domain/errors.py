"""Typed domain errors for terminal navigation.

Layout defects, invalid queries and unreachable destinations are each
reported with their own error type so that callers (service, API, CLI)
can map them without inspecting messages.

All errors inherit from NavigationError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class NavigationError(Exception):
    """Base error for the navigation domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ConfigError(NavigationError):
    """Structural or semantic defect in a raw layout description.

    Raised by the graph builder; no graph is produced when it is raised.
    """


@dataclass
class LayoutLoadError(ConfigError):
    """The layout file could not be read or decoded.

    Attributes:
        file_path: Path to the layout file
    """

    file_path: Optional[str] = None


@dataclass
class InvalidQueryError(NavigationError, ValueError):
    """A routing query carried an invalid argument."""


@dataclass
class UnknownNodeError(InvalidQueryError):
    """Node id not found in the graph.

    Attributes:
        node_id: The id that was not found
    """

    node_id: str = ""


@dataclass
class DisabledNodeError(InvalidQueryError):
    """Node exists but is administratively disabled.

    Attributes:
        node_id: The disabled node id
    """

    node_id: str = ""


@dataclass
class UnknownProfileError(InvalidQueryError):
    """Traveler profile name not recognised.

    Attributes:
        profile_name: The name that was requested
    """

    profile_name: str = ""


@dataclass
class NoRouteError(NavigationError):
    """No admissible path exists under the profile's constraints.

    Attributes:
        source: Start node id
        target: Destination node id
        profile: Name of the traveler profile used
    """

    source: str = ""
    target: str = ""
    profile: str = ""
