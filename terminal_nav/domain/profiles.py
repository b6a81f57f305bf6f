"""Traveler profiles: routing policies derived from mobility needs.

Each profile specifies which connector categories a traveler may use
and which of them carry a cost penalty. Profiles are process-wide
constants with no mutable state.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple, Union

from .errors import UnknownProfileError
from .models import Category

Number = Union[int, float]

_ALIASES = {
    "passenger": "standard",
    "wheelchair_user": "wheelchair",
    "stroller": "parent_with_stroller",
}


class TravelerProfile(Enum):
    """Closed set of traveler profiles."""

    # Default profile - all connectors allowed, no penalties.
    STANDARD = (
        "standard",
        frozenset(Category),
        (),
        "Standard passenger - can use all paths",
    )

    # Escalators allowed but difficult with a stroller.
    PARENT_WITH_STROLLER = (
        "parent_with_stroller",
        frozenset({Category.CORRIDOR, Category.ELEVATOR, Category.ESCALATOR}),
        ((Category.ESCALATOR, 3),),
        "Parent with stroller - no stairs, escalators penalized (3x)",
    )

    ELDERLY = (
        "elderly",
        frozenset({Category.CORRIDOR, Category.ELEVATOR, Category.ESCALATOR}),
        ((Category.ESCALATOR, 2),),
        "Elderly passenger - no stairs, escalators penalized (2x)",
    )

    # Elevator is the only way to change floors.
    WHEELCHAIR = (
        "wheelchair",
        frozenset({Category.CORRIDOR, Category.ELEVATOR}),
        (),
        "Wheelchair user - no stairs or escalators",
    )

    def __init__(
        self,
        key: str,
        allowed: frozenset,
        penalties: Tuple[Tuple[Category, Number], ...],
        description: str,
    ) -> None:
        self.key = key
        self.allowed = allowed
        self.multipliers: Mapping[Category, Number] = MappingProxyType(dict(penalties))
        self.description = description

    def is_allowed(self, category: Category) -> bool:
        """Return whether this profile may use the given category."""
        return category in self.allowed

    def multiplier(self, category: Category) -> Number:
        """Return the cost multiplier for a category (1 when unpenalised)."""
        return self.multipliers.get(category, 1)

    def effective_cost(self, category: Category, base_cost: float) -> float:
        """Return the cost of a connection once the penalty is applied."""
        return base_cost * self.multiplier(category)

    @classmethod
    def from_name(cls, name: str) -> TravelerProfile:
        """Look up a profile by name, case-insensitively.

        Raises:
            UnknownProfileError: If no profile matches.
        """
        key = (name or "").strip().lower().replace("-", "_")
        key = _ALIASES.get(key, key)
        for profile in cls:
            if profile.key == key:
                return profile
        raise UnknownProfileError(
            f"Unknown traveler profile: {name}",
            profile_name=name or "",
        )

    @classmethod
    def names(cls) -> Iterable[str]:
        """Return the canonical names of all profiles."""
        return [profile.key for profile in cls]
