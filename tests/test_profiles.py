"""Tests for traveler profiles and edge categories."""

from __future__ import annotations

import pytest

from terminal_nav.domain.errors import UnknownProfileError
from terminal_nav.domain.models import Category
from terminal_nav.domain.profiles import TravelerProfile


def test_standard_allows_everything_without_penalty():
    profile = TravelerProfile.STANDARD
    for category in Category:
        assert profile.is_allowed(category)
        assert profile.effective_cost(category, 4.5) == 4.5


def test_wheelchair_uses_flat_connectors_and_elevators_only():
    profile = TravelerProfile.WHEELCHAIR
    assert profile.is_allowed(Category.CORRIDOR)
    assert profile.is_allowed(Category.ELEVATOR)
    assert not profile.is_allowed(Category.STAIRS)
    assert not profile.is_allowed(Category.ESCALATOR)


@pytest.mark.parametrize(
    "profile, penalty",
    [(TravelerProfile.PARENT_WITH_STROLLER, 3), (TravelerProfile.ELDERLY, 2)],
)
def test_intermediate_profiles_penalise_escalators(profile, penalty):
    assert not profile.is_allowed(Category.STAIRS)
    assert profile.is_allowed(Category.ESCALATOR)
    assert profile.multiplier(Category.ESCALATOR) == penalty
    assert profile.effective_cost(Category.ESCALATOR, 2) == 2 * penalty
    assert profile.effective_cost(Category.ELEVATOR, 2) == 2
    assert profile.multiplier(Category.CORRIDOR) == 1


def test_profiles_are_immutable():
    with pytest.raises(TypeError):
        TravelerProfile.ELDERLY.multipliers[Category.ELEVATOR] = 5  # type: ignore[index]
    assert isinstance(TravelerProfile.ELDERLY.allowed, frozenset)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("standard", TravelerProfile.STANDARD),
        ("PASSENGER", TravelerProfile.STANDARD),
        ("Elderly", TravelerProfile.ELDERLY),
        ("parent-with-stroller", TravelerProfile.PARENT_WITH_STROLLER),
        ("WHEELCHAIR_USER", TravelerProfile.WHEELCHAIR),
        ("  wheelchair ", TravelerProfile.WHEELCHAIR),
    ],
)
def test_from_name(name, expected):
    assert TravelerProfile.from_name(name) is expected


def test_from_name_unknown():
    with pytest.raises(UnknownProfileError) as excinfo:
        TravelerProfile.from_name("jetpack")
    assert excinfo.value.profile_name == "jetpack"


def test_names_lists_every_profile():
    assert list(TravelerProfile.names()) == [
        "standard",
        "parent_with_stroller",
        "elderly",
        "wheelchair",
    ]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("corridor", Category.CORRIDOR),
        ("STAIRS", Category.STAIRS),
        (" Escalator ", Category.ESCALATOR),
        ("lift", Category.ELEVATOR),
        (Category.ELEVATOR, Category.ELEVATOR),
    ],
)
def test_category_parse(raw, expected):
    assert Category.parse(raw) is expected


def test_category_parse_unknown():
    with pytest.raises(ValueError):
        Category.parse("zipline")
