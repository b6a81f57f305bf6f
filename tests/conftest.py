"""Pytest fixtures shared by the test suite."""

from __future__ import annotations

import pytest

from factories import SAMPLE_LAYOUT, edge, layout, node
from terminal_nav.adapters.layout import JSONLayoutRepository
from terminal_nav.config import LayoutConfig, reset_config
from terminal_nav.domain.models import Category
from terminal_nav.graph import DijkstraRouter, GraphBuilder


@pytest.fixture(autouse=True)
def isolated_globals():
    """Reset cached configuration around each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def builder() -> GraphBuilder:
    return GraphBuilder()


@pytest.fixture
def router() -> DijkstraRouter:
    return DijkstraRouter()


@pytest.fixture
def simple_graph(builder):
    """A --1-- B --1-- C, plus a direct A --10-- C corridor."""
    return builder.build(
        layout(
            [node("A"), node("B"), node("C")],
            [edge("A", "B", 1), edge("B", "C", 1), edge("A", "C", 10)],
        )
    )


@pytest.fixture
def two_floor_graph(builder):
    """Two floors linked by stairs, an escalator and an elevator.

    L1 --stairs 1-- U1
    L1 --escalator 1-- U1
    L1 --elevator 2-- U1
    """
    return builder.build(
        layout(
            [node("L1", floor=1), node("U1", floor=2)],
            [
                edge("L1", "U1", 1, Category.STAIRS),
                edge("L1", "U1", 1, Category.ESCALATOR),
                edge("L1", "U1", 2, Category.ELEVATOR),
            ],
        )
    )


@pytest.fixture
def sample_repository() -> JSONLayoutRepository:
    return JSONLayoutRepository(
        config=LayoutConfig(
            data_dir=SAMPLE_LAYOUT.parent, layout_file=SAMPLE_LAYOUT.name
        )
    )
