"""Tests for GraphBuilder validation and edge materialisation."""

from __future__ import annotations

import math

import pytest

from factories import edge, layout, node
from terminal_nav.domain.errors import ConfigError
from terminal_nav.domain.models import Category, Connection, LayoutDescriptor


def _error(builder, descriptor) -> str:
    with pytest.raises(ConfigError) as excinfo:
        builder.build(descriptor)
    return excinfo.value.message


class TestStructuralValidation:
    def test_missing_input(self, builder):
        assert _error(builder, None) == "missing input"

    def test_no_nodes(self, builder):
        assert _error(builder, layout([], [edge("A", "B")])) == "no nodes defined"
        assert _error(builder, LayoutDescriptor(edges=(edge("A", "B"),))) == (
            "no nodes defined"
        )

    def test_no_edges(self, builder):
        assert _error(builder, layout([node("A")], [])) == "no edges defined"
        assert _error(builder, layout([node("A")], None)) == "no edges defined"

    def test_nodes_checked_before_edges(self, builder):
        # Both lists are empty; the node check comes first.
        assert _error(builder, layout([], [])) == "no nodes defined"

    @pytest.mark.parametrize("bad_id", [None, "", "   ", "\t"])
    def test_blank_node_id(self, builder, bad_id):
        descriptor = layout([node("A"), node(bad_id)], [edge("A", "A")])
        assert _error(builder, descriptor) == "node missing or empty id"

    def test_null_node_entry(self, builder):
        descriptor = layout([node("A"), None], [edge("A", "A")])
        assert _error(builder, descriptor) == "node missing or empty id"

    def test_duplicate_node_id(self, builder):
        descriptor = layout([node("A"), node("B"), node("A")], [edge("A", "B")])
        assert _error(builder, descriptor) == "duplicate node id: A"

    def test_node_errors_reported_before_edge_errors(self, builder):
        descriptor = layout([node("A"), node("A")], [edge("A", "Z")])
        assert _error(builder, descriptor) == "duplicate node id: A"


class TestEdgeValidation:
    def test_null_edge_entry(self, builder):
        descriptor = layout([node("A"), node("B")], [edge("A", "B"), None])
        assert _error(builder, descriptor) == "null edge definition"

    def test_unknown_source(self, builder):
        descriptor = layout([node("A"), node("B")], [edge("X", "B")])
        assert _error(builder, descriptor) == "edge references unknown source node: X"

    def test_unknown_destination(self, builder):
        descriptor = layout([node("A"), node("B")], [edge("A", "Y")])
        assert _error(builder, descriptor) == (
            "edge references unknown destination node: Y"
        )

    def test_blank_source_is_unknown(self, builder):
        descriptor = layout([node("A"), node("B")], [edge("", "B")])
        assert _error(builder, descriptor).startswith(
            "edge references unknown source node"
        )

    def test_source_checked_before_destination(self, builder):
        descriptor = layout([node("A")], [edge("X", "Y")])
        assert _error(builder, descriptor) == "edge references unknown source node: X"

    @pytest.mark.parametrize(
        "cost", [None, 0, -1, -0.5, math.inf, math.nan, True, "3", 10**400]
    )
    def test_invalid_cost(self, builder, cost):
        descriptor = layout([node("A"), node("B")], [edge("A", "B", cost=cost)])
        assert _error(builder, descriptor) == "invalid edge cost: A->B"

    def test_missing_category(self, builder):
        descriptor = layout([node("A"), node("B")], [edge("A", "B", category=None)])
        assert _error(builder, descriptor) == "missing edge type: A->B"

    def test_missing_directionality(self, builder):
        descriptor = layout(
            [node("A"), node("B")], [edge("A", "B", bidirectional=None)]
        )
        assert _error(builder, descriptor) == "missing directionality: A->B"

    def test_cost_checked_before_category_and_directionality(self, builder):
        descriptor = layout(
            [node("A"), node("B")],
            [edge("A", "B", cost=0, category=None, bidirectional=None)],
        )
        assert _error(builder, descriptor) == "invalid edge cost: A->B"

    def test_category_checked_before_directionality(self, builder):
        descriptor = layout(
            [node("A"), node("B")],
            [edge("A", "B", category=None, bidirectional=None)],
        )
        assert _error(builder, descriptor) == "missing edge type: A->B"

    def test_first_bad_edge_wins(self, builder):
        descriptor = layout(
            [node("A"), node("B")],
            [edge("A", "B"), edge("B", "A", cost=-2), edge("A", "Q")],
        )
        assert _error(builder, descriptor) == "invalid edge cost: B->A"

    def test_unknown_category(self, builder):
        descriptor = layout(
            [node("A"), node("B")],
            [edge("A", "B", category="zipline", bidirectional=None)],
        )
        assert _error(builder, descriptor) == "unknown edge type: A->B"

    def test_category_name_is_resolved(self, builder):
        graph = builder.build(
            layout([node("A"), node("B")], [edge("A", "B", category="Lift")])
        )
        (connection,) = graph.connections_from("A")
        assert connection.category is Category.ELEVATOR

    def test_non_boolean_directionality(self, builder):
        descriptor = layout([node("A"), node("B")], [edge("A", "B", bidirectional=1)])
        assert _error(builder, descriptor) == "invalid directionality for edge A->B: 1"

    def test_non_boolean_edge_flag(self, builder):
        descriptor = layout([node("A"), node("B")], [edge("A", "B", enabled="no")])
        assert _error(builder, descriptor) == "invalid enabled flag for edge A->B: 'no'"

    @pytest.mark.parametrize("floor", ["top", math.nan, True, 10**400])
    def test_invalid_floor(self, builder, floor):
        descriptor = layout([node("A", floor=floor), node("B")], [edge("A", "B")])
        assert _error(builder, descriptor) == "invalid floor for node: A"

    def test_non_boolean_node_flag(self, builder):
        descriptor = layout([node("A", enabled=1), node("B")], [edge("A", "B")])
        assert _error(builder, descriptor) == "invalid enabled flag for node A: 1"

    def test_node_defects_reported_before_edge_defects(self, builder):
        descriptor = layout(
            [node("A"), node("A")],
            [edge("A", "A", cost="x", category="teleporter")],
        )
        assert _error(builder, descriptor) == "duplicate node id: A"


class TestMaterialisation:
    def test_node_ids_match_input(self, builder):
        graph = builder.build(
            layout([node("A"), node("B"), node("C")], [edge("A", "B")])
        )
        assert graph.node_ids() == {"A", "B", "C"}

    def test_bidirectional_edge_is_mirrored(self, builder):
        graph = builder.build(
            layout(
                [node("A"), node("B")],
                [edge("A", "B", cost=7, category=Category.ESCALATOR)],
            )
        )
        assert Connection("B", 7.0, Category.ESCALATOR, True) in graph.connections_from("A")
        assert Connection("A", 7.0, Category.ESCALATOR, True) in graph.connections_from("B")

    def test_directed_edge_is_not_mirrored(self, builder):
        graph = builder.build(
            layout([node("A"), node("B")], [edge("A", "B", bidirectional=False)])
        )
        assert [c.target for c in graph.connections_from("A")] == ["B"]
        assert graph.connections_from("B") == ()

    def test_connections_keep_layout_order(self, builder):
        graph = builder.build(
            layout(
                [node("A"), node("B"), node("C")],
                [edge("A", "C", 2), edge("A", "B", 1)],
            )
        )
        assert [c.target for c in graph.connections_from("A")] == ["C", "B"]

    def test_lenient_defaults(self, builder):
        graph = builder.build(
            layout([node("A"), node("B")], [edge("A", "B", enabled=None)])
        )
        assert graph.is_enabled("A") is True
        assert graph.floor_of("A") == 1
        assert all(c.enabled for c in graph.connections_from("A"))

    def test_explicit_metadata_is_kept(self, builder):
        graph = builder.build(
            layout(
                [node("A", enabled=False, floor=3), node("B", floor=0.5)],
                [edge("A", "B")],
            )
        )
        assert graph.is_enabled("A") is False
        assert graph.floor_of("A") == 3
        assert graph.floor_of("B") == 0.5

    def test_disabled_edge_is_carried_in_both_directions(self, builder):
        graph = builder.build(
            layout([node("A"), node("B")], [edge("A", "B", enabled=False)])
        )
        (forward,) = graph.connections_from("A")
        (backward,) = graph.connections_from("B")
        assert forward.enabled is False
        assert backward.enabled is False

    def test_integer_cost_is_stored_as_float(self, builder):
        graph = builder.build(layout([node("A"), node("B")], [edge("A", "B", 3)]))
        (connection,) = graph.connections_from("A")
        assert isinstance(connection.cost, float)
        assert connection.cost == 3.0

    def test_builder_is_reusable(self, builder):
        descriptor = layout([node("A"), node("B")], [edge("A", "B")])
        first = builder.build(descriptor)
        second = builder.build(descriptor)
        assert first is not second
        assert first.node_ids() == second.node_ids()
        assert first.connections_from("A") == second.connections_from("A")

    def test_failed_build_does_not_affect_later_builds(self, builder):
        with pytest.raises(ConfigError):
            builder.build(layout([node("A")], [edge("A", "B")]))
        graph = builder.build(layout([node("A"), node("B")], [edge("A", "B")]))
        assert len(graph) == 2
