# ==============================================================================
# Tests for Visualization Export
# ==============================================================================
"""
Unit tests for export_for_visualization().

Tests cover:
- Node entries in pre-order with id, label, type and annotation data
- One parent-to-child edge per non-root node
- Empty graph export
"""

import pytest

from journey_graph.journeys import build_graph, export_for_visualization


class TestNodes:
    """Tests for exported node entries."""

    def test_nodes_in_pre_order(self, two_journey_graph):
        export = export_for_visualization(two_journey_graph)
        assert [n["id"] for n in export.nodes] == [n.id for n in two_journey_graph.nodes]

    def test_root_entry(self, checkout_graph):
        root = export_for_visualization(checkout_graph).nodes[0]
        assert root == {
            "id": "page-root",
            "label": "Current Page",
            "type": "page",
            "data": {"is_root": True},
        }

    def test_journey_entry_carries_confidence(self, checkout_graph):
        journey = export_for_visualization(checkout_graph).nodes[1]
        assert journey == {
            "id": "j1",
            "label": "Checkout",
            "type": "action",
            "data": {"journey_id": "j1", "confidence": 92.0, "journey_type": "unknown"},
        }

    def test_step_entry_carries_step_data(self, two_journey_graph):
        entries = {n["id"]: n for n in export_for_visualization(two_journey_graph).nodes}
        assert entries["j2-step-2"]["data"] == {
            "step_number": 2,
            "requires_data": True,
            "data_type": "password",
        }
        assert entries["j1-step-0"]["data"] == {
            "step_number": 0,
            "requires_data": False,
            "data_type": None,
        }


class TestEdges:
    """Tests for exported edges."""

    def test_checkout_edges(self, checkout_graph):
        assert export_for_visualization(checkout_graph).edges == [
            {"from": "page-root", "to": "j1"},
            {"from": "j1", "to": "j1-step-0"},
            {"from": "j1-step-0", "to": "j1-step-1"},
        ]

    @pytest.mark.parametrize("step_counts", [[0], [2, 4], [1, 0, 3]])
    def test_edge_count_is_node_count_minus_one(self, journey_factory, step_counts):
        journeys = [journey_factory(f"j{i}", n) for i, n in enumerate(step_counts)]
        export = export_for_visualization(build_graph(journeys))
        assert len(export.edges) == len(export.nodes) - 1

    def test_root_has_no_incoming_edge(self, two_journey_graph):
        targets = [e["to"] for e in export_for_visualization(two_journey_graph).edges]
        assert "page-root" not in targets
        assert len(targets) == len(set(targets))

    def test_empty_graph(self, empty_graph):
        export = export_for_visualization(empty_graph)
        assert len(export.nodes) == 1
        assert export.edges == []

    def test_to_dict(self, checkout_graph):
        data = export_for_visualization(checkout_graph).to_dict()
        assert set(data) == {"nodes", "edges"}
        assert len(data["nodes"]) == 4
