# ==============================================================================
# Tests for the Text Renderer
# ==============================================================================
"""
Unit tests for render_as_text().

Tests cover:
- Box-drawing connectors and indentation
- Confidence suffixes on journey nodes only
- Empty graph and deep chains
- Confidence printed as plain decimals without precision loss
"""

import pytest

from journey_graph.journeys import build_graph, render_as_text
from journey_graph.journeys.renderer import format_confidence
from journey_graph.models import Journey, JourneyStep


class TestRenderAsText:
    """Tests for render_as_text()."""

    def test_checkout_example(self, checkout_graph):
        assert render_as_text(checkout_graph) == "\n".join([
            "Current Page",
            "└── Checkout (92%)",
            "    └── Add to cart",
            "        └── Click checkout",
        ])

    def test_two_journeys(self, two_journey_graph):
        assert render_as_text(two_journey_graph) == "\n".join([
            "Current Page",
            "├── Checkout (92%)",
            "│   └── Add to cart",
            "│       └── Click checkout",
            "└── Login (80.5%)",
            "    └── Open login",
            "        └── Enter email",
            "            └── Enter password",
            "                └── Submit",
        ])

    def test_empty_graph_is_root_label_only(self, empty_graph):
        assert render_as_text(empty_graph) == "Current Page"

    def test_zero_step_journeys(self):
        graph = build_graph([
            Journey(id="a", name="Search", confidence=0),
            Journey(id="b", name="Browse", confidence=100),
        ])
        assert render_as_text(graph) == "\n".join([
            "Current Page",
            "├── Search (0%)",
            "└── Browse (100%)",
        ])

    def test_no_confidence_on_step_lines(self, checkout_graph):
        lines = render_as_text(checkout_graph).splitlines()
        assert "%" not in lines[2]
        assert "%" not in lines[3]

    def test_one_line_per_node(self, journey_factory):
        graph = build_graph([journey_factory("a", 3), journey_factory("b", 40)])
        assert len(render_as_text(graph).splitlines()) == len(graph.nodes)

    def test_deterministic(self, two_journeys):
        assert render_as_text(build_graph(two_journeys)) == render_as_text(build_graph(two_journeys))

    def test_duplicate_labels_rendered_verbatim(self):
        graph = build_graph([Journey(
            id="w",
            name="Wizard",
            confidence=75,
            steps=[JourneyStep(description="Next", order=0), JourneyStep(description="Next", order=1)],
        )])
        assert render_as_text(graph).splitlines()[2:] == [
            "    └── Next",
            "        └── Next",
        ]

    @pytest.mark.parametrize("confidence, expected", [
        (87.654321, "Precise (87.654321%)"),
        (0.00001, "Precise (0.00001%)"),
        (99.999999, "Precise (99.999999%)"),
        (12.5, "Precise (12.5%)"),
    ])
    def test_confidence_keeps_full_precision(self, confidence, expected):
        graph = build_graph([Journey(id="p", name="Precise", confidence=confidence)])
        assert render_as_text(graph).splitlines()[1] == f"└── {expected}"


class TestFormatConfidence:
    """Tests for format_confidence()."""

    @pytest.mark.parametrize("confidence, expected", [
        (92.0, "92"),
        (0, "0"),
        (100, "100"),
        (80.5, "80.5"),
        (87.654321, "87.654321"),
        (0.00001, "0.00001"),
        (1e-07, "0.0000001"),
    ])
    def test_plain_decimal_text(self, confidence, expected):
        assert format_confidence(confidence) == expected
