"""
Journey Graph
Turns detected user journeys into a single rooted tree of page actions.
"""

from .journeys import (
    JourneyGraphBuilder,
    build_graph,
    extract_paths,
    leaf_nodes,
    calculate_statistics,
    export_for_visualization,
    render_as_text,
    load_journeys,
    from_detected_journey,
    from_detected_journeys,
)
from .models import Journey, JourneyStep, GraphData, JourneyPath, GraphStatistics

__version__ = "1.0.0"

__all__ = [
    "JourneyGraphBuilder",
    "build_graph",
    "extract_paths",
    "leaf_nodes",
    "calculate_statistics",
    "export_for_visualization",
    "render_as_text",
    "load_journeys",
    "from_detected_journey",
    "from_detected_journeys",
    "Journey",
    "JourneyStep",
    "GraphData",
    "JourneyPath",
    "GraphStatistics",
]
