"""
Journey Graph - Journey Tree Module
Build a tree from detected journeys and derive paths, statistics,
visualization exports and text diagrams from it.
"""

from .builder import JourneyGraphBuilder, build_graph, step_node_id
from .paths import extract_paths, leaf_nodes
from .statistics import calculate_statistics
from .exporter import export_for_visualization
from .renderer import render_as_text
from .adapters import load_journeys, from_detected_journey, from_detected_journeys

__all__ = [
    'JourneyGraphBuilder',
    'build_graph',
    'step_node_id',
    'extract_paths',
    'leaf_nodes',
    'calculate_statistics',
    'export_for_visualization',
    'render_as_text',
    'load_journeys',
    'from_detected_journey',
    'from_detected_journeys',
]
