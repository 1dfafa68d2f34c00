"""
Journey Graph - Path Extraction
"""

from typing import List

from ..models import GraphData, JourneyNode, JourneyPath
from .traversal import iter_root_paths


def extract_paths(graph: GraphData) -> List[JourneyPath]:
    """
    Extract every root-to-leaf path, in the order the branches appear.

    A root without children is its own leaf, so an empty graph yields a
    single one-node path.
    """
    return [JourneyPath(chain) for chain in iter_root_paths(graph.root)]


def leaf_nodes(graph: GraphData) -> List[JourneyNode]:
    """Get the end point of every path."""
    return [path.leaf for path in extract_paths(graph)]
