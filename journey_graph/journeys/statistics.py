"""
Journey Graph - Statistics
Summary metrics gathered in a single pass over the tree.
"""

from decimal import ROUND_HALF_UP, Decimal

from ..models import GraphData, GraphStatistics
from .traversal import walk


def round_half_up(value: float, places: int = 1) -> float:
    """Round like a person would: 4.25 -> 4.3, not banker's rounding."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def calculate_statistics(graph: GraphData) -> GraphStatistics:
    """
    Compute journey, node and path counts plus path length metrics.

    A path ends at every leaf and its length is the leaf's depth + 1, so
    one walk gives everything. ``average_path_length`` and
    ``max_path_length`` fall back to 0 when there are no paths.
    """
    total_paths = 0
    total_length = 0
    max_length = 0

    for node, _, depth in walk(graph.root):
        if node.is_leaf:
            length = depth + 1
            total_paths += 1
            total_length += length
            max_length = max(max_length, length)

    average = round_half_up(total_length / total_paths) if total_paths else 0.0

    return GraphStatistics(
        total_journeys=len(graph.root.children),
        total_nodes=len(graph.nodes),
        total_paths=total_paths,
        average_path_length=average,
        max_path_length=max_length,
    )
