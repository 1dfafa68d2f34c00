"""
Journey Graph - Visualization Export
Flat node and edge lists for graph renderers (D3, vis.js, pyvis, ...).
"""

from ..models import GraphData, VisualizationExport
from .traversal import walk


def export_for_visualization(graph: GraphData) -> VisualizationExport:
    """
    Export the tree as nodes and parent-to-child edges.

    Nodes come in pre-order and carry their annotation payload as ``data``.
    Every node except the root has exactly one incoming edge.
    """
    export = VisualizationExport()

    for node, parent, _ in walk(graph.root):
        export.nodes.append({
            "id": node.id,
            "label": node.label,
            "type": node.type.value,
            "data": node.annotation_data(),
        })
        if parent is not None:
            export.edges.append({"from": parent.id, "to": node.id})

    return export
