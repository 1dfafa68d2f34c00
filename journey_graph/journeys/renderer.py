"""
Journey Graph - Text Renderer
ASCII tree diagram of a journey graph, for logs and terminals.

    Current Page
    ├── Checkout (92%)
    │   └── Add to cart
    │       └── Click checkout
    └── Login (80%)
        └── Enter email
"""

from decimal import Decimal

from ..models import GraphData, JourneyNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def format_confidence(confidence: float) -> str:
    """Plain decimal text of a confidence value: 92.0 -> '92', 1e-05 -> '0.00001'."""
    value = float(confidence)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _node_text(node: JourneyNode) -> str:
    confidence = node.confidence
    if confidence is None:
        return node.label
    return f"{node.label} ({format_confidence(confidence)}%)"


def render_as_text(graph: GraphData) -> str:
    """Render the whole tree, one node per line, without truncation."""
    lines = [graph.root.label]

    children = graph.root.children
    stack = [
        (child, "", index == len(children) - 1)
        for index, child in reversed(list(enumerate(children)))
    ]

    while stack:
        node, prefix, is_last = stack.pop()
        lines.append(prefix + (LAST_BRANCH if is_last else BRANCH) + _node_text(node))

        child_prefix = prefix + (SPACE if is_last else PIPE)
        last_index = len(node.children) - 1
        for index in range(last_index, -1, -1):
            stack.append((node.children[index], child_prefix, index == last_index))

    return "\n".join(lines)
