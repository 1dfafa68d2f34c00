"""
Journey Graph - Traversal
Pre-order walks over a journey tree using an explicit stack, so very long
journeys never hit the interpreter's recursion limit.
"""

from typing import Iterator, List, Optional, Tuple

from ..models import JourneyNode


def walk(root: JourneyNode) -> Iterator[Tuple[JourneyNode, Optional[JourneyNode], int]]:
    """
    Yield ``(node, parent, depth)`` for every node in depth-first pre-order,
    children left to right. The root has no parent and depth 0.
    """
    stack = [(root, None, 0)]
    while stack:
        node, parent, depth = stack.pop()
        yield node, parent, depth
        for child in reversed(node.children):
            stack.append((child, node, depth + 1))


def iter_root_paths(root: JourneyNode) -> Iterator[Tuple[JourneyNode, ...]]:
    """Yield the root-inclusive ancestor chain of every leaf, in pre-order."""
    chain: List[JourneyNode] = []
    for node, _, depth in walk(root):
        del chain[depth:]
        chain.append(node)
        if node.is_leaf:
            yield tuple(chain)
