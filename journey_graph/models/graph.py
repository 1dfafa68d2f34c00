"""
Journey Graph - Graph Models
Tree nodes, derived paths and the projections built from them.

Nodes are frozen dataclasses whose children are tuples, so a tree is
immutable once the builder returns it. Two trees built from equal
journeys compare equal.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from .journey import DataType, JourneyStep, JourneyType


ROOT_NODE_ID = "page-root"
ROOT_LABEL = "Current Page"
PATH_SEPARATOR = " → "


class NodeType(str, Enum):
    PAGE = "page"
    ACTION = "action"


# =============================================================================
# Annotations
# =============================================================================


@dataclass(frozen=True)
class PageAnnotation:
    is_root: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {"is_root": self.is_root}


@dataclass(frozen=True)
class JourneyAnnotation:
    """Carried by the first action node of every branch."""
    journey_id: str
    confidence: float
    journey_type: JourneyType = JourneyType.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "journey_id": self.journey_id,
            "confidence": self.confidence,
            "journey_type": self.journey_type.value,
        }


@dataclass(frozen=True)
class StepAnnotation:
    """Carried by each step node."""
    step_number: int
    requires_data: bool = False
    data_type: Optional[DataType] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number": self.step_number,
            "requires_data": self.requires_data,
            "data_type": self.data_type.value if self.data_type else None,
        }


ActionAnnotation = Union[JourneyAnnotation, StepAnnotation]


# =============================================================================
# Nodes
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class JourneyNode:
    """
    A vertex of the journey tree. Subclasses add an ``annotation`` field.

    Equality, hashing and repr never recurse, so trees deeper than the
    interpreter recursion limit can be compared and printed.
    """
    id: str
    label: str
    children: Tuple["JourneyNode", ...]

    type: ClassVar[NodeType]

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def confidence(self) -> Optional[float]:
        return getattr(self.annotation, "confidence", None)

    def annotation_data(self) -> Dict[str, Any]:
        return self.annotation.to_dict()

    def _shape(self) -> Tuple[Any, ...]:
        # Everything but the children themselves
        return (type(self), self.id, self.label, len(self.children))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JourneyNode):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            left, right = stack.pop()
            if left is right:
                continue
            if left._shape() != right._shape():
                return False
            stack.extend(zip(left.children, right.children))
        return True

    def __hash__(self) -> int:
        return hash((type(self), self.id, self.label))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, label={self.label!r}, "
            f"children={len(self.children)})"
        )


@dataclass(frozen=True, eq=False, repr=False)
class PageNode(JourneyNode):
    url: str
    annotation: PageAnnotation = field(default_factory=PageAnnotation)

    type: ClassVar[NodeType] = NodeType.PAGE

    def _shape(self) -> Tuple[Any, ...]:
        return super()._shape() + (self.url, self.annotation)


@dataclass(frozen=True, eq=False, repr=False)
class ActionNode(JourneyNode):
    annotation: ActionAnnotation
    step: Optional[JourneyStep] = None

    type: ClassVar[NodeType] = NodeType.ACTION

    def _shape(self) -> Tuple[Any, ...]:
        return super()._shape() + (self.annotation, self.step)


# =============================================================================
# Derived structures
# =============================================================================


@dataclass(frozen=True, eq=False)
class JourneyPath:
    """
    Root-to-leaf node sequence. Holds references, owns nothing.

    Two paths are equal when their nodes match position by position; the
    subtrees hanging off each node are not compared.
    """
    nodes: Tuple[JourneyNode, ...]

    @property
    def description(self) -> str:
        return PATH_SEPARATOR.join(node.label for node in self.nodes)

    @property
    def length(self) -> int:
        return len(self.nodes)

    @property
    def leaf(self) -> JourneyNode:
        return self.nodes[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "node_ids": [node.id for node in self.nodes],
            "description": self.description,
            "length": self.length,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JourneyPath):
            return NotImplemented
        return len(self.nodes) == len(other.nodes) and all(
            left._shape() == right._shape() for left, right in zip(self.nodes, other.nodes)
        )

    def __hash__(self) -> int:
        return hash(tuple(node.id for node in self.nodes))


@dataclass(frozen=True, eq=False, repr=False)
class GraphData:
    """Output of a build: the root, every node in pre-order, and the paths."""
    root: PageNode
    nodes: Tuple[JourneyNode, ...]
    paths: Tuple[JourneyPath, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root_id": self.root.id,
            "url": self.root.url,
            "nodes": [
                {
                    "id": node.id,
                    "label": node.label,
                    "type": node.type.value,
                    "children": [child.id for child in node.children],
                    "data": node.annotation_data(),
                }
                for node in self.nodes
            ],
            "paths": [path.to_dict() for path in self.paths],
        }

    # nodes and paths are derived from root
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphData):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        return hash(self.root)

    def __repr__(self) -> str:
        return f"GraphData(root={self.root!r}, nodes={len(self.nodes)}, paths={len(self.paths)})"


@dataclass(frozen=True)
class GraphStatistics:
    total_journeys: int
    total_nodes: int
    total_paths: int
    average_path_length: float
    max_path_length: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_journeys": self.total_journeys,
            "total_nodes": self.total_nodes,
            "total_paths": self.total_paths,
            "average_path_length": self.average_path_length,
            "max_path_length": self.max_path_length,
        }


@dataclass
class VisualizationExport:
    """Flat node/edge lists for third-party graph renderers."""
    nodes: List[Dict[str, Any]] = field(default_factory=list)
    edges: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": self.nodes, "edges": self.edges}
