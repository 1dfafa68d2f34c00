"""
Journey Graph - Graph Builder
Turns a list of detected journeys into one tree rooted at the current page.
"""

from typing import Iterable, List, Optional

from ..core.config import settings
from ..core.logging import get_logger
from ..models import (
    ROOT_LABEL,
    ROOT_NODE_ID,
    ActionNode,
    GraphData,
    Journey,
    JourneyAnnotation,
    JourneyPath,
    PageNode,
    StepAnnotation,
)
from .traversal import iter_root_paths, walk

logger = get_logger(__name__)


def step_node_id(journey_id: str, position: int) -> str:
    """Id of the step at ``position`` (0-based, after ordering) of a journey."""
    return f"{journey_id}-step-{position}"


class JourneyGraphBuilder:
    """
    Build a journey tree from detected journeys.

    The root is a page node for ``current_url``. Each journey becomes one
    branch: an action node named after the journey, followed by a linear
    chain of its steps in ascending ``order``.

    A builder keeps no state between calls; one instance can serve any
    number of builds, from any thread.
    """

    def __init__(self, current_url: Optional[str] = None):
        self.current_url = current_url if current_url is not None else settings.default_root_url

    def build(self, journeys: Iterable[Journey]) -> GraphData:
        """
        Build the tree.

        Journey ids must be unique. They are not checked; duplicates yield
        duplicate node ids.

        Args:
            journeys: Journeys in display order, possibly empty

        Returns:
            GraphData with the root, the pre-order node list and all paths
        """
        branches = [self._create_branch(journey) for journey in journeys]

        root = PageNode(
            id=ROOT_NODE_ID,
            label=ROOT_LABEL,
            children=tuple(branches),
            url=self.current_url,
        )

        nodes = tuple(node for node, _, _ in walk(root))
        paths = tuple(JourneyPath(chain) for chain in iter_root_paths(root))

        logger.info(
            "Journey graph built",
            journeys=len(branches),
            nodes=len(nodes),
            paths=len(paths),
        )

        return GraphData(root=root, nodes=nodes, paths=paths)

    def _create_branch(self, journey: Journey) -> ActionNode:
        """Create the journey node and its step chain, deepest step first."""
        steps = journey.ordered_steps()

        children = ()
        for position in range(len(steps) - 1, -1, -1):
            step = steps[position]
            step_node = ActionNode(
                id=step_node_id(journey.id, position),
                label=step.description,
                children=children,
                annotation=StepAnnotation(
                    step_number=step.order,
                    requires_data=step.requires_data,
                    data_type=step.data_type,
                ),
                step=step,
            )
            children = (step_node,)

        return ActionNode(
            id=journey.id,
            label=journey.name,
            children=children,
            annotation=JourneyAnnotation(
                journey_id=journey.id,
                confidence=journey.confidence,
                journey_type=journey.type,
            ),
        )


def build_graph(journeys: List[Journey], current_url: Optional[str] = None) -> GraphData:
    """Convenience function to build a journey graph."""
    return JourneyGraphBuilder(current_url).build(journeys)
