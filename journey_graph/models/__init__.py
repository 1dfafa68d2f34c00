from .journey import Journey, JourneyStep, JourneyType, StepType, DataType
from .graph import (
    ROOT_NODE_ID,
    ROOT_LABEL,
    PATH_SEPARATOR,
    NodeType,
    PageAnnotation,
    JourneyAnnotation,
    StepAnnotation,
    JourneyNode,
    PageNode,
    ActionNode,
    JourneyPath,
    GraphData,
    GraphStatistics,
    VisualizationExport,
)

__all__ = [
    "Journey",
    "JourneyStep",
    "JourneyType",
    "StepType",
    "DataType",
    "ROOT_NODE_ID",
    "ROOT_LABEL",
    "PATH_SEPARATOR",
    "NodeType",
    "PageAnnotation",
    "JourneyAnnotation",
    "StepAnnotation",
    "JourneyNode",
    "PageNode",
    "ActionNode",
    "JourneyPath",
    "GraphData",
    "GraphStatistics",
    "VisualizationExport",
]
