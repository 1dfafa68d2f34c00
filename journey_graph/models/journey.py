"""
Journey Graph - Journey Models
Input records handed over by the journey detection side.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class JourneyType(str, Enum):
    LOGIN = "login"
    REGISTRATION = "registration"
    SEARCH = "search"
    FORM = "form"
    NAVIGATION = "navigation"
    ECOMMERCE = "ecommerce"
    UNKNOWN = "unknown"


class StepType(str, Enum):
    FILL = "fill"
    CLICK = "click"
    SELECT = "select"
    CHECK = "check"
    NAVIGATE = "navigate"


class DataType(str, Enum):
    """Kind of value a step needs the user to enter."""
    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"
    PHONE = "phone"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"
    CHECKBOX = "checkbox"


class JourneyStep(BaseModel):
    """One action within a journey."""

    model_config = ConfigDict(frozen=True)

    description: str
    order: int = 0
    requires_data: bool = False
    data_type: Optional[DataType] = None
    type: Optional[StepType] = None


class Journey(BaseModel):
    """A detected sequence of steps believed to accomplish one task.

    Journey ids must be unique within one build; the graph builder does
    not check this and duplicate ids produce duplicate node ids.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    confidence: float = Field(ge=0, le=100)
    steps: List[JourneyStep] = Field(default_factory=list)
    type: JourneyType = JourneyType.UNKNOWN
    metadata: Optional[Dict[str, Any]] = None

    def ordered_steps(self) -> List[JourneyStep]:
        """Steps in ascending ``order``; ties keep their input position."""
        return sorted(self.steps, key=lambda step: step.order)
