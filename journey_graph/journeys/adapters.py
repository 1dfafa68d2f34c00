"""
Journey Graph - Input Adapters
Turn raw payloads from the journey detection side into Journey models.
"""

import math
import re
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ErrorCode, JourneyInputError
from ..core.logging import get_logger
from ..models import DataType, Journey, JourneyStep, JourneyType, StepType

logger = get_logger(__name__)


# Detector action types -> step types
ACTION_STEP_TYPES = {
    "navigate": StepType.NAVIGATE,
    "click": StepType.CLICK,
    "form_submit": StepType.CLICK,
    "input": StepType.FILL,
    "select": StepType.SELECT,
    "check": StepType.CHECK,
}

# First match wins; the journey name is tried before its category
JOURNEY_TYPE_PATTERNS = [
    (JourneyType.LOGIN, [r'login', r'sign.?in', r'authenticat']),
    (JourneyType.REGISTRATION, [r'regist', r'sign.?up', r'create.?account']),
    (JourneyType.SEARCH, [r'search', r'browse']),
    (JourneyType.ECOMMERCE, [r'checkout', r'payment', r'subscription', r'cart']),
    (JourneyType.NAVIGATION, [r'dashboard', r'overview', r'navigat']),
    (JourneyType.FORM, [r'form', r'profile', r'password']),
]

_DATA_TYPES = {member.value for member in DataType}


def _error_list(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "loc": ".".join(str(part) for part in error["loc"]),
            "msg": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def load_journeys(payload: Any) -> List[Journey]:
    """
    Validate a list of journey dictionaries.

    Args:
        payload: Decoded JSON, expected to be a list of journey objects

    Returns:
        Journey models, in payload order

    Raises:
        JourneyInputError: payload is not a list, or an entry is invalid
    """
    if not isinstance(payload, list):
        raise JourneyInputError(
            f"Expected a list of journeys, got {type(payload).__name__}",
            code=ErrorCode.JOURNEY_PAYLOAD_NOT_A_LIST,
        )

    journeys = []
    for index, item in enumerate(payload):
        try:
            journeys.append(Journey.model_validate(item))
        except PydanticValidationError as e:
            logger.warning("Rejected journey payload entry", index=index, error_count=e.error_count())
            raise JourneyInputError(
                f"Journey at index {index} is invalid",
                errors=_error_list(e),
                index=index,
                cause=e,
            ) from e

    return journeys


def classify_journey_type(category: str, name: str) -> JourneyType:
    """Guess a journey type from a journey name, falling back to its category."""
    for text in (name.lower(), category.lower()):
        for journey_type, patterns in JOURNEY_TYPE_PATTERNS:
            for pattern in patterns:
                if re.search(pattern, text):
                    return journey_type

    return JourneyType.UNKNOWN


def _detected_step(step: Dict[str, Any], position: int) -> JourneyStep:
    action_type = step.get("action_type")
    if not isinstance(action_type, str):
        action_type = None
    input_type: Optional[str] = step.get("input_type")

    return JourneyStep(
        description=step.get("name") or step.get("description") or f"Step {position + 1}",
        order=step.get("order", position),
        requires_data=bool(step.get("is_required")) or action_type == "input",
        data_type=DataType(input_type) if isinstance(input_type, str) and input_type in _DATA_TYPES else None,
        type=ACTION_STEP_TYPES.get(action_type),
    )


def _detected_confidence(detected: Dict[str, Any], journey_id: str) -> float:
    raw = detected.get("confidence") or 0
    try:
        confidence = float(raw) * 100
        if math.isnan(confidence):
            raise ValueError("confidence is NaN")
    except (TypeError, ValueError) as e:
        raise JourneyInputError(
            f"Detected journey '{journey_id}' has a non-numeric confidence",
            code=ErrorCode.DETECTED_JOURNEY_INVALID,
            details={"field": "confidence", "value": repr(raw)},
            cause=e,
        ) from e
    return min(max(confidence, 0.0), 100.0)


def _detected_steps(detected: Dict[str, Any], journey_id: str) -> List[JourneyStep]:
    steps = detected.get("steps") or []
    if not isinstance(steps, list):
        raise JourneyInputError(
            f"Detected journey '{journey_id}' steps must be a list",
            code=ErrorCode.DETECTED_JOURNEY_INVALID,
            details={"field": "steps", "type": type(steps).__name__},
        )
    for position, step in enumerate(steps):
        if not isinstance(step, dict):
            raise JourneyInputError(
                f"Detected journey '{journey_id}' step {position} is not an object",
                code=ErrorCode.DETECTED_JOURNEY_INVALID,
                details={"field": "steps", "index": position, "type": type(step).__name__},
            )
    return [_detected_step(step, i) for i, step in enumerate(steps)]


def from_detected_journey(detected: Dict[str, Any]) -> Journey:
    """
    Convert a detected journey record into a Journey.

    Detected records score confidence from 0 to 1; it is scaled to a
    percentage and clamped to 0-100.

    Raises:
        JourneyInputError: the record is not an object, has no id or name,
            or carries a non-numeric confidence or malformed steps
    """
    if not isinstance(detected, dict):
        raise JourneyInputError(
            f"Detected journey must be an object, got {type(detected).__name__}",
            code=ErrorCode.DETECTED_JOURNEY_INVALID,
        )

    journey_id = detected.get("journey_id") or detected.get("id")
    name = detected.get("name")
    if not journey_id or not name:
        raise JourneyInputError(
            "Detected journey needs a journey_id and a name",
            code=ErrorCode.DETECTED_JOURNEY_INVALID,
            details={"keys": sorted(str(key) for key in detected.keys())},
        )

    confidence = _detected_confidence(detected, journey_id)

    metadata = {
        key: detected[key]
        for key in ("category", "description", "url", "detected_at")
        if detected.get(key)
    }

    try:
        return Journey(
            id=journey_id,
            name=name,
            confidence=round(confidence, 2),
            steps=_detected_steps(detected, journey_id),
            type=classify_journey_type(str(detected.get("category") or ""), str(name)),
            metadata=metadata or None,
        )
    except PydanticValidationError as e:
        raise JourneyInputError(
            f"Detected journey '{journey_id}' is invalid",
            errors=_error_list(e),
            code=ErrorCode.DETECTED_JOURNEY_INVALID,
            cause=e,
        ) from e


def from_detected_journeys(detected: List[Dict[str, Any]]) -> List[Journey]:
    """Convenience function to convert a detector result list."""
    return [from_detected_journey(record) for record in detected]
