# Core infrastructure modules
from .config import settings, get_settings, Settings
from .logging import (
    get_logger,
    setup_logging,
    set_request_context,
    clear_request_context,
    log_execution_time,
)
from .exceptions import (
    ErrorCode,
    JourneyGraphError,
    ValidationError,
    PayloadTooLargeError,
    JourneyInputError,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    "Settings",
    # Logging
    "get_logger",
    "setup_logging",
    "set_request_context",
    "clear_request_context",
    "log_execution_time",
    # Exceptions
    "ErrorCode",
    "JourneyGraphError",
    "ValidationError",
    "PayloadTooLargeError",
    "JourneyInputError",
]
