"""Status and result aggregation for business logic."""

from status_generic.errors import HEADER_SEPARATOR, ErrorEntry, reheader
from status_generic.events import (
    ObservableMixin,
    StatusEvent,
    StatusEventType,
    StatusObserver,
)
from status_generic.failures import ValidationFailure
from status_generic.generic import GenericStatusHandler
from status_generic.handler import DEFAULT_SUCCESS_MESSAGE, StatusHandler
from status_generic.outcome import Failure, Outcome, Success, attempt
from status_generic.protocols import GenericStatusProtocol, StatusProtocol
from status_generic.rich_observers import (
    RichStatusObserver,
    build_errors_table,
    render_status,
)

__all__ = [
    # Errors
    "ErrorEntry",
    "HEADER_SEPARATOR",
    "ValidationFailure",
    "reheader",
    # Status containers
    "DEFAULT_SUCCESS_MESSAGE",
    "GenericStatusHandler",
    "StatusHandler",
    # Protocols
    "GenericStatusProtocol",
    "StatusProtocol",
    # Fallible calls
    "Failure",
    "Outcome",
    "Success",
    "attempt",
    # Observer pattern
    "ObservableMixin",
    "StatusEvent",
    "StatusEventType",
    "StatusObserver",
    # Rich display
    "RichStatusObserver",
    "build_errors_table",
    "render_status",
]

__version__ = "0.1.0"
