"""Observer pattern implementation for status events.

Provides event types, observer protocol, and mixin for adding observer
support to status containers. Statuses never print or log on their own;
anything written to a console or log comes from an attached observer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "StatusEventType",
    "StatusEvent",
    "StatusObserver",
    "ObservableMixin",
]


class StatusEventType(Enum):
    """Types of status events that can be observed."""

    ERROR_ADDED = auto()
    """Emitted when an error is appended to a status."""

    EXCEPTION_CAPTURED = auto()
    """Emitted when an exception is converted into a status error."""

    STATUSES_COMBINED = auto()
    """Emitted when another status is combined into this one."""

    RESULT_SET = auto()
    """Emitted when a result-carrying status stores a result."""


@dataclass
class StatusEvent:
    """A status event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The status that emitted the event.
        data: Event-specific data dictionary.

    Example:
        event = StatusEvent(
            event_type=StatusEventType.ERROR_ADDED,
            source=status,
            data={"error": entry},
        )
    """

    event_type: StatusEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class StatusObserver(Protocol):
    """Protocol for status event observers.

    Example:
        class CollectingObserver:
            def __init__(self):
                self.errors = []

            def on_event(self, event: StatusEvent) -> None:
                if event.event_type == StatusEventType.ERROR_ADDED:
                    self.errors.append(event.data["error"])
    """

    def on_event(self, event: StatusEvent) -> None:
        """Handle a status event.

        Args:
            event: The status event to handle.
        """
        ...


class ObservableMixin:
    """Mixin class to add observer support to any class."""

    _observers: list[StatusObserver]

    def _ensure_observers(self) -> None:
        """Ensure the observers list is initialized."""
        if not hasattr(self, "_observers") or self._observers is None:
            self._observers = []

    def add_observer(self, observer: StatusObserver) -> None:
        """Add an observer to receive status events.

        Args:
            observer: An object implementing the StatusObserver protocol.
        """
        self._ensure_observers()
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: StatusObserver) -> None:
        """Remove an observer from receiving status events."""
        self._ensure_observers()
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: StatusEvent) -> None:
        """Notify all observers of a status event."""
        self._ensure_observers()
        for observer in self._observers:
            observer.on_event(event)

    @property
    def observers(self) -> list[StatusObserver]:
        """Get a copy of the current observers list."""
        self._ensure_observers()
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._ensure_observers()
        self._observers.clear()
