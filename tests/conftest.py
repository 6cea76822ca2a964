"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import strategies as st

from status_generic import GenericStatusHandler, StatusHandler
from status_generic.events import StatusEvent, StatusEventType

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for headers (letters and numbers only, may be empty)
headers = st.text(
    max_size=20,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for non-empty headers
non_empty_headers = st.text(
    min_size=1,
    max_size=20,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for member names
member_names = st.lists(
    st.text(min_size=1, max_size=20, alphabet=st.characters(whitelist_categories=("L",))),
    max_size=3,
)

# Strategy for error messages
messages = st.text(min_size=1, max_size=100)

# Strategy for optional status codes
status_codes = st.one_of(st.none(), st.integers(min_value=100, max_value=599))


# -----------------------------------------------------------------------------
# Test Exceptions and Observers
# -----------------------------------------------------------------------------


class DataError(Exception):
    """Exception carrying an auxiliary ``data`` mapping."""

    def __init__(self, message: str, data: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.data = data or {}


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[StatusEvent] = []

    def on_event(self, event: StatusEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[StatusEventType]:
        return [e.event_type for e in self.events]


def raise_data_error() -> None:
    """Raise a DataError with two data entries."""
    raise DataError("This is a test", {"data1": 1, "data2": "2"})


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def status() -> StatusHandler:
    """Create a fresh StatusHandler without a header."""
    return StatusHandler()


@pytest.fixture
def generic_status() -> GenericStatusHandler[str]:
    """Create a fresh GenericStatusHandler holding strings."""
    return GenericStatusHandler[str]()


@pytest.fixture
def recording_observer() -> RecordingObserver:
    """Create a RecordingObserver instance."""
    return RecordingObserver()
