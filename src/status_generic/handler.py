"""Status container with error aggregation.

Provides StatusHandler, the value a unit of business logic returns to report
success or a list of errors, and which a caller can combine into its own
status.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, TypeVar

from status_generic.errors import ErrorEntry, reheader
from status_generic.events import ObservableMixin, StatusEvent, StatusEventType
from status_generic.failures import ValidationFailure
from status_generic.outcome import Success, attempt

if TYPE_CHECKING:
    from status_generic.protocols import StatusProtocol

__all__ = ["DEFAULT_SUCCESS_MESSAGE", "StatusHandler"]

DEFAULT_SUCCESS_MESSAGE = "Success"

R = TypeVar("R")


class StatusHandler(ObservableMixin):
    """Collects errors, a message and a status code for one unit of work.

    A status is valid until the first error is added; after that it stays
    invalid for the rest of its life. Errors keep their insertion order.

    Example:
        from status_generic import StatusHandler

        def check_order(order) -> StatusHandler:
            status = StatusHandler("Order")
            if not order.lines:
                status.add_error("An order needs at least one line.", "lines")
            return status

        status = StatusHandler("Checkout")
        status.combine_statuses(check_order(order))
        print(status.get_all_errors())
        # Checkout>Order: An order needs at least one line.
    """

    def __init__(self, header: str = "") -> None:
        """Initialize an empty, valid status.

        Args:
            header: Prefix shown before every error added to this status.
        """
        self.header = header
        self._errors: list[ErrorEntry] = []
        self._success_message = DEFAULT_SUCCESS_MESSAGE
        self._status_code: int | None = None

    @property
    def errors(self) -> tuple[ErrorEntry, ...]:
        """Read-only view of the errors, in the order they were added."""
        return tuple(self._errors)

    @property
    def is_valid(self) -> bool:
        """True if no errors have been added."""
        return not self._errors

    @property
    def has_errors(self) -> bool:
        """True if any errors have been added."""
        return bool(self._errors)

    @property
    def message(self) -> str:
        """The success message, or ``"Failed with N errors"`` once invalid."""
        if self.is_valid:
            return self._success_message
        count = len(self._errors)
        return f"Failed with {count} error" + ("" if count == 1 else "s")

    @message.setter
    def message(self, value: str) -> None:
        self._success_message = value

    @property
    def status_code(self) -> int | None:
        """Container-level status code, if any."""
        return self._status_code

    def set_status(self, status_code: int | None) -> StatusHandler:
        """Set the container-level status code."""
        self._status_code = status_code
        return self

    def _append(self, entry: ErrorEntry) -> None:
        self._errors.append(entry)
        self.notify(
            StatusEvent(
                event_type=StatusEventType.ERROR_ADDED,
                source=self,
                data={"error": entry, "error_count": len(self._errors)},
            )
        )

    def add_error(
        self,
        message: str,
        *member_names: str,
        status_code: int | None = None,
        exception: BaseException | None = None,
    ) -> StatusHandler:
        """Add one error.

        Args:
            message: User-facing text of the error. Must not be empty.
            *member_names: Names of the members the error applies to.
            status_code: Code attached to this error only. The container's
                own status code is left unchanged.
            exception: If given, its message, traceback and ``data`` mapping
                are stored in the error's ``debug_data``.

        Returns:
            Self, for method chaining.

        Raises:
            ValueError: If ``message`` is empty or None.
        """
        if not message:
            raise ValueError("An error message is required.")
        entry = ErrorEntry(
            header=self.header,
            failure=ValidationFailure(message=message, member_names=member_names),
            status_code=status_code,
        )
        if exception is not None:
            entry = entry.with_exception(exception)
            self.notify(
                StatusEvent(
                    event_type=StatusEventType.EXCEPTION_CAPTURED,
                    source=self,
                    data={"exception": exception, "message": message},
                )
            )
        self._append(entry)
        return self

    def add_validation_failure(
        self, failure: ValidationFailure, status_code: int | None = None
    ) -> StatusHandler:
        """Add one pre-built validation failure as an error."""
        self._append(ErrorEntry(header=self.header, failure=failure, status_code=status_code))
        return self

    def add_validation_failures(
        self, failures: Iterable[ValidationFailure], status_code: int | None = None
    ) -> StatusHandler:
        """Add several pre-built validation failures, in order."""
        for failure in failures:
            self.add_validation_failure(failure, status_code)
        return self

    def combine_statuses(self, other: StatusProtocol) -> StatusHandler:
        """Merge another status into this one.

        Errors from ``other`` are appended in order with this status's header
        chained in front of theirs, e.g. "MyClass" combining an error headed
        "MyProp" gives "MyClass>MyProp: ...". The message of ``other`` is
        only taken while this status is still valid and ``other`` has a
        non-default message. The status code of ``other`` is only taken if
        this status has none.

        Args:
            other: Any status exposing the StatusProtocol members.

        Returns:
            Self, for method chaining.
        """
        if not other.is_valid:
            for entry in other.errors:
                self._errors.append(reheader(self.header, entry))
        if self.is_valid and other.message != DEFAULT_SUCCESS_MESSAGE:
            self.message = other.message
        if self._status_code is None:
            self._status_code = other.status_code
        self.notify(
            StatusEvent(
                event_type=StatusEventType.STATUSES_COMBINED,
                source=self,
                data={"other": other, "error_count": len(self._errors)},
            )
        )
        return self

    def get_all_errors(self, separator: str | None = None) -> str | None:
        """Render every error as a single string.

        Args:
            separator: Placed between errors. Defaults to ``os.linesep``.

        Returns:
            The joined errors, or None if there are no errors.
        """
        if not self._errors:
            return None
        if separator is None:
            separator = os.linesep
        return separator.join(str(entry) for entry in self._errors)

    def get_last_status_code(self) -> int | None:
        """Status code of the last error added, or the container's code if valid.

        Only the last error is consulted. If it has no code the result is
        None, even when an earlier error carried one.
        """
        if self._errors:
            return self._errors[-1].status_code
        return self._status_code

    def run_and_catch(
        self,
        func: Callable[[], R],
        *,
        error_code: int | None = None,
        success_code: int | None = None,
        catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    ) -> R | None:
        """Run ``func`` and turn a raised exception into an error.

        Args:
            func: Zero-argument callable to run.
            error_code: Code attached to the error added on failure.
            success_code: Container status code set on success.
            catch: Exception type, or tuple of types, treated as a status
                error. Anything else propagates to the caller.

        Returns:
            The value returned by ``func``, or None if it raised.
        """
        outcome = attempt(func, catch)
        if isinstance(outcome, Success):
            self._status_code = success_code
            return outcome.value
        exc = outcome.exception
        self.add_error(str(exc) or type(exc).__name__, status_code=error_code, exception=exc)
        self._status_code = None
        return None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(header={self.header!r}, "
            f"errors={len(self._errors)}, status_code={self._status_code!r})"
        )
