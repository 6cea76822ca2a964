"""Status container that also carries a typed result.

GenericStatusHandler wraps a StatusHandler and adds a result slot that is
only visible while the status is valid.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Generic, TypeVar

from status_generic.events import ObservableMixin, StatusEvent, StatusEventType
from status_generic.handler import StatusHandler

if TYPE_CHECKING:
    from status_generic.errors import ErrorEntry
    from status_generic.failures import ValidationFailure
    from status_generic.protocols import StatusProtocol

__all__ = ["GenericStatusHandler"]

T = TypeVar("T")
R = TypeVar("R")


class GenericStatusHandler(ObservableMixin, Generic[T]):
    """A status with a result.

    Every accumulation method behaves exactly like the StatusHandler one and
    returns this object, so chained calls keep the result-typed view.

    Example:
        def find_author(name: str) -> GenericStatusHandler[Author]:
            status = GenericStatusHandler[Author]("FindAuthor")
            author = authors.get(name)
            if author is None:
                return status.add_error(f"No author named {name}.", "name")
            return status.set_result(author)

    Once an error has been added, ``result`` reads as None. The stored value
    is hidden, not cleared.
    """

    def __init__(self, header: str = "") -> None:
        self._status = StatusHandler(header)
        self._status.add_observer(self)
        self._result: T | None = None

    # Observer relay: events of the wrapped handler are re-emitted with
    # this object as the source.
    def on_event(self, event: StatusEvent) -> None:
        self.notify(StatusEvent(event_type=event.event_type, source=self, data=event.data))

    @property
    def header(self) -> str:
        return self._status.header

    @header.setter
    def header(self, value: str) -> None:
        self._status.header = value

    @property
    def errors(self) -> tuple[ErrorEntry, ...]:
        return self._status.errors

    @property
    def is_valid(self) -> bool:
        return self._status.is_valid

    @property
    def has_errors(self) -> bool:
        return self._status.has_errors

    @property
    def message(self) -> str:
        return self._status.message

    @message.setter
    def message(self, value: str) -> None:
        self._status.message = value

    @property
    def status_code(self) -> int | None:
        return self._status.status_code

    @property
    def result(self) -> T | None:
        """The stored result if valid, otherwise None."""
        return self._result if self._status.is_valid else None

    def set_result(self, value: T, status_code: int | None = None) -> GenericStatusHandler[T]:
        """Store the result. Does not change validity.

        Args:
            value: The result to return to the caller.
            status_code: If given, also set as the container status code.
        """
        self._result = value
        if status_code is not None:
            self._status.set_status(status_code)
        self.notify(
            StatusEvent(
                event_type=StatusEventType.RESULT_SET,
                source=self,
                data={"result": value, "status_code": status_code},
            )
        )
        return self

    def set_status(self, status_code: int | None) -> GenericStatusHandler[T]:
        self._status.set_status(status_code)
        return self

    def add_error(
        self,
        message: str,
        *member_names: str,
        status_code: int | None = None,
        exception: BaseException | None = None,
    ) -> GenericStatusHandler[T]:
        """Add one error. See StatusHandler.add_error."""
        self._status.add_error(
            message, *member_names, status_code=status_code, exception=exception
        )
        return self

    def add_validation_failure(
        self, failure: ValidationFailure, status_code: int | None = None
    ) -> GenericStatusHandler[T]:
        self._status.add_validation_failure(failure, status_code)
        return self

    def add_validation_failures(
        self, failures: Iterable[ValidationFailure], status_code: int | None = None
    ) -> GenericStatusHandler[T]:
        self._status.add_validation_failures(failures, status_code)
        return self

    def combine_statuses(self, other: StatusProtocol) -> GenericStatusHandler[T]:
        """Merge another status into this one.

        Errors, message and status code follow StatusHandler.combine_statuses.
        The result of ``other`` is ignored; this status keeps its own.
        """
        self._status.combine_statuses(other)
        return self

    def get_all_errors(self, separator: str | None = None) -> str | None:
        return self._status.get_all_errors(separator)

    def get_last_status_code(self) -> int | None:
        return self._status.get_last_status_code()

    def run_and_catch(
        self,
        func: Callable[[], R],
        *,
        error_code: int | None = None,
        success_code: int | None = None,
        catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    ) -> R | None:
        """Run ``func`` and turn a raised exception into an error.

        See StatusHandler.run_and_catch. The returned value is not stored as
        the result; call set_result for that.
        """
        return self._status.run_and_catch(
            func, error_code=error_code, success_code=success_code, catch=catch
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(header={self.header!r}, "
            f"errors={len(self.errors)}, status_code={self.status_code!r})"
        )
