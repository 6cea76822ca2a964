"""Status protocols for type checking.

Read-and-combine views of a status, for callers that do not need to know
which concrete container they were given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from status_generic.errors import ErrorEntry

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class StatusProtocol(Protocol):
    """Protocol for any status.

    Use this for type hints when accepting or returning a status.
    """

    @property
    def errors(self) -> Sequence[ErrorEntry]:
        """Errors in the order they were added."""
        ...

    @property
    def is_valid(self) -> bool:
        """True if there are no errors."""
        ...

    @property
    def has_errors(self) -> bool:
        """True if there are errors."""
        ...

    @property
    def message(self) -> str:
        """Success message, or the failure summary."""
        ...

    @message.setter
    def message(self, value: str) -> None: ...

    @property
    def status_code(self) -> int | None:
        """Container-level status code."""
        ...

    def combine_statuses(self, other: StatusProtocol) -> StatusProtocol:
        """Merge another status into this one."""
        ...

    def get_all_errors(self, separator: str | None = None) -> str | None:
        """All errors as one string, or None."""
        ...

    def get_last_status_code(self) -> int | None:
        """Code of the last error, or the container code if valid."""
        ...


@runtime_checkable
class GenericStatusProtocol(StatusProtocol, Protocol[T_co]):
    """Protocol for a status that also carries a result.

    Generic over T_co, the type of the result.
    """

    @property
    def result(self) -> T_co | None:
        """The result if valid, otherwise None."""
        ...
