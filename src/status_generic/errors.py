"""Error entries held by a status.

Provides ErrorEntry, the immutable record stored in a status's error list,
along with the header chaining and exception capture used when errors are
added or combined.
"""

from __future__ import annotations

import os
import traceback
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from status_generic.failures import ValidationFailure

__all__ = ["HEADER_SEPARATOR", "ErrorEntry", "format_exception_debug", "reheader"]

HEADER_SEPARATOR = ">"


class ErrorEntry(BaseModel):
    """A single error registered in a status.

    Entries are frozen. Operations that change the header or attach
    exception details return a new entry.

    Attributes:
        header: Scope label, e.g. a class or property name. Empty for none.
        failure: The validation failure (message and member names).
        status_code: Application-defined code for this error only.
        debug_data: Developer diagnostics, set when built from an exception.
    """

    model_config = ConfigDict(frozen=True)

    header: str = ""
    failure: ValidationFailure
    status_code: int | None = None
    debug_data: str | None = None

    @property
    def message(self) -> str:
        """The failure message."""
        return self.failure.message

    @property
    def member_names(self) -> tuple[str, ...]:
        """The member names the failure applies to."""
        return self.failure.member_names

    def with_prefix(self, prefix: str) -> ErrorEntry:
        """Return a copy whose header is chained under ``prefix``.

        Example:
            entry.header == "MyProp"
            entry.with_prefix("MyClass").header == "MyClass>MyProp"
        """
        if not prefix:
            return self
        header = f"{prefix}{HEADER_SEPARATOR}{self.header}" if self.header else prefix
        return self.model_copy(update={"header": header})

    def with_exception(self, exc: BaseException) -> ErrorEntry:
        """Return a copy with the exception's details stored in ``debug_data``."""
        return self.model_copy(update={"debug_data": format_exception_debug(exc)})

    def __str__(self) -> str:
        if self.header:
            return f"{self.header}: {self.failure.message}"
        return self.failure.message


def reheader(prefix: str, existing: ErrorEntry) -> ErrorEntry:
    """Chain ``prefix`` onto the header of an existing entry."""
    return existing.with_prefix(prefix)


def format_exception_debug(exc: BaseException) -> str:
    """Build debug text from an exception.

    The text holds the exception message, a ``StackTrace:`` line followed by
    the formatted traceback, then one ``Data: {key}\\t{value}`` line for each
    item of the exception's ``data`` mapping, if it has one. Every line ends
    with ``os.linesep``.
    """
    trace = "".join(traceback.format_tb(exc.__traceback__)).rstrip("\n")
    lines = [str(exc), "StackTrace:" + trace]
    data = getattr(exc, "data", None)
    if isinstance(data, Mapping):
        lines.extend(f"Data: {key}\t{value}" for key, value in data.items())
    return "".join(line.replace("\n", os.linesep) + os.linesep for line in lines)
