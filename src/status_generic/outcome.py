"""Tagged outcome of a fallible call.

attempt() runs a callable and reports either its value or the exception it
raised, provided that exception belongs to the requested failure family.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

__all__ = ["Failure", "Outcome", "Success", "attempt"]

R = TypeVar("R")


@dataclass(frozen=True)
class Success(Generic[R]):
    """The call returned ``value``."""

    value: R

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """The call raised ``exception``."""

    exception: BaseException

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success[R], Failure]


def attempt(
    func: Callable[[], R],
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
) -> Outcome[R]:
    """Run ``func`` and capture failures of the ``catch`` family.

    Args:
        func: Zero-argument callable to run.
        catch: Exception type, or tuple of types, to capture.

    Returns:
        Success holding the return value, or Failure holding the exception.

    Raises:
        BaseException: Anything raised by ``func`` outside ``catch``.
    """
    try:
        value = func()
    except catch as exc:
        return Failure(exc)
    return Success(value)
