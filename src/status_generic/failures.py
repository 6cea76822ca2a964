"""Validation failure records.

A ValidationFailure is the user-facing content of a status error: a
message plus the names of the members it applies to.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["ValidationFailure"]


class ValidationFailure(BaseModel):
    """A pre-built validation failure.

    Attributes:
        message: Text of the failure. Must not be empty.
        member_names: Names of the fields/members the failure applies to.

    Example:
        failure = ValidationFailure(message="Name is required", member_names=("name",))
        status.add_validation_failure(failure)
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(min_length=1)
    member_names: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.message
