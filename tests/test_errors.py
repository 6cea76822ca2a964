"""Tests for ValidationFailure and ErrorEntry."""

from __future__ import annotations

import os

import pydantic
import pytest
from hypothesis import given, settings

from status_generic.errors import ErrorEntry, format_exception_debug, reheader
from status_generic.failures import ValidationFailure

from .conftest import DataError, headers, messages, non_empty_headers, raise_data_error

# =============================================================================
# ValidationFailure Unit Tests
# =============================================================================


class TestValidationFailure:
    """Unit tests for ValidationFailure."""

    def test_creation(self) -> None:
        failure = ValidationFailure(message="Name is required", member_names=("name",))

        assert failure.message == "Name is required"
        assert failure.member_names == ("name",)
        assert str(failure) == "Name is required"

    def test_member_names_default_empty(self) -> None:
        assert ValidationFailure(message="x").member_names == ()

    def test_empty_message_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ValidationFailure(message="")

    def test_frozen(self) -> None:
        failure = ValidationFailure(message="x")

        with pytest.raises(pydantic.ValidationError):
            failure.message = "y"  # type: ignore[misc]


# =============================================================================
# ErrorEntry Unit Tests
# =============================================================================


def make_entry(header: str = "", message: str = "This is an error.", **kwargs: object) -> ErrorEntry:
    return ErrorEntry(header=header, failure=ValidationFailure(message=message), **kwargs)


class TestErrorEntryUnit:
    """Unit tests for ErrorEntry."""

    def test_defaults(self) -> None:
        entry = make_entry()

        assert entry.header == ""
        assert entry.status_code is None
        assert entry.debug_data is None
        assert entry.message == "This is an error."
        assert entry.member_names == ()

    def test_str_without_header(self) -> None:
        assert str(make_entry()) == "This is an error."

    def test_str_with_header(self) -> None:
        assert str(make_entry("MyClass")) == "MyClass: This is an error."

    def test_failure_required(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ErrorEntry(header="x")  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        entry = make_entry()

        with pytest.raises(pydantic.ValidationError):
            entry.header = "changed"  # type: ignore[misc]


class TestReheader:
    """Tests for header chaining."""

    def test_empty_prefix_keeps_header(self) -> None:
        entry = make_entry("MyProp")

        assert entry.with_prefix("").header == "MyProp"

    def test_empty_existing_header_takes_prefix(self) -> None:
        assert make_entry().with_prefix("MyClass").header == "MyClass"

    def test_both_headers_are_chained(self) -> None:
        assert make_entry("MyProp").with_prefix("MyClass").header == "MyClass>MyProp"

    def test_nested_chaining(self) -> None:
        entry = reheader("Grandparent", reheader("Parent", make_entry("Child")))

        assert str(entry) == "Grandparent>Parent>Child: This is an error."

    def test_original_not_mutated(self) -> None:
        entry = make_entry("MyProp", status_code=400, debug_data="debug")

        copy = entry.with_prefix("MyClass")

        assert entry.header == "MyProp"
        assert copy is not entry
        assert copy.failure == entry.failure
        assert copy.status_code == 400
        assert copy.debug_data == "debug"

    @given(prefix=non_empty_headers, header=headers, message=messages)
    @settings(max_examples=100)
    def test_rendered_header_starts_with_prefix(
        self, prefix: str, header: str, message: str
    ) -> None:
        """Any non-empty prefix ends up at the front of the rendered error."""
        entry = make_entry(header, message).with_prefix(prefix)

        assert str(entry).startswith(prefix)
        assert entry.header.endswith(header)
        assert entry.message == message


# =============================================================================
# Exception Capture Tests
# =============================================================================


class TestExceptionCapture:
    """Tests for with_exception and format_exception_debug."""

    def test_capture_exception_lines(self) -> None:
        try:
            raise_data_error()
        except DataError as exc:
            entry = make_entry(message="This is user-friendly error message").with_exception(exc)

        assert entry.debug_data is not None
        lines = entry.debug_data.split(os.linesep)
        assert lines[0] == "This is a test"
        assert lines[1].startswith("StackTrace:")
        assert "test_capture_exception_lines" in lines[1]
        assert any("raise_data_error" in line for line in lines[2:])
        assert lines[-3] == "Data: data1\t1"
        assert lines[-2] == "Data: data2\t2"
        assert lines[-1] == ""

    def test_capture_keeps_failure(self) -> None:
        entry = make_entry(message="Friendly").with_exception(ValueError("raw"))

        assert entry.message == "Friendly"
        assert entry.debug_data is not None
        assert entry.debug_data.startswith("raw")

    def test_unraised_exception_has_empty_trace(self) -> None:
        debug = format_exception_debug(ValueError("never raised"))

        assert debug == f"never raised{os.linesep}StackTrace:{os.linesep}"

    def test_exception_without_data_mapping(self) -> None:
        exc = ValueError("boom")
        exc.data = "not a mapping"  # type: ignore[attr-defined]

        assert "Data:" not in format_exception_debug(exc)
