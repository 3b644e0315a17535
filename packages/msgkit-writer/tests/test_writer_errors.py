"""Tests for msgkit_writer.errors."""

import pytest

from msgkit_core.errors import BaseMsgError, CoreErrorCode

from msgkit_writer.errors import (
    DuplicateAttachmentException,
    ErrorCode,
    InvalidArgumentException,
    UnknownPropertyTagException,
    WriterError,
    WriterException,
)


class TestErrorCodes:
    def test_error_codes_prefixed(self):
        """All error codes start with E_."""
        for code in ErrorCode:
            assert code.value.startswith("E_"), f"ErrorCode {code.name} does not start with E_"

    def test_error_code_values_match_names(self):
        """Value == name for all members."""
        for code in ErrorCode:
            assert code.value == code.name

    def test_core_codes_included(self):
        for code in CoreErrorCode:
            assert ErrorCode[code.name].value == code.value


class TestWriterError:
    def test_creation(self):
        err = WriterError(
            code=ErrorCode.E_WRITER_INVALID_ARGUMENT,
            message="bad",
            stage="attachments",
            file_name="a.txt",
        )
        assert isinstance(err, BaseMsgError)
        assert err.code == ErrorCode.E_WRITER_INVALID_ARGUMENT
        assert err.file_name == "a.txt"
        assert err.property_name is None
        assert err.recoverable is False


class TestExceptionKinds:
    def test_duplicate(self):
        exc = DuplicateAttachmentException("a.txt")
        assert isinstance(exc, WriterException)
        assert exc.code == ErrorCode.E_WRITER_DUPLICATE_ATTACHMENT
        assert exc.recoverable is True
        assert exc.stage == "attachments"
        assert str(exc) == "The attachment with the name 'a.txt' already exists"

    def test_invalid_argument(self):
        exc = InvalidArgumentException("missing", stage="attachments")
        assert isinstance(exc, ValueError)
        assert isinstance(exc, WriterException)
        assert exc.code == ErrorCode.E_WRITER_INVALID_ARGUMENT
        assert exc.recoverable is False

    def test_invalid_argument_custom_code(self):
        exc = InvalidArgumentException("nope", code=ErrorCode.E_WRITER_UNSUPPORTED_VALUE)
        assert exc.code == ErrorCode.E_WRITER_UNSUPPORTED_VALUE

    def test_unknown_tag(self):
        exc = UnknownPropertyTagException("PR_X")
        assert isinstance(exc, KeyError)
        assert exc.error.property_name == "PR_X"
        assert str(exc) == "Unknown property tag 'PR_X'"

    def test_kinds_are_distinct(self):
        """Callers can catch duplicates without catching contract violations."""
        with pytest.raises(InvalidArgumentException):
            try:
                raise InvalidArgumentException("x")
            except DuplicateAttachmentException:
                pytest.fail("InvalidArgumentException caught as a duplicate")
