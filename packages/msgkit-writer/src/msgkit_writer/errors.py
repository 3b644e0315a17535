"""Error codes and structured error model for the msgkit-writer package.

``ErrorCode`` contains all writer-specific error codes plus the shared
storage codes from the core taxonomy.  ``WriterError`` extends
``BaseMsgError`` with the narrowed ``code`` type.

Raising follows a two-tier split:

* ``DuplicateAttachmentException`` is an expected domain outcome that a
  caller may catch and recover from (``recoverable=True``).
* ``InvalidArgumentException`` and ``UnknownPropertyTagException`` signal
  contract violations by the calling code.  They also subclass the matching
  built-in (``ValueError`` / ``KeyError``).
"""

from __future__ import annotations

from enum import Enum

from msgkit_core.errors import BaseMsgError


class ErrorCode(str, Enum):
    """Error codes for msgkit-writer.

    Values equal their names for stable metric/alerting strings.
    """

    # Writer-specific errors
    E_WRITER_DUPLICATE_ATTACHMENT = "E_WRITER_DUPLICATE_ATTACHMENT"
    E_WRITER_INVALID_ARGUMENT = "E_WRITER_INVALID_ARGUMENT"
    E_WRITER_UNKNOWN_TAG = "E_WRITER_UNKNOWN_TAG"
    E_WRITER_UNSUPPORTED_VALUE = "E_WRITER_UNSUPPORTED_VALUE"
    E_WRITER_SOURCE_CONSUMED = "E_WRITER_SOURCE_CONSUMED"

    # Storage / source errors (reused from core taxonomy)
    E_STORAGE_NAME_EXISTS = "E_STORAGE_NAME_EXISTS"
    E_STORAGE_WRITE_FAILED = "E_STORAGE_WRITE_FAILED"
    E_SOURCE_READ_FAILED = "E_SOURCE_READ_FAILED"


class WriterError(BaseMsgError):
    """Structured error for the writer.

    Narrows the ``code`` field to ``ErrorCode`` and adds the optional
    attachment / property context the error refers to.
    """

    code: ErrorCode  # type: ignore[assignment]  # narrows base str to ErrorCode
    file_name: str | None = None
    property_name: str | None = None


class WriterException(Exception):
    """Raisable exception wrapping a :class:`WriterError` data model.

    Carries the structured ``WriterError`` as the ``.error`` attribute for
    inspection and serialization.
    """

    def __init__(self, **kwargs: object) -> None:
        self.error = WriterError(**kwargs)  # type: ignore[arg-type]
        super().__init__(self.error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def stage(self) -> str | None:
        return self.error.stage

    @property
    def recoverable(self) -> bool:
        return self.error.recoverable


class DuplicateAttachmentException(WriterException):
    """An attachment with the same file name is already in the collection."""

    def __init__(self, file_name: str) -> None:
        super().__init__(
            code=ErrorCode.E_WRITER_DUPLICATE_ATTACHMENT,
            message=f"The attachment with the name '{file_name}' already exists",
            stage="attachments",
            recoverable=True,
            file_name=file_name,
        )

    @property
    def file_name(self) -> str:
        return self.error.file_name or ""


class InvalidArgumentException(WriterException, ValueError):
    """A required argument is missing, empty, or of the wrong kind."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.E_WRITER_INVALID_ARGUMENT,
        stage: str | None = None,
        **context: object,
    ) -> None:
        super().__init__(code=code, message=message, stage=stage, **context)


class UnknownPropertyTagException(WriterException, KeyError):
    """A symbolic property name is not present in the tag registry."""

    def __init__(self, property_name: str) -> None:
        super().__init__(
            code=ErrorCode.E_WRITER_UNKNOWN_TAG,
            message=f"Unknown property tag '{property_name}'",
            stage="registry",
            property_name=property_name,
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.error.message
