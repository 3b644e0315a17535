"""Shared error codes and base error model for the msgkit packages.

``CoreErrorCode`` contains the codes common to every msgkit package (storage
and byte-source failures).  ``BaseMsgError`` is a Pydantic model that each
package extends with its own context fields.  ``StorageException`` is the
raisable form used by storage backends.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class CoreErrorCode(str, Enum):
    """Error codes shared across all msgkit packages.

    Each package maintains its own *complete* ``ErrorCode`` enum that includes
    both the shared codes here and package-specific codes.  Values equal their
    names so they are stable strings suitable for metrics and alerting.
    """

    # Storage engine errors
    E_STORAGE_NAME_EXISTS = "E_STORAGE_NAME_EXISTS"
    E_STORAGE_WRITE_FAILED = "E_STORAGE_WRITE_FAILED"

    # Byte-source errors
    E_SOURCE_READ_FAILED = "E_SOURCE_READ_FAILED"


class BaseMsgError(BaseModel):
    """Base structured error with code, message, and context.

    The ``code`` field is typed as ``str`` so it accepts any package-specific
    ``ErrorCode`` enum member.
    """

    code: str
    message: str
    stage: str | None = None
    recoverable: bool = False


class StorageException(Exception):
    """Raisable exception for failures signalled by a storage container.

    Wraps a :class:`BaseMsgError` as ``.error``; the node name involved, if
    any, is kept on ``.node_name``.
    """

    def __init__(self, node_name: str | None = None, **kwargs: object) -> None:
        kwargs.setdefault("stage", "storage")
        self.error = BaseMsgError(**kwargs)  # type: ignore[arg-type]
        self.node_name = node_name
        super().__init__(self.error.message)

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message
