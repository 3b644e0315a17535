"""Attachment records and the ordered collection a message owns.

``Attachments`` exposes only ``add``/``add_file``, iteration, and length so
that every mutation passes the same validation: the file name (final path
component, compared case-insensitively) must be unique and an inline
attachment must carry a content id.  Insertion order is the order in which
attachments are written, and therefore their storage index.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PureWindowsPath
from typing import BinaryIO

from msgkit_writer.errors import (
    DuplicateAttachmentException,
    ErrorCode,
    InvalidArgumentException,
    WriterException,
)

logger = logging.getLogger("msgkit_writer")

ByteSource = BinaryIO | bytes | bytearray

# (source, creation time, last modification time, source owned by the collection)
_OpenedSource = tuple[BinaryIO, datetime, datetime, bool]


def normalize_file_name(file_name: str) -> str:
    """Strip any directory part, accepting both ``/`` and ``\\`` separators."""
    if not isinstance(file_name, str):
        raise InvalidArgumentException("fileName must be a string", stage="attachments")
    name = PureWindowsPath(file_name).name
    if not name.strip():
        raise InvalidArgumentException(
            f"'{file_name}' does not contain a file name", stage="attachments"
        )
    return name


def _check_content_id(is_inline: bool, content_id: str | None) -> None:
    if is_inline and not (content_id or "").strip():
        raise InvalidArgumentException(
            "The content id cannot be empty when isInline is set to true",
            stage="attachments",
        )


@dataclass(frozen=True)
class Attachment:
    """One file attached to a message.  Fields are read-only once accepted."""

    source: BinaryIO
    file_name: str
    creation_time: datetime
    last_modification_time: datetime
    is_inline: bool = False
    content_id: str = ""
    owns_source: bool = field(default=False, repr=False)
    _consumed: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "file_name", normalize_file_name(self.file_name))
        _check_content_id(self.is_inline, self.content_id)

    def read_payload(self) -> bytes:
        """Read the whole source.  A source can be read exactly once.

        Read errors from the source propagate unchanged.
        """
        if self._consumed:
            raise WriterException(
                code=ErrorCode.E_WRITER_SOURCE_CONSUMED,
                message=f"The source of attachment '{self.file_name}' was already read",
                stage="serialize",
                file_name=self.file_name,
            )
        object.__setattr__(self, "_consumed", True)
        return self.source.read()

    def close(self) -> None:
        """Close the source if the collection opened it; caller-supplied sources are left open."""
        if self.owns_source and not self.source.closed:
            self.source.close()


class Attachments:
    """Ordered, duplicate-checked set of :class:`Attachment` records."""

    def __init__(self) -> None:
        self._items: list[Attachment] = []

    def add(
        self,
        source: ByteSource,
        file_name: str,
        is_inline: bool = False,
        content_id: str = "",
    ) -> Attachment:
        """Add an attachment read from *source*.

        *source* is a readable binary file object (left open; the caller
        closes it) or a ``bytes``/``bytearray`` buffer.  Both timestamps are
        set to the current UTC time.

        Raises
        ------
        InvalidArgumentException
            If *source* is missing or not readable, or *is_inline* is set
            without a content id.
        DuplicateAttachmentException
            If an attachment with the same file name already exists.
        """
        if source is None:
            raise InvalidArgumentException("stream cannot be None", stage="attachments")
        if not isinstance(source, (bytes, bytearray)) and not callable(
            getattr(source, "read", None)
        ):
            raise InvalidArgumentException(
                f"stream must be a readable binary object, not {type(source).__name__}",
                stage="attachments",
            )

        def open_source() -> _OpenedSource:
            now = datetime.now(timezone.utc)
            if isinstance(source, (bytes, bytearray)):
                return io.BytesIO(bytes(source)), now, now, True
            return source, now, now, False

        return self._accept(file_name, is_inline, content_id, open_source)

    def add_file(
        self,
        path: str | os.PathLike[str],
        is_inline: bool = False,
        content_id: str = "",
    ) -> Attachment:
        """Add the file at *path*, keeping its creation and modification times.

        The collection opens the file and closes it on :meth:`close`.

        Raises
        ------
        FileNotFoundError
            If *path* does not exist.
        InvalidArgumentException
            If *is_inline* is set without a content id.
        DuplicateAttachmentException
            If an attachment with the same file name already exists.
        """
        path = os.fspath(path)

        def open_source() -> _OpenedSource:
            fh = open(path, "rb")
            stat = os.fstat(fh.fileno())
            created = getattr(stat, "st_birthtime", stat.st_ctime)
            return (
                fh,
                datetime.fromtimestamp(created, tz=timezone.utc),
                datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                True,
            )

        return self._accept(path, is_inline, content_id, open_source)

    def _accept(
        self,
        file_name: str,
        is_inline: bool,
        content_id: str,
        open_source: Callable[[], _OpenedSource],
    ) -> Attachment:
        name = normalize_file_name(file_name)
        _check_content_id(is_inline, content_id)
        if name in self:
            raise DuplicateAttachmentException(name)

        source, created, modified, owned = open_source()
        attachment = Attachment(
            source=source,
            file_name=name,
            creation_time=created,
            last_modification_time=modified,
            is_inline=is_inline,
            content_id=content_id,
            owns_source=owned,
        )
        self._items.append(attachment)
        logger.debug("Accepted attachment #%d (inline=%s)", len(self._items) - 1, is_inline)
        return attachment

    def file_names(self) -> list[str]:
        return [attachment.file_name for attachment in self._items]

    def close(self) -> None:
        """Close every source the collection opened itself."""
        for attachment in self._items:
            attachment.close()

    def __enter__(self) -> Attachments:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __contains__(self, file_name: object) -> bool:
        if not isinstance(file_name, str):
            return False
        key = PureWindowsPath(file_name).name.casefold()
        return any(attachment.file_name.casefold() == key for attachment in self._items)

    def __iter__(self) -> Iterator[Attachment]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Attachments({self.file_names()!r})"
