"""Storage node names for the Outlook .msg compound-file layout.

Property leaves are named ``__substg1.0_`` + 4 uppercase hex digits of the
property id + 4 uppercase hex digits of the type code.  Attachment
containers are named ``__attach_version1.0_#`` + an 8-digit zero-padded
decimal index.  Readers parse these names back into ids and types, so the
width and case are part of the file format.
"""

from __future__ import annotations

import re

from msgkit_writer.errors import InvalidArgumentException
from msgkit_writer.property_types import PropertyType
from msgkit_writer.tags import PropertyTag

PROPERTY_STREAM_PREFIX = "__substg1.0_"
ATTACHMENT_STORAGE_PREFIX = "__attach_version1.0_#"

MAX_ATTACHMENT_INDEX = 99_999_999

_PROPERTY_NAME_RE = re.compile(
    re.escape(PROPERTY_STREAM_PREFIX) + r"(?P<id>[0-9A-F]{4})(?P<type>[0-9A-F]{4})"
)


def derive_name(tag: PropertyTag) -> str:
    """Return the leaf name for *tag*, e.g. ``__substg1.0_3001001F``."""
    return f"{PROPERTY_STREAM_PREFIX}{tag.id:04X}{int(tag.type):04X}"


def parse_name(name: str) -> PropertyTag:
    """Recover the :class:`PropertyTag` encoded in a property leaf *name*.

    Raises
    ------
    InvalidArgumentException
        If *name* does not follow the leaf naming rule or carries an
        unknown type code.
    """
    match = _PROPERTY_NAME_RE.fullmatch(name)
    if match is None:
        raise InvalidArgumentException(
            f"'{name}' is not a property stream name", stage="naming"
        )
    return PropertyTag(
        int(match.group("id"), 16),
        PropertyType.from_code(int(match.group("type"), 16)),
    )


def attachment_container_name(index: int) -> str:
    """Return the container name for the attachment at 0-based *index*."""
    if not 0 <= index <= MAX_ATTACHMENT_INDEX:
        raise InvalidArgumentException(
            f"Attachment index {index} is out of range", stage="naming"
        )
    return f"{ATTACHMENT_STORAGE_PREFIX}{index:08d}"
