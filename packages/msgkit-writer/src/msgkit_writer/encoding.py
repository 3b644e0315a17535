"""Byte encoding of property values for storage leaves.

All numeric values are little-endian.  Strings are written without a byte
order mark or terminator: ``PT_UNICODE`` as UTF-16-LE, ``PT_STRING8`` in the
caller's codepage.  Fixed-width multi-valued types are the concatenation of
their elements.
"""

from __future__ import annotations

import struct
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any

from msgkit_writer.errors import ErrorCode, InvalidArgumentException
from msgkit_writer.property_types import PropertyType
from msgkit_writer.tags import PropertyTag

DEFAULT_CODEPAGE = "cp1252"

FILETIME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)


def datetime_to_filetime(value: datetime) -> int:
    """100-nanosecond ticks since 1601-01-01 UTC.  Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - FILETIME_EPOCH
    return (delta.days * 86_400 + delta.seconds) * 10_000_000 + delta.microseconds * 10


def _unsupported(ptype: PropertyType, value: Any, reason: str | None = None) -> InvalidArgumentException:
    message = reason or f"Cannot encode {type(value).__name__} as {ptype.name}"
    return InvalidArgumentException(
        message, code=ErrorCode.E_WRITER_UNSUPPORTED_VALUE, stage="encoding"
    )


def _pack(fmt: str) -> Callable[[PropertyType, Any, str], bytes]:
    def encode(ptype: PropertyType, value: Any, codepage: str) -> bytes:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _unsupported(ptype, value)
        try:
            return struct.pack(fmt, value)
        except struct.error as exc:
            raise _unsupported(ptype, value, f"{ptype.name} value {value!r}: {exc}") from exc

    return encode


def _encode_boolean(ptype: PropertyType, value: Any, codepage: str) -> bytes:
    if not isinstance(value, bool):
        raise _unsupported(ptype, value)
    return struct.pack("<H", 1 if value else 0)


def _encode_systime(ptype: PropertyType, value: Any, codepage: str) -> bytes:
    if not isinstance(value, datetime):
        raise _unsupported(ptype, value)
    try:
        return struct.pack("<Q", datetime_to_filetime(value))
    except struct.error as exc:
        raise _unsupported(ptype, value, f"{value!r} is outside the FILETIME range") from exc


def _encode_clsid(ptype: PropertyType, value: Any, codepage: str) -> bytes:
    if isinstance(value, str):
        try:
            value = uuid.UUID(value)
        except ValueError as exc:
            raise _unsupported(ptype, value, f"{value!r} is not a GUID: {exc}") from exc
    if not isinstance(value, uuid.UUID):
        raise _unsupported(ptype, value)
    return value.bytes_le


def _encode_string8(ptype: PropertyType, value: Any, codepage: str) -> bytes:
    if not isinstance(value, str):
        raise _unsupported(ptype, value)
    try:
        return value.encode(codepage)
    except UnicodeEncodeError as exc:
        raise _unsupported(
            ptype, value, f"Value is not representable in codepage '{codepage}': {exc}"
        ) from exc


def _encode_unicode(ptype: PropertyType, value: Any, codepage: str) -> bytes:
    if not isinstance(value, str):
        raise _unsupported(ptype, value)
    return value.encode("utf-16-le")


def _encode_binary(ptype: PropertyType, value: Any, codepage: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise _unsupported(ptype, value)
    return bytes(value)


def _encode_float(fmt: str) -> Callable[[PropertyType, Any, str], bytes]:
    def encode(ptype: PropertyType, value: Any, codepage: str) -> bytes:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _unsupported(ptype, value)
        try:
            return struct.pack(fmt, float(value))
        except (struct.error, OverflowError) as exc:
            raise _unsupported(ptype, value, f"{ptype.name} value {value!r}: {exc}") from exc

    return encode


def _encode_currency(ptype: PropertyType, value: Any, codepage: str) -> bytes:
    # Stored as a 64-bit integer scaled by 10,000
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _unsupported(ptype, value)
    try:
        scaled = round(value * 10_000)
    except (OverflowError, ValueError) as exc:
        raise _unsupported(ptype, value, f"{ptype.name} value {value!r}: {exc}") from exc
    return _pack("<q")(ptype, scaled, codepage)


_ENCODERS: dict[PropertyType, Callable[[PropertyType, Any, str], bytes]] = {
    PropertyType.PT_SHORT: _pack("<h"),
    PropertyType.PT_LONG: _pack("<i"),
    PropertyType.PT_ERROR: _pack("<I"),
    PropertyType.PT_I8: _pack("<q"),
    PropertyType.PT_FLOAT: _encode_float("<f"),
    PropertyType.PT_DOUBLE: _encode_float("<d"),
    PropertyType.PT_APPTIME: _encode_float("<d"),
    PropertyType.PT_CURRENCY: _encode_currency,
    PropertyType.PT_BOOLEAN: _encode_boolean,
    PropertyType.PT_SYSTIME: _encode_systime,
    PropertyType.PT_CLSID: _encode_clsid,
    PropertyType.PT_STRING8: _encode_string8,
    PropertyType.PT_UNICODE: _encode_unicode,
    PropertyType.PT_BINARY: _encode_binary,
}


def encode_value(
    tag: PropertyTag | PropertyType,
    value: Any,
    codepage: str = DEFAULT_CODEPAGE,
) -> bytes:
    """Encode *value* as the bytes of a leaf for *tag* (or a bare type).

    Raises
    ------
    InvalidArgumentException
        With code ``E_WRITER_UNSUPPORTED_VALUE`` when the type has no
        stream encoding or *value* does not fit it.
    """
    ptype = tag.type if isinstance(tag, PropertyTag) else tag

    if ptype.is_multi_valued:
        if ptype.fixed_size is None:
            raise _unsupported(
                ptype, value, f"{ptype.name} values span several streams and are not supported"
            )
        if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
            raise _unsupported(ptype, value)
        encoder = _ENCODERS[ptype.base_type]
        return b"".join(encoder(ptype.base_type, item, codepage) for item in value)

    encoder = _ENCODERS.get(ptype)
    if encoder is None:
        raise _unsupported(ptype, value, f"{ptype.name} has no stream encoding")
    return encoder(ptype, value, codepage)
