"""Tests for msgkit_writer.encoding."""

from __future__ import annotations

import struct
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from msgkit_writer import tags
from msgkit_writer.encoding import datetime_to_filetime, encode_value
from msgkit_writer.errors import ErrorCode, InvalidArgumentException
from msgkit_writer.property_types import PropertyType


class TestScalars:
    def test_long(self):
        assert encode_value(tags.PR_ATTACH_METHOD, 1) == b"\x01\x00\x00\x00"

    def test_negative_long(self):
        assert encode_value(PropertyType.PT_LONG, -1) == b"\xff\xff\xff\xff"

    def test_short(self):
        assert encode_value(PropertyType.PT_SHORT, 0x0102) == b"\x02\x01"

    def test_i8(self):
        assert encode_value(PropertyType.PT_I8, 1 << 40) == struct.pack("<q", 1 << 40)

    def test_boolean(self):
        assert encode_value(tags.PR_HASATTACH, True) == b"\x01\x00"
        assert encode_value(tags.PR_HASATTACH, False) == b"\x00\x00"

    def test_double(self):
        assert encode_value(PropertyType.PT_DOUBLE, 1.5) == struct.pack("<d", 1.5)

    def test_float_accepts_int(self):
        assert encode_value(PropertyType.PT_FLOAT, 2) == struct.pack("<f", 2.0)

    def test_currency_is_scaled(self):
        assert encode_value(PropertyType.PT_CURRENCY, 1.25) == struct.pack("<q", 12_500)


class TestSystime:
    def test_epoch(self):
        epoch = datetime(1601, 1, 1, tzinfo=timezone.utc)
        assert encode_value(PropertyType.PT_SYSTIME, epoch) == b"\x00" * 8

    def test_unix_epoch(self):
        unix = datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert datetime_to_filetime(unix) == 116_444_736_000_000_000

    def test_naive_is_utc(self):
        naive = datetime(2024, 1, 15, 10, 30)
        aware = naive.replace(tzinfo=timezone.utc)
        assert datetime_to_filetime(naive) == datetime_to_filetime(aware)

    def test_offset_is_normalized(self):
        local = datetime(2024, 1, 15, 12, 30, tzinfo=timezone(timedelta(hours=2)))
        utc = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        assert datetime_to_filetime(local) == datetime_to_filetime(utc)

    def test_microseconds(self):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert datetime_to_filetime(base + timedelta(microseconds=1)) - datetime_to_filetime(base) == 10


class TestStrings:
    def test_unicode_is_utf16le_without_terminator(self):
        assert encode_value(tags.PR_SUBJECT_W, "Hi") == b"H\x00i\x00"

    def test_unicode_non_ascii(self):
        assert encode_value(tags.PR_SUBJECT_W, "é") == "é".encode("utf-16-le")

    def test_string8_default_codepage(self):
        assert encode_value(tags.PR_SUBJECT_A, "café") == b"caf\xe9"

    def test_string8_custom_codepage(self):
        assert encode_value(tags.PR_SUBJECT_A, "café", codepage="utf-8") == "café".encode("utf-8")

    def test_string8_unrepresentable(self):
        with pytest.raises(InvalidArgumentException) as exc_info:
            encode_value(tags.PR_SUBJECT_A, "日本")
        assert exc_info.value.code == ErrorCode.E_WRITER_UNSUPPORTED_VALUE


class TestBinaryAndClsid:
    def test_binary(self):
        assert encode_value(tags.PR_ATTACH_DATA_BIN, bytearray(b"\x00\x01")) == b"\x00\x01"

    def test_clsid(self):
        guid = uuid.UUID("00020328-0000-0000-c000-000000000046")
        assert encode_value(PropertyType.PT_CLSID, guid) == guid.bytes_le

    def test_clsid_from_string(self):
        text = "00020328-0000-0000-c000-000000000046"
        assert encode_value(PropertyType.PT_CLSID, text) == uuid.UUID(text).bytes_le


class TestMultiValued:
    def test_mv_long(self):
        assert encode_value(PropertyType.PT_MV_LONG, [1, 2]) == (
            b"\x01\x00\x00\x00\x02\x00\x00\x00"
        )

    def test_mv_long_empty(self):
        assert encode_value(PropertyType.PT_MV_LONG, []) == b""

    @pytest.mark.parametrize("ptype", [
        PropertyType.PT_MV_UNICODE,
        PropertyType.PT_MV_STRING8,
        PropertyType.PT_MV_BINARY,
    ])
    def test_variable_length_mv_rejected(self, ptype: PropertyType):
        with pytest.raises(InvalidArgumentException):
            encode_value(ptype, ["a"])

    def test_mv_requires_sequence(self):
        with pytest.raises(InvalidArgumentException):
            encode_value(PropertyType.PT_MV_LONG, 5)


class TestRejections:
    @pytest.mark.parametrize("ptype, value", [
        (PropertyType.PT_LONG, "1"),
        (PropertyType.PT_LONG, 1.5),
        (PropertyType.PT_LONG, True),
        (PropertyType.PT_LONG, 1 << 40),
        (PropertyType.PT_BOOLEAN, 1),
        (PropertyType.PT_UNICODE, b"bytes"),
        (PropertyType.PT_BINARY, "text"),
        (PropertyType.PT_SYSTIME, 0),
    ])
    def test_wrong_value(self, ptype: PropertyType, value: object):
        with pytest.raises(InvalidArgumentException):
            encode_value(ptype, value)

    @pytest.mark.parametrize("ptype, value", [
        (PropertyType.PT_SYSTIME, datetime(1500, 1, 1, tzinfo=timezone.utc)),
        (PropertyType.PT_SYSTIME, datetime(1600, 12, 31, 23, 59)),
        (PropertyType.PT_FLOAT, 1e300),
        (PropertyType.PT_CURRENCY, float("inf")),
        (PropertyType.PT_CURRENCY, float("nan")),
        (PropertyType.PT_CURRENCY, 1e20),
        (PropertyType.PT_CLSID, "not-a-guid"),
        (PropertyType.PT_MV_SYSTIME, [datetime(1500, 1, 1)]),
    ])
    def test_out_of_range_value(self, ptype: PropertyType, value: object):
        with pytest.raises(InvalidArgumentException) as exc_info:
            encode_value(ptype, value)
        assert exc_info.value.code == ErrorCode.E_WRITER_UNSUPPORTED_VALUE

    @pytest.mark.parametrize("ptype", [
        PropertyType.PT_OBJECT,
        PropertyType.PT_NULL,
        PropertyType.PT_UNSPECIFIED,
        PropertyType.PT_SRESTRICT,
    ])
    def test_types_without_stream_encoding(self, ptype: PropertyType):
        with pytest.raises(InvalidArgumentException) as exc_info:
            encode_value(ptype, b"")
        assert exc_info.value.code == ErrorCode.E_WRITER_UNSUPPORTED_VALUE

    def test_rejection_is_value_error(self):
        with pytest.raises(ValueError):
            encode_value(tags.PR_ATTACH_DATA_OBJ, b"")
