"""Tests for msgkit_writer.attachments."""

from __future__ import annotations

import io
import os
from dataclasses import FrozenInstanceError
from datetime import datetime, timezone
from pathlib import Path

import pytest

from msgkit_writer.attachments import Attachment, Attachments, normalize_file_name
from msgkit_writer.errors import (
    DuplicateAttachmentException,
    ErrorCode,
    InvalidArgumentException,
    WriterException,
)


class TestNormalizeFileName:
    @pytest.mark.parametrize("raw, expected", [
        ("Report.PDF", "Report.PDF"),
        ("/a/b/x.txt", "x.txt"),
        ("C:\\Users\\me\\x.txt", "x.txt"),
        ("relative/dir\\mixed.doc", "mixed.doc"),
    ])
    def test_basename(self, raw: str, expected: str):
        assert normalize_file_name(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_name(self, raw: str):
        with pytest.raises(InvalidArgumentException):
            normalize_file_name(raw)


class TestAdd:
    def test_appends_in_order(self, attachments: Attachments):
        attachments.add(b"a", "a.txt")
        attachments.add(b"b", "b.txt")
        assert len(attachments) == 2
        assert [a.file_name for a in attachments] == ["a.txt", "b.txt"]

    def test_returns_record(self, attachments: Attachments, pdf_stream: io.BytesIO):
        record = attachments.add(pdf_stream, "/tmp/in/Report.PDF")
        assert isinstance(record, Attachment)
        assert record.file_name == "Report.PDF"
        assert record.source is pdf_stream
        assert record.is_inline is False
        assert record.content_id == ""

    def test_timestamps_are_now(self, attachments: Attachments):
        before = datetime.now(timezone.utc)
        record = attachments.add(b"x", "x.bin")
        after = datetime.now(timezone.utc)
        assert before <= record.creation_time <= after
        assert record.creation_time == record.last_modification_time

    def test_inline_with_content_id(self, attachments: Attachments):
        record = attachments.add(b"img", "logo.png", is_inline=True, content_id="logo@1")
        assert record.is_inline is True
        assert record.content_id == "logo@1"

    def test_bytes_source_is_owned(self, attachments: Attachments):
        record = attachments.add(bytearray(b"xyz"), "x.bin")
        assert record.owns_source is True
        assert record.read_payload() == b"xyz"

    def test_stream_source_not_owned(self, attachments: Attachments, pdf_stream: io.BytesIO):
        record = attachments.add(pdf_stream, "r.pdf")
        assert record.owns_source is False
        attachments.close()
        assert not pdf_stream.closed


class TestDuplicates:
    def test_case_insensitive_duplicate(self, attachments: Attachments):
        attachments.add(b"1", "Report.pdf")
        with pytest.raises(DuplicateAttachmentException) as exc_info:
            attachments.add(b"2", "REPORT.PDF")
        assert len(attachments) == 1
        assert "REPORT.PDF" in exc_info.value.message
        assert exc_info.value.file_name == "REPORT.PDF"
        assert exc_info.value.code == ErrorCode.E_WRITER_DUPLICATE_ATTACHMENT

    def test_duplicate_across_directories(self, attachments: Attachments):
        """Uniqueness is checked on the final path component only."""
        attachments.add(b"1", "/b/x.txt")
        with pytest.raises(DuplicateAttachmentException):
            attachments.add(b"2", "/a/x.txt")
        assert attachments.file_names() == ["x.txt"]

    def test_duplicate_is_recoverable(self, attachments: Attachments):
        attachments.add(b"1", "a.txt")
        with pytest.raises(DuplicateAttachmentException) as exc_info:
            attachments.add(b"2", "A.TXT")
        assert exc_info.value.recoverable is True
        attachments.add(b"2", "a (2).txt")
        assert len(attachments) == 2

    def test_duplicate_not_a_value_error(self, attachments: Attachments):
        attachments.add(b"1", "a.txt")
        with pytest.raises(WriterException) as exc_info:
            attachments.add(b"2", "a.txt")
        assert not isinstance(exc_info.value, ValueError)

    def test_contains(self, attachments: Attachments):
        attachments.add(b"1", "Notes.TXT")
        assert "notes.txt" in attachments
        assert "/elsewhere/NOTES.txt" in attachments
        assert "other.txt" not in attachments
        assert 5 not in attachments


class TestInvalidArguments:
    def test_none_source(self, attachments: Attachments):
        with pytest.raises(InvalidArgumentException):
            attachments.add(None, "a.txt")  # type: ignore[arg-type]
        assert len(attachments) == 0

    def test_unreadable_source(self, attachments: Attachments):
        with pytest.raises(InvalidArgumentException):
            attachments.add("not bytes", "a.txt")  # type: ignore[arg-type]

    @pytest.mark.parametrize("content_id", ["", "   ", "\t\n"])
    def test_inline_without_content_id(self, attachments: Attachments, content_id: str):
        with pytest.raises(InvalidArgumentException) as exc_info:
            attachments.add(b"img", "logo.png", is_inline=True, content_id=content_id)
        assert len(attachments) == 0
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.recoverable is False

    def test_rejected_inline_leaves_collection_unchanged(self, attachments: Attachments):
        attachments.add(b"1", "logo.png")
        with pytest.raises(InvalidArgumentException):
            attachments.add(b"2", "other.png", is_inline=True)
        assert attachments.file_names() == ["logo.png"]

    def test_record_enforces_inline_rule(self):
        with pytest.raises(InvalidArgumentException):
            Attachment(
                source=io.BytesIO(b""),
                file_name="x.png",
                creation_time=datetime.now(timezone.utc),
                last_modification_time=datetime.now(timezone.utc),
                is_inline=True,
            )


class TestRecordIsReadOnly:
    @pytest.mark.parametrize("field_name, value", [
        ("file_name", "A.TXT"),
        ("is_inline", True),
        ("content_id", "cid"),
        ("creation_time", datetime(2020, 1, 1, tzinfo=timezone.utc)),
        ("last_modification_time", datetime(2020, 1, 1, tzinfo=timezone.utc)),
        ("source", io.BytesIO(b"other")),
    ])
    def test_fields_cannot_be_reassigned(
        self, attachments: Attachments, field_name: str, value: object
    ):
        record = attachments.add(b"2", "b.txt")
        with pytest.raises(FrozenInstanceError):
            setattr(record, field_name, value)

    def test_rename_cannot_bypass_duplicate_check(self, attachments: Attachments):
        attachments.add(b"1", "a.txt")
        record = attachments.add(b"2", "b.txt")
        with pytest.raises(FrozenInstanceError):
            record.file_name = "A.TXT"
        assert attachments.file_names() == ["a.txt", "b.txt"]
        assert record.is_inline is False


class TestAddFile:
    def test_reads_file_and_times(self, attachments: Attachments, sample_file: Path):
        os.utime(sample_file, (1_700_000_000, 1_700_000_000))
        record = attachments.add_file(sample_file)
        assert record.file_name == "notes.txt"
        assert record.owns_source is True
        assert record.last_modification_time == datetime.fromtimestamp(
            1_700_000_000, tz=timezone.utc
        )
        assert record.creation_time.tzinfo is not None
        assert record.read_payload() == b"meeting notes\r\n"
        attachments.close()
        assert record.source.closed

    def test_missing_file(self, attachments: Attachments, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            attachments.add_file(tmp_path / "missing.txt")
        assert len(attachments) == 0

    def test_duplicate_checked_before_open(self, attachments: Attachments, tmp_path: Path):
        """A duplicate name is rejected even when the second file does not exist."""
        attachments.add(b"x", "notes.txt")
        with pytest.raises(DuplicateAttachmentException):
            attachments.add_file(tmp_path / "missing" / "NOTES.txt")

    def test_file_and_stream_share_uniqueness(self, attachments: Attachments, sample_file: Path):
        attachments.add_file(sample_file)
        with pytest.raises(DuplicateAttachmentException):
            attachments.add(b"x", "Notes.txt")

    def test_context_manager_closes(self, sample_file: Path):
        with Attachments() as collection:
            record = collection.add_file(str(sample_file))
        assert record.source.closed


class TestReadPayload:
    def test_single_read(self, attachments: Attachments, pdf_stream: io.BytesIO):
        record = attachments.add(pdf_stream, "r.pdf")
        assert record.read_payload() == b"%PDF"
        with pytest.raises(WriterException) as exc_info:
            record.read_payload()
        assert exc_info.value.code == ErrorCode.E_WRITER_SOURCE_CONSUMED

    def test_read_error_propagates(self, attachments: Attachments):
        class _Broken(io.RawIOBase):
            def readable(self) -> bool:
                return True

            def read(self, size: int = -1) -> bytes:
                raise OSError("device gone")

        record = attachments.add(_Broken(), "broken.bin")
        with pytest.raises(OSError, match="device gone"):
            record.read_payload()


class TestCollectionSurface:
    def test_no_list_mutators(self, attachments: Attachments):
        for name in ("append", "insert", "extend", "remove", "pop", "__setitem__", "__delitem__"):
            assert not hasattr(attachments, name)

    def test_repr(self, attachments: Attachments):
        attachments.add(b"", "a.txt")
        assert repr(attachments) == "Attachments(['a.txt'])"
