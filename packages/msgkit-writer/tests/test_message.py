"""Tests for msgkit_writer.message."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from msgkit_writer import tags
from msgkit_writer.backends.memory import InMemoryStorage
from msgkit_writer.config import WriterConfig
from msgkit_writer.errors import InvalidArgumentException, UnknownPropertyTagException
from msgkit_writer.message import MessageWriter


class TestMessageWriter:
    def test_layout(self, root: InMemoryStorage):
        writer = MessageWriter()
        writer.set_string("PR_SUBJECT", "Quarterly report")
        writer.set_property("PR_HASATTACH", True)
        writer.attachments.add(b"%PDF", "Report.PDF")
        writer.write(root)

        assert root.children == [
            "__substg1.0_0037001F",
            "__substg1.0_0E1B000B",
            "__attach_version1.0_#00000000",
        ]
        assert root.leaf("__substg1.0_0037001F") == "Quarterly report".encode("utf-16-le")
        assert root.leaf("__substg1.0_0E1B000B") == b"\x01\x00"

    def test_set_string_ansi(self, root: InMemoryStorage):
        writer = MessageWriter(WriterConfig(prefer_unicode=False))
        tag = writer.set_string("PR_BODY", "hello")
        assert tag is tags.PR_BODY_A
        writer.write(root)
        assert root.leaf("__substg1.0_1000001E") == b"hello"

    def test_set_property_by_tag(self):
        writer = MessageWriter()
        when = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
        writer.set_property(tags.PR_CLIENT_SUBMIT_TIME, when)
        assert writer.properties == {tags.PR_CLIENT_SUBMIT_TIME: when}

    def test_set_property_overwrites(self):
        writer = MessageWriter()
        writer.set_property("PR_SUBJECT_W", "one")
        writer.set_property("PR_SUBJECT_W", "two")
        assert writer.properties[tags.PR_SUBJECT_W] == "two"

    def test_bad_value_rejected_early(self):
        writer = MessageWriter()
        with pytest.raises(InvalidArgumentException):
            writer.set_property("PR_HASATTACH", "yes")
        assert writer.properties == {}

    def test_out_of_range_time_rejected_early(self):
        writer = MessageWriter()
        with pytest.raises(InvalidArgumentException):
            writer.set_property("PR_CLIENT_SUBMIT_TIME", datetime(1500, 1, 1))
        assert writer.properties == {}

    def test_unknown_name(self):
        with pytest.raises(UnknownPropertyTagException):
            MessageWriter().set_property("PR_NOPE", 1)

    def test_properties_is_a_copy(self):
        writer = MessageWriter()
        writer.properties[tags.PR_SUBJECT_W] = "x"
        assert writer.properties == {}

    def test_context_manager_closes_owned_sources(self, sample_file):
        with MessageWriter() as writer:
            record = writer.attachments.add_file(sample_file)
        assert record.source.closed

    def test_write_logs_writer_version(
        self, root: InMemoryStorage, caplog: pytest.LogCaptureFixture
    ):
        writer = MessageWriter(WriterConfig(writer_version="msgkit_writer:9.9.9"))
        with caplog.at_level(logging.INFO, logger="msgkit_writer"):
            writer.write(root)
        assert "msgkit_writer:9.9.9" in caplog.text
