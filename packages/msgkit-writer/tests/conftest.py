"""Shared fixtures for msgkit-writer tests."""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from msgkit_writer.attachments import Attachments
from msgkit_writer.backends.memory import InMemoryStorage
from msgkit_writer.config import WriterConfig

PDF_MAGIC = bytes([0x25, 0x50, 0x44, 0x46])


@pytest.fixture
def config() -> WriterConfig:
    return WriterConfig()


@pytest.fixture
def root() -> InMemoryStorage:
    """Empty in-memory root container."""
    return InMemoryStorage()


@pytest.fixture
def attachments() -> Attachments:
    return Attachments()


@pytest.fixture
def pdf_stream() -> io.BytesIO:
    return io.BytesIO(PDF_MAGIC)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A small text file on disk."""
    p = tmp_path / "notes.txt"
    p.write_bytes(b"meeting notes\r\n")
    return p


# ---------------------------------------------------------------------------
# Mock backends
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_container() -> MagicMock:
    """Mock satisfying the StorageContainer protocol.

    ``create_child_container`` returns a fresh child mock per call, recorded
    on ``.created_children`` in call order.
    """
    container = MagicMock()
    container.created_children = []

    def _child(name: str) -> MagicMock:
        child = MagicMock(name=name)
        container.created_children.append(child)
        return child

    container.create_child_container.side_effect = _child
    container.create_leaf.return_value = None
    return container
