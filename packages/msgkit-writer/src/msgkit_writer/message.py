"""MessageWriter -- public entry point that lays out a message in a container.

Ordinary fields become property leaves directly under the root container,
followed by one child container per attachment.
"""

from __future__ import annotations

import logging
from typing import Any

from msgkit_core.protocols import StorageContainer

from msgkit_writer.attachments import Attachments
from msgkit_writer.config import WriterConfig
from msgkit_writer.encoding import encode_value
from msgkit_writer.registry import lookup, lookup_string
from msgkit_writer.serializer import AttachmentSerializer, write_property
from msgkit_writer.tags import PropertyTag

logger = logging.getLogger("msgkit_writer")


class MessageWriter:
    """Collects message properties and attachments and writes them out.

    Parameters
    ----------
    config:
        Writer configuration. Uses defaults when *None*.
    """

    def __init__(self, config: WriterConfig | None = None) -> None:
        self._config = config or WriterConfig()
        self._properties: dict[PropertyTag, Any] = {}
        self._attachments = Attachments()
        self._serializer = AttachmentSerializer(self._config)

    @property
    def config(self) -> WriterConfig:
        return self._config

    @property
    def attachments(self) -> Attachments:
        return self._attachments

    @property
    def properties(self) -> dict[PropertyTag, Any]:
        return dict(self._properties)

    def set_property(self, tag: PropertyTag | str, value: Any) -> PropertyTag:
        """Set the value of *tag* (a tag or its registry name).

        The value is encoded immediately so that type errors surface here
        rather than half way through :meth:`write`.
        """
        if isinstance(tag, str):
            tag = lookup(tag)
        encode_value(tag, value, self._config.ansi_codepage)
        self._properties[tag] = value
        return tag

    def set_string(self, base_name: str, value: str) -> PropertyTag:
        """Set a string field, choosing ``_W`` or ``_A`` from ``prefer_unicode``."""
        tag = lookup_string(base_name, unicode=self._config.prefer_unicode)
        return self.set_property(tag, value)

    def write(self, root: StorageContainer) -> None:
        """Write all properties, then all attachments, into *root*."""
        logger.info("Writing message (%s)", self._config.writer_version)
        for tag, value in self._properties.items():
            write_property(root, tag, value, self._config.ansi_codepage)
        logger.debug("Wrote %d message properties", len(self._properties))
        self._serializer.serialize(self._attachments, root)

    def close(self) -> None:
        self._attachments.close()

    def __enter__(self) -> MessageWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
