"""Write attachments and property leaves into a storage container.

Each attachment at index ``i`` becomes a child container named
``__attach_version1.0_#<i:08d>`` holding two leaves: the file name
(encoded per the type of the configured name tag) and the raw payload.
Sources the collection opened itself are closed as soon as they are read.
Storage and source errors propagate unchanged; containers already written
are not rolled back.
"""

from __future__ import annotations

import logging
from typing import Any

from msgkit_core.protocols import StorageContainer

from msgkit_writer.attachments import Attachment, Attachments
from msgkit_writer.config import WriterConfig
from msgkit_writer.encoding import DEFAULT_CODEPAGE, encode_value
from msgkit_writer.naming import attachment_container_name, derive_name
from msgkit_writer.tags import PropertyTag

logger = logging.getLogger("msgkit_writer")


def write_property(
    container: StorageContainer,
    tag: PropertyTag,
    value: Any,
    codepage: str = DEFAULT_CODEPAGE,
) -> str:
    """Encode *value* for *tag* and write it as a leaf of *container*.

    Returns the leaf name.
    """
    data = encode_value(tag, value, codepage)
    name = derive_name(tag)
    container.create_leaf(name, data)
    return name


class AttachmentSerializer:
    """Serialize an :class:`Attachments` collection into a destination container.

    Parameters
    ----------
    config:
        Writer configuration. Uses defaults when *None*.
    """

    def __init__(self, config: WriterConfig | None = None) -> None:
        self._config = config or WriterConfig()

    def serialize(self, attachments: Attachments, container: StorageContainer) -> int:
        """Write every attachment in insertion order.  Returns the number written."""
        count = 0
        for index, attachment in enumerate(attachments):
            self.write_attachment(index, attachment, container)
            count += 1
        logger.info("Serialized %d attachment(s)", count)
        return count

    def write_attachment(
        self, index: int, attachment: Attachment, container: StorageContainer
    ) -> StorageContainer:
        """Write one attachment as the child container for *index*."""
        storage = container.create_child_container(attachment_container_name(index))
        write_property(
            storage,
            self._config.name_tag,
            attachment.file_name,
            self._config.ansi_codepage,
        )
        try:
            payload = attachment.read_payload()
        finally:
            attachment.close()
        write_property(storage, self._config.data_tag, payload)

        if self._config.log_sample_data:
            logger.debug("Wrote attachment #%d: %s", index, attachment.file_name)
        else:
            logger.debug("Wrote attachment #%d", index)
        return storage


def write_attachments(
    attachments: Attachments,
    container: StorageContainer,
    config: WriterConfig | None = None,
) -> int:
    """Convenience wrapper around :meth:`AttachmentSerializer.serialize`."""
    return AttachmentSerializer(config).serialize(attachments, container)
