"""msgkit-writer -- Outlook .msg property and attachment writer.

Re-exports all public types: property types, tag registry, naming, value
encoding, attachments, serializer, message writer, config, and errors.
"""

from msgkit_writer.attachments import Attachment, Attachments
from msgkit_writer.backends.memory import InMemoryStorage
from msgkit_writer.config import WriterConfig
from msgkit_writer.encoding import encode_value
from msgkit_writer.errors import (
    DuplicateAttachmentException,
    ErrorCode,
    InvalidArgumentException,
    UnknownPropertyTagException,
    WriterError,
    WriterException,
)
from msgkit_writer.message import MessageWriter
from msgkit_writer.naming import (
    ATTACHMENT_STORAGE_PREFIX,
    PROPERTY_STREAM_PREFIX,
    attachment_container_name,
    derive_name,
    parse_name,
)
from msgkit_writer.property_types import PropertyType
from msgkit_writer.registry import REGISTRY, lookup, lookup_string
from msgkit_writer.serializer import AttachmentSerializer, write_attachments, write_property
from msgkit_writer.tags import PropertyTag

__all__ = [
    # Types and registry
    "PropertyType",
    "PropertyTag",
    "REGISTRY",
    "lookup",
    "lookup_string",
    # Naming
    "PROPERTY_STREAM_PREFIX",
    "ATTACHMENT_STORAGE_PREFIX",
    "derive_name",
    "parse_name",
    "attachment_container_name",
    # Encoding
    "encode_value",
    # Attachments
    "Attachment",
    "Attachments",
    # Writers
    "AttachmentSerializer",
    "MessageWriter",
    "write_attachments",
    "write_property",
    # Backends
    "InMemoryStorage",
    # Config
    "WriterConfig",
    # Errors
    "ErrorCode",
    "WriterError",
    "WriterException",
    "DuplicateAttachmentException",
    "InvalidArgumentException",
    "UnknownPropertyTagException",
]
