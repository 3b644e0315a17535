"""msgkit-core -- Shared primitives for the msgkit packages.

Re-exports all public types: errors and storage protocols.
"""

from msgkit_core.errors import BaseMsgError, CoreErrorCode, StorageException
from msgkit_core.protocols import StorageContainer

__all__ = [
    # Errors
    "CoreErrorCode",
    "BaseMsgError",
    "StorageException",
    # Protocols
    "StorageContainer",
]
