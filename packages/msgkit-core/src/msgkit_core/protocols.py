"""Backend protocols for the msgkit packages.

Defines the structural-subtyping interface a compound-file storage engine
must satisfy to receive a message layout.  The protocol is
``@runtime_checkable`` so callers can optionally verify conformance with
``isinstance`` checks.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StorageContainer(Protocol):
    """A node of a structured-storage document that can hold children.

    Implementations treat names as opaque identifiers: they do not validate
    the property naming convention, they only refuse names that already
    exist under the same parent.
    """

    def create_child_container(self, name: str) -> StorageContainer:
        """Create a named child container and return a handle to it."""
        ...

    def create_leaf(self, name: str, data: bytes) -> None:
        """Create a named leaf node holding an exact copy of *data*."""
        ...
