"""In-memory implementation of the StorageContainer protocol.

Keeps the container/leaf tree as plain Python objects so a message layout
can be built and inspected without a compound-file engine.  Suitable for
testing and for staging a layout before copying it into a real document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from msgkit_core.errors import CoreErrorCode, StorageException

logger = logging.getLogger("msgkit_writer")


class InMemoryStorage:
    """A container node; children are either containers or ``bytes`` leaves.

    Satisfies :class:`~msgkit_core.protocols.StorageContainer` via
    structural subtyping (no inheritance required).

    Parameters
    ----------
    name:
        Name of this node.  The root is conventionally ``"Root Entry"``.
    """

    def __init__(self, name: str = "Root Entry") -> None:
        self.name = name
        self._children: dict[str, InMemoryStorage | bytes] = {}

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def create_child_container(self, name: str) -> InMemoryStorage:
        """Create a named child container.

        Raises
        ------
        StorageException
            If *name* already exists under this node.
        """
        self._check_free(name)
        child = InMemoryStorage(name)
        self._children[name] = child
        logger.debug("Created container %s/%s", self.name, name)
        return child

    def create_leaf(self, name: str, data: bytes) -> None:
        """Create a named leaf holding a copy of *data*.

        Raises
        ------
        StorageException
            If *name* already exists under this node.
        """
        self._check_free(name)
        self._children[name] = bytes(data)
        logger.debug("Created leaf %s/%s (%d bytes)", self.name, name, len(data))

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def children(self) -> list[str]:
        """Child names in creation order."""
        return list(self._children)

    def leaf(self, name: str) -> bytes:
        node = self._children[name]
        if not isinstance(node, bytes):
            raise KeyError(f"'{name}' is a container, not a leaf")
        return node

    def container(self, name: str) -> InMemoryStorage:
        node = self._children[name]
        if not isinstance(node, InMemoryStorage):
            raise KeyError(f"'{name}' is a leaf, not a container")
        return node

    def leaves(self) -> dict[str, bytes]:
        return {k: v for k, v in self._children.items() if isinstance(v, bytes)}

    def containers(self) -> dict[str, InMemoryStorage]:
        return {k: v for k, v in self._children.items() if isinstance(v, InMemoryStorage)}

    def walk(self, prefix: str = "") -> Iterator[tuple[str, bytes | None]]:
        """Yield ``(path, data)`` for every node below this one, depth first.

        Containers are yielded with ``data=None`` before their children.
        """
        for name, node in self._children.items():
            path = f"{prefix}{name}"
            if isinstance(node, InMemoryStorage):
                yield path, None
                yield from node.walk(path + "/")
            else:
                yield path, node

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __len__(self) -> int:
        return len(self._children)

    def _check_free(self, name: str) -> None:
        if name in self._children:
            raise StorageException(
                node_name=name,
                code=CoreErrorCode.E_STORAGE_NAME_EXISTS,
                message=f"'{name}' already exists in '{self.name}'",
            )
