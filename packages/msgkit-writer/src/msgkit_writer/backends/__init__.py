"""Concrete storage backends for msgkit-writer."""

from msgkit_writer.backends.memory import InMemoryStorage

__all__ = ["InMemoryStorage"]
