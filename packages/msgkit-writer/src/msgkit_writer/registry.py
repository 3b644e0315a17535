"""Read-only lookup over the property tag table in :mod:`msgkit_writer.tags`.

``REGISTRY`` is built once at import time and exposed as a
``MappingProxyType``; every lookup returns the same shared
:class:`~msgkit_writer.tags.PropertyTag` instance for a given name.
"""

from __future__ import annotations

from collections import defaultdict
from types import MappingProxyType

from msgkit_writer import tags
from msgkit_writer.errors import UnknownPropertyTagException
from msgkit_writer.tags import PropertyTag

UNICODE_SUFFIX = "_W"
ANSI_SUFFIX = "_A"


def _build_registry() -> dict[str, PropertyTag]:
    return {
        name: value
        for name, value in vars(tags).items()
        if name.startswith("PR_") and isinstance(value, PropertyTag)
    }


REGISTRY: MappingProxyType[str, PropertyTag] = MappingProxyType(_build_registry())


def _build_indexes() -> tuple[
    MappingProxyType[int, tuple[PropertyTag, ...]],
    MappingProxyType[PropertyTag, tuple[str, ...]],
]:
    by_id: dict[int, list[PropertyTag]] = defaultdict(list)
    names: dict[PropertyTag, list[str]] = defaultdict(list)
    for name, tag in REGISTRY.items():
        if tag not in by_id[tag.id]:
            by_id[tag.id].append(tag)
        names[tag].append(name)
    return (
        MappingProxyType({k: tuple(v) for k, v in by_id.items()}),
        MappingProxyType({k: tuple(sorted(v)) for k, v in names.items()}),
    )


_BY_ID, _NAMES = _build_indexes()


def lookup(name: str) -> PropertyTag:
    """Return the tag registered under the symbolic *name* (e.g. ``"PR_SUBJECT_W"``).

    Raises
    ------
    UnknownPropertyTagException
        If *name* is not in the table.
    """
    try:
        return REGISTRY[name]
    except KeyError:
        raise UnknownPropertyTagException(name) from None


def lookup_string(base_name: str, unicode: bool = True) -> PropertyTag:
    """Pick the UTF-16 or 8-bit variant of a string field.

    ``lookup_string("PR_SUBJECT")`` returns ``PR_SUBJECT_W``;
    ``lookup_string("PR_SUBJECT", unicode=False)`` returns ``PR_SUBJECT_A``.
    """
    return lookup(base_name + (UNICODE_SUFFIX if unicode else ANSI_SUFFIX))


def names_for(tag: PropertyTag) -> tuple[str, ...]:
    """All symbolic names bound to a tag equal to *tag* (empty if unregistered)."""
    return _NAMES.get(tag, ())


def variants(property_id: int) -> tuple[PropertyTag, ...]:
    """All registered tags that share *property_id*, in table order."""
    return _BY_ID.get(property_id, ())


def is_registered(tag: PropertyTag) -> bool:
    return tag in _NAMES
