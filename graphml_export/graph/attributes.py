"""Attribute declarations discovered while walking a graph."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator


class Scope(str, Enum):
    """Element kind an attribute declaration applies to."""

    NODE = "node"
    EDGE = "edge"


@dataclass(frozen=True)
class Attribute:
    """A ``(name, scope)`` pair declared by a ``<key>`` element."""

    name: str
    scope: Scope


@dataclass
class AttributeRegistry:
    """Deduplicating collection of attributes, kept in first-seen order.

    A plain ``dict`` with ``None`` values acts as the ordered set so that
    ``<key>`` declarations come out in a reproducible order.
    """

    _entries: Dict[Attribute, None] = field(default_factory=dict)

    def register(self, name: str, scope: Scope) -> bool:
        """Record ``(name, scope)``; return ``True`` if it was not seen before."""

        attribute = Attribute(name, scope)
        if attribute in self._entries:
            return False
        self._entries[attribute] = None
        return True

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._entries

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["Attribute", "AttributeRegistry", "Scope"]
