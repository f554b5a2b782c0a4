"""ClassificationResult dataclass for slot classification output.

This module provides the result type returned by classify()/get_slots() calls.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["ClassificationResult"]


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Result of partitioning children against a slot schema.

    Attributes:
        slots: Mapping from slot name to one element (single slots) or a list
            of elements (repeatable slots).  Unmatched single slots and all
            namespaced slots are absent.  Repeatable slots are always present.
        children: Elements that matched no schema entry, in input order.
        namespaced_count: Number of elements consumed by namespaced slots.
            These appear in neither ``slots`` nor ``children``.
    """

    slots: dict[str, Any]
    children: list[Any]
    namespaced_count: int = 0

    def partition_size(self) -> int:
        """Count every node the classification placed somewhere.

        Single slots count as one, repeatable slots by length, namespaced
        matches by ``namespaced_count``.  Overwritten duplicates of a single
        slot are not counted.
        """
        slotted = sum(len(v) if isinstance(v, list) else 1 for v in self.slots.values())
        return len(self.children) + slotted + self.namespaced_count

    def __iter__(self) -> Iterator[Any]:
        """Allow ``slots, children = result`` unpacking."""
        yield self.slots
        yield self.children
