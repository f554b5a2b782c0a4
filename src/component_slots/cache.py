"""ClassificationCache: LRU memo around a SlotClassifier.

A wrapped component is typically called again and again with the very same
children (same element objects, same order).  ``ClassificationCache`` keys
results on the frozen structure of the raw ``children`` value so those calls
skip the classification pass.  LRU eviction occurs silently when
``max_size`` is exceeded.

Every node in the key is compared by reference identity: elements hash that
way already and every other leaf (strings, numbers, arbitrary objects) is
wrapped in a ``_LeafRef``.  A hit therefore only happens when the very same
objects are passed again, so the parent never receives nodes from an earlier
call.  The key holds references to the objects it was built from, which keeps
their ids stable for the lifetime of the entry.

Example::

    from component_slots.algorithm import SlotClassifier
    from component_slots.cache import ClassificationCache

    cache = ClassificationCache(SlotClassifier({"Title": Title}), max_size=64)
    first = cache.get_or_classify(children)
    again = cache.get_or_classify(children)   # served from memory
    assert first is again
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

from component_slots.tree.nodes import Element

if TYPE_CHECKING:
    from component_slots.algorithm.classifier import SlotClassifier
    from component_slots.result import ClassificationResult

__all__ = ["ClassificationCache", "freeze_children"]

logger = logging.getLogger(__name__)


class _LeafRef:
    """Hashes and compares a non-element leaf by reference identity."""

    __slots__ = ("obj",)

    def __init__(self, obj: Any) -> None:
        self.obj = obj

    def __hash__(self) -> int:
        return id(self.obj)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _LeafRef) and other.obj is self.obj

    def __repr__(self) -> str:
        return f"_LeafRef({self.obj!r})"


def freeze_children(children: Any) -> Hashable | None:
    """Build a hashable cache key for a raw ``children`` value.

    Lists and tuples become tuples, elements stay as themselves (identity
    hash), and every other leaf is wrapped in a ``_LeafRef`` (identity hash),
    so equal-but-distinct objects never share a key.

    Returns:
        The key, or None when ``children`` itself is None.
    """
    if children is None:
        return None
    return _freeze(children)


def _freeze(node: Any) -> Hashable:
    if isinstance(node, Element):
        return node
    if isinstance(node, (list, tuple)):
        return tuple(_freeze(child) for child in node)
    return _LeafRef(node)


class ClassificationCache:
    """LRU-backed memo of ``SlotClassifier.classify`` results.

    Each instance maintains its own ``LRUCache`` — there is no class-level
    shared state, so two caches never interfere with each other.

    Args:
        classifier: The classifier whose results are memoized.
        max_size: Maximum number of results to hold (>= 1).  Defaults to 128.
    """

    def __init__(self, classifier: SlotClassifier, max_size: int = 128) -> None:
        self._classifier = classifier
        self._cache: LRUCache[Hashable, ClassificationResult] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Memo surface
    # ------------------------------------------------------------------

    def get_or_classify(self, children: Any) -> ClassificationResult:
        """Return the cached result for ``children``, classifying on a miss.

        ``None`` children are classified directly without touching the cache.
        """
        key = freeze_children(children)
        if key is None:
            return self._classifier.classify(children)

        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = self._classifier.classify(children)
        self._cache[key] = result
        logger.debug("Cached classification result (%d/%d)", self.curr_size, self.max_size)
        return result

    def clear(self) -> None:
        """Drop every cached result."""
        self._cache.clear()
