"""SlotClassifier: partitions children into named slots and leftovers.

Pipeline for one ``classify()`` call:

1. normalize the raw children (absent / single node / sequence -> list);
2. drop non-renderable values (None, booleans, empty strings);
3. inline exactly one level of grouping containers;
4. walk the flat sequence once, in order, dispatching each element on the
   reference identity of its component:

   - not a component element, or identity unknown -> leftover ``children``;
   - single slot     -> overwrite (last match wins, earlier ones vanish);
   - repeatable slot -> append to the pre-seeded list;
   - namespaced slot -> consumed, written nowhere.

The identity lookup and the seeded result are built fresh per call, so a
classifier has no mutable state and can be shared freely.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from component_slots.algorithm.schema import SlotKind, SlotSchema
from component_slots.result import ClassificationResult
from component_slots.tree.nodes import Element, NodeKind
from component_slots.tree.normalizer import (
    filter_renderable,
    flatten_once,
    normalize_children,
)

__all__ = ["SlotClassifier", "classify"]

logger = logging.getLogger(__name__)


class SlotClassifier:
    """Classifies children against one validated ``SlotSchema``.

    The schema is parsed at construction, so a malformed entry raises
    ``ConfigurationError`` before any child is looked at.

    Example::

        classifier = SlotClassifier({"Title": Title, "Items": [Item]})
        result = classifier.classify([create_element(Item), "text"])
        result.slots      # {"Items": [<Item>]}
        result.children   # ["text"]
    """

    def __init__(self, schema: SlotSchema | Mapping[str, Any]) -> None:
        self._schema = SlotSchema.coerce(schema)

    @property
    def schema(self) -> SlotSchema:
        """The parsed schema."""
        return self._schema

    def classify(self, children: Any) -> ClassificationResult:
        """Partition ``children`` into slots and leftover children.

        Args:
            children: None, one node, or a list/tuple of nodes possibly
                containing empty markers and grouping containers.

        Returns:
            A ``ClassificationResult``.
        """
        nodes = flatten_once(filter_renderable(normalize_children(children)))

        lookup = self._schema.identity_lookup()
        slots = self._schema.seed_slots()
        leftovers: list[Any] = []
        namespaced = 0

        for node in nodes:
            name = self._match(node, lookup)
            if name is None:
                leftovers.append(node)
                continue

            kind = self._schema[name].kind
            if kind is SlotKind.REPEATABLE:
                slots[name].append(node)
            elif kind is SlotKind.SINGLE:
                slots[name] = node
            else:
                namespaced += 1

        logger.debug(
            "Classified %d nodes: %d slotted, %d namespaced, %d leftover",
            len(nodes),
            len(nodes) - len(leftovers) - namespaced,
            namespaced,
            len(leftovers),
        )
        return ClassificationResult(
            slots=slots, children=leftovers, namespaced_count=namespaced
        )

    @staticmethod
    def _match(node: Any, lookup: dict[int, str]) -> str | None:
        if not isinstance(node, Element) or node.kind is not NodeKind.COMPONENT:
            return None
        return lookup.get(id(node.type))


def classify(
    children: Any, schema: SlotSchema | Mapping[str, Any]
) -> ClassificationResult:
    """Partition ``children`` against ``schema`` with a fresh classifier."""
    return SlotClassifier(schema).classify(children)
