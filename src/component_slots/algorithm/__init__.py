"""algorithm subpackage — public API for slot classification.

Provides the slot schema model and the classifier.  Import from this module
(not from sub-modules directly) to stay on the stable public interface.

Example::

    from component_slots.algorithm import SlotClassifier

    classifier = SlotClassifier({"Title": Title, "Items": [Item]})
    result = classifier.classify(children)
"""

from __future__ import annotations

from component_slots.algorithm.classifier import SlotClassifier, classify
from component_slots.algorithm.schema import (
    Namespaced,
    Repeatable,
    Single,
    SlotKind,
    SlotSchema,
    parse_slot,
)

__all__ = [
    "Namespaced",
    "Repeatable",
    "Single",
    "SlotClassifier",
    "SlotKind",
    "SlotSchema",
    "classify",
    "parse_slot",
]
