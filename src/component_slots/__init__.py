"""component-slots - sort a component's children into named slots by identity."""

from __future__ import annotations

from component_slots.algorithm.classifier import SlotClassifier
from component_slots.algorithm.schema import (
    Namespaced,
    Repeatable,
    Single,
    SlotKind,
    SlotSchema,
)
from component_slots.api import classify, get_slots, resolve_slot_identities
from component_slots.composition import SlottedComponent, slotted_component, with_slots
from component_slots.config import SlotsConfig
from component_slots.errors import ConfigurationError
from component_slots.result import ClassificationResult
from component_slots.tree.nodes import Element, Fragment, NodeKind, create_element

__version__: str = "0.1.0"
__all__: list[str] = [
    "ClassificationResult",
    "ConfigurationError",
    "Element",
    "Fragment",
    "Namespaced",
    "NodeKind",
    "Repeatable",
    "Single",
    "SlotClassifier",
    "SlotKind",
    "SlotSchema",
    "SlotsConfig",
    "SlottedComponent",
    "classify",
    "create_element",
    "get_slots",
    "resolve_slot_identities",
    "slotted_component",
    "with_slots",
]
