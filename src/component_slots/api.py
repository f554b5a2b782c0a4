"""Public API functions for component-slots.

This module provides the user-facing functions: get_slots (alias classify)
and resolve_slot_identities.  Each call builds a fresh SlotClassifier to
guarantee zero global state between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from component_slots.algorithm.classifier import SlotClassifier
from component_slots.algorithm.schema import SlotSchema
from component_slots.result import ClassificationResult

__all__ = ["classify", "get_slots", "resolve_slot_identities"]


def get_slots(
    children: Any,
    schema: SlotSchema | Mapping[str, Any],
) -> ClassificationResult:
    """Sort ``children`` into the named slots declared by ``schema``.

    Args:
        children: None, one node, or a list/tuple of nodes.  Empty markers
                  (None, booleans, "") are dropped and one level of
                  ``Fragment`` elements is unwrapped.
        schema:   Mapping from slot name to a component (single slot),
                  ``[component]`` (repeatable slot), ``{label: component}``
                  (namespaced slot), or an explicit slot variant.

    Returns:
        A ``ClassificationResult`` whose ``slots`` hold the matched elements
        and whose ``children`` hold everything else in input order.

    Raises:
        ConfigurationError: If a schema entry is malformed.  Raised before
            any child is partitioned.
    """
    return SlotClassifier(schema).classify(children)


classify = get_slots


def resolve_slot_identities(schema: SlotSchema | Mapping[str, Any]) -> dict[str, Any]:
    """Return the component each slot expects its children to be built from.

    Args:
        schema: Same forms as accepted by ``get_slots``.

    Returns:
        Mapping from slot name to component.  Repeatable and namespaced
        entries resolve to their inner component.
    """
    return SlotSchema.coerce(schema).resolve_identities()
