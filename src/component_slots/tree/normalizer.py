"""Child-sequence normalization ahead of slot classification.

Three steps, applied in order by the classifier:

1. ``normalize_children``: absent -> ``[]``, a single node -> ``[node]``,
   a list/tuple -> a list of the same items (no deep flattening).
2. ``filter_renderable``: drop the host framework's "empty" markers
   (``None``, booleans, the empty string).
3. ``flatten_once``: inline the immediate children of every top-level
   grouping container (``Fragment`` elements and nested lists/tuples).

Flattening is exactly one level deep.  A container found inside an
already-unwrapped container stays in the sequence as an ordinary leaf, so a
slotted child wrapped two fragments deep is treated as a generic child.
"""

from __future__ import annotations

from typing import Any

from component_slots.tree.nodes import Element, NodeKind

__all__ = ["filter_renderable", "flatten_once", "is_renderable", "normalize_children"]


def normalize_children(children: Any) -> list[Any]:
    """Coerce a raw ``children`` value into a list.

    Args:
        children: None, a single node, or a list/tuple of nodes.

    Returns:
        A new list.  Nested lists/tuples are left untouched.
    """
    if children is None:
        return []
    if isinstance(children, (list, tuple)):
        return list(children)
    return [children]


def is_renderable(value: Any) -> bool:
    """Return False for values the host framework renders as nothing.

    ``None``, ``True``/``False`` and ``""`` are empty markers; every other
    value (elements, non-empty strings, numbers including ``0``) is a node.
    """
    if value is None or isinstance(value, bool):
        return False
    return not (isinstance(value, str) and value == "")


def filter_renderable(nodes: list[Any]) -> list[Any]:
    """Drop every non-renderable value, preserving order."""
    return [n for n in nodes if is_renderable(n)]


def _is_group(node: Any) -> bool:
    if isinstance(node, (list, tuple)):
        return True
    return isinstance(node, Element) and node.kind is NodeKind.FRAGMENT


def flatten_once(nodes: list[Any]) -> list[Any]:
    """Inline one level of grouping containers.

    Each top-level ``Fragment`` element is replaced by its own children, and
    each top-level list/tuple by its items, normalized and filtered the same
    way as the outer sequence.  Groups inside those children are NOT
    unwrapped.

    Args:
        nodes: An already normalized and filtered sequence.

    Returns:
        A new flat list in input order.
    """
    flat: list[Any] = []
    for node in nodes:
        if not _is_group(node):
            flat.append(node)
            continue
        inner = node.children if isinstance(node, Element) else node
        flat.extend(filter_renderable(normalize_children(inner)))
    return flat
