"""Tree subpackage for the UI node model.

Re-exports the public API for the tree module:
- Element: immutable element compared by reference identity
- NodeKind: StrEnum of the three element kinds (COMPONENT, HOST, FRAGMENT)
- Fragment: sentinel type of grouping containers
- create_element: element factory storing positional children in props
- normalize_children / filter_renderable / flatten_once: pre-classification steps
"""

from component_slots.tree.nodes import Element, Fragment, NodeKind, create_element
from component_slots.tree.normalizer import (
    filter_renderable,
    flatten_once,
    is_renderable,
    normalize_children,
)

__all__ = [
    "Element",
    "Fragment",
    "NodeKind",
    "create_element",
    "filter_renderable",
    "flatten_once",
    "is_renderable",
    "normalize_children",
]
