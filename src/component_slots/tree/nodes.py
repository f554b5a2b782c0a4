"""Element dataclass and NodeKind StrEnum for the UI node model.

Elements are the opaque values a parent component receives as children.
Each one carries a ``type`` (the component, host tag, or ``Fragment`` that
produced it) and a ``props`` mapping.  The slot classifier only ever reads
these values and re-buckets references; it never copies or mutates them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType
from typing import Any

__all__ = ["Element", "Fragment", "NodeKind", "create_element"]


class NodeKind(StrEnum):
    """Enumeration of the three element kinds.

    StrEnum values are the lowercased member names:
    - COMPONENT -> "component" : type is a component object (function/class)
    - HOST      -> "host"      : type is a string tag such as "div"
    - FRAGMENT  -> "fragment"  : type is the ``Fragment`` grouping container
    """

    COMPONENT = auto()
    HOST = auto()
    FRAGMENT = auto()


class _FragmentType:
    """Marker type of grouping containers.  Only one instance exists."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "Fragment"


Fragment = _FragmentType()


@dataclass(frozen=True, slots=True, eq=False)
class Element:
    """An immutable UI element.

    Elements compare and hash by reference identity (``eq=False``): two
    elements built from the same component with the same props are still
    distinct nodes.  ``props`` is copied into a read-only mapping and a list
    of children is stored as a tuple, so an element never changes after
    construction.

    Attributes:
        type:  The component object, a host tag string, or ``Fragment``.
        props: Element properties.  Nested children live under ``"children"``.
        key:   Optional reconciliation key.  Carried, never interpreted.
    """

    type: Any
    props: Mapping[str, Any] = field(default_factory=dict)
    key: Any = None

    def __post_init__(self) -> None:
        props = dict(self.props)
        if isinstance(props.get("children"), list):
            props["children"] = tuple(props["children"])
        object.__setattr__(self, "props", MappingProxyType(props))

    @property
    def kind(self) -> NodeKind:
        """The ``NodeKind`` derived from ``type``."""
        if self.type is Fragment:
            return NodeKind.FRAGMENT
        if isinstance(self.type, str):
            return NodeKind.HOST
        return NodeKind.COMPONENT

    @property
    def children(self) -> Any:
        """The raw ``props["children"]`` value, or None when absent."""
        return self.props.get("children")

    def __repr__(self) -> str:
        name = getattr(self.type, "__name__", None) or repr(self.type)
        if self.key is None:
            return f"<{name}>"
        return f"<{name} key={self.key!r}>"


def create_element(
    type: Any,  # noqa: A002
    props: Mapping[str, Any] | None = None,
    *children: Any,
    key: Any = None,
) -> Element:
    """Build an ``Element``.

    Positional ``children`` are stored under ``props["children"]``: a single
    child is stored bare, several are stored as a tuple.  When no positional
    children are given, any ``children`` already in ``props`` is kept.

    Example::

        create_element(Fragment, None, create_element(Title), "text")
    """
    merged: dict[str, Any] = dict(props) if props else {}
    if len(children) == 1:
        merged["children"] = children[0]
    elif children:
        merged["children"] = children
    return Element(type=type, props=merged, key=key)
