"""Slot schema model: tagged slot variants and the SlotSchema collection.

A schema maps slot names to one of three variants:

- ``Single(component)``:            at most one match, last match wins.
- ``Repeatable(component)``:        matches accumulate into a list.
- ``Namespaced(label, component)``: matches are consumed but never surfaced.

The shorthand forms accepted by ``SlotSchema.from_mapping`` are parsed into
these variants up front (bare component -> Single, ``[component]`` ->
Repeatable, ``{label: component}`` -> Namespaced), so malformed entries fail
with ``ConfigurationError`` before any child is classified.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, ClassVar

from component_slots.errors import ConfigurationError
from component_slots.tree.nodes import Fragment

__all__ = [
    "Namespaced",
    "Repeatable",
    "Single",
    "SlotKind",
    "SlotSchema",
    "SlotVariant",
    "parse_slot",
]

logger = logging.getLogger(__name__)


class SlotKind(StrEnum):
    """How matches for a slot are accumulated."""

    SINGLE = auto()
    REPEATABLE = auto()
    NAMESPACED = auto()


@dataclass(frozen=True, slots=True)
class Single:
    """Slot holding at most one element.  Duplicates overwrite."""

    component: Any
    kind: ClassVar[SlotKind] = SlotKind.SINGLE


@dataclass(frozen=True, slots=True)
class Repeatable:
    """Slot holding an ordered list of every matching element."""

    component: Any
    kind: ClassVar[SlotKind] = SlotKind.REPEATABLE


@dataclass(frozen=True, slots=True)
class Namespaced:
    """Slot whose matches are removed from the children and discarded.

    Attributes:
        label:     The single key of the ``{label: component}`` shorthand.
        component: The component identity matched against children.
    """

    label: str
    component: Any
    kind: ClassVar[SlotKind] = SlotKind.NAMESPACED


SlotVariant = Single | Repeatable | Namespaced


def _check_component(name: str, component: Any) -> Any:
    if component is None:
        raise ConfigurationError(f"slot {name!r}: component must not be None", slot=name)
    if component is Fragment:
        raise ConfigurationError(f"slot {name!r}: Fragment cannot be a slot component", slot=name)
    if isinstance(component, str):
        # Host tags are never classified, a string identity could never match.
        raise ConfigurationError(
            f"slot {name!r}: host tag {component!r} cannot be a slot component", slot=name
        )
    if isinstance(component, (list, tuple, Mapping, Single, Repeatable, Namespaced)):
        raise ConfigurationError(
            f"slot {name!r}: nested slot declarations are not supported", slot=name
        )
    return component


def parse_slot(name: str, value: Any) -> SlotVariant:
    """Parse one schema entry into its slot variant.

    Args:
        name:  Slot name (must be a string).
        value: A ``Single``/``Repeatable``/``Namespaced`` instance, a bare
               component, a one-element list/tuple, or a one-key mapping.

    Returns:
        The validated slot variant.

    Raises:
        ConfigurationError: If the name is not a string, a list/tuple does not
            hold exactly one component, a mapping does not hold exactly one
            key, or the component identity is unusable.
    """
    if not isinstance(name, str):
        raise ConfigurationError(f"slot names must be strings, got {name!r}", slot=name)

    if isinstance(value, (Single, Repeatable)):
        _check_component(name, value.component)
        return value

    if isinstance(value, Namespaced):
        _check_component(name, value.component)
        return value

    if isinstance(value, (list, tuple)):
        if len(value) != 1:
            raise ConfigurationError(
                f"slot {name!r}: repeatable form takes exactly one component, got {len(value)}",
                slot=name,
            )
        return Repeatable(_check_component(name, value[0]))

    if isinstance(value, Mapping):
        if len(value) != 1:
            raise ConfigurationError(
                f"slot {name!r}: namespaced form takes exactly one key, got {len(value)}",
                slot=name,
            )
        ((label, component),) = value.items()
        return Namespaced(label=label, component=_check_component(name, component))

    return Single(_check_component(name, value))


class SlotSchema(Mapping[str, SlotVariant]):
    """Immutable, validated slot schema.

    Behaves as a read-only mapping from slot name to slot variant.  Derived
    structures (the identity lookup and the seeded slots) are rebuilt on
    every call; nothing is cached between classifications.

    Example::

        schema = SlotSchema.from_mapping({"Title": Title, "Items": [Item]})
        schema["Items"].kind        # SlotKind.REPEATABLE
        schema.seed_slots()         # {"Items": []}
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        if entries is None:
            entries = {}
        if not isinstance(entries, Mapping):
            raise ConfigurationError(
                f"schema must be a mapping of slot names, got {type(entries).__name__}"
            )
        parsed: dict[str, SlotVariant] = {}
        for name, value in entries.items():
            parsed[name] = parse_slot(name, value)
        self._entries = parsed
        logger.debug("Parsed slot schema with %d entries: %s", len(parsed), list(parsed))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> SlotSchema:
        """Build a schema from a mapping of shorthand or explicit entries."""
        return cls(mapping)

    @classmethod
    def coerce(cls, schema: SlotSchema | Mapping[str, Any]) -> SlotSchema:
        """Return ``schema`` unchanged if already parsed, else parse it."""
        if isinstance(schema, SlotSchema):
            return schema
        return cls.from_mapping(schema)

    # ------------------------------------------------------------------
    # Mapping surface
    # ------------------------------------------------------------------

    def __getitem__(self, name: str) -> SlotVariant:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SlotSchema({self._entries!r})"

    # ------------------------------------------------------------------
    # Derived structures
    # ------------------------------------------------------------------

    def identity_lookup(self) -> dict[int, str]:
        """Map ``id(component)`` to slot name, built fresh on every call.

        Components are matched by reference identity, never by name or
        equality.  When two entries share a component the later one wins.
        """
        lookup: dict[int, str] = {}
        for name, slot in self._entries.items():
            lookup[id(slot.component)] = name
        return lookup

    def seed_slots(self) -> dict[str, Any]:
        """Fresh result slots: ``[]`` per repeatable slot, nothing else."""
        return {
            name: []
            for name, slot in self._entries.items()
            if slot.kind is SlotKind.REPEATABLE
        }

    def resolve_identities(self) -> dict[str, Any]:
        """Map every slot name to the component callers build children from.

        The same component for Single and Repeatable entries; the nested
        component for Namespaced entries.
        """
        return {name: slot.component for name, slot in self._entries.items()}
