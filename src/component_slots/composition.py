"""Composition wrapper: injects classified slots into a parent component.

``with_slots(Parent, schema)`` returns a ``SlottedComponent``.  Calling it
with props classifies ``props["children"]`` against the schema, then calls
``Parent`` with the remaining props plus ``slots=`` and the leftover
``children=``.  The slot components are exposed through ``slot_types`` (and,
by default, as attributes) so callers can build children for each slot::

    def Card(*, title_text, slots, children):
        ...

    Card = with_slots(Card, {"Title": Title, "Actions": [Button]})

    Card(
        title_text="Hi",
        children=[create_element(Card.Title), create_element(Card.Actions)],
    )

The decorator form ``@slotted_component(schema)`` is equivalent.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from component_slots.algorithm.classifier import SlotClassifier
from component_slots.algorithm.schema import SlotSchema
from component_slots.cache import ClassificationCache
from component_slots.config import SlotsConfig
from component_slots.result import ClassificationResult

__all__ = ["SlottedComponent", "slotted_component", "with_slots"]

logger = logging.getLogger(__name__)


class SlottedComponent:
    """A parent component wrapped with a fixed slot schema.

    The schema is validated once, here, so a malformed schema fails when the
    component is defined rather than when it is first called.

    Slot attributes are a fallback: a slot named like a real member of the
    wrapper (``parent``, ``schema``, ``slot_types``, ``cache``,
    ``get_slots``, or an attribute copied from the parent such as
    ``__name__`` or ``__doc__``) resolves to that member, and its component
    is only reachable as ``slot_types[name]``.

    Args:
        parent: Callable accepting keyword props including ``slots`` and
            ``children``.
        schema: Slot schema (mapping or ``SlotSchema``).
        config: Wrapper settings.  Defaults to ``SlotsConfig()``.
    """

    def __init__(
        self,
        parent: Callable[..., Any],
        schema: SlotSchema | Mapping[str, Any],
        config: SlotsConfig | None = None,
    ) -> None:
        self._config: SlotsConfig = config if config is not None else SlotsConfig()
        self._parent = parent
        self._classifier = SlotClassifier(schema)
        self._cache: ClassificationCache | None = None
        if self._config.cache_size:
            self._cache = ClassificationCache(self._classifier, max_size=self._config.cache_size)
        self._slot_types: Mapping[str, Any] = MappingProxyType(
            self._classifier.schema.resolve_identities()
        )
        functools.update_wrapper(self, parent, updated=())
        logger.debug(
            "Wrapped %s with slots %s",
            getattr(parent, "__qualname__", parent),
            list(self._slot_types),
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def parent(self) -> Callable[..., Any]:
        """The wrapped parent component."""
        return self._parent

    @property
    def schema(self) -> SlotSchema:
        """The validated slot schema."""
        return self._classifier.schema

    @property
    def slot_types(self) -> Mapping[str, Any]:
        """Read-only mapping from slot name to the component to build it from."""
        return self._slot_types

    @property
    def cache(self) -> ClassificationCache | None:
        """The per-component result cache, or None when memoization is off."""
        return self._cache

    # ------------------------------------------------------------------
    # Component surface
    # ------------------------------------------------------------------

    def __call__(self, **props: Any) -> Any:
        # The wrapper owns the slots prop.
        props.pop("slots", None)
        result = self.get_slots(props.pop("children", None))
        slots = {k: list(v) if isinstance(v, list) else v for k, v in result.slots.items()}
        return self._parent(**props, slots=slots, children=list(result.children))

    def get_slots(self, children: Any) -> ClassificationResult:
        """Classify ``children`` against this component's schema."""
        if self._cache is None:
            return self._classifier.classify(children)
        return self._cache.get_or_classify(children)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        state = self.__dict__
        config = state.get("_config")
        slot_types = state.get("_slot_types")
        if config is not None and config.expose_attributes and slot_types and name in slot_types:
            return slot_types[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __repr__(self) -> str:
        name = getattr(self._parent, "__qualname__", repr(self._parent))
        return f"<SlottedComponent {name} slots={list(self._slot_types)}>"


def with_slots(
    parent: Callable[..., Any],
    schema: SlotSchema | Mapping[str, Any],
    config: SlotsConfig | None = None,
) -> SlottedComponent:
    """Wrap ``parent`` so it receives its children pre-sorted into slots."""
    return SlottedComponent(parent, schema, config=config)


def slotted_component(
    schema: SlotSchema | Mapping[str, Any],
    config: SlotsConfig | None = None,
) -> Callable[[Callable[..., Any]], SlottedComponent]:
    """Decorator form of ``with_slots``.

    Example::

        @slotted_component({"Title": Title, "Footer": Footer})
        def Article(*, author, slots, children):
            ...
    """
    parsed = SlotSchema.coerce(schema)

    def decorator(parent: Callable[..., Any]) -> SlottedComponent:
        return with_slots(parent, parsed, config=config)

    return decorator
