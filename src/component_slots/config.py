"""SlotsConfig: infrastructure settings for slotted components.

SlotsConfig is a frozen (immutable) dataclass.  It governs the composition
wrapper only; the classifier itself takes no configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SlotsConfig"]


@dataclass(frozen=True, slots=True)
class SlotsConfig:
    """Immutable configuration for ``with_slots`` wrappers.

    Attributes:
        cache_size: Maximum number of classification results memoized per
            wrapped component (>= 0).  ``0`` disables memoization.
        expose_attributes: When True, slot components are reachable as
            attributes of the wrapped component (``Wrapped.Title``) in
            addition to the ``slot_types`` mapping.
    """

    cache_size: int = 128
    expose_attributes: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.cache_size, bool) or not isinstance(self.cache_size, int):
            msg = f"cache_size must be an int, got {type(self.cache_size).__name__}"
            raise ValueError(msg)
        if self.cache_size < 0:
            msg = f"cache_size must be >= 0, got {self.cache_size}"
            raise ValueError(msg)
