"""Exception types raised by component-slots."""

from __future__ import annotations

__all__ = ["ConfigurationError"]


class ConfigurationError(ValueError):
    """A slot schema entry is malformed.

    Raised while the schema is parsed, before any child is partitioned.

    Attributes:
        slot: Name of the offending schema entry, or None when the schema
            itself (not one entry) is malformed.
    """

    def __init__(self, message: str, slot: object = None) -> None:
        super().__init__(message)
        self.slot = slot
