"""Tests for the SlotsConfig frozen dataclass."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from component_slots.config import SlotsConfig


class TestSlotsConfigDefaults:
    """Default values."""

    def test_defaults(self) -> None:
        config = SlotsConfig()
        assert config.cache_size == 128
        assert config.expose_attributes is True

    def test_frozen(self) -> None:
        config = SlotsConfig()
        with pytest.raises(FrozenInstanceError):
            config.cache_size = 1  # type: ignore[misc]


class TestSlotsConfigValidation:
    """__post_init__ rejects invalid values with ValueError."""

    def test_zero_cache_size_allowed(self) -> None:
        assert SlotsConfig(cache_size=0).cache_size == 0

    def test_negative_cache_size(self) -> None:
        with pytest.raises(ValueError, match="cache_size must be >= 0"):
            SlotsConfig(cache_size=-1)

    def test_float_cache_size(self) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            SlotsConfig(cache_size=1.5)  # type: ignore[arg-type]

    def test_bool_cache_size(self) -> None:
        with pytest.raises(ValueError, match="must be an int"):
            SlotsConfig(cache_size=True)
