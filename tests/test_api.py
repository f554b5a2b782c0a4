"""Unit tests for the public API functions: get_slots, classify, resolve_slot_identities."""

from __future__ import annotations

import pytest

from component_slots import (
    ClassificationResult,
    ConfigurationError,
    Namespaced,
    Single,
    SlotSchema,
    classify,
    create_element,
    get_slots,
    resolve_slot_identities,
)


def Title(**props: object) -> None:
    return None


def Item(**props: object) -> None:
    return None


def Aside(**props: object) -> None:
    return None


class TestGetSlots:
    """Tests for the get_slots() function."""

    def test_returns_classification_result(self) -> None:
        result = get_slots(None, {"Title": Title})
        assert isinstance(result, ClassificationResult)

    def test_unpacks_into_slots_and_children(self) -> None:
        title = create_element(Title)
        slots, children = get_slots([title, "text"], {"Title": Title})
        assert slots == {"Title": title}
        assert children == ["text"]

    def test_classify_is_alias(self) -> None:
        assert classify is get_slots

    def test_no_global_state_between_calls(self) -> None:
        item = create_element(Item)
        r1 = get_slots(item, {"Items": [Item]})
        r2 = get_slots(None, {"Items": [Item]})
        assert r1.slots == {"Items": [item]}
        assert r2.slots == {"Items": []}

    def test_explicit_variants(self) -> None:
        title = create_element(Title)
        aside = create_element(Aside)
        result = get_slots(
            [title, aside], {"Title": Single(Title), "Side": Namespaced("Aside", Aside)}
        )
        assert result.slots == {"Title": title}
        assert result.children == []

    def test_malformed_schema_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            get_slots(None, {"Side": {"A": Aside, "B": Title}})


class TestResolveSlotIdentities:
    """Tests for resolve_slot_identities()."""

    def test_all_three_forms(self) -> None:
        identities = resolve_slot_identities(
            {"Title": Title, "Items": [Item], "Side": {"Aside": Aside}}
        )
        assert identities == {"Title": Title, "Items": Item, "Side": Aside}

    def test_accepts_parsed_schema(self) -> None:
        schema = SlotSchema.from_mapping({"Items": [Item]})
        assert resolve_slot_identities(schema) == {"Items": Item}

    def test_identity_round_trips_through_classification(self) -> None:
        identities = resolve_slot_identities({"Items": [Item]})
        el = create_element(identities["Items"])
        assert get_slots(el, {"Items": [Item]}).slots["Items"] == [el]

    def test_empty_schema(self) -> None:
        assert resolve_slot_identities({}) == {}
