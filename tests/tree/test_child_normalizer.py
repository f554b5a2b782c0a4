"""Tests for child normalization, falsy filtering and one-level flattening."""

import pytest

from component_slots.tree.nodes import Fragment, create_element
from component_slots.tree.normalizer import (
    filter_renderable,
    flatten_once,
    is_renderable,
    normalize_children,
)


def Item(**props: object) -> None:
    return None


class TestNormalizeChildren:
    """absent -> [], single -> [single], sequence -> list as-is."""

    def test_none(self) -> None:
        assert normalize_children(None) == []

    def test_single_element(self) -> None:
        el = create_element(Item)
        assert normalize_children(el) == [el]

    def test_single_string(self) -> None:
        assert normalize_children("text") == ["text"]

    def test_list_is_copied(self) -> None:
        seq = [create_element(Item), None]
        out = normalize_children(seq)
        assert out == seq
        assert out is not seq

    def test_tuple(self) -> None:
        el = create_element(Item)
        assert normalize_children((el, "x")) == [el, "x"]

    def test_no_deep_flattening(self) -> None:
        inner = ["a", "b"]
        assert normalize_children(["x", inner]) == ["x", inner]


class TestIsRenderable:
    """Empty markers are dropped; real nodes are kept."""

    @pytest.mark.parametrize("value", [None, False, True, ""])
    def test_empty_markers(self, value: object) -> None:
        assert is_renderable(value) is False

    @pytest.mark.parametrize("value", [0, 1, "text", 0.0])
    def test_primitives_render(self, value: object) -> None:
        assert is_renderable(value) is True

    def test_element_renders(self) -> None:
        assert is_renderable(create_element(Item)) is True

    def test_filter_preserves_order(self) -> None:
        a, b = create_element(Item), create_element("div")
        assert filter_renderable([None, a, False, "", b, True]) == [a, b]


class TestFlattenOnce:
    """Exactly one level of grouping containers is unwrapped."""

    def test_plain_nodes_unchanged(self) -> None:
        a, b = create_element(Item), create_element("div")
        assert flatten_once([a, b]) == [a, b]

    def test_fragment_children_inlined_in_place(self) -> None:
        a, b, c, d = (create_element(Item, key=i) for i in range(4))
        frag = create_element(Fragment, None, b, c)
        assert flatten_once([a, frag, d]) == [a, b, c, d]

    def test_fragment_with_single_child(self) -> None:
        a = create_element(Item)
        assert flatten_once([create_element(Fragment, None, a)]) == [a]

    def test_empty_fragment_vanishes(self) -> None:
        assert flatten_once([create_element(Fragment)]) == []

    def test_falsy_inside_fragment_dropped(self) -> None:
        a = create_element(Item)
        frag = create_element(Fragment, None, None, a, False)
        assert flatten_once([frag]) == [a]

    def test_nested_list_inlined(self) -> None:
        a, b = create_element(Item), create_element(Item)
        assert flatten_once(["x", [a, b]]) == ["x", a, b]

    def test_second_level_fragment_is_kept_as_leaf(self) -> None:
        a = create_element(Item)
        inner = create_element(Fragment, None, a)
        outer = create_element(Fragment, None, inner)
        assert flatten_once([outer]) == [inner]

    def test_second_level_list_is_kept_as_leaf(self) -> None:
        a = create_element(Item)
        frag = create_element(Fragment, None, [a])
        # A list child of a fragment is the fragment's child sequence itself.
        assert flatten_once([frag]) == [a]

    def test_list_inside_list_is_kept(self) -> None:
        a = create_element(Item)
        inner = [a]
        assert flatten_once([[inner]]) == [inner]
