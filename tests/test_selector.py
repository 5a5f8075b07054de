"""Tests for class selector namespacing."""

import pytest

from jss.css.selector import class_namespaced, selector_namespaced


class TestSelectorNamespaced:
    def test_root(self):
        assert selector_namespaced("frame", ".") == ".frame"

    def test_root_is_trimmed(self):
        assert selector_namespaced("frame", "  .  ") == ".frame"

    def test_single_class(self):
        assert selector_namespaced("frame", ".text-anim") == ".frame__text-anim"

    def test_descendant_classes(self):
        assert selector_namespaced("frame", ".hide .corner") == ".frame__hide .frame__corner"

    def test_element_after_class(self):
        assert selector_namespaced("frame", ".hide button") == ".frame__hide button"

    def test_selector_list(self):
        assert (
            selector_namespaced("frame", ".expand_corners,.hovered")
            == ".frame__expand_corners,.frame__hovered"
        )

    def test_selector_list_and_descendant(self):
        assert (
            selector_namespaced("frame", ".expand_corners,.hovered button .highlight")
            == ".frame__expand_corners,.frame__hovered button .frame__highlight"
        )

    def test_compound_classes_stay_adjacent(self):
        assert (
            selector_namespaced("frame", ".expand_corners.hovered button .highlight")
            == ".frame__expand_corners.frame__hovered button .frame__highlight"
        )

    @pytest.mark.parametrize(
        "selector",
        ["button", "#content", "rect", "a:hover", "[data-open]", "div > p", "@media screen and (max-width: 800px)"],
    )
    def test_non_class_selectors_untouched(self, selector):
        assert selector_namespaced("frame", selector) == selector

    def test_pseudo_class_kept_on_class(self):
        assert selector_namespaced("ns", ".item:hover") == ".ns__item:hover"


class TestClassNamespaced:
    def test_single(self):
        assert class_namespaced("frame", "text-anim") == "frame__text-anim"

    def test_many(self):
        assert class_namespaced("frame", "layer hide") == "frame__layer frame__hide"

    def test_blank_is_namespace(self):
        assert class_namespaced("frame", "   ") == "frame"
