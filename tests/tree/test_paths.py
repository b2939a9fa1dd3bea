"""Tests for split_path, deep_set, fill_missing and unflatten.

Covers:
- deep_set builds intermediate objects and assigns the leaf
- deep_set never mutates its input and shares untouched branches
- Falsy leaves are neither treated as missing nor clobbered
- Non-mapping intermediates are replaced by objects
- Malformed paths raise InvalidPathError
- Reconstruction law: flatten(unflatten(F)) == F
- Non-interference law: deep_set leaves sibling paths unchanged
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from glottis.errors import InvalidPathError
from glottis.tree.flatten import flatten
from glottis.tree.paths import deep_set, fill_missing, split_path, unflatten

# ---------------------------------------------------------------------------
# split_path
# ---------------------------------------------------------------------------


class TestSplitPath:
    def test_single_segment(self) -> None:
        assert split_path("a") == ["a"]

    def test_multiple_segments(self) -> None:
        assert split_path("a.b.c") == ["a", "b", "c"]

    def test_custom_separator(self) -> None:
        assert split_path("a/b", separator="/") == ["a", "b"]

    @pytest.mark.parametrize("path", ["", ".a", "a.", "a..b", "."])
    def test_malformed_paths_rejected(self, path: str) -> None:
        with pytest.raises(InvalidPathError):
            split_path(path)

    def test_invalid_path_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            split_path("")


# ---------------------------------------------------------------------------
# deep_set
# ---------------------------------------------------------------------------


class TestDeepSet:
    def test_creates_nested_objects(self) -> None:
        assert deep_set({}, "x.y.z", "v") == {"x": {"y": {"z": "v"}}}

    def test_single_segment(self) -> None:
        assert deep_set({}, "a", 1) == {"a": 1}

    def test_descends_into_existing_object(self) -> None:
        result = deep_set({"a": {"b": "old"}}, "a.c", "new")
        assert result == {"a": {"b": "old", "c": "new"}}

    def test_overwrites_existing_leaf_at_terminal(self) -> None:
        assert deep_set({"a": {"b": "old"}}, "a.b", "new") == {"a": {"b": "new"}}

    def test_replaces_leaf_intermediate_with_object(self) -> None:
        assert deep_set({"a": "text"}, "a.b", "v") == {"a": {"b": "v"}}

    def test_replaces_array_intermediate_with_object(self) -> None:
        assert deep_set({"a": [1, 2]}, "a.b", "v") == {"a": {"b": "v"}}

    def test_new_keys_append_after_existing(self) -> None:
        result = deep_set({"a": "1", "b": "2"}, "c", "3")
        assert list(result) == ["a", "b", "c"]

    def test_existing_key_keeps_its_position(self) -> None:
        result = deep_set({"a": {"x": "1"}, "b": "2"}, "a.y", "3")
        assert list(result) == ["a", "b"]

    def test_malformed_path_raises(self) -> None:
        with pytest.raises(InvalidPathError):
            deep_set({}, "a..b", "v")

    def test_custom_separator(self) -> None:
        assert deep_set({}, "a/b.c", "v", separator="/") == {"a": {"b.c": "v"}}


class TestDeepSetDoesNotMutate:
    def test_input_unchanged(self) -> None:
        tree: dict[str, Any] = {"a": {"b": "x"}}
        snapshot = copy.deepcopy(tree)
        deep_set(tree, "a.c", "y")
        assert tree == snapshot

    def test_returns_new_root(self) -> None:
        tree: dict[str, Any] = {}
        assert deep_set(tree, "a", 1) is not tree

    def test_untouched_branches_are_shared(self) -> None:
        tree: dict[str, Any] = {"a": {"b": "x"}, "other": {"k": "v"}}
        result = deep_set(tree, "a.c", "y")
        assert result["other"] is tree["other"]
        assert result["a"] is not tree["a"]


class TestFalsyValues:
    @pytest.mark.parametrize("falsy", [0, "", False, None])
    def test_falsy_sibling_untouched(self, falsy: object) -> None:
        tree = {"section": {"flag": falsy}}
        result = deep_set(tree, "section.other", "v")
        assert result == {"section": {"flag": falsy, "other": "v"}}

    def test_false_leaf_sibling_at_root_untouched(self) -> None:
        result = deep_set({"enabled": False}, "label", "v")
        assert result == {"enabled": False, "label": "v"}

    def test_empty_object_intermediate_is_reused(self) -> None:
        # {} is falsy but is a mapping, so its existing contents must be kept
        tree: dict[str, Any] = {"a": {}, "b": "x"}
        result = deep_set(tree, "a.c", "v")
        assert result == {"a": {"c": "v"}, "b": "x"}
        assert tree == {"a": {}, "b": "x"}


# ---------------------------------------------------------------------------
# fill_missing
# ---------------------------------------------------------------------------


class TestFillMissing:
    def test_fills_every_key(self) -> None:
        result = fill_missing({"a": {}}, ["a.b", "c"], "MISSING_TRANSLATION")
        assert result == {"a": {"b": "MISSING_TRANSLATION"}, "c": "MISSING_TRANSLATION"}

    def test_no_keys_returns_equal_copy(self) -> None:
        tree = {"a": "x"}
        result = fill_missing(tree, [], "S")
        assert result == tree
        assert result is not tree

    def test_input_unchanged(self) -> None:
        tree: dict[str, Any] = {"a": {}}
        fill_missing(tree, ["a.b"], "S")
        assert tree == {"a": {}}


# ---------------------------------------------------------------------------
# Laws
# ---------------------------------------------------------------------------


FLAT_MAPS = [
    {},
    {"a": "1"},
    {"a.b": 1, "c": 2},
    {"a.b.c": "x", "a.b.d": "y", "a.e": None, "f": [1, 2], "g": False},
]


class TestReconstructionLaw:
    @pytest.mark.parametrize("flat", FLAT_MAPS)
    def test_flatten_of_unflatten_is_identity(self, flat: dict[str, Any]) -> None:
        assert flatten(unflatten(flat)) == flat

    def test_unflatten_preserves_key_order(self) -> None:
        flat = {"b.x": "1", "a": "2", "b.y": "3"}
        assert list(flatten(unflatten(flat))) == ["b.x", "b.y", "a"]


class TestNonInterferenceLaw:
    def test_new_path_visible_and_siblings_unchanged(self) -> None:
        tree = {"a": {"b": "1", "c": 0}, "d": False, "e": ["x"]}
        before = flatten(tree)
        after = flatten(deep_set(tree, "a.new", "v"))
        assert after["a.new"] == "v"
        for key, value in before.items():
            assert after[key] == value
