"""Tests for diff_keys and extra_keys."""

from __future__ import annotations

from typing import Any

import pytest

from glottis.diff import diff_keys, extra_keys
from glottis.tree.flatten import flatten

REFERENCES: list[dict[str, Any]] = [
    {},
    {"a": 1},
    {"a.b": "x", "a.c": "y", "d": None},
]


class TestDiffKeys:
    @pytest.mark.parametrize("ref", REFERENCES)
    def test_self_diff_is_empty(self, ref: dict[str, Any]) -> None:
        assert diff_keys(ref, ref) == []

    @pytest.mark.parametrize("ref", REFERENCES)
    def test_diff_against_empty_is_every_key_in_order(self, ref: dict[str, Any]) -> None:
        assert diff_keys(ref, {}) == list(ref)

    def test_extra_candidate_keys_not_reported(self) -> None:
        assert diff_keys({"a": 1}, {"a": 1, "b": 2}) == []

    def test_reference_order_kept(self) -> None:
        ref = {"z": 1, "m": 2, "a": 3}
        assert diff_keys(ref, {"m": 0}) == ["z", "a"]

    def test_values_are_ignored(self) -> None:
        assert diff_keys({"a": "hello"}, {"a": ""}) == []

    def test_null_value_counts_as_present(self) -> None:
        assert diff_keys({"a": "x"}, {"a": None}) == []

    def test_example_from_nested_trees(self) -> None:
        ref = flatten({"a": {"b": "hi"}, "c": "x"})
        cand = flatten({"a": {}})
        assert diff_keys(ref, cand) == ["a.b", "c"]

    def test_repeatable(self) -> None:
        ref = {"a": 1, "b": 2, "c": 3}
        cand = {"b": 2}
        assert diff_keys(ref, cand) == diff_keys(ref, cand)


class TestExtraKeys:
    def test_reports_candidate_only_keys_in_candidate_order(self) -> None:
        assert extra_keys({"a": 1}, {"y": 1, "a": 1, "x": 2}) == ["y", "x"]

    def test_empty_when_subset(self) -> None:
        assert extra_keys({"a": 1, "b": 2}, {"a": 1}) == []
