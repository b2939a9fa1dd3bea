"""Tests for the error hierarchy and format_error."""

from __future__ import annotations

from pathlib import Path

import pytest

from glottis.errors import (
    GlottisError,
    InvalidKeyError,
    InvalidPathError,
    LocaleIOError,
    ParseError,
    SnapshotError,
    format_error,
)


@pytest.mark.parametrize(
    "error",
    [
        ParseError("en.json", "bad"),
        LocaleIOError("en.json", "missing"),
        InvalidPathError("bad path"),
        InvalidKeyError("a.b", "", "."),
        SnapshotError("en.json", "disk full"),
    ],
)
def test_all_errors_derive_from_base(error: GlottisError) -> None:
    assert isinstance(error, GlottisError)


class TestParseError:
    def test_message_with_position(self) -> None:
        err = ParseError("fr.json", "Expecting value", line=3, column=7)
        assert str(err) == "fr.json:3:7: Expecting value"

    def test_message_without_position(self) -> None:
        assert str(ParseError("fr.json", "root must be a JSON object")) == (
            "fr.json: root must be a JSON object"
        )

    def test_attributes(self) -> None:
        err = ParseError("fr.json", "x", line=1, column=2)
        assert err.path == Path("fr.json")
        assert (err.line, err.column, err.detail) == (1, 2, "x")


class TestInvalidKeyError:
    def test_separator_message(self) -> None:
        err = InvalidKeyError("file.open", "menu", ".")
        assert "'file.open'" in str(err)
        assert "under menu" in str(err)

    def test_empty_key_at_root(self) -> None:
        assert str(InvalidKeyError("", "", ".")) == "empty key under <root>"

    def test_is_value_error(self) -> None:
        assert isinstance(InvalidKeyError("", "", "."), ValueError)


class TestFormatError:
    def test_name_and_message(self) -> None:
        assert format_error(SnapshotError("a.json", "denied")) == "SnapshotError: a.json: denied"

    def test_name_only_when_message_empty(self) -> None:
        assert format_error(GlottisError()) == "GlottisError"
