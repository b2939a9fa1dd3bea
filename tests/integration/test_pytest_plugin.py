"""Integration tests for the glottis pytest plugin.

These tests verify that the assert_locales_in_sync fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require glottis to be installed (even in editable mode via
``pip install -e .``). The pytest11 entry point is only registered at install
time; running from a raw source checkout without installing will not discover
the fixture.
"""

from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from glottis import SyncConfig


def _write(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_fixture_passes_in_sync_files(assert_locales_in_sync: Any, tmp_path: Path) -> None:
    """Candidates holding every reference key pass, extra keys are tolerated."""
    en = _write(tmp_path / "en.json", {"home": {"title": "Home"}, "ok": "OK"})
    fr = _write(tmp_path / "fr.json", {"home": {"title": "Accueil"}, "ok": "OK", "x": "y"})
    assert_locales_in_sync(en, fr)


def test_fixture_fails_on_missing_keys(assert_locales_in_sync: Any, tmp_path: Path) -> None:
    en = _write(tmp_path / "en.json", {"home": {"title": "Home"}, "ok": "OK"})
    fr = _write(tmp_path / "fr.json", {"home": {}})
    with pytest.raises(AssertionError) as exc_info:
        assert_locales_in_sync(en, fr)

    message = str(exc_info.value)
    assert "out of sync" in message
    assert "(2 missing keys)" in message
    assert f"{fr}: missing home.title, ok" in message


def test_fixture_reports_skipped_files(assert_locales_in_sync: Any, tmp_path: Path) -> None:
    en = _write(tmp_path / "en.json", {"a": "1"})
    broken = tmp_path / "de.json"
    broken.write_text("{oops", encoding="utf-8")
    with pytest.raises(AssertionError, match=r"de\.json: skipped"):
        assert_locales_in_sync(en, broken)


def test_fixture_custom_config(assert_locales_in_sync: Any, tmp_path: Path) -> None:
    """Custom SyncConfig is forwarded to compare_files()."""
    en = _write(tmp_path / "en.json", {"a": {"b.c": "1"}})
    fr = _write(tmp_path / "fr.json", {"a": {"b.c": "un"}})
    assert_locales_in_sync(en, fr, config=SyncConfig(separator="/"))


def test_fixture_returns_callable(assert_locales_in_sync: Any) -> None:
    """The fixture returns a callable, not a direct assertion result."""
    assert callable(assert_locales_in_sync)


def test_plugin_discovery() -> None:
    """Verify assert_locales_in_sync appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_locales_in_sync" in result.stdout, (
        f"assert_locales_in_sync not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )
