"""Shared fixtures: writing small locale files into a temporary directory."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

WriteLocale = Callable[..., Path]


@pytest.fixture
def write_locale(tmp_path: Path) -> WriteLocale:
    """Return a helper writing ``data`` as ``<name>`` under ``tmp_path``.

    Pass a ``str`` to write raw text (for malformed JSON cases).
    """

    def _write(name: str, data: Any) -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
