"""pytest plugin for glottis.

Auto-discovered by pytest via the pytest11 entry point declared in
pyproject.toml, so projects with glottis installed can guard their locale
files in their own test suite without touching conftest.py.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from glottis.api import compare_files
from glottis.config import SyncConfig


@pytest.fixture(scope="session")
def assert_locales_in_sync() -> Any:
    """Fixture returning a callable that asserts locale files share the reference keys.

    Usage in tests::

        def test_locales(assert_locales_in_sync):
            assert_locales_in_sync("locales/en.json", "locales/fr.json", "locales/de.json")

    Returns:
        A callable ``_assert(reference, *candidates, config=None) -> None``
        raising ``AssertionError`` when any candidate misses reference keys
        or cannot be loaded.
    """

    def _assert(
        reference: str | Path,
        *candidates: str | Path,
        config: SyncConfig | None = None,
    ) -> None:
        report = compare_files([reference, *candidates], config=config)
        problems = [
            f"  {path}: missing {', '.join(keys)}" for path, keys in report.missing.items()
        ]
        problems.extend(f"  {s.path}: skipped ({s.reason})" for s in report.skipped)
        if problems:
            raise AssertionError(
                f"Locale files out of sync with {report.reference} "
                f"({report.total_missing} missing keys):\n" + "\n".join(problems)
            )

    return _assert
