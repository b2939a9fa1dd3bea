"""Public convenience functions for glottis.

``compare_files`` creates a fresh ``LocaleComparator`` per call so that no
state leaks between calls.  ``patch_tree`` is the in-memory counterpart for
callers that already hold parsed documents.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from glottis.comparator import LocaleComparator
from glottis.config import SyncConfig
from glottis.diff import diff_keys
from glottis.result import ComparisonReport
from glottis.tree.flatten import flatten
from glottis.tree.nodes import Tree
from glottis.tree.paths import fill_missing

__all__ = ["compare_files", "missing_keys", "patch_tree"]


def compare_files(
    paths: Sequence[str | Path],
    config: SyncConfig | None = None,
) -> ComparisonReport:
    """Compare locale files on disk; the first path is the reference.

    Args:
        paths:  Reference path followed by one or more candidate paths.
        config: Run settings.  Defaults to ``SyncConfig()`` when None.

    Returns:
        A ``ComparisonReport``.  Candidates that fail to load are listed in
        ``report.skipped``; a failing reference raises.
    """
    return LocaleComparator(config=config).compare(paths)


def missing_keys(
    reference: Tree,
    candidate: Tree,
    config: SyncConfig | None = None,
) -> list[str]:
    """Return the paths of ``reference`` absent from ``candidate``, in reference order."""
    config = config if config is not None else SyncConfig()
    return diff_keys(
        flatten(reference, config.separator),
        flatten(candidate, config.separator),
    )


def patch_tree(
    reference: Tree,
    candidate: Tree,
    config: SyncConfig | None = None,
) -> Tree:
    """Return a copy of ``candidate`` with the sentinel at every missing path.

    Example::

        patch_tree({"a": {"b": "hi"}, "c": "x"}, {"a": {}})
        # {"a": {"b": "MISSING_TRANSLATION"}, "c": "MISSING_TRANSLATION"}
    """
    config = config if config is not None else SyncConfig()
    keys = missing_keys(reference, candidate, config)
    return fill_missing(candidate, keys, config.sentinel, config.separator)
