"""glottis - find and fill missing keys across localization JSON files."""

from __future__ import annotations

from glottis.api import compare_files, missing_keys, patch_tree
from glottis.comparator import LocaleComparator
from glottis.config import SyncConfig
from glottis.diff import diff_keys, extra_keys
from glottis.errors import (
    GlottisError,
    InvalidKeyError,
    InvalidPathError,
    LocaleIOError,
    ParseError,
    SnapshotError,
)
from glottis.result import ComparisonReport, FileReport, PatchPreview, SyncState
from glottis.tree import deep_set, fill_missing, flatten, unflatten

__version__: str = "0.1.0"
__all__: list[str] = [
    "ComparisonReport",
    "FileReport",
    "GlottisError",
    "InvalidKeyError",
    "InvalidPathError",
    "LocaleComparator",
    "LocaleIOError",
    "ParseError",
    "PatchPreview",
    "SnapshotError",
    "SyncConfig",
    "SyncState",
    "compare_files",
    "deep_set",
    "diff_keys",
    "extra_keys",
    "fill_missing",
    "flatten",
    "missing_keys",
    "patch_tree",
    "unflatten",
]
