"""SyncConfig: immutable settings for a comparison run.

Holds the path separator, the sentinel written for missing keys, JSON
serialization options, rename-hint tuning, and the suffixes used for the
before/after snapshot artifacts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from glottis.tree.nodes import is_utf8_encodable

__all__ = ["DEFAULT_SENTINEL", "SyncConfig"]

DEFAULT_SENTINEL = "MISSING_TRANSLATION"


@dataclass(frozen=True, slots=True)
class SyncConfig:
    """Immutable configuration for flattening, diffing and patching.

    Attributes:
        separator: String joining nested keys into a flat path.  Keys that
            contain it are rejected by the flattener.
        sentinel: Leaf value inserted at every missing path when patching.
        indent: Indentation used when serializing patched trees.
        ensure_ascii: Escape non-ASCII characters on output.  Off by default
            so translated text stays readable in the diff.
        trailing_newline: Append ``"\\n"`` to serialized output.
        suggest_renames: Compute rename hints between missing and extra keys.
        rename_threshold: Minimum similarity in [0, 1] for a rename hint.
        rename_pair_limit: Largest number of (missing, extra) pairs scored for
            rename hints in one file.  Larger files skip hints entirely.
        before_suffix: Suffix of the snapshot holding the unmodified file.
        after_suffix: Suffix of the snapshot holding the patched file.
    """

    separator: str = "."
    sentinel: Any = DEFAULT_SENTINEL
    indent: int = 2
    ensure_ascii: bool = False
    trailing_newline: bool = False
    suggest_renames: bool = True
    rename_threshold: float = 0.75
    rename_pair_limit: int = 2_500
    before_suffix: str = ".temp"
    after_suffix: str = ".new.json"

    def __post_init__(self) -> None:
        if not self.separator:
            msg = "separator must be a non-empty string"
            raise ValueError(msg)
        if isinstance(self.sentinel, (dict, list)):
            msg = f"sentinel must be a JSON leaf value, got {type(self.sentinel).__name__}"
            raise ValueError(msg)
        if isinstance(self.sentinel, str) and not is_utf8_encodable(self.sentinel):
            msg = f"sentinel must be encodable as UTF-8, got {self.sentinel!r}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if not 0.0 <= self.rename_threshold <= 1.0:
            msg = f"rename_threshold must be in [0, 1], got {self.rename_threshold}"
            raise ValueError(msg)
        if self.rename_pair_limit < 0:
            msg = f"rename_pair_limit must be >= 0, got {self.rename_pair_limit}"
            raise ValueError(msg)
        if not self.before_suffix or not self.after_suffix:
            msg = "snapshot suffixes must be non-empty"
            raise ValueError(msg)
        if self.before_suffix == self.after_suffix:
            msg = f"before_suffix and after_suffix must differ, both are {self.before_suffix!r}"
            raise ValueError(msg)
