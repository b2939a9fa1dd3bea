"""Result types produced by a comparison run.

``ComparisonReport`` is what the reporter consumes; ``PatchPreview`` is what
a diff viewer consumes.  All types are frozen dataclasses.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from enum import StrEnum, auto
from pathlib import Path

from glottis.hints import RenameHint

__all__ = [
    "ComparisonReport",
    "FileReport",
    "PatchPreview",
    "SkippedFile",
    "SnapshotPair",
    "SyncOutcome",
    "SyncState",
    "format_report",
]


class SyncState(StrEnum):
    """States of a comparison run, in the order they are entered.

    NO_MISSING_KEYS is terminal.  MISSING_KEYS_FOUND moves to PATCHING only
    after confirmation, otherwise straight to DONE.
    """

    SELECTING_FILES = auto()
    FLATTENING = auto()
    DIFFING = auto()
    NO_MISSING_KEYS = auto()
    MISSING_KEYS_FOUND = auto()
    PATCHING = auto()
    PREVIEWING = auto()
    DONE = auto()


@dataclass(frozen=True, slots=True)
class FileReport:
    """Key comparison of one candidate against the reference.

    Attributes:
        path:         Candidate file.
        missing_keys: Reference paths absent here, in reference order.
        extra_keys:   Paths present here but not in the reference.
        rename_hints: Likely renames pairing missing with extra keys.
    """

    path: Path
    missing_keys: list[str]
    extra_keys: list[str] = field(default_factory=list)
    rename_hints: list[RenameHint] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing_keys


@dataclass(frozen=True, slots=True)
class SkippedFile:
    """A candidate that could not be compared, and why."""

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class ComparisonReport:
    """Outcome of comparing every candidate against the reference.

    Attributes:
        reference:           Reference file path.
        reference_key_count: Number of leaf paths in the reference.
        files:               One report per compared candidate, input order.
        skipped:             Candidates that failed to load or flatten.
        state:               ``NO_MISSING_KEYS`` or ``MISSING_KEYS_FOUND``.
    """

    reference: Path
    reference_key_count: int
    files: list[FileReport]
    skipped: list[SkippedFile] = field(default_factory=list)
    state: SyncState = SyncState.NO_MISSING_KEYS

    @property
    def missing(self) -> dict[Path, list[str]]:
        """Map of candidate path to missing keys, only for incomplete files."""
        return {f.path: f.missing_keys for f in self.files if f.missing_keys}

    @property
    def has_missing_keys(self) -> bool:
        return any(f.missing_keys for f in self.files)

    @property
    def total_missing(self) -> int:
        return sum(len(f.missing_keys) for f in self.files)


@dataclass(frozen=True, slots=True)
class PatchPreview:
    """Before/after serializations of one candidate, ready for a diff viewer.

    Attributes:
        path:          Candidate file the preview belongs to.
        title:         Display title, e.g. ``"Preview: fr.json"``.
        before:        The file's original text, byte-for-byte.
        after:         The patched tree serialized with ``SyncConfig``.
        inserted_keys: Paths that received the sentinel.
    """

    path: Path
    title: str
    before: str
    after: str
    inserted_keys: list[str]

    def unified_diff(self, context: int = 3) -> str:
        """Render ``before`` -> ``after`` as a unified diff."""
        name = self.path.name
        lines = difflib.unified_diff(
            self.before.splitlines(keepends=True),
            self.after.splitlines(keepends=True),
            fromfile=f"a/{name}",
            tofile=f"b/{name}",
            n=context,
        )
        return "".join(line if line.endswith("\n") else line + "\n" for line in lines)


@dataclass(frozen=True, slots=True)
class SnapshotPair:
    """Locations of a fully written before/after snapshot pair."""

    before_path: Path
    after_path: Path


@dataclass(frozen=True, slots=True)
class SyncOutcome:
    """Everything a full ``LocaleComparator.run`` produced.

    Attributes:
        report:    The comparison report.
        previews:  Patch previews; empty when nothing was missing or the
                   user declined.
        snapshots: Snapshot pairs written for previews, keyed by file.
        failed:    Files whose snapshot step failed, with the reason.
        state:     Final state, always ``DONE`` or ``NO_MISSING_KEYS``.
        confirmed: Whether patching was approved.
    """

    report: ComparisonReport
    previews: list[PatchPreview] = field(default_factory=list)
    snapshots: dict[Path, SnapshotPair] = field(default_factory=dict)
    failed: list[SkippedFile] = field(default_factory=list)
    state: SyncState = SyncState.DONE
    confirmed: bool = False


def format_report(report: ComparisonReport, show_keys: bool = True) -> str:
    """Render a human-readable summary of a comparison report."""
    lines = [f"Reference: {report.reference} ({report.reference_key_count} keys)"]
    for file_report in report.files:
        name = file_report.path.name
        if file_report.is_complete:
            lines.append(f"  {name}: in sync")
            continue
        count = len(file_report.missing_keys)
        lines.append(f"  {name}: missing {count} key{'s' if count != 1 else ''}")
        if show_keys:
            lines.extend(f"    - {key}" for key in file_report.missing_keys)
        for hint in file_report.rename_hints:
            lines.append(
                f"    ? {hint.missing_key} may be renamed to {hint.candidate_key}"
                f" (similarity {hint.similarity:.2f})"
            )
        if file_report.extra_keys:
            lines.append(f"    ({len(file_report.extra_keys)} extra keys not in reference)")
    for skipped in report.skipped:
        lines.append(f"  {skipped.path.name}: skipped ({skipped.reason})")
    if report.has_missing_keys:
        lines.append(f"Total missing: {report.total_missing}")
    else:
        lines.append("All files are in sync.")
    return "\n".join(lines)
