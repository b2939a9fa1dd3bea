"""LocaleComparator: orchestrates loading, flattening, diffing and patching.

Architecture:
- compare() loads every file once, flattens it, diffs each candidate against
  the reference and returns a ComparisonReport.  A reference that fails to
  load is fatal; a candidate that fails is recorded as skipped.
- build_previews() patches a copy of each incomplete candidate with the
  sentinel and pairs it with the untouched original text.
- run() drives the whole state machine and asks ``confirm`` before patching.

Parsed trees are cached per comparator between compare() and
build_previews(); deep_set copies, so the cached trees are never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from glottis.backends import LevenshteinBackend
from glottis.cache import SimilarityCache
from glottis.config import SyncConfig
from glottis.diff import diff_keys, extra_keys
from glottis.errors import GlottisError, SnapshotError
from glottis.hints import RenameHint, suggest_renames
from glottis.loader import dump_tree, read_locale
from glottis.result import (
    ComparisonReport,
    FileReport,
    PatchPreview,
    SkippedFile,
    SnapshotPair,
    SyncOutcome,
    SyncState,
)
from glottis.snapshots import write_snapshots
from glottis.tree.flatten import flatten
from glottis.tree.nodes import Tree
from glottis.tree.paths import fill_missing

if TYPE_CHECKING:
    from glottis.protocols import SimilarityBackend

__all__ = ["LocaleComparator"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _LoadedFile:
    path: Path
    text: str
    tree: Tree
    flat: dict[str, Any]


class LocaleComparator:
    """Orchestrator for comparing locale files against a reference.

    Example::

        from glottis.comparator import LocaleComparator

        cmp = LocaleComparator()
        report = cmp.compare(["en.json", "fr.json", "de.json"])
        for path, keys in report.missing.items():
            print(path, keys)
        previews = cmp.build_previews(report)
    """

    def __init__(
        self,
        config: SyncConfig | None = None,
        backend: SimilarityBackend | None = None,
    ) -> None:
        """Initialise the comparator.

        Args:
            config:  Run settings.  Defaults to ``SyncConfig()``.
            backend: Similarity scorer for rename hints.  Defaults to
                ``LevenshteinBackend()``; always wrapped in a per-instance
                ``SimilarityCache``.
        """
        self._config: SyncConfig = config if config is not None else SyncConfig()
        raw_backend: Any = backend if backend is not None else LevenshteinBackend()
        self._backend = SimilarityCache(raw_backend)
        self._loaded: dict[Path, _LoadedFile] = {}
        self._state = SyncState.SELECTING_FILES

    @property
    def config(self) -> SyncConfig:
        return self._config

    @property
    def state(self) -> SyncState:
        return self._state

    def _enter(self, state: SyncState) -> None:
        logger.debug("state %s -> %s", self._state, state)
        self._state = state

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, paths: Sequence[str | Path]) -> ComparisonReport:
        """Compare every candidate against the first path.

        Args:
            paths: Reference path followed by one or more candidate paths.

        Returns:
            A ``ComparisonReport``; its ``state`` is ``NO_MISSING_KEYS`` or
            ``MISSING_KEYS_FOUND``.

        Raises:
            ValueError: Fewer than two paths were given.
            ParseError, LocaleIOError, InvalidKeyError: The reference could
                not be loaded or flattened.
        """
        self._enter(SyncState.SELECTING_FILES)
        if len(paths) < 2:
            msg = f"need a reference and at least one candidate, got {len(paths)} file(s)"
            raise ValueError(msg)
        self._loaded = {}
        reference_path, *candidate_paths = (Path(p) for p in paths)

        self._enter(SyncState.FLATTENING)
        reference = self._load(reference_path)
        candidates: list[_LoadedFile] = []
        skipped: list[SkippedFile] = []
        for path in candidate_paths:
            if path.resolve() == reference_path.resolve():
                skipped.append(SkippedFile(path, "same file as reference"))
                logger.warning("skipping %s: same file as reference", path)
                continue
            try:
                candidates.append(self._load(path))
            except GlottisError as exc:
                skipped.append(SkippedFile(path, str(exc)))
                logger.warning("skipping %s: %s", path, exc)

        self._enter(SyncState.DIFFING)
        files = [self._diff(reference, candidate) for candidate in candidates]
        has_missing = any(f.missing_keys for f in files)
        state = SyncState.MISSING_KEYS_FOUND if has_missing else SyncState.NO_MISSING_KEYS
        self._enter(state)
        return ComparisonReport(
            reference=reference.path,
            reference_key_count=len(reference.flat),
            files=files,
            skipped=skipped,
            state=state,
        )

    def build_previews(self, report: ComparisonReport) -> list[PatchPreview]:
        """Patch a copy of every incomplete candidate and pair it with its original."""
        self._enter(SyncState.PATCHING)
        previews: list[PatchPreview] = []
        for file_report in report.files:
            if file_report.is_complete:
                continue
            loaded = self._loaded.get(file_report.path)
            if loaded is None:
                loaded = self._load(file_report.path)
            patched = fill_missing(
                loaded.tree,
                file_report.missing_keys,
                self._config.sentinel,
                self._config.separator,
            )
            previews.append(
                PatchPreview(
                    path=file_report.path,
                    title=f"Preview: {file_report.path.name}",
                    before=loaded.text,
                    after=dump_tree(patched, self._config),
                    inserted_keys=list(file_report.missing_keys),
                )
            )
        return previews

    def run(
        self,
        paths: Sequence[str | Path],
        confirm: Callable[[ComparisonReport], bool],
        write: bool = True,
    ) -> SyncOutcome:
        """Run the full compare -> confirm -> patch -> preview cycle.

        Args:
            paths:   Reference path followed by candidate paths.
            confirm: Called with the report only when keys are missing;
                     returning False ends the run without patching.
            write:   Write snapshot pairs for each preview.

        Returns:
            A ``SyncOutcome``.  Snapshot failures are collected in
            ``failed`` and do not stop other files.
        """
        report = self.compare(paths)
        if report.state is SyncState.NO_MISSING_KEYS:
            return SyncOutcome(report=report, state=SyncState.NO_MISSING_KEYS)

        if not confirm(report):
            logger.info("patching declined, %d missing keys reported", report.total_missing)
            self._enter(SyncState.DONE)
            return SyncOutcome(report=report, state=SyncState.DONE)

        previews = self.build_previews(report)
        snapshots: dict[Path, SnapshotPair] = {}
        failed: list[SkippedFile] = []
        ready: list[PatchPreview] = []
        if write:
            for preview in previews:
                try:
                    snapshots[preview.path] = write_snapshots(preview, self._config)
                except SnapshotError as exc:
                    failed.append(SkippedFile(preview.path, str(exc)))
                    logger.error("preview for %s aborted: %s", preview.path, exc)
                    continue
                ready.append(preview)
        else:
            ready = previews

        self._enter(SyncState.PREVIEWING)
        self._enter(SyncState.DONE)
        return SyncOutcome(
            report=report,
            previews=ready,
            snapshots=snapshots,
            failed=failed,
            state=SyncState.DONE,
            confirmed=True,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _load(self, path: Path) -> _LoadedFile:
        text, tree = read_locale(path)
        loaded = _LoadedFile(path, text, tree, flatten(tree, self._config.separator))
        self._loaded[path] = loaded
        return loaded

    def _diff(self, reference: _LoadedFile, candidate: _LoadedFile) -> FileReport:
        missing = diff_keys(reference.flat, candidate.flat)
        extra = extra_keys(reference.flat, candidate.flat)
        hints: list[RenameHint] = []
        if self._config.suggest_renames and missing and extra:
            hints = suggest_renames(
                missing,
                extra,
                backend=self._backend,
                threshold=self._config.rename_threshold,
                separator=self._config.separator,
                max_pairs=self._config.rename_pair_limit,
            )
        logger.info(
            "%s: %d missing, %d extra", candidate.path.name, len(missing), len(extra)
        )
        return FileReport(
            path=candidate.path,
            missing_keys=missing,
            extra_keys=extra,
            rename_hints=hints,
        )
