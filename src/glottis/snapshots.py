"""Before/after snapshot artifacts for patch previews.

A pair is either written completely or not at all: each file goes to a
temporary sibling and is moved into place, and if the second file fails the
first is removed again.  The original locale file is never touched.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from glottis.config import SyncConfig
from glottis.errors import SnapshotError
from glottis.result import PatchPreview, SnapshotPair

__all__ = ["snapshot_paths", "write_snapshots"]

logger = logging.getLogger(__name__)


def snapshot_paths(path: Path, config: SyncConfig) -> SnapshotPair:
    """Return where the snapshots for ``path`` are written."""
    return SnapshotPair(
        before_path=path.with_name(path.name + config.before_suffix),
        after_path=path.with_name(path.name + config.after_suffix),
    )


def _write_atomic(target: Path, text: str) -> None:
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def write_snapshots(preview: PatchPreview, config: SyncConfig | None = None) -> SnapshotPair:
    """Write the before/after texts of ``preview`` next to its file.

    Raises:
        SnapshotError: If either artifact cannot be written.  No artifact
            from this call is left behind in that case.
    """
    config = config if config is not None else SyncConfig()
    pair = snapshot_paths(preview.path, config)
    written: list[Path] = []
    try:
        for target, text in ((pair.before_path, preview.before), (pair.after_path, preview.after)):
            _write_atomic(target, text)
            written.append(target)
    except (OSError, UnicodeEncodeError) as exc:
        for artifact in written:
            artifact.unlink(missing_ok=True)
        raise SnapshotError(preview.path, f"could not write snapshot: {exc}") from exc
    logger.info("wrote snapshots %s and %s", pair.before_path, pair.after_path)
    return pair
