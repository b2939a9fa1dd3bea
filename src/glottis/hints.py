"""Rename hints: pair missing keys with extra keys that look like renames.

A candidate that is "missing" ``auth.signIn`` while carrying an unknown
``auth.sign_in`` most likely renamed the key rather than dropped the
translation.  Each missing key is paired with at most one extra key so that
the summed similarity of the accepted pairs is as large as possible; pairs
scoring below the threshold are never suggested.

Scoring is quadratic in the key counts.  A file whose missing and extra keys
form more than ``max_pairs`` combinations (typically a candidate nested under
a different top-level key) gets no hints rather than a slow run.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

from glottis.backends import LevenshteinBackend

if TYPE_CHECKING:
    from glottis.protocols import SimilarityBackend

__all__ = ["RenameHint", "pair_by_similarity", "suggest_renames"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenameHint:
    """A missing reference key that probably exists under another name.

    Attributes:
        missing_key:   Path present in the reference, absent in the candidate.
        candidate_key: Path present in the candidate, absent in the reference.
        similarity:    Backend score in [0.0, 1.0].
    """

    missing_key: str
    candidate_key: str
    similarity: float


def pair_by_similarity(scores: np.ndarray, threshold: float) -> list[tuple[int, int]]:
    """Return ``(missing_index, extra_index)`` pairs, sorted by missing index.

    Cells below ``threshold`` are zeroed out before the assignment and
    dropped from its result, so they never displace an acceptable pair.
    """
    if scores.size == 0:
        return []
    accepted = scores >= threshold
    if not accepted.any():
        return []
    weights = np.where(accepted, scores, 0.0)
    rows, cols = linear_sum_assignment(weights, maximize=True)
    return sorted(
        (int(r), int(c)) for r, c in zip(rows, cols, strict=True) if accepted[r, c]
    )


def suggest_renames(
    missing: Sequence[str],
    extra: Sequence[str],
    backend: SimilarityBackend | None = None,
    threshold: float = 0.75,
    separator: str = ".",
    max_pairs: int | None = None,
) -> list[RenameHint]:
    """Return rename hints ordered like ``missing``.

    Args:
        missing:   Keys the candidate lacks, in reference order.
        extra:     Keys only the candidate has.
        backend:   Similarity scorer.  Defaults to ``LevenshteinBackend()``.
        threshold: Minimum similarity for a pair to be suggested.
        separator: Path separator used by both key lists.
        max_pairs: Skip scoring (and return no hints) when
                   ``len(missing) * len(extra)`` exceeds this.  None means
                   no limit.
    """
    if not missing or not extra:
        return []
    pair_count = len(missing) * len(extra)
    if max_pairs is not None and pair_count > max_pairs:
        logger.info(
            "skipping rename hints: %d missing x %d extra keys exceeds %d pairs",
            len(missing),
            len(extra),
            max_pairs,
        )
        return []
    scorer = backend if backend is not None else LevenshteinBackend()

    scores = np.array(
        [[scorer.similarity(m, e, separator) for e in extra] for m in missing],
        dtype=float,
    )
    return [
        RenameHint(missing[r], extra[c], float(scores[r, c]))
        for r, c in pair_by_similarity(scores, threshold)
    ]
