"""LevenshteinBackend: edit-distance similarity on normalized key paths.

Both paths are passed through ``KeyNormalizer`` first, so "auth.signIn" and
"auth.sign_in" score 1.0 while "auth.signIn" and "auth.signOut" score high
but below 1.0.
"""

from __future__ import annotations

from glottis.tree.normalizer import KeyNormalizer

# KeyNormalizer is stateless, safe to share.
_normalizer = KeyNormalizer()


def _levenshtein_distance(a: str, b: str) -> int:
    """Return the number of single-character edits turning ``a`` into ``b``.

    Common prefix and suffix are trimmed first, then one distance column is
    updated in place per character of the longer string.
    """
    start = 0
    while start < min(len(a), len(b)) and a[start] == b[start]:
        start += 1
    end_a, end_b = len(a), len(b)
    while end_a > start and end_b > start and a[end_a - 1] == b[end_b - 1]:
        end_a -= 1
        end_b -= 1
    long, short = a[start:end_a], b[start:end_b]
    if len(long) < len(short):
        long, short = short, long
    if not short:
        return len(long)

    column = list(range(len(short) + 1))
    for i, ch_long in enumerate(long, start=1):
        diagonal, column[0] = column[0], i
        for j, ch_short in enumerate(short, start=1):
            above = column[j]
            column[j] = min(above + 1, column[j - 1] + 1, diagonal + (ch_long != ch_short))
            diagonal = above
    return column[-1]


class LevenshteinBackend:
    """Similarity backend with no dependencies beyond the standard library.

    Satisfies the ``SimilarityBackend`` Protocol structurally.

    Example::

        backend = LevenshteinBackend()
        backend.similarity("menu.signIn", "menu.sign_in")   # 1.0
        backend.similarity("menu.signIn", "footer.about")   # < 0.5
    """

    def similarity(self, a: str, b: str, separator: str = ".") -> float:
        """Return ``1 - distance / max(len)`` over the normalized paths."""
        norm_a = _normalizer.normalize_path(a, separator)
        norm_b = _normalizer.normalize_path(b, separator)
        distance = _levenshtein_distance(norm_a, norm_b)
        return 1.0 - distance / max(len(norm_a), len(norm_b), 1)
