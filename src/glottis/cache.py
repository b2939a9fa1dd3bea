"""SimilarityCache: LRU-backed caching proxy for any SimilarityBackend.

A comparison run scores every (missing, extra) pair for every candidate, and
the same pairs recur across locales that drifted the same way.  Scores are
cached per unordered pair; eviction is silent when ``max_size`` is exceeded.

Each instance owns its own ``LRUCache``, so two instances never interfere.

Example::

    from glottis.backends import LevenshteinBackend
    from glottis.cache import SimilarityCache

    cache = SimilarityCache(LevenshteinBackend(), max_size=1024)
    cache.similarity("menu.open", "menu.opn")   # computed
    cache.similarity("menu.opn", "menu.open")   # served from memory
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from glottis.protocols import SimilarityBackend

__all__ = ["SimilarityCache"]


class SimilarityCache:
    """LRU-backed caching proxy around any SimilarityBackend.

    Satisfies the ``SimilarityBackend`` Protocol structurally.

    Args:
        backend: Object with a ``similarity(a, b, separator)`` method.
        max_size: Maximum number of cached pair scores.  Defaults to 4096.
    """

    def __init__(self, backend: SimilarityBackend, max_size: int = 4096) -> None:
        self._backend: Any = backend
        self._cache: LRUCache[tuple[str, str, str], float] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        return int(self._cache.currsize)

    def similarity(self, a: str, b: str, separator: str = ".") -> float:
        """Return the cached score for ``(a, b)``, computing it on a miss."""
        key = (a, b, separator) if a <= b else (b, a, separator)
        score = self._cache.get(key)
        if score is None:
            score = float(self._backend.similarity(a, b, separator))
            self._cache[key] = score
        return score
