"""SimilarityBackend Protocol: the extension point for rename hints.

Any object with a conformant ``similarity`` method can score key paths;
no inheritance is required.

Example::

    from glottis.protocols import SimilarityBackend

    class ExactBackend:
        def similarity(self, a: str, b: str, separator: str = ".") -> float:
            return 1.0 if a == b else 0.0

    assert isinstance(ExactBackend(), SimilarityBackend)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["SimilarityBackend"]


@runtime_checkable
class SimilarityBackend(Protocol):
    """Structural protocol for key-path similarity scorers.

    ``similarity`` must be symmetric and return a float in [0.0, 1.0], with
    1.0 meaning the two paths name the same key.
    """

    def similarity(self, a: str, b: str, separator: str = ".") -> float: ...
