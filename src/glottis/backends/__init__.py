"""Backends subpackage for glottis rename hints.

Only ``LevenshteinBackend`` ships with the package.  Any object satisfying
the ``SimilarityBackend`` Protocol can be passed to ``suggest_renames`` or
``LocaleComparator`` instead.
"""

from glottis.backends.static import LevenshteinBackend

__all__ = ["LevenshteinBackend"]
