"""Tree subpackage: pure operations on parsed locale documents.

Re-exports the public API for the tree module:
- NodeKind: StrEnum of the three value kinds (MAPPING, ARRAY, LEAF)
- kind_of: classifies a parsed JSON value
- flatten: nested tree -> flat map of joined key paths
- deep_set / fill_missing / unflatten: copy-on-write path assignment
- split_path: validates and splits a joined key path
- KeyNormalizer: folds key naming styles for rename hints
"""

from glottis.tree.flatten import flatten
from glottis.tree.nodes import NodeKind, kind_of
from glottis.tree.normalizer import KeyNormalizer
from glottis.tree.paths import deep_set, fill_missing, split_path, unflatten

__all__ = [
    "KeyNormalizer",
    "NodeKind",
    "deep_set",
    "fill_missing",
    "flatten",
    "kind_of",
    "split_path",
    "unflatten",
]
