"""Flattener: nested locale tree -> single-level map of joined key paths.

Traversal is depth-first in insertion order, so the flat map lists keys in
the same order a reader sees them in the file.  Arrays are opaque leaves and
empty nested objects contribute nothing.
"""

from __future__ import annotations

from typing import Any

from glottis.errors import InvalidKeyError
from glottis.tree.nodes import NodeKind, Tree, kind_of

__all__ = ["flatten"]


def flatten(tree: Tree, separator: str = ".") -> dict[str, Any]:
    """Flatten a locale tree into ``{joined_path: leaf_value}``.

    Args:
        tree:      Parsed JSON object.
        separator: String used to join nested keys.

    Returns:
        A new dict with one entry per reachable leaf.  Arrays appear as a
        single entry holding the list itself.

    Raises:
        TypeError:       If ``tree`` is not a mapping.
        InvalidKeyError: If a key is empty or contains ``separator``.

    Example::

        flatten({"a": {"b": "hi"}, "c": "x"})
        # {"a.b": "hi", "c": "x"}
    """
    if kind_of(tree) is not NodeKind.MAPPING:
        raise TypeError(f"Expected a JSON object at the root, got {type(tree).__name__}")
    result: dict[str, Any] = {}
    _flatten_into(tree, "", separator, result)
    return result


def _flatten_into(
    node: Tree, prefix: str, separator: str, out: dict[str, Any]
) -> None:
    for key, value in node.items():
        if key == "" or separator in key:
            raise InvalidKeyError(key, prefix, separator)
        path = f"{prefix}{separator}{key}" if prefix else key
        if kind_of(value) is NodeKind.MAPPING:
            _flatten_into(value, path, separator, out)
        else:
            out[path] = value
