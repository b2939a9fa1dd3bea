"""Copy-on-write assignment of values at joined key paths.

``deep_set`` never mutates its input.  Mappings on the walked path are
shallow-copied and everything off the path is shared with the original, so
an "original" and a "patched" tree can coexist without aliasing.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from glottis.errors import InvalidPathError
from glottis.tree.nodes import Tree, is_mapping

__all__ = ["deep_set", "fill_missing", "split_path", "unflatten"]


def split_path(path: str, separator: str = ".") -> list[str]:
    """Split a joined path into segments.

    Raises:
        InvalidPathError: If the path is empty or has an empty segment
            (leading, trailing or doubled separator).
    """
    if not path:
        raise InvalidPathError("key path must not be empty")
    segments = path.split(separator)
    if any(segment == "" for segment in segments):
        raise InvalidPathError(f"key path {path!r} contains an empty segment")
    return segments


def deep_set(tree: Tree, path: str, value: Any, separator: str = ".") -> Tree:
    """Return a copy of ``tree`` with ``value`` stored at ``path``.

    Intermediate segments that are absent, or present but not a mapping,
    are replaced with a fresh mapping.  Presence and type are checked
    explicitly so falsy leaves such as ``0``, ``""`` or ``False`` elsewhere
    in the tree are left alone.

    Args:
        tree:      Source tree.  Not modified.
        path:      Joined key path, e.g. ``"x.y.z"``.
        value:     Value to store at the last segment.
        separator: Separator used in ``path``.

    Returns:
        A new root mapping.

    Raises:
        InvalidPathError: If ``path`` is malformed.

    Example::

        deep_set({}, "x.y.z", "v")
        # {"x": {"y": {"z": "v"}}}
    """
    segments = split_path(path, separator)
    root = dict(tree)
    current = root
    for segment in segments[:-1]:
        child = current.get(segment)
        child = dict(child) if segment in current and is_mapping(child) else {}
        current[segment] = child
        current = child
    current[segments[-1]] = value
    return root


def fill_missing(
    tree: Tree, keys: Iterable[str], value: Any, separator: str = "."
) -> Tree:
    """Return a copy of ``tree`` with ``value`` stored at every path in ``keys``."""
    patched = dict(tree)
    for key in keys:
        patched = deep_set(patched, key, value, separator)
    return patched


def unflatten(flat: Mapping[str, Any], separator: str = ".") -> Tree:
    """Rebuild a nested tree from a flat map by repeated ``deep_set``.

    ``flatten(unflatten(flat)) == flat`` holds whenever no flat key is a
    strict prefix of another (a leaf and a branch cannot share a path).
    """
    tree: Tree = {}
    for path, value in flat.items():
        tree = deep_set(tree, path, value, separator)
    return tree
