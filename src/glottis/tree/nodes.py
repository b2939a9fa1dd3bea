"""NodeKind StrEnum and JSON value classification.

Locale documents are plain parsed JSON.  Rather than wrapping every value in
a node object, the tree helpers classify values on the fly with ``kind_of``
so that arrays are never confused with mappings during traversal.
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import Any

__all__ = ["JsonValue", "NodeKind", "Tree", "is_mapping", "is_utf8_encodable", "kind_of"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

# A locale tree is always a JSON object at the root
Tree = dict[str, Any]


class NodeKind(StrEnum):
    """The three kinds of value a locale tree can hold.

    - MAPPING -> "mapping" : JSON object, recursed into by the flattener
    - ARRAY   -> "array"   : JSON array, kept whole as an opaque leaf
    - LEAF    -> "leaf"    : string, number, bool or null
    """

    MAPPING = auto()
    ARRAY = auto()
    LEAF = auto()


def kind_of(value: Any) -> NodeKind:
    """Classify a parsed JSON value.

    Raises:
        TypeError: If value is not something ``json.loads`` can produce.
    """
    if isinstance(value, dict):
        return NodeKind.MAPPING
    if isinstance(value, list):
        return NodeKind.ARRAY
    # bool is a subclass of int, both are leaves so no ordering concern here
    if value is None or isinstance(value, (str, int, float)):
        return NodeKind.LEAF
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def is_utf8_encodable(text: str) -> bool:
    """Return False for strings holding lone surrogates.

    ``json.loads`` accepts escapes such as ``"\\ud800"`` and produces a str
    that cannot be written back as UTF-8.
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
