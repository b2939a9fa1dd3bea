"""Reading and writing locale documents.

``load_tree`` turns a UTF-8 JSON file into a tree (a JSON object) or raises a
typed error; ``dump_tree`` serializes a tree back to text using the
formatting options in ``SyncConfig``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from glottis.config import SyncConfig
from glottis.errors import LocaleIOError, ParseError
from glottis.tree.nodes import Tree, is_mapping, is_utf8_encodable

__all__ = ["dump_tree", "load_tree", "parse_tree", "read_locale"]

logger = logging.getLogger(__name__)


def parse_tree(text: str, path: str | Path = "<string>") -> Tree:
    """Parse JSON text into a tree.

    Raises:
        ParseError: On malformed JSON, a root that is not an object, or a
            string holding a lone surrogate escape such as ``"\\ud800"``.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(path, exc.msg, line=exc.lineno, column=exc.colno) from exc
    if not is_mapping(data):
        raise ParseError(path, f"root must be a JSON object, got {type(data).__name__}")
    location = _find_unencodable(data, "")
    if location is not None:
        detail = f"lone surrogate escape at {location}, cannot be written as UTF-8"
        raise ParseError(path, detail)
    return data


def _find_unencodable(value: object, location: str) -> str | None:
    """Return where the first string that is not UTF-8 encodable sits, if any."""
    if isinstance(value, str):
        return None if is_utf8_encodable(value) else location or "<root>"
    if isinstance(value, dict):
        for key, child in value.items():
            child_location = f"{location}/{key}" if location else key
            if not is_utf8_encodable(key):
                return f"key under {location or '<root>'}"
            found = _find_unencodable(child, child_location)
            if found is not None:
                return found
    elif isinstance(value, list):
        for index, item in enumerate(value):
            found = _find_unencodable(item, f"{location}[{index}]")
            if found is not None:
                return found
    return None


def read_locale(path: str | Path) -> tuple[str, Tree]:
    """Read a UTF-8 encoded locale file, returning its exact text and tree.

    The text is decoded without newline translation so it can serve as
    the unmodified "before" side of a preview.

    Raises:
        LocaleIOError: If the file cannot be read.
        ParseError:    If the bytes are not UTF-8 or not a JSON object.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise LocaleIOError(path, exc.strerror or str(exc)) from exc
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(path, f"not valid UTF-8 ({exc.reason})") from exc
    # A UTF-8 BOM is not valid JSON but editors write one often enough
    tree = parse_tree(text.removeprefix("\ufeff"), path)
    logger.debug("loaded %s (%d top-level keys)", path, len(tree))
    return text, tree


def load_tree(path: str | Path) -> Tree:
    """Read and parse a UTF-8 encoded locale file (see ``read_locale``)."""
    return read_locale(path)[1]


def dump_tree(tree: Tree, config: SyncConfig | None = None) -> str:
    """Serialize a tree with the indentation and escaping from ``config``."""
    config = config if config is not None else SyncConfig()
    text = json.dumps(tree, indent=config.indent, ensure_ascii=config.ensure_ascii)
    return text + "\n" if config.trailing_newline else text
