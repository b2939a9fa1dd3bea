"""One-directional key comparison of flat maps.

The reference is ground truth.  ``diff_keys`` answers "what does the
candidate lack?"; ``extra_keys`` answers the informational reverse question
and never feeds into patching.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["diff_keys", "extra_keys"]


def diff_keys(reference: Mapping[str, Any], candidate: Mapping[str, Any]) -> list[str]:
    """Return keys of ``reference`` absent from ``candidate``, in reference order."""
    return [key for key in reference if key not in candidate]


def extra_keys(reference: Mapping[str, Any], candidate: Mapping[str, Any]) -> list[str]:
    """Return keys of ``candidate`` absent from ``reference``, in candidate order."""
    return [key for key in candidate if key not in reference]
