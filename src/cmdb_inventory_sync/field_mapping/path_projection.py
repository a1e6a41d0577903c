"""Path projection over nested source records."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .mapping_models import Index, Name, PathSegment

MISSING_VALUE = ""


def project(root: Any, path: Sequence[PathSegment]) -> Any:
    """Return the value found at `path` inside `root`, or an empty string.

    Only absence short-circuits: a missing key, an out-of-range index, a `None`
    value or a value that cannot be indexed by the segment kind. Present values
    are returned as found, including falsy ones such as `0` or `False`.
    """
    current = root
    for segment in path:
        if current is None:
            return MISSING_VALUE
        current = _step(current, segment)
    return MISSING_VALUE if current is None else current


def _step(current: Any, segment: PathSegment) -> Any:
    if isinstance(segment, Name):
        if isinstance(current, Mapping):
            return current.get(segment.key)
        return None
    if isinstance(segment, Index):
        if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            if 0 <= segment.position < len(current):
                return current[segment.position]
        return None
    raise TypeError(f"Unsupported path segment: {segment!r}")
