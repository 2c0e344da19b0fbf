from __future__ import annotations

from typing import Any, List, Optional

# Returned by resolve_key when a segment names nothing in the container.
MISSING = object()


def is_absent_path(path: Any) -> bool:
    """True for the paths that address the whole container (None and '')."""
    return path is None or path == ''


def split_path(path: Any) -> List[str]:
    """Split a dot path into its segments.

    There is no escaping: every '.' separates two segments, so 'a..b'
    yields an empty middle segment.
    """
    if is_absent_path(path):
        return []
    if not isinstance(path, str):
        path = str(path)
    return path.split('.')


def as_index(segment: Any) -> Optional[int]:
    """Return segment as a non-negative int, or None if it is not one."""
    if isinstance(segment, bool):
        return None
    if isinstance(segment, int):
        return segment if segment >= 0 else None
    if isinstance(segment, str) and segment.isdigit() and segment.isascii():
        return int(segment)
    return None


def resolve_key(container: Any, segment: Any) -> Any:
    """Find the key that segment names in container.

    Dict lookups try the segment as given and then, for decimal segments,
    the matching int key. Lists only accept in-range indexes. Returns
    MISSING when nothing matches or container is not a dict or list.
    """
    if isinstance(container, dict):
        if segment in container:
            return segment
        index = as_index(segment)
        if index is not None and index in container:
            return index
        return MISSING
    if isinstance(container, list):
        index = as_index(segment)
        if index is not None and index < len(container):
            return index
    return MISSING
