from __future__ import annotations

import logging
from typing import Any, Iterable, Union

from .containers import Container, is_container, require_container
from .errors import ContainerTypeError
from .paths import MISSING, as_index, is_absent_path, resolve_key, split_path

logger = logging.getLogger(__name__)

PathLike = Union[str, int, None]


def get_value_by_path(data: Any, path: PathLike, default: Any = None) -> Any:
    """Retrieve a value from nested data using a dot-notation path.

    An absent path (None or '') returns data itself. A key that literally
    contains dots is matched before the path is split.
    """
    if is_absent_path(path):
        return data

    if isinstance(data, dict) and path in data:
        return data[path]

    current = data
    for segment in split_path(path):
        key = resolve_key(current, segment)
        if key is MISSING:
            return default
        current = current[key]
    return current


def has_path(data: Any, path: PathLike) -> bool:
    """Check whether path resolves to a value, even a None one."""
    if not is_container(data) or not data or is_absent_path(path):
        return False

    if isinstance(data, dict) and path in data:
        return True

    current = data
    for segment in split_path(path):
        key = resolve_key(current, segment)
        if key is MISSING:
            return False
        current = current[key]
    return True


def _writable_key(container: Container, segment: str) -> Any:
    key = resolve_key(container, segment)
    if key is not MISSING:
        return key
    if isinstance(container, dict):
        return segment

    index = as_index(segment)
    if index is None or index > len(container):
        raise ContainerTypeError(
            f"cannot write segment {segment!r} into a list of length {len(container)}"
        )
    return index


def _assign(container: Container, key: Any, value: Any) -> None:
    if isinstance(container, list) and key == len(container):
        container.append(value)
    else:
        container[key] = value


def _replace_contents(data: Container, value: Any) -> None:
    if value is data:
        return
    if isinstance(data, dict) and isinstance(value, dict):
        data.clear()
        data.update(value)
    elif isinstance(data, list) and isinstance(value, list):
        data[:] = value
    else:
        raise ContainerTypeError(
            f"cannot replace a {type(data).__name__} root with {type(value).__name__}"
        )
    logger.debug("Replaced root %s contents (%d entries)", type(data).__name__, len(data))


def set_value_by_path(data: Container, path: PathLike, value: Any) -> Container:
    """Set a value in nested data by dot path and return data.

    Missing or non-container intermediates are replaced by new dicts. An
    absent path replaces the whole root in place, which requires value to
    be a container of the same kind.
    """
    require_container(data, "set")

    if is_absent_path(path):
        _replace_contents(data, value)
        return data

    segments = split_path(path)
    current = data
    for segment in segments[:-1]:
        key = resolve_key(current, segment)
        if key is MISSING or not is_container(current[key]):
            key = _writable_key(current, segment)
            _assign(current, key, {})
        current = current[key]

    _assign(current, _writable_key(current, segments[-1]), value)
    return data


def remove_paths(data: Container, paths: Union[PathLike, Iterable[PathLike]]) -> None:
    """Remove one or many entries addressed by dot paths.

    Each path is walked from the root. Descent stops at the first
    intermediate segment that is missing or not a container, and the
    last segment is deleted at the level reached, if present there.
    """
    require_container(data, "remove")

    if paths is None or isinstance(paths, (str, int)):
        paths = [paths]

    for path in paths:
        segments = split_path(path)
        if not segments:
            continue

        current = data
        for segment in segments[:-1]:
            key = resolve_key(current, segment)
            if key is MISSING or not is_container(current[key]):
                logger.debug("Removing %r: descent stopped at %r", path, segment)
                break
            current = current[key]

        key = resolve_key(current, segments[-1])
        if key is not MISSING:
            del current[key]


def _next_index(target: dict) -> int:
    indexes = [k for k in target if isinstance(k, int) and not isinstance(k, bool)]
    return max(indexes) + 1 if indexes else 0


def add_value_by_path(data: Container, path: PathLike, value: Any) -> Container:
    """Append value to the list at path, creating or wrapping it as needed.

    A scalar found at path becomes the first item of a new list. A dict
    found at path gets value under its next free int key.
    """
    target = get_value_by_path(data, path, [])

    if isinstance(target, dict):
        target[_next_index(target)] = value
    else:
        if not isinstance(target, list):
            target = [target]
        target.append(value)

    return set_value_by_path(data, path, target)
