from __future__ import annotations

from typing import Any, Dict, Iterator, Tuple, Union

from .errors import ContainerTypeError
from .paths import as_index

Container = Union[Dict[Any, Any], list]


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def require_container(value: Any, operation: str) -> None:
    if not is_container(value):
        raise ContainerTypeError(
            f"{operation} expects a dict or list, got {type(value).__name__}"
        )


def iter_items(container: Container) -> Iterator[Tuple[Any, Any]]:
    """Yield (key, value) pairs; list keys are their indexes."""
    if isinstance(container, dict):
        return iter(container.items())
    return enumerate(container)


def is_indexed(container: Container) -> bool:
    """Check whether a container is list-shaped.

    Lists always are. A dict is when its keys are exactly the ints
    0..n-1 in insertion order, so the empty dict counts as indexed.
    """
    require_container(container, "is_indexed")
    if isinstance(container, list):
        return True
    for position, key in enumerate(container):
        if isinstance(key, bool) or key != position:
            return False
    return True


def is_associative(container: Container) -> bool:
    return not is_indexed(container)


def _is_numeric_key(key: Any) -> bool:
    # Decimal strings count, so JSON objects such as {"5": ...} renumber too.
    if isinstance(key, str):
        return as_index(key) is not None
    return isinstance(key, int) and not isinstance(key, bool)


def reset_indexes(container: Container, deep: bool = False) -> Container:
    """Return a copy with numeric keys renumbered from zero.

    Int keys and decimal string keys are numeric. Other string keys
    keep their value and their position. With deep=True nested
    containers are renumbered too; otherwise they are shared with the
    input.
    """
    require_container(container, "reset")

    if isinstance(container, list):
        if not deep:
            return list(container)
        return [reset_indexes(v, deep=True) if is_container(v) else v for v in container]

    target: Dict[Any, Any] = {}
    next_index = 0
    for key, value in container.items():
        if deep and is_container(value):
            value = reset_indexes(value, deep=True)
        if _is_numeric_key(key):
            target[next_index] = value
            next_index += 1
        else:
            target[key] = value
    return target
