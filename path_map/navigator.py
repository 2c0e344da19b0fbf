from __future__ import annotations

from typing import Any, Dict

from .accessors import (
    add_value_by_path,
    get_value_by_path,
    has_path,
    remove_paths,
    set_value_by_path,
)
from .containers import Container, is_associative, is_indexed, reset_indexes
from .flattening import expand_dot_paths, flatten_to_dot_paths
from .merging import deep_extend, deep_extend_distinct


class PathMap:
    """Dot-path operations on nested dicts and lists, under short names."""

    @staticmethod
    def get(data: Any, path: Any, default: Any = None) -> Any:
        return get_value_by_path(data, path, default)

    @staticmethod
    def has(data: Any, path: Any) -> bool:
        return has_path(data, path)

    @staticmethod
    def set(data: Container, path: Any, value: Any) -> Container:
        return set_value_by_path(data, path, value)

    @staticmethod
    def remove(data: Container, paths: Any) -> None:
        remove_paths(data, paths)

    @staticmethod
    def add(data: Container, path: Any, value: Any) -> Container:
        return add_value_by_path(data, path, value)

    @staticmethod
    def reset(data: Container, deep: bool = False) -> Container:
        return reset_indexes(data, deep)

    @staticmethod
    def dot(data: Container, prefix: str = '') -> Dict[str, Any]:
        return flatten_to_dot_paths(data, prefix)

    @staticmethod
    def undot(flat: Dict[str, Any]) -> Dict[str, Any]:
        return expand_dot_paths(flat)

    @staticmethod
    def extend(*containers: Container) -> Container:
        return deep_extend(*containers)

    @staticmethod
    def extend_distinct(*containers: Container) -> Container:
        return deep_extend_distinct(*containers)

    @staticmethod
    def is_associative(data: Container) -> bool:
        return is_associative(data)

    @staticmethod
    def is_indexed(data: Container) -> bool:
        return is_indexed(data)
