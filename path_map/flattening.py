from __future__ import annotations

from typing import Any, Dict

from .accessors import set_value_by_path
from .containers import Container, is_container, iter_items, require_container


def flatten_to_dot_paths(data: Container, prefix: str = '') -> Dict[str, Any]:
    """Flatten nested data into a single-level dict keyed by dot paths.

    Every non-container value becomes one entry, None included. Empty
    nested containers have no leaves and therefore disappear.
    """
    require_container(data, "dot")

    results: Dict[str, Any] = {}
    for key, value in iter_items(data):
        if is_container(value):
            results.update(flatten_to_dot_paths(value, f"{prefix}{key}."))
        else:
            results[f"{prefix}{key}"] = value
    return results


def expand_dot_paths(flat: Dict[str, Any]) -> Dict[str, Any]:
    """Rebuild nested dicts from a mapping produced by flatten_to_dot_paths."""
    require_container(flat, "undot")

    nested: Dict[str, Any] = {}
    for path, value in iter_items(flat):
        set_value_by_path(nested, path, value)
    return nested
