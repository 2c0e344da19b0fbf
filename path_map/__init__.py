"""Dot-path access to nested dicts and lists.

The package contains pure functions that:
- read, test, write and delete values by dot path
- flatten nested data to dot paths and back
- deep-merge several containers

The Gradio playground lives in `app.py`.
"""
import logging

from .accessors import (
    add_value_by_path,
    get_value_by_path,
    has_path,
    remove_paths,
    set_value_by_path,
)
from .containers import is_associative, is_container, is_indexed, reset_indexes
from .errors import ContainerTypeError, PathMapError
from .flattening import expand_dot_paths, flatten_to_dot_paths
from .merging import deep_extend, deep_extend_distinct
from .navigator import PathMap

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'PathMap',
    'PathMapError',
    'ContainerTypeError',
    'get_value_by_path',
    'has_path',
    'set_value_by_path',
    'remove_paths',
    'add_value_by_path',
    'reset_indexes',
    'flatten_to_dot_paths',
    'expand_dot_paths',
    'deep_extend',
    'deep_extend_distinct',
    'is_associative',
    'is_indexed',
    'is_container',
]
