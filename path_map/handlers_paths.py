from __future__ import annotations

import json
import logging
from typing import Any, List

import gradio as gr

from .accessors import (
    add_value_by_path,
    get_value_by_path,
    has_path,
    remove_paths,
    set_value_by_path,
)
from .containers import is_container, reset_indexes
from .errors import PathMapError
from .flattening import expand_dot_paths, flatten_to_dot_paths
from .io_utils import dump_json, parse_json_text, read_json_content

logger = logging.getLogger(__name__)

PATH_OPERATIONS = ["get", "has", "set", "remove", "add"]
FLATTEN_MODES = ["dot", "undot", "reset"]


def parse_value_text(text: str) -> Any:
    """Values are JSON; anything that does not parse is taken as a plain string."""
    if text is None or text == '':
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def list_path_choices(data: Any) -> List[str]:
    if not is_container(data):
        return []
    return list(flatten_to_dot_paths(data).keys())


def load_document_file(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."
    try:
        data = read_json_content(file_obj)
    except (ValueError, OSError) as exc:
        logger.warning("Could not load uploaded document: %s", exc)
        return gr.update(), f"Error parsing JSON: {exc}"
    return dump_json(data), f"Loaded document with {len(list_path_choices(data))} leaf paths."


def refresh_path_choices(document_text: str):
    try:
        data = parse_json_text(document_text, "Document")
    except ValueError:
        return gr.update(choices=[])
    return gr.update(choices=list_path_choices(data))


def run_path_operation(document_text: str, operation: str, path: str, value_text: str = ''):
    """Apply one path operation to the document.

    Returns (result, document_text, status). Mutating operations hand back
    the rewritten document; read-only ones leave it untouched.
    """
    try:
        data = parse_json_text(document_text, "Document")
    except ValueError as exc:
        return None, document_text, str(exc)

    path = path if path else None
    try:
        if operation == "get":
            found = has_path(data, path) or path is None
            return get_value_by_path(data, path), document_text, "Found." if found else "Path not found."
        if operation == "has":
            return has_path(data, path), document_text, f"has({path!r})"
        if operation == "set":
            set_value_by_path(data, path, parse_value_text(value_text))
        elif operation == "remove":
            remove_paths(data, [p.strip() for p in path.split(',')] if path else None)
        elif operation == "add":
            add_value_by_path(data, path, parse_value_text(value_text))
        else:
            return None, document_text, f"Unknown operation: {operation}"
    except PathMapError as exc:
        return None, document_text, f"Error: {exc}"

    return data, dump_json(data), f"{operation} applied."


def flatten_handler(document_text: str, mode: str, deep: bool = False, preview_limit: int = 20):
    """Run dot, undot or reset on the document. Returns (result, preview_rows, status)."""
    try:
        data = parse_json_text(document_text, "Document")
        if mode == "dot":
            result = flatten_to_dot_paths(data)
        elif mode == "undot":
            result = expand_dot_paths(data)
        elif mode == "reset":
            result = reset_indexes(data, deep=bool(deep))
        else:
            return None, [], f"Unknown mode: {mode}"
    except (ValueError, PathMapError) as exc:
        return None, [], str(exc)

    rows = [[path, dump_json(value)] for path, value in flatten_to_dot_paths(result).items()]
    limit = max(1, int(preview_limit))
    status = f"{mode}: {len(rows)} leaf paths"
    if len(rows) > limit:
        status += f" (showing first {limit})"
    return result, rows[:limit], status
