from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any, List
from uuid import uuid4

from .containers import is_container
from .errors import PathMapError
from .io_utils import read_json_content
from .merging import deep_extend, deep_extend_distinct

logger = logging.getLogger(__name__)

MERGE_MODES = {
    "extend": deep_extend,
    "extend_distinct": deep_extend_distinct,
}


def load_merge_documents(files):
    """Read every uploaded file, keeping upload order. Returns (documents, status)."""
    if not files:
        return [], "No files uploaded."

    documents: List[Any] = []
    for file_obj in files:
        name = os.path.basename(getattr(file_obj, 'name', str(file_obj)))
        try:
            data = read_json_content(file_obj)
        except (ValueError, OSError) as exc:
            logger.warning("Skipping %s: %s", name, exc)
            return [], f"{name}: Error parsing JSON: {exc}"
        if not is_container(data):
            return [], f"{name}: top level must be a JSON object or array."
        documents.append(data)

    return documents, f"Loaded {len(documents)} documents."


def perform_merge(documents, mode: str):
    if not documents:
        raise ValueError("Upload at least one document before merging.")
    try:
        reducer = MERGE_MODES[mode]
    except KeyError:
        raise ValueError(f"Unknown merge mode: {mode}") from None
    return reducer(*documents)


def merge_documents_handler(documents, mode, file_name):
    try:
        merged = perform_merge(documents, mode)
    except (ValueError, PathMapError) as exc:
        return None, str(exc), None

    output_name = os.path.basename((file_name or "").strip()) or f"merged_{uuid4().hex}"
    if not output_name.lower().endswith('.json'):
        output_name += '.json'

    temp_dir = tempfile.gettempdir()
    path = os.path.join(temp_dir, output_name)

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(merged, f, indent=2, ensure_ascii=False)
    except OSError as exc:
        return None, f"Error writing merged file: {exc}", None

    key_count = len(merged)
    logger.info("Merged %d documents with %s into %s", len(documents), mode, path)
    return path, f"{mode}: merged {len(documents)} documents into {key_count} top-level keys.", merged
