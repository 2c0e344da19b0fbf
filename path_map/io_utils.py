from __future__ import annotations

import json
import os
from typing import Any


def parse_json_text(text: str, label: str = "Input") -> Any:
    """Parse JSON typed into a textbox; blank text means no value."""
    if text is None or not str(text).strip():
        raise ValueError(f"{label} is empty.")
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{label} is not valid JSON: {exc.msg} (line {exc.lineno})") from exc


def read_json_content(file_obj) -> Any:
    """Parse an uploaded document, given as a file object, Gradio file or path.

    Parse failures raise ValueError naming the file, like blank text does.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        text = file_obj.read()
        label = os.path.basename(getattr(file_obj, 'name', '') or 'Upload')
    else:
        path = getattr(file_obj, 'name', file_obj)
        label = os.path.basename(str(path))
        with open(path, 'rb') as f:
            text = f.read()

    if isinstance(text, bytes):
        text = text.decode('utf-8-sig')
    return parse_json_text(text, label)


def dump_json(data: Any) -> str:
    # JSON object keys are strings; int keys from merged dicts are written as "0", "1", ...
    return json.dumps(data, indent=2, ensure_ascii=False)
