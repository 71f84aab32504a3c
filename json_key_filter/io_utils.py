from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any, Optional

from .config import load_config
from .errors import NoDataToExportError, ParseError, ReadError

logger = logging.getLogger(__name__)


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ReadError("No file uploaded.")

    try:
        if hasattr(file_obj, 'read'):
            if hasattr(file_obj, 'seek'):
                file_obj.seek(0)
            content = file_obj.read()
            if isinstance(content, bytes):
                content = content.decode('utf-8')
        else:
            path = file_obj
            if not isinstance(file_obj, (str, os.PathLike)) and hasattr(file_obj, 'name'):
                path = file_obj.name
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Failed to read file: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc


def source_file_name(file_obj) -> Optional[str]:
    """Best-effort base name of an upload, a path or an open file."""
    if file_obj is None:
        return None
    name = file_obj if isinstance(file_obj, (str, os.PathLike)) else getattr(file_obj, 'name', None)
    if not name or not isinstance(name, (str, os.PathLike)):
        return None
    return os.path.basename(os.fspath(name)) or None


def export_file_name(file_name: Optional[str] = None) -> str:
    name = (file_name or '').strip()
    if not name:
        name = load_config().default_file_name
    name = os.path.basename(name)
    if not name.lower().endswith('.json'):
        name += '.json'
    return f"filtered_{name}"


def dumps_filtered(value: Any, indent: Optional[int] = None) -> str:
    if indent is None:
        indent = load_config().indent
    return json.dumps(value, indent=indent, ensure_ascii=False)


def write_filtered_json(value: Any, file_name: Optional[str] = None, directory=None) -> str:
    """Write ``value`` as pretty JSON into a fresh folder under ``directory``.

    Returns the written path; its base name is ``export_file_name(file_name)``.
    """
    if value is None:
        raise NoDataToExportError()

    directory = os.fspath(directory or load_config().export_dir)
    name = export_file_name(file_name)
    path = directory

    try:
        os.makedirs(directory, exist_ok=True)
        # one folder per export; the visible name stays filtered_<name>
        path = os.path.join(tempfile.mkdtemp(prefix="export_", dir=directory), name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(dumps_filtered(value))
    except OSError as exc:
        logger.error("Error writing filtered file %s: %s", path, exc)
        raise
    logger.info("Wrote filtered JSON to %s", path)
    return path
