"""Core logic for the JSON Key Filter.

The Gradio UI lives in `ui.py` (launched by `app.py`). The rest of the package is
pure functions and an immutable session that:
- index every key path of a JSON document
- track which paths are selected
- rebuild the document keeping only the selected paths
- export the filtered result
"""

from .errors import (
    EmptyDocumentError,
    JsonKeyFilterError,
    NoDataToExportError,
    ParseError,
    ReadError,
)
from .projection import ABSENT, filter_json, project
from .schema_utils import PathEntry, build_key_tree
from .selection import deselect_all, select_all, toggle
from .session import FilterSession

__version__ = "0.1.0"
__all__ = [
    "ABSENT",
    "EmptyDocumentError",
    "FilterSession",
    "JsonKeyFilterError",
    "NoDataToExportError",
    "ParseError",
    "PathEntry",
    "ReadError",
    "build_key_tree",
    "deselect_all",
    "filter_json",
    "project",
    "select_all",
    "toggle",
]
