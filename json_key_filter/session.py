"""Session state for one loaded document.

A ``FilterSession`` is immutable: every user action returns a new session,
which is what ``gr.State`` stores between events. ``FilterSession()`` is the
"no document loaded" state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, FrozenSet, List, Optional, Tuple

from . import selection as sel
from .errors import EmptyDocumentError, NoDataToExportError
from .io_utils import read_json_content, source_file_name, write_filtered_json
from .projection import project
from .schema_utils import PathEntry, build_key_tree, has_children
from .tree_view import TreeNode, build_display_tree, toggle_expanded

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSession:
    document: Any = None
    entries: Tuple[PathEntry, ...] = ()
    selection: FrozenSet[str] = field(default_factory=frozenset)
    expanded: FrozenSet[str] = field(default_factory=frozenset)
    search_term: str = ''
    file_name: Optional[str] = None

    @property
    def loaded(self) -> bool:
        return bool(self.entries)

    @classmethod
    def load_document(cls, data: Any, file_name: Optional[str] = None) -> "FilterSession":
        """Index ``data`` and select every path.

        Raises EmptyDocumentError when the document has no keys.
        """
        entries = build_key_tree(data)
        if not entries:
            raise EmptyDocumentError()
        logger.info("Loaded %s with %d key paths", file_name or "document", len(entries))
        return cls(
            document=data,
            entries=tuple(entries),
            selection=sel.select_all(entries),
            file_name=file_name,
        )

    @classmethod
    def load_file(cls, file_obj) -> "FilterSession":
        data = read_json_content(file_obj)
        return cls.load_document(data, source_file_name(file_obj))

    def is_container(self, path: str) -> bool:
        return has_children(self.entries, path)

    def toggle(self, path: str) -> "FilterSession":
        if not self.loaded:
            return self
        updated = sel.toggle(path, self.is_container(path), self.selection, self.entries)
        return replace(self, selection=updated)

    def select_all(self) -> "FilterSession":
        return replace(self, selection=sel.select_all(self.entries))

    def deselect_all(self) -> "FilterSession":
        return replace(self, selection=sel.deselect_all())

    def toggle_expand(self, path: str) -> "FilterSession":
        return replace(self, expanded=toggle_expanded(self.expanded, path))

    def set_expanded(self, path: str, is_open: bool) -> "FilterSession":
        if (path in self.expanded) == is_open:
            return self
        return self.toggle_expand(path)

    def with_search(self, term: Optional[str]) -> "FilterSession":
        return replace(self, search_term=term or '')

    def current_filtered(self) -> Any:
        return project(self.document, self.selection) if self.loaded else None

    def display_tree(self) -> List[TreeNode]:
        return build_display_tree(self.entries, self.selection, self.expanded, self.search_term)

    def export(self, directory=None) -> str:
        if not self.loaded:
            raise NoDataToExportError("No document loaded.")
        filtered = self.current_filtered()
        if filtered is None:
            raise NoDataToExportError()
        return write_filtered_json(filtered, self.file_name, directory)

    def summary(self) -> str:
        if not self.loaded:
            return "No document loaded."
        return f"{len(self.selection)} of {len(self.entries)} keys selected."
