from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Dict, FrozenSet, List, Optional, Sequence

from .schema_utils import PathEntry
from .selection import search_entries


@dataclass
class TreeNode:
    entry: PathEntry
    selected: bool
    expanded: bool
    has_children: bool
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def path(self) -> str:
        return self.entry.path

    @property
    def label(self) -> str:
        return self.entry.display_name


def build_display_tree(
    entries: Sequence[PathEntry],
    selection: AbstractSet[str],
    expanded: AbstractSet[str],
    search_term: str = '',
) -> List[TreeNode]:
    """Nest the flat index under each entry's parent for display.

    Entries hidden by ``search_term`` are dropped. While a search is active
    every branch is reported expanded so the matches can be seen.
    """
    visible = search_entries(entries, search_term)
    searching = bool(search_term and search_term.strip())

    children_of: Dict[Optional[str], List[PathEntry]] = {}
    for entry in entries:
        children_of.setdefault(entry.parent_path, []).append(entry)
    visible_paths = {entry.path for entry in visible}

    def make(entry: PathEntry) -> TreeNode:
        kids = [c for c in children_of.get(entry.path, []) if c.path in visible_paths]
        has_kids = entry.path in children_of
        return TreeNode(
            entry=entry,
            selected=entry.path in selection,
            expanded=has_kids and (searching or entry.path in expanded),
            has_children=has_kids,
            children=[make(c) for c in kids],
        )

    return [make(entry) for entry in visible if entry.parent_path is None]


def toggle_expanded(expanded: AbstractSet[str], path: str) -> FrozenSet[str]:
    updated = set(expanded)
    if path in updated:
        updated.discard(path)
    else:
        updated.add(path)
    return frozenset(updated)
