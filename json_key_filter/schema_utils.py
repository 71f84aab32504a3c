from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .paths import ARRAY_SEGMENT, element_path, is_element_path, key_path
from .values import JsonKind, JsonValue, json_kind


@dataclass(frozen=True)
class PathEntry:
    """One addressable node of a document.

    ``path`` is unique within an index; ``parent_path`` is None at depth 0.
    """
    path: str
    display_name: str
    depth: int
    parent_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'display_name': self.display_name,
            'depth': self.depth,
            'parent_path': self.parent_path,
        }


def build_key_tree(data: JsonValue) -> List[PathEntry]:
    """Recursively index every container and leaf path of a JSON structure.

    Array elements share the single path ``<array>.[]`` so sibling elements
    with different shapes are merged. Returns entries deduplicated by path
    and sorted by path; a scalar root or an empty container yields ``[]``.
    """
    entries: List[PathEntry] = []

    def walk(node: Any, path: str, depth: int, parent: Optional[str]) -> None:
        kind = json_kind(node)
        if kind is JsonKind.OBJECT:
            for k, v in node.items():
                child = key_path(path, k)
                display = f"[].{k}" if is_element_path(path) else k
                entries.append(PathEntry(child, display, depth, parent))
                walk(v, child, depth + 1, child)
        elif kind is JsonKind.ARRAY:
            if not node:
                return
            slot = element_path(path)
            display = f"[].{ARRAY_SEGMENT}" if is_element_path(path) else ARRAY_SEGMENT
            entries.append(PathEntry(slot, display, depth, parent))
            for item in node:
                walk(item, slot, depth + 1, slot)

    walk(data, '', 0, None)

    unique: Dict[str, PathEntry] = {}
    for entry in entries:
        unique.setdefault(entry.path, entry)
    return sorted(unique.values(), key=lambda e: e.path)


def index_by_path(entries: Sequence[PathEntry]) -> Dict[str, PathEntry]:
    return {entry.path: entry for entry in entries}


def has_children(entries: Sequence[PathEntry], path: str) -> bool:
    return any(entry.parent_path == path for entry in entries)


def all_paths(entries: Sequence[PathEntry]) -> List[str]:
    return [entry.path for entry in entries]
