from __future__ import annotations

from typing import AbstractSet, Any, FrozenSet, Optional

from .paths import element_path, iter_path_prefixes, key_path
from .values import JsonKind, JsonValue, json_kind


class _Absent:
    """Marker for "nothing under this path is kept"; distinct from JSON null."""

    _instance: Optional["_Absent"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'ABSENT'

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def selection_prefixes(selection: AbstractSet[str]) -> FrozenSet[str]:
    """Every path that is a selected path or a segment-aligned ancestor of one."""
    prefixes = set()
    for path in selection:
        prefixes.update(iter_path_prefixes(path))
    return frozenset(prefixes)


def filter_json(data: Any, selection: AbstractSet[str], path: str = '') -> Any:
    """Rebuild ``data`` keeping only the structure reachable from ``selection``.

    Paths are built exactly like ``build_key_tree`` builds them. Returns
    ``ABSENT`` when nothing at or below ``path`` survives.
    """
    return _filter(data, selection, selection_prefixes(selection), path)


def _filter(data: Any, selection: AbstractSet[str], prefixes: AbstractSet[str], path: str) -> Any:
    kind = json_kind(data)

    if kind is JsonKind.ARRAY:
        slot = element_path(path)
        items = []
        for item in data:
            kept = _filter(item, selection, prefixes, slot)
            if kept is not ABSENT:
                items.append(kept)
        return items if items or _selected(path, selection) else ABSENT

    if kind is JsonKind.OBJECT:
        obj = {}
        for k, v in data.items():
            child = key_path(path, k)
            if child not in prefixes:
                continue
            kept = _filter(v, selection, prefixes, child)
            if kept is not ABSENT:
                obj[k] = kept
        return obj if obj or _selected(path, selection) else ABSENT

    return data if _selected(path, selection) else ABSENT


def _selected(path: str, selection: AbstractSet[str]) -> bool:
    # the document root has no entry of its own
    return bool(path) and path in selection


def project(data: JsonValue, selection: AbstractSet[str]) -> JsonValue:
    """Filter a whole document; ``None`` means nothing was kept."""
    if data is None:
        return None
    result = filter_json(data, selection)
    return None if result is ABSENT else result
