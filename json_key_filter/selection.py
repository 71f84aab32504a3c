from __future__ import annotations

import logging
from typing import AbstractSet, FrozenSet, List, Mapping, Sequence

from .paths import is_path_prefix
from .schema_utils import PathEntry, all_paths, index_by_path

logger = logging.getLogger(__name__)


def ancestors_of(path: str, entries: Sequence[PathEntry]) -> List[str]:
    """Walk the parent chain of ``path``, nearest ancestor first."""
    return _parent_chain(path, index_by_path(entries))


def _parent_chain(path: str, by_path: Mapping[str, PathEntry]) -> List[str]:
    chain: List[str] = []
    entry = by_path.get(path)
    parent = entry.parent_path if entry else None
    while parent and parent not in chain:
        chain.append(parent)
        entry = by_path.get(parent)
        parent = entry.parent_path if entry else None
    return chain


def descendants_of(path: str, entries: Sequence[PathEntry]) -> List[str]:
    return [e.path for e in entries if e.path != path and is_path_prefix(path, e.path)]


def toggle(
    path: str,
    is_container: bool,
    selection: AbstractSet[str],
    entries: Sequence[PathEntry],
) -> FrozenSet[str]:
    """Return the selection after the user clicks ``path``.

    Deselecting drops the whole subtree. Selecting adds every ancestor, and
    for a container also the whole subtree; a leaf does not pull in siblings.
    """
    updated = set(selection)
    if path in updated:
        updated.discard(path)
        updated.difference_update(descendants_of(path, entries))
        logger.debug("Deselected %s (%d paths remain)", path, len(updated))
    else:
        updated.add(path)
        updated.update(ancestors_of(path, entries))
        if is_container:
            updated.update(descendants_of(path, entries))
        logger.debug("Selected %s (%d paths selected)", path, len(updated))
    return frozenset(updated)


def select_all(entries: Sequence[PathEntry]) -> FrozenSet[str]:
    return frozenset(all_paths(entries))


def deselect_all() -> FrozenSet[str]:
    return frozenset()


def search_entries(entries: Sequence[PathEntry], term: str) -> List[PathEntry]:
    """Entries whose path contains ``term`` (case-insensitive), plus their ancestors.

    Index order is preserved. An empty term matches everything.
    """
    if not term or not term.strip():
        return list(entries)

    needle = term.strip().lower()
    by_path = index_by_path(entries)
    matching = set()
    for entry in entries:
        if needle in entry.path.lower():
            matching.add(entry.path)
            matching.update(_parent_chain(entry.path, by_path))
    return [entry for entry in entries if entry.path in matching]
