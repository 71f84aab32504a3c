from __future__ import annotations

from typing import Iterator, Optional

SEP = '.'
ARRAY_SEGMENT = '[]'
# an empty key gets its own segment so it never reads as the document root
EMPTY_SEGMENT = '\\0'


def escape_path_segment(segment: str) -> str:
    """Escape a single key segment for dot-path representation.

    - Dots are escaped as '\\.' so keys like 'gpt-3.5-turbo' remain one segment.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    - The empty key becomes '\\0', which no other key can escape to.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    if segment == '':
        return EMPTY_SEGMENT
    return segment.replace('\\', '\\\\').replace('.', '\\.')


def join_path(parent: str, segment: str) -> str:
    """Append an already escaped segment to ``parent``."""
    return f"{parent}{SEP}{segment}" if parent else segment


def key_path(parent: str, key: str) -> str:
    return join_path(parent, escape_path_segment(key))


def element_path(parent: str) -> str:
    """Path shared by every element of the array at ``parent``."""
    return join_path(parent, ARRAY_SEGMENT)


def is_element_path(path: Optional[str]) -> bool:
    if not path:
        return False
    return path == ARRAY_SEGMENT or path.endswith(SEP + ARRAY_SEGMENT)


def _separator_positions(path: str) -> Iterator[int]:
    escaping = False
    for i, ch in enumerate(path):
        if escaping:
            escaping = False
        elif ch == '\\':
            escaping = True
        elif ch == SEP:
            yield i


def iter_path_prefixes(path: str) -> Iterator[str]:
    """Yield every segment-aligned prefix of ``path``, ending with ``path`` itself."""
    if not path:
        return
    for pos in _separator_positions(path):
        yield path[:pos]
    yield path


def is_path_prefix(prefix: str, path: str) -> bool:
    """True when ``prefix`` names ``path`` or one of its ancestors.

    Comparison works on whole segments, so 'item' is not a prefix of 'item2'.
    """
    if prefix == path:
        return True
    if not prefix or not path.startswith(prefix + SEP):
        return False
    # the '.' right after the prefix must be a separator, not an escaped dot
    return len(prefix) in set(_separator_positions(path))
