"""Generic path arithmetic.

A path is absolute here only when it starts with a separator; drive letters
and UNC markers are ordinary characters. Both ``/`` and ``\\`` separate
segments and results always use ``/``.
"""

from __future__ import annotations

import re
import typing as t

from ._validators import require_absolute
from .prefix import starts_with_separator
from .variant import PlatformVariant

_PATH_SEPARATOR: t.Final[re.Pattern[str]] = re.compile(r"[/\\]")

_CURRENT: t.Final[str] = "."
_PARENT: t.Final[str] = ".."


def segments(path: str) -> list[str]:
    """Split *path* into its normalized segments.

    ``.`` and empty segments are dropped and each ``..`` removes the segment
    before it. A ``..`` with nothing left to remove is discarded, so
    ``"../a"`` yields ``["a"]``.
    """
    parts: list[str] = []
    for part in _PATH_SEPARATOR.split(path):
        if part == _PARENT:
            if parts:
                parts.pop()
        elif part and part != _CURRENT:
            parts.append(part)
    return parts


def normalize(path: str) -> str:
    """Return *path* normalized without a leading or trailing separator."""
    return "/".join(segments(path))


def resolve_one(path: str) -> str:
    """Resolve a single *path*.

    >>> resolve_one("a//b/")
    'a/b'
    >>> resolve_one("/a/./b")
    '/a/b'
    """
    normalized = normalize(path)
    return "/" + normalized if starts_with_separator(path) else normalized


def resolve(path1: str, path2: str) -> str:
    """Resolve *path2* relative to *path1*.

    When *path2* is absolute it replaces *path1* entirely. The result is
    absolute whenever the surviving base is.

    >>> resolve("/c", "/a/b")
    '/a/b'
    >>> resolve("a/b", "..")
    'a'
    """
    if starts_with_separator(path2):
        return resolve_one(path2)
    resolved = normalize(path1)
    if path2:
        resolved = normalize(f"{resolved}/{path2}")
    return "/" + resolved if starts_with_separator(path1) else resolved


def resolve_n(paths: t.Iterable[str]) -> str:
    """Resolve *paths* left to right, later absolute paths overriding earlier ones.

    >>> resolve_n([])
    ''
    >>> resolve_n(["a/b", "c", ".."])
    'a/b'
    """
    items = list(paths)
    if not items:
        return ""
    if len(items) == 1:
        return resolve_one(items[0])
    result = resolve(items[0], items[1])
    for item in items[2:]:
        result = resolve(result, item)
    return result


def relative(from_path: str, to_path: str) -> str:
    """Return the relative path leading from *from_path* to *to_path*.

    Both paths must start with a separator. Identical locations yield an
    empty string.

    >>> relative("/a/b", "/c/d")
    '../../c/d'
    >>> relative("/a/b", "/a/b")
    ''

    Raises
    ------
    NonAbsolutePathError
        If either path is not absolute.
    """
    require_absolute(
        from_path, to_path, PlatformVariant.GENERIC, check=starts_with_separator
    )
    from_parts = segments(from_path)
    to_parts = segments(to_path)

    common = 0
    for from_part, to_part in zip(from_parts, to_parts, strict=False):
        if from_part != to_part:
            break
        common += 1

    parts = [_PARENT] * (len(from_parts) - common) + to_parts[common:]
    return "/".join(parts)


__all__ = [
    "normalize",
    "relative",
    "resolve",
    "resolve_n",
    "resolve_one",
    "segments",
]
