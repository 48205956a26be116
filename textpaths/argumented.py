"""Path operations parameterized by a :class:`PlatformVariant`.

``GENERIC`` delegates straight to :mod:`textpaths.generic`. ``WINDOWS`` strips
any drive-letter or UNC prefix, runs the generic algorithm on the remainder
and reattaches the prefix afterwards.
"""

from __future__ import annotations

import logging
import typing as t

from . import generic
from ._validators import require_absolute
from .prefix import (
    UNC_PREFIX,
    is_absolute,
    prefix_of,
    starts_with_separator,
    strip_windows_prefix,
    windows_prefix_of,
)
from .variant import PlatformVariant

logger = logging.getLogger(__name__)


def _resolve_windows(path1: str, path2: str) -> str:
    """Resolve *path2* against *path1* honouring drive and UNC prefixes."""
    prefixes = [
        prefix for prefix in map(windows_prefix_of, (path1, path2)) if prefix
    ]
    if not prefixes:
        return generic.resolve(path1, path2)

    # The later prefixed path wins, matching the absolute override rule.
    prefix = prefixes[-1]
    resolved = generic.resolve(
        strip_windows_prefix(path1), strip_windows_prefix(path2)
    )
    if prefix == UNC_PREFIX:
        return UNC_PREFIX + resolved[1:]
    return prefix + resolved


def resolve(path1: str, path2: str, variant: PlatformVariant) -> str:
    """Resolve *path2* relative to *path1* under *variant*.

    If *path2* is absolute the result depends on *path2* alone. Under
    ``WINDOWS`` the prefix of the later prefixed argument is kept.
    """
    if variant == PlatformVariant.WINDOWS:
        return _resolve_windows(path1, path2)
    return generic.resolve(path1, path2)


def resolve_n(paths: t.Iterable[str], variant: PlatformVariant) -> str:
    """Fold :func:`resolve` over *paths* from left to right."""
    items = list(paths)
    if not items:
        return ""
    if len(items) == 1:
        return resolve(items[0], "", variant)
    result = resolve(items[0], items[1], variant)
    for item in items[2:]:
        result = resolve(result, item, variant)
    return result


def resolve_one(path: str, variant: PlatformVariant) -> str:
    """Resolve a single *path* under *variant*."""
    return resolve_n([path], variant)


def relative(from_path: str, to_path: str, variant: PlatformVariant) -> str:
    """Return the relative path from *from_path* to *to_path* under *variant*.

    When the two paths live under different Windows roots (for example two
    drive letters) no relative path exists and the resolved *to_path* is
    returned instead.

    Raises
    ------
    NonAbsolutePathError
        If either path is not absolute under *variant*.
    """
    if variant != PlatformVariant.WINDOWS:
        return generic.relative(from_path, to_path)

    require_absolute(
        from_path,
        to_path,
        variant,
        check=lambda path: is_absolute(path, variant),
    )
    from_prefix = prefix_of(from_path, variant)
    to_prefix = prefix_of(to_path, variant)
    if not from_prefix.same_root(to_prefix):
        logger.debug(
            "No relative path between roots %r and %r; returning target",
            from_prefix.text,
            to_prefix.text,
        )
        return resolve_one(to_path, variant)

    stripped = []
    for path, prefix in ((from_path, from_prefix), (to_path, to_prefix)):
        remainder = path[len(prefix.text) :]
        if not starts_with_separator(remainder):
            remainder = "/" + remainder
        stripped.append(remainder)
    return generic.relative(*stripped)


__all__ = [
    "is_absolute",
    "relative",
    "resolve",
    "resolve_n",
    "resolve_one",
]
