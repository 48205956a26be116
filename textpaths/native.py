"""Path operations bound to the host platform's variant.

These mirror :mod:`textpaths.argumented` with the variant fixed to
:func:`textpaths.variant.native_variant`, so Windows hosts understand drive
letters and UNC prefixes while other hosts use the generic rules.
"""

from __future__ import annotations

import typing as t

from . import argumented
from .extensions import (
    base_name,
    base_name_without_ext,
    change_extension,
    change_last_extension,
    has_extension,
    has_extensions,
)
from .variant import native_variant


def resolve(path1: str, path2: str) -> str:
    """Resolve *path2* relative to *path1* using the native variant."""
    return argumented.resolve(path1, path2, native_variant())


def resolve_n(paths: t.Iterable[str]) -> str:
    """Resolve multiple *paths* using the native variant."""
    return argumented.resolve_n(paths, native_variant())


def resolve_one(path: str) -> str:
    """Resolve a single *path* using the native variant."""
    return argumented.resolve_one(path, native_variant())


def is_absolute(path: str) -> bool:
    """Return ``True`` if *path* is absolute on the host platform."""
    return argumented.is_absolute(path, native_variant())


def relative(from_path: str, to_path: str) -> str:
    """Return the relative path from *from_path* to *to_path*.

    Paths under different roots yield ``resolve_one(to_path)``.
    """
    return argumented.relative(from_path, to_path, native_variant())


__all__ = [
    "base_name",
    "base_name_without_ext",
    "change_extension",
    "change_last_extension",
    "has_extension",
    "has_extensions",
    "is_absolute",
    "relative",
    "resolve",
    "resolve_n",
    "resolve_one",
]
