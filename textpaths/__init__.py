"""Textual path arithmetic without touching the filesystem.

Paths are plain strings. Every operation takes a :class:`PlatformVariant`
deciding whether Windows drive letters and UNC prefixes count as absolute
markers; :mod:`textpaths.native` binds the host platform's variant.

>>> from textpaths import Path
>>> str(Path.from_n_generic(["a/b", "c/d", "e/f", ".."]))
'a/b/c/d/e'
"""

from __future__ import annotations

from .argumented import is_absolute, relative, resolve, resolve_n, resolve_one
from .errors import (
    ExtensionArgumentError,
    NonAbsolutePathError,
    TextPathError,
    UnknownVariantError,
)
from .extensions import (
    base_name,
    base_name_without_ext,
    change_extension,
    change_last_extension,
    has_extension,
    has_extensions,
)
from .path import Path
from .prefix import Prefix, PrefixKind, prefix_of
from .variant import (
    PLATFORM_OVERRIDE_ENV,
    PlatformVariant,
    native_variant,
    reset_native_variant,
    variant_for,
)

__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "ExtensionArgumentError",
    "NonAbsolutePathError",
    "Path",
    "PlatformVariant",
    "Prefix",
    "PrefixKind",
    "TextPathError",
    "UnknownVariantError",
    "base_name",
    "base_name_without_ext",
    "change_extension",
    "change_last_extension",
    "has_extension",
    "has_extensions",
    "is_absolute",
    "native_variant",
    "prefix_of",
    "relative",
    "reset_native_variant",
    "resolve",
    "resolve_n",
    "resolve_one",
    "variant_for",
]
