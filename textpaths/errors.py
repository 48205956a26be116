"""Exception hierarchy for textpaths.

Every error raised by the library signals a caller contract violation rather
than a runtime condition, so none of them are caught internally.
"""

from __future__ import annotations

import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .variant import PlatformVariant


class TextPathError(Exception):
    """Base class for all textpaths errors."""


class NonAbsolutePathError(TextPathError, ValueError):
    """Raised when ``relative()`` receives a path that is not absolute."""

    def __init__(
        self,
        from_path: str,
        to_path: str,
        variant: PlatformVariant,
    ) -> None:
        self.from_path = from_path
        self.to_path = to_path
        self.variant = variant
        msg = (
            "relative() requires absolute paths as arguments under the "
            f"{variant} variant; got {from_path!r} and {to_path!r}"
        )
        super().__init__(msg)


class ExtensionArgumentError(TextPathError, ValueError):
    """Raised when ``change_last_extension()`` gets more than one extension."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        msg = (
            "change_last_extension() must only be given one extension; "
            f"got {extension!r}"
        )
        super().__init__(msg)


class UnknownVariantError(TextPathError, ValueError):
    """Raised when a platform variant name cannot be recognised."""

    def __init__(self, name: str) -> None:
        self.name = name
        msg = f"unknown platform variant {name!r}"
        super().__init__(msg)


__all__ = [
    "ExtensionArgumentError",
    "NonAbsolutePathError",
    "TextPathError",
    "UnknownVariantError",
]
