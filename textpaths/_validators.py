"""Shared precondition helpers."""

from __future__ import annotations

import typing as t

from .errors import ExtensionArgumentError, NonAbsolutePathError

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .variant import PlatformVariant


def require_absolute(
    from_path: str,
    to_path: str,
    variant: PlatformVariant,
    *,
    check: t.Callable[[str], bool],
) -> None:
    """Ensure both *from_path* and *to_path* satisfy the absoluteness *check*."""
    if not (check(from_path) and check(to_path)):
        raise NonAbsolutePathError(from_path, to_path, variant)


def require_single_extension(extension: str) -> None:
    """Ensure a dot-prefixed *extension* names exactly one extension."""
    if "." in extension[1:]:
        raise ExtensionArgumentError(extension)
