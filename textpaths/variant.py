"""Platform variants governing absolute-path recognition.

Variants are a closed enumeration passed explicitly to every operation. The
*native* variant is chosen once per process from the host platform so that
callers who do not care about portability get the behaviour they expect.
"""

from __future__ import annotations

import enum
import logging
import os
import sys
import typing as t

from .errors import UnknownVariantError

logger = logging.getLogger(__name__)

# Test suites set this override to emulate alternative hosts (for example
# Windows) without needing to run on a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "TEXTPATHS_PLATFORM_OVERRIDE"

# ``sys.platform`` prefixes whose paths follow Windows rules.
_WINDOWS_PLATFORM_PREFIXES: t.Final[tuple[str, ...]] = ("win",)

_NATIVE_NAME: t.Final[str] = "native"


class PlatformVariant(enum.StrEnum):
    """Rule set used to recognise absolute paths."""

    GENERIC = "generic"
    WINDOWS = "windows"


_native: PlatformVariant | None = None


def variant_for_platform(platform: str | None = None) -> PlatformVariant:
    """Return the variant matching *platform* (default: the current host).

    Without an explicit *platform* the ``TEXTPATHS_PLATFORM_OVERRIDE``
    environment variable takes precedence over ``sys.platform``.
    """
    if not platform and (platform := os.getenv(PLATFORM_OVERRIDE_ENV)):
        logger.debug(
            "Using platform override %r from %s", platform, PLATFORM_OVERRIDE_ENV
        )
    name = (platform or sys.platform).strip().lower()
    if name.startswith(_WINDOWS_PLATFORM_PREFIXES):
        return PlatformVariant.WINDOWS
    return PlatformVariant.GENERIC


def native_variant() -> PlatformVariant:
    """Return the variant of the host platform, resolving it on first use."""
    global _native
    if _native is None:
        _native = variant_for_platform()
        logger.debug("Resolved native path variant to %s", _native)
    return _native


def reset_native_variant() -> None:
    """Forget the cached native variant so the next lookup re-detects it."""
    global _native
    _native = None


def variant_for(name: str | PlatformVariant) -> PlatformVariant:
    """Map *name* (``generic``, ``windows`` or ``native``) to a variant."""
    if isinstance(name, PlatformVariant):
        return name
    normalised = name.strip().lower()
    if normalised == _NATIVE_NAME:
        return native_variant()
    try:
        return PlatformVariant(normalised)
    except ValueError:
        raise UnknownVariantError(name) from None


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "PlatformVariant",
    "native_variant",
    "reset_native_variant",
    "variant_for",
    "variant_for_platform",
]
