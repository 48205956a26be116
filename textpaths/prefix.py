"""Classify the absolute-path prefix of a path string per platform variant."""

from __future__ import annotations

import dataclasses as dc
import enum
import re
import typing as t

from .variant import PlatformVariant

# The UNC marker and drive letters are only meaningful to Windows paths.
UNC_PREFIX: t.Final[str] = "\\\\"

_STARTS_WITH_SEPARATOR: t.Final[re.Pattern[str]] = re.compile(r"^[/\\]")

_STARTS_WITH_WINDOWS_PREFIX: t.Final[re.Pattern[str]] = re.compile(
    r"""
    ^ (?:
        (?P<unc> \\\\ )            # UNC prefix
        | (?P<drive> [A-Za-z] : )  # drive prefix
    )
    """,
    re.VERBOSE,
)

_STARTS_WITH_WINDOWS_PREFIX_OR_SEPARATOR: t.Final[re.Pattern[str]] = re.compile(
    r"""
    ^ (?:
        \\\\                 # UNC prefix
        | [A-Za-z] :         # drive prefix
        | [/\\] (?: [^\\] | $ )  # separator not starting a UNC marker
    )
    """,
    re.VERBOSE,
)


class PrefixKind(enum.StrEnum):
    """Kinds of absolute-path markers."""

    NONE = "none"
    LEADING_SEPARATOR = "leading-separator"
    DRIVE_LETTER = "drive-letter"
    UNC = "unc"


@dc.dataclass(frozen=True, slots=True)
class Prefix:
    """The absolute marker found at the start of a path.

    ``text`` is the matched portion of the original string, so stripping
    ``len(text)`` characters removes the prefix.
    """

    kind: PrefixKind
    text: str = ""

    @property
    def drive(self) -> str | None:
        """Return the drive letter for ``DRIVE_LETTER`` prefixes."""
        if self.kind is PrefixKind.DRIVE_LETTER:
            return self.text[0]
        return None

    def same_root(self, other: Prefix) -> bool:
        """Return ``True`` when *other* denotes the same root as this prefix.

        Leading separators compare equal regardless of slash style; drive
        letters compare case-sensitively.
        """
        if self.kind is not other.kind:
            return False
        if self.kind is PrefixKind.DRIVE_LETTER:
            return self.text == other.text
        return True


NO_PREFIX: t.Final[Prefix] = Prefix(PrefixKind.NONE)


def starts_with_separator(path: str) -> bool:
    """Return ``True`` if *path* begins with ``/`` or ``\\``."""
    return _STARTS_WITH_SEPARATOR.match(path) is not None


def windows_prefix_of(path: str) -> str | None:
    """Return the UNC or drive-letter prefix of *path*, if any."""
    match = _STARTS_WITH_WINDOWS_PREFIX.match(path)
    return match.group(0) if match else None


def strip_windows_prefix(path: str) -> str:
    """Replace the UNC or drive-letter prefix of *path* with a single ``/``."""
    return _STARTS_WITH_WINDOWS_PREFIX.sub("/", path, count=1)


def prefix_of(path: str, variant: PlatformVariant) -> Prefix:
    """Return the :class:`Prefix` of *path* under *variant*."""
    if variant == PlatformVariant.WINDOWS:
        match = _STARTS_WITH_WINDOWS_PREFIX.match(path)
        if match and match.group("unc"):
            return Prefix(PrefixKind.UNC, match.group(0))
        if match:
            return Prefix(PrefixKind.DRIVE_LETTER, match.group(0))
        if not is_absolute(path, variant):
            return NO_PREFIX
    if starts_with_separator(path):
        return Prefix(PrefixKind.LEADING_SEPARATOR, path[0])
    return NO_PREFIX


def is_absolute(path: str, variant: PlatformVariant) -> bool:
    """Return ``True`` when *path* is absolute under *variant*."""
    if variant == PlatformVariant.WINDOWS:
        return _STARTS_WITH_WINDOWS_PREFIX_OR_SEPARATOR.match(path) is not None
    return starts_with_separator(path)


__all__ = [
    "NO_PREFIX",
    "UNC_PREFIX",
    "Prefix",
    "PrefixKind",
    "is_absolute",
    "prefix_of",
    "starts_with_separator",
    "strip_windows_prefix",
    "windows_prefix_of",
]
