"""Unit tests for absolute-path prefix classification."""

from __future__ import annotations

import pytest

from textpaths.prefix import (
    NO_PREFIX,
    Prefix,
    PrefixKind,
    is_absolute,
    prefix_of,
    strip_windows_prefix,
    windows_prefix_of,
)
from textpaths.variant import PlatformVariant

GENERIC = PlatformVariant.GENERIC
WINDOWS = PlatformVariant.WINDOWS


@pytest.mark.parametrize(
    ("path", "generic", "windows"),
    [
        ("/a", True, True),
        ("\\a", True, True),
        ("/", True, True),
        ("\\", True, True),
        ("\\\\server", True, True),
        ("/\\", True, False),
        ("C:", False, True),
        ("c:/x", False, True),
        ("C:relative", False, True),
        ("a/b", False, False),
        ("", False, False),
        ("1:/x", False, False),
    ],
)
def test_is_absolute(path: str, *, generic: bool, windows: bool) -> None:
    """Absoluteness depends on the variant's recognised prefixes."""
    assert is_absolute(path, GENERIC) is generic
    assert is_absolute(path, WINDOWS) is windows


@pytest.mark.parametrize(
    ("path", "variant", "expected"),
    [
        ("a/b", GENERIC, NO_PREFIX),
        ("/a", GENERIC, Prefix(PrefixKind.LEADING_SEPARATOR, "/")),
        ("C:/a", GENERIC, NO_PREFIX),
        ("\\\\host", GENERIC, Prefix(PrefixKind.LEADING_SEPARATOR, "\\")),
        ("\\\\host", WINDOWS, Prefix(PrefixKind.UNC, "\\\\")),
        ("C:/a", WINDOWS, Prefix(PrefixKind.DRIVE_LETTER, "C:")),
        ("\\a", WINDOWS, Prefix(PrefixKind.LEADING_SEPARATOR, "\\")),
        ("/\\a", WINDOWS, NO_PREFIX),
        ("a", WINDOWS, NO_PREFIX),
    ],
)
def test_prefix_of(path: str, variant: PlatformVariant, expected: Prefix) -> None:
    """prefix_of() reports the kind and text of the absolute marker."""
    assert prefix_of(path, variant) == expected


def test_drive_property() -> None:
    """Only drive-letter prefixes expose a drive."""
    assert prefix_of("d:/x", WINDOWS).drive == "d"
    assert prefix_of("/x", WINDOWS).drive is None


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("/a", "\\b", True),
        ("C:/a", "C:\\b", True),
        ("C:/a", "D:/a", False),
        ("C:/a", "c:/a", False),
        ("C:/a", "\\\\a", False),
        ("\\\\a", "\\\\b", True),
        ("/a", "C:/a", False),
    ],
)
def test_same_root(left: str, right: str, *, expected: bool) -> None:
    """Roots match on kind and, for drives, the exact letter."""
    assert prefix_of(left, WINDOWS).same_root(prefix_of(right, WINDOWS)) is expected


def test_windows_prefix_helpers() -> None:
    """The dispatcher helpers find and replace only drive and UNC prefixes."""
    assert windows_prefix_of("C:/a") == "C:"
    assert windows_prefix_of("\\\\a\\b") == "\\\\"
    assert windows_prefix_of("/a") is None
    assert strip_windows_prefix("C:a") == "/a"
    assert strip_windows_prefix("\\\\a") == "/a"
    assert strip_windows_prefix("/a") == "/a"
