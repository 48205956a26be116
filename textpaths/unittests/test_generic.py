"""Unit tests for generic segment normalization, resolution and relative paths."""

from __future__ import annotations

import pytest

import textpaths.generic as generic
from textpaths.errors import NonAbsolutePathError, TextPathError


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("", ""),
        ("a/b/", "a/b"),
        ("a//b", "a/b"),
        ("a/./b/.", "a/b"),
        ("a/b/..", "a"),
        ("/a/b", "/a/b"),
        ("\\a\\b", "/a/b"),
        ("/", "/"),
        ("///", "/"),
        ("/..", "/"),
    ],
)
def test_resolve_one(path: str, expected: str) -> None:
    """Single paths collapse empty, ``.`` and ``..`` segments."""
    assert generic.resolve_one(path) == expected


def test_leading_parent_segments_are_dropped() -> None:
    """A ``..`` with nothing to remove disappears, even for relative paths."""
    assert generic.resolve_one("../a") == "a"
    assert generic.resolve_one("a/../../b") == "b"
    assert generic.segments("../..") == []


def test_normalize_never_adds_separators() -> None:
    """normalize() strips leading and trailing separators."""
    assert generic.normalize("/a/b/") == "a/b"


@pytest.mark.parametrize(
    ("path1", "path2", "expected"),
    [
        ("/c", "/a/b", "/a/b"),
        ("a/b", "..", "a"),
        ("a", "b", "a/b"),
        ("/a", "b/../c", "/a/c"),
        ("/a", "", "/a"),
        ("", "b", "b"),
        ("a", "\\b", "/b"),
    ],
)
def test_resolve(path1: str, path2: str, expected: str) -> None:
    """resolve() appends relative paths and lets absolute ones override."""
    assert generic.resolve(path1, path2) == expected


@pytest.mark.parametrize(
    ("paths", "expected"),
    [
        ([], ""),
        (["a/b/.."], "a"),
        (["a", "b", ".."], "a"),
        (["/foo", "/bar"], "/bar"),
        (["/foo", "bar", "/baz", "qux"], "/baz/qux"),
    ],
)
def test_resolve_n(paths: list[str], expected: str) -> None:
    """resolve_n() folds resolution from left to right."""
    assert generic.resolve_n(paths) == expected


def test_resolve_n_accepts_iterators() -> None:
    """Any iterable of strings may be resolved."""
    assert generic.resolve_n(iter(["a", "b"])) == "a/b"


@pytest.mark.parametrize(
    ("from_path", "to_path", "expected"),
    [
        ("/a/b", "/a/b", ""),
        ("/a/b", "/a/b/c", "c"),
        ("/a/b/c", "/a/c/d", "../../c/d"),
        ("/a/b/c", "/a/b", ".."),
        ("/a/b/c", "/a", "../.."),
        ("/a", "/", ".."),
        ("/", "/a", "a"),
        ("/", "/", ""),
        ("/a/b", "/c/d", "../../c/d"),
        ("/a/b", "/a/c", "../c"),
        ("/a/b/", "\\a\\b\\c\\", "c"),
    ],
)
def test_relative(from_path: str, to_path: str, expected: str) -> None:
    """relative() walks up to the common ancestor and back down."""
    assert generic.relative(from_path, to_path) == expected


@pytest.mark.parametrize(
    ("from_path", "to_path"),
    [("not/absolute", "/x"), ("/x", "not/absolute"), ("", "")],
)
def test_relative_requires_absolute_paths(from_path: str, to_path: str) -> None:
    """Non-absolute arguments are a contract violation."""
    with pytest.raises(NonAbsolutePathError, match="requires absolute paths") as exc:
        generic.relative(from_path, to_path)
    assert isinstance(exc.value, TextPathError)
    assert exc.value.from_path == from_path
    assert exc.value.to_path == to_path
