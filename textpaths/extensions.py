"""Extension and base-name helpers operating on plain path strings."""

from __future__ import annotations

import re
import typing as t

from ._validators import require_single_extension

# A trailing run of ``.ext`` groups, e.g. ``.tar.gz`` in ``a.tar.gz``.
_EXTENSION_RUN: t.Final[re.Pattern[str]] = re.compile(r"(\.[^.]+)+$")
# The final ``.ext`` of the last segment; never spans a separator.
_LAST_EXTENSION: t.Final[re.Pattern[str]] = re.compile(r"\.[^./\\]+$")


def extension_arg(extension: str) -> str:
    """Return *extension* with a leading dot added when missing."""
    return extension if extension.startswith(".") else f".{extension}"


def _replace_suffix(path: str, pattern: re.Pattern[str], extension: str) -> str:
    match = pattern.search(path)
    if match is None:
        return path + extension
    return path[: match.start()] + extension


def change_extension(path: str, extension: str) -> str:
    """Replace every trailing extension of *path* with *extension*.

    >>> change_extension("a.x.y", "z")
    'a.z'
    >>> change_extension("a", ".z.w")
    'a.z.w'
    """
    return _replace_suffix(path, _EXTENSION_RUN, extension_arg(extension))


def change_last_extension(path: str, extension: str) -> str:
    """Replace only the final extension of *path* with *extension*.

    >>> change_last_extension("a.x.y", ".z")
    'a.x.z'

    Raises
    ------
    ExtensionArgumentError
        If *extension* contains more than one dot.
    """
    extension = extension_arg(extension)
    require_single_extension(extension)
    return _replace_suffix(path, _LAST_EXTENSION, extension)


def has_extension(path: str, extension: str) -> bool:
    """Return ``True`` if *path* ends with *extension*."""
    return path.endswith(extension_arg(extension))


def has_extensions(path: str, extensions: t.Iterable[str]) -> bool:
    """Return ``True`` if *path* ends with any of *extensions*."""
    return any(has_extension(path, extension) for extension in extensions)


def base_name(path: str) -> str:
    """Return the final ``/``-delimited segment of *path*."""
    return path.rsplit("/", 1)[-1]


def base_name_without_ext(path: str, extensions: t.Iterable[str]) -> str:
    """Return the base name of *path* without its extension.

    Only the last extension of the trailing run is compared against
    *extensions*. On a match the whole run is removed; otherwise the run is
    collapsed to that last extension.

    >>> base_name_without_ext("foo/qux.tar.gz", ["gz"])
    'qux'
    >>> base_name_without_ext("foo/qux.tar.gz", [".css"])
    'qux.gz'
    """
    wanted = {extension_arg(extension) for extension in extensions}
    base = base_name(path)
    match = _EXTENSION_RUN.search(base)
    if match is None:
        return base
    last = match.group(1)
    return base[: match.start()] + ("" if last in wanted else last)


__all__ = [
    "base_name",
    "base_name_without_ext",
    "change_extension",
    "change_last_extension",
    "extension_arg",
    "has_extension",
    "has_extensions",
]
