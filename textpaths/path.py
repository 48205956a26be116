"""Immutable path value bound to a platform variant."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from . import argumented, extensions
from .variant import PlatformVariant, native_variant


@dc.dataclass(frozen=True, slots=True, order=True, init=False)
class Path:
    """A resolved textual path together with the variant it was resolved under.

    The stored text is always the output of :func:`argumented.resolve_one`
    (or :func:`argumented.resolve_n`) for :attr:`variant`; raw strings never
    leak in. Every transformation returns a new ``Path``.

    >>> str(Path.generic("a/b").resolve(".."))
    'a'
    >>> Path.generic("/a/b").relative("/c/d")
    '../../c/d'
    """

    text: str
    variant: PlatformVariant

    def __init__(
        self, path: str = "", variant: PlatformVariant = PlatformVariant.GENERIC
    ) -> None:
        self._set(argumented.resolve_one(path, variant), variant)

    def _set(self, text: str, variant: PlatformVariant) -> None:
        object.__setattr__(self, "text", text)
        object.__setattr__(self, "variant", variant)

    @classmethod
    def _resolved(cls, text: str, variant: PlatformVariant) -> Path:
        """Wrap *text* that is already resolved for *variant*."""
        path = cls.__new__(cls)
        path._set(text, variant)
        return path

    @classmethod
    def generic(cls, path: str) -> Path:
        """Construct a ``Path`` using the generic variant."""
        return cls(path, PlatformVariant.GENERIC)

    @classmethod
    def native(cls, path: str) -> Path:
        """Construct a ``Path`` using the host platform's variant."""
        return cls(path, native_variant())

    @classmethod
    def from_n(cls, paths: t.Iterable[str], variant: PlatformVariant) -> Path:
        """Construct a ``Path`` by resolving *paths* left to right."""
        return cls._resolved(argumented.resolve_n(paths, variant), variant)

    @classmethod
    def from_n_generic(cls, paths: t.Iterable[str]) -> Path:
        """Construct a ``Path`` from multiple paths using the generic variant."""
        return cls.from_n(paths, PlatformVariant.GENERIC)

    @classmethod
    def from_n_native(cls, paths: t.Iterable[str]) -> Path:
        """Construct a ``Path`` from multiple paths using the native variant."""
        return cls.from_n(paths, native_variant())

    def __str__(self) -> str:
        return self.text

    def is_absolute(self) -> bool:
        """Return ``True`` when this path is absolute under its variant."""
        return argumented.is_absolute(self.text, self.variant)

    def resolve(self, path2: str) -> Path:
        """Return a new ``Path`` with *path2* resolved against this one."""
        return self._resolved(
            argumented.resolve(self.text, path2, self.variant), self.variant
        )

    def resolve_n(self, paths: t.Iterable[str]) -> Path:
        """Return a new ``Path`` with all *paths* resolved against this one."""
        return self.resolve(argumented.resolve_n(paths, self.variant))

    def relative(self, to_path: str) -> str:
        """Return the relative path from this path to *to_path*.

        Raises
        ------
        NonAbsolutePathError
            If this path or *to_path* is not absolute.
        """
        return argumented.relative(self.text, to_path, self.variant)

    def change_extension(self, extension: str) -> Path:
        """Return a new ``Path`` whose trailing extensions become *extension*."""
        return self._resolved(
            extensions.change_extension(self.text, extension), self.variant
        )

    def change_last_extension(self, extension: str) -> Path:
        """Return a new ``Path`` whose final extension becomes *extension*."""
        return self._resolved(
            extensions.change_last_extension(self.text, extension), self.variant
        )

    def has_extension(self, extension: str) -> bool:
        """Return ``True`` if this path ends with *extension*."""
        return extensions.has_extension(self.text, extension)

    def has_extensions(self, candidates: t.Iterable[str]) -> bool:
        """Return ``True`` if this path ends with any of *candidates*."""
        return extensions.has_extensions(self.text, candidates)

    def base_name(self) -> str:
        """Return the final segment of this path."""
        return extensions.base_name(self.text)

    def base_name_without_ext(self, candidates: t.Iterable[str]) -> str:
        """Return the base name with a matching extension run removed."""
        return extensions.base_name_without_ext(self.text, candidates)


__all__ = ["Path"]
