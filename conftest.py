"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import textpaths.variant


@pytest.fixture(autouse=True)
def reset_native_variant_cache() -> t.Generator[None, None, None]:
    """Ensure each test detects the native variant afresh."""
    textpaths.variant.reset_native_variant()
    yield
    textpaths.variant.reset_native_variant()
