"""Shared fixtures for the saltedhash test suite."""

from __future__ import annotations

import hashlib
from collections.abc import Iterator

import pytest

from saltedhash.core import registry


@pytest.fixture()
def known_salt() -> bytes:
    return bytes.fromhex("6de2088b")


@pytest.fixture()
def known_sha1_token() -> str:
    """``{SSHA}`` token for clear text ``testing123`` with salt ``6de2088b``."""
    return "{SSHA}72uhy5xc1AWOLwmNcXALHBSzp8xt4giL"


@pytest.fixture()
def restore_registry() -> Iterator[None]:
    """Undo any :func:`register_algorithm` calls made by a test."""
    saved = dict(registry._REGISTRY)
    yield
    registry._REGISTRY.clear()
    registry._REGISTRY.update(saved)


class NoCopySha256:
    """hashlib-like primitive that cannot be copied."""

    digest_size = 32

    def __init__(self) -> None:
        self._inner = hashlib.sha256()

    def update(self, data: bytes) -> None:
        self._inner.update(data)

    def digest(self) -> bytes:
        return self._inner.digest()


@pytest.fixture()
def nocopy_algorithm(restore_registry: None) -> str:
    return registry.register_algorithm("NOCOPY-256", NoCopySha256)
