"""Incremental digest state with non-destructive finalisation.

:class:`DigestState` wraps one registered hash primitive.  Input is
appended with :meth:`DigestState.add`; :meth:`DigestState.finalize_clone`
produces a digest from a copy, so the live state keeps accumulating
afterwards.
"""

from __future__ import annotations

from saltedhash.core.defaults import DEFAULT_ALGORITHM
from saltedhash.core.registry import HashFactory, HashPrimitive, canonical_algorithm, get_factory

Chunk = bytes | bytearray | memoryview | str


def as_bytes(chunk: Chunk) -> bytes:
    """Coerce *chunk* to bytes; text is encoded as UTF-8."""
    if isinstance(chunk, str):
        return chunk.encode("utf-8")
    if isinstance(chunk, (bytes, bytearray, memoryview)):
        return bytes(chunk)
    raise TypeError(f"Cannot hash object of type {type(chunk).__name__}")


class DigestState:
    """Mutable accumulator bound to one algorithm.

    Cloning uses the primitive's ``copy()`` when it has one.  Otherwise
    every chunk fed so far is retained and replayed into a fresh
    primitive.
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._algorithm = canonical_algorithm(algorithm)
        self._factory: HashFactory = get_factory(self._algorithm)
        self._primitive: HashPrimitive = self._factory()
        self._replay: list[bytes] | None = (
            None if callable(getattr(self._primitive, "copy", None)) else []
        )

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def digest_size(self) -> int:
        return self._primitive.digest_size

    def add(self, *chunks: Chunk) -> None:
        """Append the concatenation of *chunks*, in order, with no separator."""
        data = b"".join(as_bytes(c) for c in chunks)
        self._primitive.update(data)
        if self._replay is not None:
            self._replay.append(data)

    def _copy_primitive(self) -> HashPrimitive:
        if self._replay is None:
            return self._primitive.copy()  # type: ignore[attr-defined]
        fresh = self._factory()
        for data in self._replay:
            fresh.update(data)
        return fresh

    def clone(self) -> DigestState:
        """Independent copy of this state; later input to either is not shared."""
        other = DigestState.__new__(DigestState)
        other._algorithm = self._algorithm
        other._factory = self._factory
        other._primitive = self._copy_primitive()
        other._replay = None if self._replay is None else list(self._replay)
        return other

    def finalize_clone(self, *extra: Chunk) -> bytes:
        """Digest of everything added so far plus *extra*, leaving this state untouched."""
        copy = self._copy_primitive()
        if extra:
            copy.update(b"".join(as_bytes(c) for c in extra))
        return copy.digest()
