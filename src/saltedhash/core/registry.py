"""Registry of hash primitives addressable by canonical algorithm name.

Algorithms are selected by name at runtime.  Each name maps to a
zero-argument factory returning a fresh :class:`HashPrimitive`; adding an
algorithm means registering a factory, not editing a dispatch table.

Names are matched case-insensitively and without dashes, underscores or
slashes, so ``sha256``, ``sha3_256`` and ``SHA-256`` all resolve to
their canonical dashed spelling.  The bare ``SHA`` is an alias for
``SHA-1`` (it is what the ``{SSHA}`` scheme tag carries).
"""

from __future__ import annotations

import functools
import hashlib
import logging
from typing import Callable, Final, Protocol, runtime_checkable

from saltedhash.core.errors import UnsupportedAlgorithmError

logger = logging.getLogger(__name__)


@runtime_checkable
class HashPrimitive(Protocol):
    """Incremental hash object contract.

    Anything with ``update``/``digest``/``digest_size`` qualifies, which
    covers every :mod:`hashlib` object.  ``copy()`` is optional: primitives
    without it are cloned by replaying their input (see
    :class:`~saltedhash.core.digest.DigestState`).
    """

    @property
    def digest_size(self) -> int: ...
    def update(self, data: bytes, /) -> None: ...
    def digest(self) -> bytes: ...


HashFactory = Callable[[], HashPrimitive]

_ALIASES: Final[dict[str, str]] = {"SHA": "SHA1"}

# compact name (upper case, no dashes, underscores or slashes) -> (canonical name, factory)
_REGISTRY: dict[str, tuple[str, HashFactory]] = {}


def compact_name(name: str) -> str:
    """Upper-case *name* and drop separators (``sha-512/256`` -> ``SHA512256``)."""
    return name.strip().upper().replace("-", "").replace("_", "").replace("/", "")


def register_algorithm(name: str, factory: HashFactory) -> str:
    """Make *factory* available under *name*.

    Args:
        name: Canonical algorithm name, e.g. ``"SHA-256"``.  Stored upper case.
        factory: Zero-argument callable returning a fresh hash primitive.

    Returns:
        The canonical name under which the algorithm was registered.

    Raises:
        ValueError: If *name* is empty or collides with a registered name
            once dashes and case are ignored.
    """
    canonical = name.strip().upper()
    key = compact_name(canonical)
    if not key:
        raise ValueError("algorithm name must not be empty")
    if key in _ALIASES:
        raise ValueError(f"{name!r} is reserved as an alias of {_ALIASES[key]}")
    existing = _REGISTRY.get(key)
    if existing is not None and existing[0] != canonical:
        raise ValueError(f"{name!r} collides with registered algorithm {existing[0]!r}")
    _REGISTRY[key] = (canonical, factory)
    logger.debug("Registered hash algorithm %s", canonical)
    return canonical


def canonical_algorithm(name: str) -> str:
    """Resolve *name* to its registered canonical spelling.

    Raises:
        UnsupportedAlgorithmError: If no registered algorithm matches.
    """
    key = compact_name(name)
    key = _ALIASES.get(key, key)
    try:
        return _REGISTRY[key][0]
    except KeyError:
        raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {name!r}") from None


def get_factory(name: str) -> HashFactory:
    """Return the primitive factory for *name* (any accepted spelling)."""
    return _REGISTRY[compact_name(canonical_algorithm(name))][1]


def supported_algorithms() -> tuple[str, ...]:
    """Canonical names of every registered algorithm, in registration order."""
    return tuple(canonical for canonical, _ in _REGISTRY.values())


register_algorithm("MD5", hashlib.md5)
register_algorithm("SHA-1", hashlib.sha1)
register_algorithm("SHA-224", hashlib.sha224)
register_algorithm("SHA-256", hashlib.sha256)
register_algorithm("SHA-384", hashlib.sha384)
register_algorithm("SHA-512", hashlib.sha512)
register_algorithm("SHA3-224", hashlib.sha3_224)
register_algorithm("SHA3-256", hashlib.sha3_256)
register_algorithm("SHA3-384", hashlib.sha3_384)
register_algorithm("SHA3-512", hashlib.sha3_512)
register_algorithm("BLAKE2B", hashlib.blake2b)
register_algorithm("BLAKE2S", hashlib.blake2s)

# Truncated SHA-512 variants come from OpenSSL and are not always built in.
for _name, _hashlib_name in (("SHA-512/224", "sha512_224"), ("SHA-512/256", "sha512_256")):
    if _hashlib_name in hashlib.algorithms_available:
        register_algorithm(_name, functools.partial(hashlib.new, _hashlib_name))
