"""Salt generation and parsing.

A salt is always handled as raw bytes internally.  Callers may supply it as
bytes, as plain hex text (``"6de2088b"``) or wrapped as ``"HEX{6de2088b}"``.
"""

from __future__ import annotations

import secrets
import string

from saltedhash.core.defaults import (
    DEFAULT_SALT_LENGTH,
    HEX_ALPHABET,
    HEX_SALT_PREFIX,
    HEX_SALT_SUFFIX,
)
from saltedhash.core.errors import MalformedSaltError

SaltInput = bytes | bytearray | memoryview | str


def generate_salt(length: int = DEFAULT_SALT_LENGTH) -> bytes:
    """Return *length* random salt bytes.

    Drawn as ``2 * length`` random hex characters, the first of which is
    never ``0``, then packed to bytes.  Tokens produced this way therefore
    never start their salt with a byte below ``0x10``.

    Raises:
        MalformedSaltError: If *length* is not positive.
    """
    if length < 1:
        raise MalformedSaltError(f"Salt length must be positive, got {length}")
    chars = [secrets.choice(HEX_ALPHABET[1:])]
    chars.extend(secrets.choice(HEX_ALPHABET) for _ in range(2 * length - 1))
    return bytes.fromhex("".join(chars))


def parse_salt(value: SaltInput) -> bytes:
    """Normalise a caller-supplied salt to raw bytes.

    Args:
        value: Raw bytes, plain hex text, or hex text wrapped as ``HEX{...}``.

    Raises:
        MalformedSaltError: Empty salt, bad hex, unterminated ``HEX{``, or
            an unsupported type.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if not raw:
            raise MalformedSaltError("Salt must not be empty")
        return raw
    if not isinstance(value, str):
        raise MalformedSaltError(f"Unsupported salt type: {type(value).__name__}")

    text = value
    if text.upper().startswith(HEX_SALT_PREFIX):
        if not text.endswith(HEX_SALT_SUFFIX):
            raise MalformedSaltError(f"Unterminated {HEX_SALT_PREFIX} salt: {value!r}")
        text = text[len(HEX_SALT_PREFIX):-len(HEX_SALT_SUFFIX)]
    return _hex_to_bytes(text)


def _hex_to_bytes(text: str) -> bytes:
    if not text:
        raise MalformedSaltError("Salt must not be empty")
    if len(text) % 2:
        raise MalformedSaltError(f"Hex salt has odd length ({len(text)})")
    if any(c not in string.hexdigits for c in text):
        raise MalformedSaltError(f"Hex salt contains non-hex characters: {text!r}")
    return bytes.fromhex(text)


def salt_to_hex(salt: bytes) -> str:
    """Lower-case hex rendering of *salt*."""
    return salt.hex()


def format_hex_salt(salt: bytes) -> str:
    """Render *salt* in the ``HEX{...}`` form accepted by :func:`parse_salt`."""
    return f"{HEX_SALT_PREFIX}{salt.hex()}{HEX_SALT_SUFFIX}"
