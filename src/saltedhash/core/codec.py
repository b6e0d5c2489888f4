"""Token encoding and decoding.

Token layout::

    {SCHEME}base64(digest ++ salt)

The salt length is not recorded in the token; the decoder must be told it
(default 4 bytes).
"""

from __future__ import annotations

import base64
import binascii

from saltedhash.core.defaults import DEFAULT_SALT_LENGTH, SCHEME_CLOSE, SCHEME_OPEN
from saltedhash.core.digest import DigestState
from saltedhash.core.errors import MalformedSaltError, MalformedTokenError, TruncatedTokenError


def generate_token(state: DigestState, salt: bytes, scheme_tag: str) -> str:
    """Encode *state* plus *salt* as a token.

    The salt is appended to a clone of *state* only, so the live
    accumulator can keep receiving input.
    """
    digest = state.finalize_clone(salt)
    payload = base64.b64encode(digest + salt).decode("ascii")
    return f"{scheme_tag}{payload}"


def decode_token(token: str) -> tuple[str, str]:
    """Split *token* into its braced scheme tag and base64 payload.

    The tag runs from the first ``{`` to the next ``}``; the payload is
    everything after it up to the first whitespace character.

    Raises:
        MalformedTokenError: If there is no ``{...}`` region or no payload.
    """
    start = token.find(SCHEME_OPEN)
    if start < 0:
        raise MalformedTokenError(f"Token has no scheme tag: {token!r}")
    end = token.find(SCHEME_CLOSE, start + 1)
    if end < 0:
        raise MalformedTokenError(f"Token scheme tag is not closed: {token!r}")

    stop = end + 1
    while stop < len(token) and not token[stop].isspace():
        stop += 1
    payload = token[end + 1:stop]
    if not payload:
        raise MalformedTokenError(f"Token has no payload after its scheme tag: {token!r}")
    return token[start:end + 1], payload


def split_payload(payload: str, salt_length: int = DEFAULT_SALT_LENGTH) -> tuple[bytes, bytes]:
    """Base64-decode *payload* into ``(digest, salt)``.

    Raises:
        MalformedSaltError: If *salt_length* is not positive.
        MalformedTokenError: If *payload* is not valid base64.
        TruncatedTokenError: If the decoded bytes are shorter than *salt_length*.
    """
    if salt_length < 1:
        raise MalformedSaltError(f"Salt length must be positive, got {salt_length}")
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedTokenError(f"Token payload is not valid base64: {exc}") from exc
    if len(raw) < salt_length:
        raise TruncatedTokenError(
            f"Decoded payload is {len(raw)} bytes, shorter than salt length {salt_length}"
        )
    cut = len(raw) - salt_length
    return raw[:cut], raw[cut:]


def extract_salt(payload: str, salt_length: int = DEFAULT_SALT_LENGTH) -> bytes:
    """Return the trailing *salt_length* bytes of the decoded *payload*."""
    return split_payload(payload, salt_length)[1]
