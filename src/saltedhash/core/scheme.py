"""Bidirectional mapping between algorithm names and token scheme tags.

``SHA-1 -> {SSHA}``, ``SHA-256 -> {SSHA256}``, ``MD5 -> {SMD5}``.
"""

from __future__ import annotations

from saltedhash.core.defaults import SCHEME_CLOSE, SCHEME_OPEN, SCHEME_PREFIX
from saltedhash.core.errors import SchemeParseError
from saltedhash.core.registry import canonical_algorithm, compact_name


def scheme_tag_for(algorithm: str) -> str:
    """Build the braced scheme tag for *algorithm*.

    The name is canonicalised first, its dashes are dropped and it is
    prefixed with ``S``.  ``SHA-1`` is special-cased to ``{SSHA}``.

    Raises:
        UnsupportedAlgorithmError: If *algorithm* is not registered.
    """
    canonical = canonical_algorithm(algorithm)
    body = "SHA" if canonical == "SHA-1" else compact_name(canonical)
    return f"{SCHEME_OPEN}{SCHEME_PREFIX}{body}{SCHEME_CLOSE}"


def algorithm_for_scheme_tag(tag: str) -> str:
    """Inverse of :func:`scheme_tag_for`.

    The tag is matched case-insensitively (``{ssha256}`` -> ``SHA-256``).

    Raises:
        SchemeParseError: If *tag* lacks its braces or the leading ``S``.
        UnsupportedAlgorithmError: If the named algorithm is not registered.
    """
    if len(tag) < 2 or not (tag.startswith(SCHEME_OPEN) and tag.endswith(SCHEME_CLOSE)):
        raise SchemeParseError(f"Scheme tag must be wrapped in braces: {tag!r}")
    inner = tag[1:-1].upper()
    if len(inner) < 2 or not inner.startswith(SCHEME_PREFIX):
        raise SchemeParseError(f"Scheme tag must start with {SCHEME_PREFIX!r}: {tag!r}")
    return canonical_algorithm(inner[len(SCHEME_PREFIX):])
