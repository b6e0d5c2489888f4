"""Centralised default constants for saltedhash.

Every project-wide magic number / string lives here.
Import these instead of hard-coding values in function signatures.
"""

from __future__ import annotations

from typing import Final

# ── Algorithms ──
DEFAULT_ALGORITHM: Final[str] = "SHA-1"

# ── Salt ──
DEFAULT_SALT_LENGTH: Final[int] = 4
HEX_ALPHABET: Final[str] = "0123456789abcdef"
HEX_SALT_PREFIX: Final[str] = "HEX{"
HEX_SALT_SUFFIX: Final[str] = "}"

# ── Token layout ──
SCHEME_OPEN: Final[str] = "{"
SCHEME_CLOSE: Final[str] = "}"
SCHEME_PREFIX: Final[str] = "S"
