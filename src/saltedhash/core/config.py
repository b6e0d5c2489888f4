"""Immutable construction options for :class:`~saltedhash.salted_hash.SaltedHash`.

Usage::

    from saltedhash.core.config import SaltedHashOptions

    opts = SaltedHashOptions(algorithm="SHA-256", salt="HEX{6de2088b}")
    SaltedHash.from_options(opts)

Only the shape of the options is checked here.  Whether the algorithm
is registered and the salt well-formed is decided when an instance is
built, so those failures surface as the library's own errors.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from saltedhash.core.defaults import DEFAULT_ALGORITHM, DEFAULT_SALT_LENGTH


class SaltedHashOptions(BaseModel, frozen=True, extra="forbid"):
    """Algorithm and salt settings for one SaltedHash instance."""

    algorithm: str = Field(
        default=DEFAULT_ALGORITHM,
        min_length=1,
        description="Hash algorithm name, e.g. 'SHA-1', 'sha256', 'MD5'.",
    )
    salt: bytes | str | None = Field(
        default=None,
        description="Raw salt bytes, hex text, or 'HEX{...}'.  Generated when omitted.",
    )
    salt_length: int = Field(
        default=DEFAULT_SALT_LENGTH,
        ge=1,
        description="Bytes of salt to generate.  Ignored when salt is given.",
    )
