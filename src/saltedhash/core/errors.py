"""Exception hierarchy shared by every saltedhash module.

All errors derive from :class:`SaltedHashError` and also from
:class:`ValueError`, so callers that only care about "bad input" can catch
the latter.  A wrong password is never an error: ``validate`` returns
``False`` for it.
"""

from __future__ import annotations


class SaltedHashError(Exception):
    """Base class for all saltedhash errors."""


class UnsupportedAlgorithmError(SaltedHashError, ValueError):
    """The requested hash algorithm is not registered."""


class MalformedTokenError(SaltedHashError, ValueError):
    """A token has no ``{SCHEME}`` region, no payload, or bad base64."""


class SchemeParseError(MalformedTokenError, UnsupportedAlgorithmError):
    """A scheme tag is missing its braces or its leading ``S``.

    Raised while mapping a tag to an algorithm, so it is an
    :class:`UnsupportedAlgorithmError`; the tag came out of a bad token, so
    it is a :class:`MalformedTokenError` as well.
    """


class MalformedSaltError(SaltedHashError, ValueError):
    """Salt input could not be turned into raw bytes."""


class TruncatedTokenError(SaltedHashError, ValueError):
    """The decoded payload is shorter than the expected salt length."""
