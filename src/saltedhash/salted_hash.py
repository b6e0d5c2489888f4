"""RFC-3112 salted hashes (``{SSHA}``-style tokens).

Usage::

    from saltedhash.salted_hash import SaltedHash

    csh = SaltedHash(algorithm="SHA-1")
    csh.add("secret")
    token = csh.generate()            # '{SSHA}...'
    SaltedHash.validate(token, "secret")   # True

A token is the scheme tag followed by ``base64(digest ++ salt)``, where
the digest is taken over the clear text followed by the salt.  Salt
length is not stored in the token: if you generate with a salt other
than 4 bytes, pass the same ``salt_length`` to :meth:`SaltedHash.validate`.
"""

from __future__ import annotations

import logging

from saltedhash.core.codec import decode_token, extract_salt, generate_token
from saltedhash.core.config import SaltedHashOptions
from saltedhash.core.defaults import DEFAULT_ALGORITHM, DEFAULT_SALT_LENGTH
from saltedhash.core.digest import Chunk, DigestState
from saltedhash.core.salt import SaltInput, generate_salt, parse_salt, salt_to_hex
from saltedhash.core.scheme import algorithm_for_scheme_tag, scheme_tag_for

logger = logging.getLogger(__name__)


class SaltedHash:
    """Accumulates clear text and renders it as salted-hash tokens.

    Algorithm, salt and scheme tag are fixed at construction.  Input may
    be added at any time; :meth:`generate` can be called repeatedly and
    never consumes the accumulated input.

    Raises on construction:
        UnsupportedAlgorithmError: Unknown *algorithm*.
        MalformedSaltError: Unparseable *salt* or non-positive *salt_length*.
    """

    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        salt: SaltInput | None = None,
        *,
        salt_length: int = DEFAULT_SALT_LENGTH,
    ) -> None:
        self._digest = DigestState(algorithm)
        self._scheme = scheme_tag_for(self._digest.algorithm)
        self._salt = generate_salt(salt_length) if salt is None else parse_salt(salt)
        logger.debug(
            "SaltedHash created: algorithm=%s scheme=%s salt_length=%d",
            self._digest.algorithm, self._scheme, len(self._salt),
        )

    @classmethod
    def from_options(cls, options: SaltedHashOptions) -> SaltedHash:
        return cls(options.algorithm, options.salt, salt_length=options.salt_length)

    # -- accessors -------------------------------------------------------------

    @property
    def algorithm(self) -> str:
        """Canonical algorithm name, e.g. ``"SHA-256"``."""
        return self._digest.algorithm

    @property
    def scheme(self) -> str:
        """Braced scheme tag, e.g. ``"{SSHA256}"``."""
        return self._scheme

    @property
    def salt(self) -> bytes:
        """Raw salt bytes appended to every generated token."""
        return self._salt

    @property
    def salt_hex(self) -> str:
        return salt_to_hex(self._salt)

    @property
    def digest(self) -> DigestState:
        """The live digest state (shared, not a copy)."""
        return self._digest

    # -- accumulation / output ---------------------------------------------------

    def add(self, *data: Chunk) -> None:
        """Logically join *data* into one string and feed it to the digest.

        ``str`` values are encoded as UTF-8.
        """
        self._digest.add(*data)

    def generate(self) -> str:
        """Return the token for everything added so far."""
        token = generate_token(self._digest, self._salt, self._scheme)
        logger.debug("Generated %s token", self._scheme)
        return token

    # -- validation --------------------------------------------------------------

    @classmethod
    def validate(
        cls,
        hashed: str,
        clear_text: Chunk,
        salt_length: int = DEFAULT_SALT_LENGTH,
    ) -> bool:
        """Check *clear_text* against a stored token.

        The token's own scheme tag selects the algorithm, and its trailing
        *salt_length* bytes are taken as the salt.  The token is rebuilt
        from *clear_text* and compared exactly, so a lower-case scheme tag
        or a wrong *salt_length* yields ``False``.

        Returns:
            ``True`` only on an exact match; a wrong password is ``False``.

        Raises:
            MalformedTokenError: No ``{...}`` region, no payload, bad base64.
            SchemeParseError: Scheme tag without its leading ``S``.
            UnsupportedAlgorithmError: Scheme names an unregistered algorithm.
            TruncatedTokenError: Payload shorter than *salt_length*.
        """
        scheme, payload = decode_token(hashed)
        if scheme != scheme.upper():
            logger.warning("Scheme tag %s is not upper case; it will never match", scheme)
        algorithm = algorithm_for_scheme_tag(scheme)
        salt = extract_salt(payload, salt_length)

        candidate = cls(algorithm, salt)
        candidate.add(clear_text)
        matched = candidate.generate() == hashed
        logger.debug("Validated %s token: %s", scheme, "match" if matched else "mismatch")
        return matched

    def __repr__(self) -> str:
        return f"{type(self).__name__}(algorithm={self.algorithm!r}, scheme={self.scheme!r})"
