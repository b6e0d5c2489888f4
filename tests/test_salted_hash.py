"""Tests for the SaltedHash public API: construction, generate and validate."""

from __future__ import annotations

import logging

import pytest

from saltedhash.core.config import SaltedHashOptions
from saltedhash.core.errors import (
    MalformedSaltError,
    MalformedTokenError,
    SchemeParseError,
    TruncatedTokenError,
    UnsupportedAlgorithmError,
)
from saltedhash.core.registry import supported_algorithms
from saltedhash.salted_hash import SaltedHash

_BUILTINS = ("MD5", "SHA-1", "SHA-224", "SHA-256", "SHA-384", "SHA-512", "SHA3-256", "BLAKE2B")


class TestConstruction:
    def test_defaults(self) -> None:
        csh = SaltedHash()
        assert csh.algorithm == "SHA-1"
        assert csh.scheme == "{SSHA}"
        assert len(csh.salt) == 4
        assert csh.salt_hex == csh.salt.hex()

    def test_algorithm_spelling_normalised(self) -> None:
        csh = SaltedHash(algorithm="sha256")
        assert csh.algorithm == "SHA-256"
        assert csh.scheme == "{SSHA256}"

    def test_explicit_salt_forms(self, known_salt: bytes) -> None:
        assert SaltedHash(salt=known_salt).salt == known_salt
        assert SaltedHash(salt="6de2088b").salt == known_salt
        assert SaltedHash(salt="HEX{6de2088b}").salt_hex == "6de2088b"

    def test_generated_salt_length(self) -> None:
        assert len(SaltedHash(salt_length=12).salt) == 12

    def test_explicit_salt_wins_over_length(self, known_salt: bytes) -> None:
        assert SaltedHash(salt=known_salt, salt_length=16).salt == known_salt

    def test_unsupported_algorithm(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError):
            SaltedHash(algorithm="CRC32")

    def test_bad_salt(self) -> None:
        with pytest.raises(MalformedSaltError):
            SaltedHash(salt="HEX{xyz}")

    def test_from_options(self, known_salt: bytes) -> None:
        opts = SaltedHashOptions(algorithm="SHA-512", salt="HEX{6de2088b}")
        csh = SaltedHash.from_options(opts)
        assert csh.algorithm == "SHA-512"
        assert csh.salt == known_salt

    def test_digest_accessor_is_live_state(self) -> None:
        csh = SaltedHash(algorithm="MD5")
        csh.add("abc")
        assert csh.digest.algorithm == "MD5"
        csh.digest.add("def")
        other = SaltedHash(algorithm="MD5", salt=csh.salt)
        other.add("abcdef")
        assert csh.generate() == other.generate()

    def test_repr(self) -> None:
        assert repr(SaltedHash(algorithm="md5")) == "SaltedHash(algorithm='MD5', scheme='{SMD5}')"


class TestGenerate:
    def test_known_token(self, known_salt: bytes, known_sha1_token: str) -> None:
        csh = SaltedHash(algorithm="SHA-1", salt=known_salt)
        csh.add("testing123")
        assert csh.generate() == known_sha1_token

    def test_md5_known_token(self) -> None:
        csh = SaltedHash(algorithm="MD5", salt="abcdef01")
        csh.add("secret")
        assert csh.generate() == "{SMD5}6QQ48NCYSxnDtyLKE7MeT6vN7wE="

    def test_sha3_known_token(self) -> None:
        csh = SaltedHash(algorithm="SHA3-256", salt=b"\x01\x02\x03\x04")
        csh.add("secret")
        token = csh.generate()
        assert token == "{SSHA3256}Z+diDTTK+s8evnX5cE+6OiczLTR0TWprREYYAlpPJYwBAgME"
        assert SaltedHash.validate(token, "secret")
        assert not SaltedHash.validate(token, "Secret")

    def test_generate_is_repeatable(self) -> None:
        csh = SaltedHash()
        csh.add("pw")
        assert csh.generate() == csh.generate()

    def test_generate_does_not_consume_input(self) -> None:
        csh = SaltedHash(algorithm="SHA-256")
        csh.add("a")
        csh.generate()
        csh.add("b")

        fresh = SaltedHash(algorithm="SHA-256", salt=csh.salt)
        fresh.add("ab")
        assert csh.generate() == fresh.generate()

    def test_multiple_arguments_join(self, known_salt: bytes, known_sha1_token: str) -> None:
        csh = SaltedHash(salt=known_salt)
        csh.add("testing", b"1", "23")
        assert csh.generate() == known_sha1_token

    def test_different_salts_differ(self) -> None:
        first, second = SaltedHash(salt="01020304"), SaltedHash(salt="05060708")
        first.add("same")
        second.add("same")
        assert first.generate() != second.generate()


class TestValidate:
    def test_known_token(self, known_sha1_token: str) -> None:
        assert SaltedHash.validate(known_sha1_token, "testing123") is True
        assert SaltedHash.validate(known_sha1_token, "Test123") is False

    @pytest.mark.parametrize("algorithm", _BUILTINS)
    @pytest.mark.parametrize("clear_text", ["", "secret", "pässwörd", "x" * 300])
    def test_round_trip(self, algorithm: str, clear_text: str) -> None:
        csh = SaltedHash(algorithm=algorithm)
        csh.add(clear_text)
        token = csh.generate()
        assert SaltedHash.validate(token, clear_text)
        assert not SaltedHash.validate(token, clear_text + "!")

    def test_every_registered_algorithm_round_trips(self) -> None:
        for algorithm in supported_algorithms():
            csh = SaltedHash(algorithm=algorithm)
            csh.add("pw")
            assert SaltedHash.validate(csh.generate(), "pw")

    def test_bytes_clear_text(self) -> None:
        csh = SaltedHash()
        csh.add(b"\x00\xffbinary")
        assert SaltedHash.validate(csh.generate(), b"\x00\xffbinary")

    def test_custom_salt_length_needs_matching_length(self) -> None:
        csh = SaltedHash(algorithm="SHA-256", salt_length=16)
        csh.add("pw")
        token = csh.generate()
        assert SaltedHash.validate(token, "pw", salt_length=16)
        assert not SaltedHash.validate(token, "pw")
        assert not SaltedHash.validate(token, "pw", salt_length=8)

    def test_oversized_salt_length_is_truncated(self) -> None:
        csh = SaltedHash(algorithm="MD5")
        csh.add("pw")
        with pytest.raises(TruncatedTokenError):
            SaltedHash.validate(csh.generate(), "pw", salt_length=64)

    def test_lower_case_scheme_never_matches(self, known_sha1_token: str) -> None:
        lowered = known_sha1_token.replace("{SSHA}", "{ssha}")
        assert SaltedHash.validate(lowered, "testing123") is False

    def test_lower_case_scheme_logs_warning(
        self, known_sha1_token: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        lowered = known_sha1_token.replace("{SSHA}", "{ssha}")
        with caplog.at_level(logging.WARNING, logger="saltedhash.salted_hash"):
            SaltedHash.validate(lowered, "testing123")
        assert "not upper case" in caplog.text

    def test_tampered_payload_is_mismatch(self, known_sha1_token: str) -> None:
        tampered = known_sha1_token.replace("72uh", "72uI")
        assert SaltedHash.validate(tampered, "testing123") is False

    def test_trailing_whitespace_is_mismatch(self, known_sha1_token: str) -> None:
        assert SaltedHash.validate(known_sha1_token + " ", "testing123") is False

    def test_malformed_token_raises(self) -> None:
        with pytest.raises(MalformedTokenError):
            SaltedHash.validate("not-a-token", "testing123")

    def test_scheme_without_s_raises(self) -> None:
        with pytest.raises(SchemeParseError):
            SaltedHash.validate("{XSHA}72uhy5xc1AWOLwmNcXALHBSzp8xt4giL", "testing123")

    def test_scheme_without_s_is_malformed_token(self) -> None:
        with pytest.raises(MalformedTokenError, match="must start with"):
            SaltedHash.validate("{XSHA}72uhy5xc1AWOLwmNcXALHBSzp8xt4giL", "testing123")

    def test_unknown_scheme_raises(self) -> None:
        with pytest.raises(UnsupportedAlgorithmError):
            SaltedHash.validate("{SCRYPT}72uhy5xc1AWOLwmNcXALHBSzp8xt4giL", "testing123")

    def test_validate_never_logs_secrets(
        self, known_sha1_token: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="saltedhash"):
            SaltedHash.validate(known_sha1_token, "testing123")
        assert "testing123" not in caplog.text
        assert "72uhy5xc1AWOLwmNcXALHBSzp8xt4giL" not in caplog.text
        assert "6de2088b" not in caplog.text
        assert "match" in caplog.text
