"""Tests for the unpadded base64url codec."""

from __future__ import annotations

import logging

import pytest

from encoded_bytes import ALPHABET, Base64Url, DecodingConfig, DecodingError


@pytest.mark.parametrize(
    ("raw", "encoded"),
    [
        (b"", b""),
        (b"f", b"Zg"),
        (b"fo", b"Zm8"),
        (b"foo", b"Zm9v"),
        (b"foobar", b"Zm9vYmFy"),
        (b"aa\xbf", b"YWG_"),
        (b"\xfb\xff", b"-_8"),
    ],
)
def test_encode_vectors(raw: bytes, encoded: bytes) -> None:
    """Known vectors encode without padding and decode back."""
    assert Base64Url.encode(raw) == encoded
    assert Base64Url.encode_text(raw) == encoded.decode("ascii")
    assert Base64Url.decode(encoded) == raw
    assert Base64Url.decode(encoded.decode("ascii")) == raw


def test_alphabet_is_url_safe_ascii() -> None:
    """The alphabet has 64 URL-safe ASCII characters."""
    assert len(set(ALPHABET)) == 64
    assert b"+" not in ALPHABET and b"/" not in ALPHABET and b"=" not in ALPHABET


def test_invalid_character_fails() -> None:
    """Characters outside the alphabet are rejected with their offset."""
    with pytest.raises(DecodingError, match="invalid character at offset: 16"):
        Base64Url.decode("not-valid-base64!")


def test_standard_alphabet_characters_fail() -> None:
    """'+' and '/' belong to the standard alphabet, not base64url."""
    with pytest.raises(DecodingError, match="invalid character at offset: 3"):
        Base64Url.decode("YWG/")
    with pytest.raises(DecodingError, match="invalid character at offset: 0"):
        Base64Url.decode("+A")


def test_non_ascii_text_fails() -> None:
    """Non-ASCII text is reported as an invalid character."""
    with pytest.raises(DecodingError, match="invalid character at offset: 4"):
        Base64Url.decode("Zm9vé")


@pytest.mark.parametrize("encoded", ["Z", "Zm9vY", "Zm9vYmFyZ"])
def test_invalid_length_fails(encoded: str) -> None:
    """One leftover character cannot encode a byte."""
    with pytest.raises(DecodingError, match="invalid length"):
        Base64Url.decode(encoded)


def test_padded_input_is_accepted_by_default() -> None:
    """Correctly padded input decodes with the default configuration."""
    assert Base64Url.decode("Zg==") == b"f"
    assert Base64Url.decode("Zm8=") == b"fo"


@pytest.mark.parametrize("encoded", ["Zg=", "Zg===", "Zm9v=", "Z=g"])
def test_bad_padding_fails(encoded: str) -> None:
    """Misplaced or excessive padding is rejected."""
    with pytest.raises(DecodingError, match="invalid padding"):
        Base64Url.decode(encoded)


def test_strict_config_rejects_padding() -> None:
    """The strict configuration accepts only the unpadded form."""
    with pytest.raises(DecodingError, match="invalid padding"):
        Base64Url.decode("Zg==", DecodingConfig.strict())
    assert Base64Url.decode("Zg", DecodingConfig.strict()) == b"f"


def test_non_canonical_input() -> None:
    """Non-zero unused bits are rejected unless canonical form is not required."""
    with pytest.raises(DecodingError, match="non-canonical encoding"):
        Base64Url.decode("Zh")
    assert Base64Url.decode("Zh", DecodingConfig(require_canonical=False)) == b"f"


def test_decoding_error_is_value_error() -> None:
    """Parse failures are ordinary bad-input errors."""
    with pytest.raises(ValueError):
        Base64Url.decode("!!")


def test_failures_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Rejected input is logged at debug level."""
    with caplog.at_level(logging.DEBUG, logger="encoded_bytes.encoding.base64url"):
        with pytest.raises(DecodingError):
            Base64Url.decode("!")
    assert "invalid character at offset: 0" in caplog.text


def test_lone_surrogate_fails() -> None:
    """Text that cannot be UTF-8 encoded is reported as an invalid character."""
    with pytest.raises(DecodingError, match="invalid character at offset: 4") as excinfo:
        Base64Url.decode("Zm9v\udcff")
    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
    with pytest.raises(DecodingError, match="invalid character at offset: 0"):
        Base64Url.decode("\ud800")
