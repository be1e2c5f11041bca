"""Unpadded base64url encoding utilities.

This module provides the URL-safe base64 codec (RFC 4648 Section 5) used for
every textual representation of EncodedBytes. Output never carries '='
padding; input is validated against the alphabet before decoding.
"""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Union

from encoded_bytes.exceptions import DecodingError

logger = logging.getLogger(__name__)

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

# The text view of encoded output is ASCII, never Latin-1 reinterpretation.
assert ALPHABET.isascii() and len(ALPHABET) == 64

_ALPHABET_SET = frozenset(ALPHABET)
_PAD = ord("=")


@dataclass(frozen=True)
class DecodingConfig:
    """Decoder configuration.

    Attributes:
        accept_padding: Also accept correctly '='-padded input. Encoded output
            is always unpadded regardless of this setting.
        require_canonical: Reject input whose final character carries
            non-zero unused bits (e.g. "YR" instead of "YQ").
    """

    accept_padding: bool = True
    require_canonical: bool = True

    @classmethod
    def strict(cls) -> DecodingConfig:
        """Configuration accepting only the canonical unpadded form."""
        return cls(accept_padding=False, require_canonical=True)


DEFAULT_DECODING = DecodingConfig()


def _failure(message: str) -> DecodingError:
    logger.debug("rejected base64url input: %s", message)
    return DecodingError(message)


class Base64Url:
    """Base64url codec without padding.

    This class provides static methods to encode bytes to unpadded base64url
    and decode base64url back to bytes, rejecting characters outside the
    alphabet and impossible lengths instead of silently skipping them.
    """

    @staticmethod
    def encode(data: bytes) -> bytes:
        """Encode bytes to unpadded base64url.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded bytes, drawn only from ALPHABET.

        Example:
            >>> Base64Url.encode(b"aa\\xbf")
            b'YWG_'
        """
        return base64.urlsafe_b64encode(data).rstrip(b"=")

    @staticmethod
    def encode_text(data: bytes) -> str:
        """Encode bytes to an unpadded base64url string.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        return Base64Url.encode(data).decode("ascii")

    @staticmethod
    def decode(
        data: Union[bytes, bytearray, memoryview, str],
        config: DecodingConfig = DEFAULT_DECODING,
    ) -> bytes:
        """Decode base64url input to bytes.

        Text input is UTF-8 encoded first, so any non-ASCII character is
        reported as an invalid character.

        Args:
            data: The encoded text or bytes.
            config: Decoder configuration.

        Returns:
            The decoded bytes.

        Raises:
            DecodingError: If the input contains characters outside the
                alphabet, has misplaced padding, has an impossible length, or
                is not canonically encoded.

        Example:
            >>> Base64Url.decode("Zm9vYmFy")
            b'foobar'
        """
        if isinstance(data, str):
            try:
                encoded = data.encode("utf-8")
            except UnicodeEncodeError as e:
                offset = len(data[: e.start].encode("utf-8"))
                raise _failure(f"invalid character at offset: {offset}") from e
        else:
            encoded = bytes(data)

        body = encoded
        padding = 0
        if config.accept_padding:
            body = encoded.rstrip(b"=")
            padding = len(encoded) - len(body)

        for offset, byte in enumerate(body):
            if byte not in _ALPHABET_SET:
                if byte == _PAD:
                    raise _failure("invalid padding")
                raise _failure(f"invalid character at offset: {offset}")

        remainder = len(body) % 4
        if remainder == 1:
            raise _failure("invalid length")
        if padding and (padding > 2 or (len(body) + padding) % 4 != 0):
            raise _failure("invalid padding")

        try:
            decoded = base64.urlsafe_b64decode(body + b"=" * (-len(body) % 4))
        except binascii.Error as e:
            raise _failure(str(e)) from e

        if config.require_canonical and remainder and Base64Url.encode(decoded) != body:
            raise _failure("non-canonical encoding")

        return decoded
