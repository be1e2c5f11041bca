"""Base64url codec package.

This package provides the unpadded base64url primitive and its decoder
configuration.
"""

from .base64url import ALPHABET, DEFAULT_DECODING, Base64Url, DecodingConfig

__all__ = [
    "ALPHABET",
    "Base64Url",
    "DecodingConfig",
    "DEFAULT_DECODING",
]
