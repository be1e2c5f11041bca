"""encoded-bytes: raw bytes that travel as unpadded base64url text.

This package provides EncodedBytes, an immutable wrapper around raw bytes,
and one adapter per serialization boundary. Textual boundaries (JSON, URL
path pieces, HTTP headers) see unpadded base64url; binary boundaries see the
raw bytes.

Main Components:
    - EncodedBytes: The value type, with wrap/unwrap
    - Base64Url: The unpadded base64url codec
    - JsonCodec, BinaryCodec, HttpApiCodec: Adapters
    - Interfaces: Protocol definitions for each boundary

Example:
    >>> from encoded_bytes import JsonCodec, wrap
    >>> JsonCodec().encode(wrap(b"foobar"))
    '"Zm9vYmFy"'
"""

from encoded_bytes.adapters import (
    BinaryCodec,
    EncodedBytesJSONEncoder,
    HttpApiCodec,
    JsonCodec,
    dumps,
)
from encoded_bytes.encoding import ALPHABET, DEFAULT_DECODING, Base64Url, DecodingConfig
from encoded_bytes.exceptions import DecodingError, EncodedBytesError
from encoded_bytes.result import ParseFailure, Parsed, ParseResult
from encoded_bytes.value import (
    EncodedBytes,
    encoded_form,
    get_encoded_bytes,
    make_encoded_bytes,
    unwrap,
    wrap,
)

__version__ = "0.1.0"

__all__ = [
    # Value
    "EncodedBytes",
    "wrap",
    "unwrap",
    "encoded_form",
    "make_encoded_bytes",
    "get_encoded_bytes",
    # Codec
    "ALPHABET",
    "Base64Url",
    "DecodingConfig",
    "DEFAULT_DECODING",
    # Adapters
    "BinaryCodec",
    "EncodedBytesJSONEncoder",
    "HttpApiCodec",
    "JsonCodec",
    "dumps",
    # Results
    "Parsed",
    "ParseFailure",
    "ParseResult",
    # Exceptions
    "EncodedBytesError",
    "DecodingError",
]
