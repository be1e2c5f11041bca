"""Serialization adapters for EncodedBytes.

This package provides the JSON, binary and HTTP API adapters. The pydantic
and MessagePack adapters live in ``encoded_bytes.adapters.pydantic_field``
and ``encoded_bytes.adapters.msgpack_codec`` and are imported only on demand.
"""

from .binary_codec import BinaryCodec
from .http_codec import HttpApiCodec
from .json_codec import EncodedBytesJSONEncoder, JsonCodec, dumps

__all__ = [
    "BinaryCodec",
    "EncodedBytesJSONEncoder",
    "HttpApiCodec",
    "JsonCodec",
    "dumps",
]
