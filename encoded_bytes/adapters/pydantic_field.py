"""Pydantic field type for EncodedBytes.

Requires the ``pydantic`` extra. Models declaring an ``EncodedBytesField``
accept base64url text (or an EncodedBytes instance) and dump base64url text
in both Python and JSON mode.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from encoded_bytes.adapters.json_codec import JsonCodec
from encoded_bytes.value import EncodedBytes

_codec = JsonCodec()


def _validate(data: Any) -> EncodedBytes:
    if isinstance(data, EncodedBytes):
        return data
    return _codec.from_json(data)


def _serialize(value: EncodedBytes) -> str:
    return _codec.to_json(value)


EncodedBytesField = Annotated[
    EncodedBytes,
    PlainValidator(_validate),
    PlainSerializer(_serialize, return_type=str),
    WithJsonSchema({"type": "string", "format": "base64url"}),
]
"""
EncodedBytes carried as unpadded base64url text.
"""
