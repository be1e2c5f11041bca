"""JSON adapter for EncodedBytes.

Values and object keys are both written as unpadded base64url strings:
``EncodedBytes(b"foobar")`` becomes ``"Zm9vYmFy"``.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Set, TypeVar

from encoded_bytes.encoding.base64url import DEFAULT_DECODING, Base64Url, DecodingConfig
from encoded_bytes.exceptions import DecodingError
from encoded_bytes.interfaces.codecs import ITextCodec
from encoded_bytes.value import EncodedBytes, wrap

logger = logging.getLogger(__name__)

V = TypeVar("V")

SEPARATORS = (",", ":")


def _json_type(obj: Any) -> str:
    if obj is None:
        return "Null"
    if isinstance(obj, bool):
        return "Boolean"
    if isinstance(obj, (int, float)):
        return "Number"
    if isinstance(obj, (list, tuple)):
        return "Array"
    if isinstance(obj, dict):
        return "Object"
    return type(obj).__name__


def _encode_keys(obj: Any, markers: Optional[Set[int]] = None) -> Any:
    if not isinstance(obj, (dict, list, tuple)):
        return obj

    if markers is None:
        markers = set()
    marker = id(obj)
    if marker in markers:
        raise ValueError("Circular reference detected")
    markers.add(marker)

    try:
        if isinstance(obj, dict):
            encoded: Dict[Any, Any] = {}
            for key, value in obj.items():
                if isinstance(key, EncodedBytes):
                    key = key.encoded_text()
                if key in encoded:
                    raise ValueError(f"duplicate object key after encoding: {key!r}")
                encoded[key] = _encode_keys(value, markers)
            return encoded
        return [_encode_keys(item, markers) for item in obj]
    finally:
        markers.discard(marker)


class EncodedBytesJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes EncodedBytes values and keys as base64url text."""

    def default(self, o: Any) -> Any:
        if isinstance(o, EncodedBytes):
            return o.encoded_text()
        return super().default(o)

    def iterencode(self, o: Any, _one_shot: bool = False) -> Any:
        return super().iterencode(_encode_keys(o), _one_shot)


def dumps(obj: Any, **kwargs: Any) -> str:
    """Serialize a structure that may contain EncodedBytes values or keys.

    Args:
        obj: The structure to serialize.
        **kwargs: Passed through to json.dumps. Compact separators are used
            unless overridden.

    Returns:
        The JSON document.

    Raises:
        ValueError: If the structure is circular, or if an EncodedBytes key
            and a string key of one object render to the same text.
    """
    kwargs.setdefault("separators", SEPARATORS)
    return json.dumps(obj, cls=EncodedBytesJSONEncoder, **kwargs)


class JsonCodec(ITextCodec):
    """JSON codec for EncodedBytes.

    Serialization is total. Parsing fails with DecodingError for non-string
    JSON values and malformed base64url; it never lets a lower-level error
    escape.

    Attributes:
        config: Decoder configuration used by every parse method.
    """

    def __init__(self, config: DecodingConfig = DEFAULT_DECODING) -> None:
        self.config = config

    def to_json(self, value: EncodedBytes) -> str:
        return value.encoded_text()

    def from_json(self, obj: object) -> EncodedBytes:
        if not isinstance(obj, str):
            message = f"parsing EncodedBytes failed, expected String, but encountered {_json_type(obj)}"
            logger.debug(message)
            raise DecodingError(message)
        return wrap(Base64Url.decode(obj, self.config))

    def to_json_key(self, value: EncodedBytes) -> str:
        return value.encoded_text()

    def from_json_key(self, key: str) -> EncodedBytes:
        return wrap(Base64Url.decode(key, self.config))

    def encode(self, value: EncodedBytes) -> str:
        """Serialize a single value as a JSON document.

        Example:
            >>> JsonCodec().encode(EncodedBytes(b"foobar"))
            '"Zm9vYmFy"'
        """
        return dumps(value)

    def decode(self, document: str) -> EncodedBytes:
        """Parse a JSON document holding a single string value.

        Args:
            document: The JSON text.

        Returns:
            The parsed value.

        Raises:
            DecodingError: If the document is not valid JSON, not a string,
                or not valid base64url.
        """
        try:
            obj = json.loads(document)
        except json.JSONDecodeError as e:
            logger.debug("rejected JSON document: %s", e)
            raise DecodingError(f"invalid JSON: {e}") from e
        return self.from_json(obj)

    def decode_keys(self, mapping: Mapping[str, V]) -> Dict[EncodedBytes, V]:
        """Parse the string keys of a decoded JSON object.

        Args:
            mapping: A JSON object as returned by json.loads.

        Returns:
            The same entries keyed by EncodedBytes.

        Raises:
            DecodingError: If any key is not valid base64url.
        """
        return {self.from_json_key(key): value for key, value in mapping.items()}
