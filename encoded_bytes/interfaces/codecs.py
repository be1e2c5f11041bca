"""Codec interfaces for encoded-bytes.

This module defines one protocol per serialization boundary. Each adapter
implements exactly one of them on top of wrap, unwrap and the encoded form.
"""

from __future__ import annotations

from typing import BinaryIO, Protocol

from encoded_bytes.result import ParseResult
from encoded_bytes.value import EncodedBytes


class ITextCodec(Protocol):
    """Interface for structured text serialization (JSON-like)."""

    def to_json(self, value: EncodedBytes) -> str:
        """Render a value as a JSON string value.

        Args:
            value: The value to render.

        Returns:
            The base64url text.
        """
        ...

    def from_json(self, obj: object) -> EncodedBytes:
        """Parse a value from a decoded JSON value.

        Args:
            obj: The decoded JSON value; must be a string.

        Returns:
            The parsed value.

        Raises:
            DecodingError: If obj is not a string or not valid base64url.
        """
        ...

    def to_json_key(self, value: EncodedBytes) -> str:
        """Render a value as a JSON object key."""
        ...

    def from_json_key(self, key: str) -> EncodedBytes:
        """Parse a value from a JSON object key.

        Raises:
            DecodingError: If key is not valid base64url.
        """
        ...


class IBinaryCodec(Protocol):
    """Interface for native binary serialization of the raw bytes."""

    def encode(self, value: EncodedBytes) -> bytes:
        """Frame the raw bytes of a value.

        Args:
            value: The value to frame.

        Returns:
            The framed raw bytes, never base64.
        """
        ...

    def decode(self, data: bytes) -> EncodedBytes:
        """Read exactly one framed value.

        Raises:
            DecodingError: If the framing is truncated or followed by extra data.
        """
        ...

    def put(self, stream: BinaryIO, value: EncodedBytes) -> None:
        """Write one framed value to a binary stream."""
        ...

    def get(self, stream: BinaryIO) -> EncodedBytes:
        """Read one framed value from a binary stream.

        Raises:
            DecodingError: If the stream ends before the value is complete.
        """
        ...


class IHttpApiCodec(Protocol):
    """Interface for URL path pieces, query parameters and HTTP headers."""

    def to_url_piece(self, value: EncodedBytes) -> str:
        """Render a value as a URL path piece."""
        ...

    def to_header(self, value: EncodedBytes) -> bytes:
        """Render a value as an HTTP header value."""
        ...

    def parse_url_piece(self, piece: str) -> ParseResult:
        """Parse a URL path piece without raising on malformed input."""
        ...

    def parse_query_param(self, param: str) -> ParseResult:
        """Parse a query parameter without raising on malformed input."""
        ...

    def parse_header(self, header: bytes) -> ParseResult:
        """Parse an HTTP header value without raising on malformed input."""
        ...
