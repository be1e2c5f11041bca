"""URL path piece, query parameter and HTTP header adapter for EncodedBytes.

Parsing never raises on malformed client input. Every parse method returns
Parsed or ParseFailure so routing code can answer with a client error.
"""

from __future__ import annotations

from encoded_bytes.encoding.base64url import DEFAULT_DECODING, Base64Url, DecodingConfig
from encoded_bytes.exceptions import DecodingError
from encoded_bytes.interfaces.codecs import IHttpApiCodec
from encoded_bytes.result import ParseFailure, Parsed, ParseResult
from encoded_bytes.value import EncodedBytes, wrap


class HttpApiCodec(IHttpApiCodec):
    """HTTP API codec.

    Attributes:
        config: Decoder configuration used by every parse method.
    """

    def __init__(self, config: DecodingConfig = DEFAULT_DECODING) -> None:
        self.config = config

    def to_url_piece(self, value: EncodedBytes) -> str:
        return value.encoded_text()

    def to_header(self, value: EncodedBytes) -> bytes:
        return value.encoded_form()

    def parse_url_piece(self, piece: str) -> ParseResult:
        """Parse a URL path piece.

        The piece is decoded as given; percent-escapes are not resolved, since
        the base64url alphabet never needs escaping.

        Args:
            piece: A single path segment.

        Returns:
            Parsed with the value, or ParseFailure with a message.
        """
        return self._parse(piece)

    def parse_query_param(self, param: str) -> ParseResult:
        return self._parse(param)

    def parse_header(self, header: bytes) -> ParseResult:
        return self._parse(header)

    def _parse(self, encoded: str | bytes) -> ParseResult:
        try:
            return Parsed(wrap(Base64Url.decode(encoded, self.config)))
        except DecodingError as e:
            return ParseFailure(str(e))
