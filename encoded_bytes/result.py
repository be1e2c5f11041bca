"""Two-variant parse result for request-facing decoders.

Routing code consumes these instead of catching exceptions, so malformed
client input can be turned into a client-error response directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from encoded_bytes.exceptions import DecodingError
from encoded_bytes.value import EncodedBytes


@dataclass(frozen=True)
class Parsed:
    """Successful parse.

    Attributes:
        value: The decoded value.
    """

    value: EncodedBytes

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap_or_raise(self) -> EncodedBytes:
        return self.value


@dataclass(frozen=True)
class ParseFailure:
    """Failed parse.

    Attributes:
        message: Description of why the input was rejected.
    """

    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap_or_raise(self) -> EncodedBytes:
        """Raise the failure as a DecodingError.

        Raises:
            DecodingError: Always, carrying the failure message.
        """
        raise DecodingError(self.message)


ParseResult = Union[Parsed, ParseFailure]
