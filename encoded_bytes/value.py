"""The EncodedBytes value type.

EncodedBytes wraps raw bytes. Textual adapters render it as unpadded
base64url; binary adapters write the raw bytes unchanged. The wrapped value
is always the raw form and the encoded form is recomputed on every request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple, Union

from encoded_bytes.encoding.base64url import Base64Url

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True, order=True)
class EncodedBytes:
    """Immutable wrapper around a raw byte sequence.

    Equality, ordering and hashing are those of the raw bytes. Concatenation
    with ``+`` joins the raw bytes, with ``EncodedBytes.empty()`` as identity.

    Attributes:
        raw: The unencoded bytes.

    Example:
        >>> value = EncodedBytes(b"foobar")
        >>> value.encoded_form()
        b'Zm9vYmFy'
        >>> str(value)
        'Zm9vYmFy'
    """

    raw: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.raw, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"EncodedBytes requires a bytes-like object, not {type(self.raw).__name__}"
            )
        if type(self.raw) is not bytes:
            object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def empty(cls) -> EncodedBytes:
        """Return the identity element for concatenation."""
        return cls(b"")

    @classmethod
    def concat(cls, values: Iterable[EncodedBytes]) -> EncodedBytes:
        """Concatenate any number of values, left to right.

        Args:
            values: The values to join.

        Returns:
            A value holding the joined raw bytes; empty for no values.
        """
        return cls(b"".join(value.raw for value in values))

    @classmethod
    def from_str(cls, text: str, encoding: str = "utf-8") -> EncodedBytes:
        """Wrap the encoded bytes of a string.

        Args:
            text: The text to wrap.
            encoding: Character encoding used to obtain the raw bytes.

        Returns:
            A new value holding ``text.encode(encoding)``.
        """
        return cls(text.encode(encoding))

    def encoded_form(self) -> bytes:
        """Compute the unpadded base64url encoding of the raw bytes."""
        return Base64Url.encode(self.raw)

    def encoded_text(self) -> str:
        """Compute the unpadded base64url encoding as ASCII text."""
        return Base64Url.encode_text(self.raw)

    def __hash__(self) -> int:
        return hash(self.raw)

    def __add__(self, other: Any) -> EncodedBytes:
        if not isinstance(other, EncodedBytes):
            return NotImplemented
        return EncodedBytes(self.raw + other.raw)

    def __len__(self) -> int:
        return len(self.raw)

    def __str__(self) -> str:
        return self.encoded_text()

    def __reduce__(self) -> Tuple[Any, Tuple[bytes]]:
        # Pickles as the raw bytes, never the encoded text.
        return (wrap, (self.raw,))


def wrap(data: BytesLike) -> EncodedBytes:
    """Wrap raw bytes into an EncodedBytes value.

    Args:
        data: Any bytes-like object. No validation is performed on contents.

    Returns:
        A new EncodedBytes holding a copy of ``data``.
    """
    return EncodedBytes(data)


def unwrap(value: EncodedBytes) -> bytes:
    """Return the exact raw bytes held by ``value``."""
    return value.raw


def encoded_form(value: EncodedBytes) -> bytes:
    """Return the unpadded base64url encoding of ``value``."""
    return value.encoded_form()


make_encoded_bytes = wrap
get_encoded_bytes = unwrap
