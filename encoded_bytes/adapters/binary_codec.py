"""Binary adapter for EncodedBytes.

The raw bytes are written with the usual length-prefixed byte-sequence
framing: an unsigned 8-byte big-endian length followed by the bytes
themselves. Nothing on this path is base64 encoded.
"""

from __future__ import annotations

import io
import logging
import struct
from typing import BinaryIO, Optional

from encoded_bytes.exceptions import DecodingError
from encoded_bytes.interfaces.codecs import IBinaryCodec
from encoded_bytes.value import EncodedBytes, wrap

logger = logging.getLogger(__name__)

LENGTH_PREFIX = struct.Struct(">Q")

READ_CHUNK_SIZE = 64 * 1024


def _short_read(expected: int, received: int) -> DecodingError:
    message = f"not enough bytes: expected {expected}, received {received}"
    logger.debug(message)
    return DecodingError(message)


def _remaining(stream: BinaryIO) -> Optional[int]:
    if not stream.seekable():
        return None
    position = stream.tell()
    end = stream.seek(0, io.SEEK_END)
    stream.seek(position)
    return end - position


def _read_exactly(stream: BinaryIO, size: int) -> bytes:
    # Bounded reads, so a forged length prefix cannot force a huge allocation.
    available = _remaining(stream)
    if available is not None and available < size:
        raise _short_read(size, available)

    chunks = []
    received = 0
    while received < size:
        chunk = stream.read(min(size - received, READ_CHUNK_SIZE))
        if not chunk:
            raise _short_read(size, received)
        chunks.append(chunk)
        received += len(chunk)
    return b"".join(chunks)


class BinaryCodec(IBinaryCodec):
    """Length-prefixed binary codec.

    Example:
        >>> BinaryCodec().encode(EncodedBytes(b"foobar"))
        b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x06foobar'
    """

    def encode(self, value: EncodedBytes) -> bytes:
        return LENGTH_PREFIX.pack(len(value.raw)) + value.raw

    def decode(self, data: bytes) -> EncodedBytes:
        stream = io.BytesIO(data)
        value = self.get(stream)
        trailing = len(data) - stream.tell()
        if trailing:
            message = f"trailing bytes: {trailing} left after value"
            logger.debug(message)
            raise DecodingError(message)
        return value

    def put(self, stream: BinaryIO, value: EncodedBytes) -> None:
        stream.write(LENGTH_PREFIX.pack(len(value.raw)))
        stream.write(value.raw)

    def get(self, stream: BinaryIO) -> EncodedBytes:
        (length,) = LENGTH_PREFIX.unpack(_read_exactly(stream, LENGTH_PREFIX.size))
        return wrap(_read_exactly(stream, length))
