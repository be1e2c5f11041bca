"""MessagePack adapter for EncodedBytes.

Requires the ``msgpack`` extra. The raw bytes are written as a MessagePack
bin value (a compact type/length header followed by the bytes themselves),
so ``EncodedBytes(b"xyzzy")`` becomes ``b"\\xc4\\x05xyzzy"``. Truncated and
malformed input fails the way msgpack itself fails.
"""

from __future__ import annotations

import logging
from typing import Any, BinaryIO

import msgpack

from encoded_bytes.exceptions import DecodingError
from encoded_bytes.interfaces.codecs import IBinaryCodec
from encoded_bytes.value import EncodedBytes, wrap

logger = logging.getLogger(__name__)


def _from_unpacked(obj: Any) -> EncodedBytes:
    if not isinstance(obj, bytes):
        message = f"expected bin, but encountered {type(obj).__name__}"
        logger.debug(message)
        raise DecodingError(message)
    return wrap(obj)


class MsgpackCodec(IBinaryCodec):
    """MessagePack bin codec."""

    def encode(self, value: EncodedBytes) -> bytes:
        return msgpack.packb(value.raw, use_bin_type=True)

    def decode(self, data: bytes) -> EncodedBytes:
        """Read exactly one bin value.

        Raises:
            DecodingError: If the value is not a bin value.
            msgpack.ExtraData: If data follows the value.
            ValueError: If the input is truncated or malformed.
        """
        return _from_unpacked(msgpack.unpackb(data, raw=False))

    def put(self, stream: BinaryIO, value: EncodedBytes) -> None:
        stream.write(self.encode(value))

    def get(self, stream: BinaryIO) -> EncodedBytes:
        # read_size=1 keeps the unpacker from consuming the following values.
        unpacker = msgpack.Unpacker(stream, raw=False, read_size=1)
        try:
            obj = unpacker.unpack()
        except msgpack.OutOfData as e:
            logger.debug("stream ended before a complete value")
            raise DecodingError("not enough bytes") from e
        return _from_unpacked(obj)
