"""Exception classes for encoded-bytes.

This module defines the exception types raised by the codecs and adapters.
"""


class EncodedBytesError(Exception):
    """Base exception class for all encoded-bytes errors."""

    pass


class DecodingError(EncodedBytesError, ValueError):
    """Exception raised when textual or framed input cannot be decoded.

    Subclasses ValueError so that validation frameworks treat it as bad
    input rather than an internal fault.
    """

    pass
