"""encoded-bytes interfaces package.

This package provides protocol definitions for the text, binary and HTTP
serialization boundaries.
"""

from .codecs import IBinaryCodec, IHttpApiCodec, ITextCodec

__all__ = [
    "IBinaryCodec",
    "IHttpApiCodec",
    "ITextCodec",
]
