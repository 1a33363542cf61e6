"""
CYPHERSOLBASE - seeded base64 obfuscation codec with CRC32 framing

Bytes are optionally LZ4-compressed, framed with a little-endian CRC32,
base64-encoded and then pushed through a seed-derived permutation of the
base64 alphabet. This is obfuscation plus integrity, not encryption.
"""

from .main import (
    ChecksumMismatchError,
    CodecError,
    CompressionAlgorithm,
    CompressionNotImplementedError,
    DecodeError,
    DecompressionError,
    InvalidBase64Error,
    InvalidCharacterError,
    TooShortError,
    UnsupportedCompressionError,
    cyphersolbase,
)
from .api_codec import *
from .api_codec import __all__ as _codec_all
from .version import __version__

__all__ = [
    *_codec_all,
    "ChecksumMismatchError",
    "CodecError",
    "CompressionAlgorithm",
    "CompressionNotImplementedError",
    "DecodeError",
    "DecompressionError",
    "InvalidBase64Error",
    "InvalidCharacterError",
    "TooShortError",
    "UnsupportedCompressionError",
    "cyphersolbase",
    "__version__",
]
