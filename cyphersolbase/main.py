"""Stable import point for the codec engine.

The implementation lives in `engine.py`; callers import from here so the
package can be reorganized without changing public imports.
"""

from .engine import (
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
    cli,
    cyphersolbase,
    main,
)

__all__ = [
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
    "cli",
    "cyphersolbase",
    "main",
]
