"""Codec convenience wrappers."""

from .main import CompressionAlgorithm, cyphersolbase


def derive_alphabet(seed):
    return cyphersolbase.derive_alphabet(seed)


def encode(data, seed, algorithm=CompressionAlgorithm.NONE):
    return cyphersolbase.encode(data, seed, algorithm)


def decode(encoded, seed, algorithm=CompressionAlgorithm.NONE):
    return cyphersolbase.decode(encoded, seed, algorithm)


def partial_verify(encoded) -> bool:
    return cyphersolbase.partial_verify(encoded)


def checksum(data) -> int:
    return cyphersolbase.checksum(data)


def checksum_verify(data, checksum: int) -> bool:
    return cyphersolbase.checksum_verify(data, checksum)


def frame(payload):
    return cyphersolbase.frame(payload)


def unframe(buffer):
    return cyphersolbase.unframe(buffer)


def compress(data, algorithm=CompressionAlgorithm.NONE):
    return cyphersolbase.compress(data, algorithm)


def decompress(data, algorithm=CompressionAlgorithm.NONE):
    return cyphersolbase.decompress(data, algorithm)


__all__ = [
    "checksum",
    "checksum_verify",
    "compress",
    "decode",
    "decompress",
    "derive_alphabet",
    "encode",
    "frame",
    "partial_verify",
    "unframe",
]
