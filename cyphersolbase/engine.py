# CYPHERSOLBASE CODEC ENGINE ->

import enum as _enum_module
import os as _os_module
import sys as _sys_module
import warnings as _warnings_module

_BASE64_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_PAD = b"="


def _lenient_table() -> bytes:
    # Unknown bytes collapse onto index 0 of the canonical alphabet
    keep = set(_BASE64_ALPHABET + _PAD)
    return bytes(b if b in keep else _BASE64_ALPHABET[0] for b in range(256))


class CodecError(ValueError):
    pass


class DecodeError(CodecError):
    kind = "decode"


class InvalidCharacterError(DecodeError):
    kind = "invalid_character"

    def __init__(self, byte: int, offset: int):
        super().__init__(f"Invalid character 0x{byte:02x} at offset {offset}")
        self.byte = byte
        self.offset = offset


class InvalidBase64Error(DecodeError):
    kind = "invalid_base64"


class TooShortError(DecodeError):
    kind = "too_short"


class ChecksumMismatchError(DecodeError):
    kind = "checksum_mismatch"

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Checksum mismatch: stored {expected:08x}, computed {actual:08x}")
        self.expected = expected
        self.actual = actual


class DecompressionError(DecodeError):
    kind = "decompression"


class UnsupportedCompressionError(CodecError):
    pass


class CompressionNotImplementedError(CodecError, NotImplementedError):
    pass


class CompressionAlgorithm(_enum_module.Enum):
    NONE = "none"
    HUFFMAN = "huffman"
    LZ4 = "lz4"
    BROTLI = "brotli"

    @classmethod
    def parse(cls, name: str) -> "CompressionAlgorithm":
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnsupportedCompressionError(f"Unsupported compression: {name!r}")
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedCompressionError(f"Unsupported compression: {name!r}") from None


class cyphersolbase:
    import base64
    import binascii
    import struct
    import typing
    import zlib
    import lz4.block
    from cryptography.hazmat.primitives import hashes

    @staticmethod
    def _env_int(name: str) -> "cyphersolbase.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "0.1.0"
    BASE64_ALPHABET = _BASE64_ALPHABET
    PAD = _PAD
    ALPHABET_SIZE = 64
    CHECKSUM_SIZE = 4
    LZ4_SIZE_HEADER = 4
    LZ4_MAX_EXPANSION = 255
    LZ4_EXPANSION_SLACK = 64
    DEFAULT_MAX_DECOMPRESSED = 1_073_741_824
    MAX_DECOMPRESSED = _env_int("CYPHERSOLBASE_MAX_DECOMPRESSED") or DEFAULT_MAX_DECOMPRESSED
    CompressionAlgorithm = CompressionAlgorithm
    _LENIENT_TABLE = _lenient_table()
    _VALID_SYMBOLS = _BASE64_ALPHABET + _PAD

    @staticmethod
    def _coerce_bytes(
        value: "cyphersolbase.typing.Union[str, bytes, bytearray, memoryview]",
        label: str = "data"
    ) -> bytes:
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError(f"Unsupported {label} type: {type(value)!r}")

    # ---- alphabet ----

    @staticmethod
    def _seed_digest(seed: bytes) -> bytes:
        hasher = cyphersolbase.hashes.Hash(cyphersolbase.hashes.SHA256())
        hasher.update(seed)
        return hasher.finalize()

    @staticmethod
    def derive_alphabet(seed) -> bytes:
        """
        Permute the base64 alphabet with a SHA-256 digest of ``seed``.

        Position ``i`` is swapped with ``(digest[i % 32] + i) % 64`` for every
        ``i`` in order, so the result is always a permutation of the 64
        canonical symbols and the same seed always gives the same alphabet.
        """
        digest = cyphersolbase._seed_digest(cyphersolbase._coerce_bytes(seed, "seed"))
        alphabet = bytearray(cyphersolbase.BASE64_ALPHABET)
        size = cyphersolbase.ALPHABET_SIZE
        for i in range(size):
            j = (digest[i % len(digest)] + i) % size
            alphabet[i], alphabet[j] = alphabet[j], alphabet[i]
        return bytes(alphabet)

    @staticmethod
    def _substitute(text: bytes, alphabet: bytes) -> bytes:
        return text.translate(bytes.maketrans(cyphersolbase.BASE64_ALPHABET, alphabet))

    @staticmethod
    def _unsubstitute(text: bytes, alphabet: bytes) -> bytes:
        stray = text.translate(None, cyphersolbase._VALID_SYMBOLS)
        if stray:
            offset = next(
                idx for idx, b in enumerate(text) if b not in cyphersolbase._VALID_SYMBOLS
            )
            raise InvalidCharacterError(text[offset], offset)
        return text.translate(bytes.maketrans(alphabet, cyphersolbase.BASE64_ALPHABET))

    @staticmethod
    def _b64decode_strict(text: bytes) -> bytes:
        try:
            decoded = cyphersolbase.binascii.a2b_base64(text, strict_mode=True)
        except cyphersolbase.binascii.Error as exc:
            raise InvalidBase64Error(f"Invalid base64: {exc}") from exc
        # unused trailing bits of the last symbol must be zero
        if cyphersolbase.base64.b64encode(decoded) != text:
            raise InvalidBase64Error("Invalid base64: non-canonical trailing bits")
        return decoded

    # ---- compression ----

    IMPLEMENTED_COMPRESSION = frozenset({CompressionAlgorithm.NONE, CompressionAlgorithm.LZ4})

    @staticmethod
    def _require_implemented(algorithm) -> CompressionAlgorithm:
        algo = CompressionAlgorithm.parse(algorithm)
        if algo not in cyphersolbase.IMPLEMENTED_COMPRESSION:
            raise CompressionNotImplementedError(f"{algo.value} compression is not implemented")
        return algo

    @staticmethod
    def compress(data, algorithm="none") -> bytes:
        raw = cyphersolbase._coerce_bytes(data)
        algo = CompressionAlgorithm.parse(algorithm)
        if algo is CompressionAlgorithm.NONE:
            return raw
        if algo is CompressionAlgorithm.LZ4:
            return cyphersolbase.lz4.block.compress(raw, store_size=True)
        raise CompressionNotImplementedError(f"{algo.value} compression is not implemented")

    @staticmethod
    def decompress(data, algorithm="none") -> bytes:
        raw = cyphersolbase._coerce_bytes(data)
        algo = CompressionAlgorithm.parse(algorithm)
        if algo is CompressionAlgorithm.NONE:
            return raw
        if algo is CompressionAlgorithm.LZ4:
            return cyphersolbase._lz4_decompress(raw)
        raise CompressionNotImplementedError(f"{algo.value} decompression is not implemented")

    @staticmethod
    def _lz4_decompress(raw: bytes) -> bytes:
        if len(raw) < cyphersolbase.LZ4_SIZE_HEADER:
            raise DecompressionError("LZ4 block missing size header")
        declared = cyphersolbase.struct.unpack_from("<I", raw, 0)[0]
        if declared > cyphersolbase.MAX_DECOMPRESSED:
            raise DecompressionError(
                f"LZ4 block declares {declared} bytes (limit {cyphersolbase.MAX_DECOMPRESSED})"
            )
        if declared == 0:
            if raw[cyphersolbase.LZ4_SIZE_HEADER:] in (b"", b"\x00"):
                return b""
            raise DecompressionError("LZ4 block has data for an empty payload")
        body_len = len(raw) - cyphersolbase.LZ4_SIZE_HEADER
        ceiling = body_len * cyphersolbase.LZ4_MAX_EXPANSION + cyphersolbase.LZ4_EXPANSION_SLACK
        if declared > ceiling:
            raise DecompressionError(
                f"LZ4 block declares {declared} bytes but a {body_len}-byte body yields at most {ceiling}"
            )
        try:
            return cyphersolbase.lz4.block.decompress(raw)
        except (cyphersolbase.lz4.block.LZ4BlockError, ValueError) as exc:
            raise DecompressionError(f"LZ4 decompression failed: {exc}") from exc

    # ---- checksum framing ----

    @staticmethod
    def checksum(data) -> int:
        return cyphersolbase.zlib.crc32(cyphersolbase._coerce_bytes(data)) & 0xFFFFFFFF

    @staticmethod
    def checksum_verify(data, checksum: int) -> bool:
        return cyphersolbase.checksum(data) == checksum

    @staticmethod
    def frame(payload) -> bytes:
        raw = cyphersolbase._coerce_bytes(payload, "payload")
        return raw + cyphersolbase.struct.pack("<I", cyphersolbase.checksum(raw))

    @staticmethod
    def unframe(buffer) -> "cyphersolbase.typing.Tuple[bytes, int]":
        raw = cyphersolbase._coerce_bytes(buffer, "buffer")
        if len(raw) < cyphersolbase.CHECKSUM_SIZE:
            raise TooShortError(
                f"Data too short: {len(raw)} bytes, need at least {cyphersolbase.CHECKSUM_SIZE}"
            )
        split = len(raw) - cyphersolbase.CHECKSUM_SIZE
        payload = raw[:split]
        stored = cyphersolbase.struct.unpack_from("<I", raw, split)[0]
        actual = cyphersolbase.checksum(payload)
        if actual != stored:
            raise ChecksumMismatchError(stored, actual)
        return payload, stored

    # ---- pipelines ----

    @staticmethod
    def encode(data, seed, algorithm="none") -> bytes:
        algo = cyphersolbase._require_implemented(algorithm)
        alphabet = cyphersolbase.derive_alphabet(seed)
        compressed = cyphersolbase.compress(data, algo)
        framed = cyphersolbase.frame(compressed)
        return cyphersolbase._substitute(cyphersolbase.base64.b64encode(framed), alphabet)

    @staticmethod
    def decode(encoded, seed, algorithm="none") -> bytes:
        """
        Reverse ``encode``.

        Raises a ``DecodeError`` subclass at the first failing stage:
        ``InvalidCharacterError``, ``InvalidBase64Error``, ``TooShortError``,
        ``ChecksumMismatchError`` or ``DecompressionError``.
        """
        algo = cyphersolbase._require_implemented(algorithm)
        alphabet = cyphersolbase.derive_alphabet(seed)
        text = cyphersolbase._unsubstitute(cyphersolbase._coerce_bytes(encoded, "encoded"), alphabet)
        framed = cyphersolbase._b64decode_strict(text)
        payload, _ = cyphersolbase.unframe(framed)
        return cyphersolbase.decompress(payload, algo)

    @staticmethod
    def partial_verify(encoded) -> bool:
        """
        Keyless check: read ``encoded`` through the canonical alphabet and
        check the trailing CRC32. Never raises.
        """
        try:
            raw = cyphersolbase._coerce_bytes(encoded, "encoded")
            framed = cyphersolbase._b64decode_strict(raw.translate(cyphersolbase._LENIENT_TABLE))
            cyphersolbase.unframe(framed)
        except (TypeError, ValueError):
            return False
        return True


def cli(argv=None) -> int:
    import argparse

    def _cli_config_path() -> str:
        cfg = _os_module.getenv("CYPHERSOLBASE_CLI_CONFIG")
        if cfg:
            return _os_module.path.expanduser(cfg)
        xdg = _os_module.getenv("XDG_CONFIG_HOME")
        if xdg:
            return _os_module.path.join(xdg, "cyphersolbase", "cli.conf")
        appdata = _os_module.getenv("APPDATA")
        if appdata:
            return _os_module.path.join(appdata, "cyphersolbase", "cli.conf")
        return _os_module.path.expanduser("~/.config/cyphersolbase/cli.conf")

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("CYPHERSOLBASE_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("CYPHERSOLBASE_CLI_STYLE") or "").strip().lower()
        if style in {"plain", "boring", "0", "false", "off"}:
            return True
        if style in {"color", "emoji", "on"}:
            return False
        try:
            with open(_cli_config_path(), "r", encoding="utf-8") as handle:
                data = handle.read().lower()
        except OSError:
            return False
        return "plain=1" in data or "plain=true" in data or "style=plain" in data

    _STYLES = {
        "ok": ("\033[32m", "✅"),
        "warn": ("\033[33m", "⚠️"),
        "err": ("\033[31m", "❌"),
    }
    plain = _cli_plain_mode()

    def _paint(level: str, msg: str) -> str:
        if plain:
            return msg
        color, emoji = _STYLES[level]
        return f"\033[1m{color}{emoji} {msg}\033[0m"

    def _compression_arg(value: str) -> CompressionAlgorithm:
        try:
            return CompressionAlgorithm.parse(value)
        except UnsupportedCompressionError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from None

    def _read_input(path: str) -> bytes:
        if path == "-":
            return _sys_module.stdin.buffer.read()
        with open(path, "rb") as handle:
            return handle.read()

    def _write_output(path: str, data: bytes, *, newline: bool = False) -> None:
        if path == "-":
            _sys_module.stdout.flush()
            _sys_module.stdout.buffer.write(data + (b"\n" if newline else b""))
            _sys_module.stdout.buffer.flush()
            return
        with open(path, "wb") as handle:
            handle.write(data)

    def _resolve_seed(args) -> bytes:
        if args.seed_hex is not None:
            try:
                seed = bytes.fromhex(args.seed_hex)
            except ValueError:
                parser.error("--seed-hex must be an even-length hex string")
        else:
            seed = args.seed.encode("utf-8")
        if not seed:
            _warnings_module.warn(
                "Empty seed: the derived alphabet is public and gives no obfuscation",
                UserWarning
            )
        return seed

    parser = argparse.ArgumentParser(prog="cyphersolbase", description="CypherSolBase seeded base64 codec")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def _add_io(sub) -> None:
        sub.add_argument("-i", "--input", default="-", help="Input file path (default: stdin)")
        sub.add_argument("-o", "--output", default="-", help="Output file path (default: stdout)")

    def _add_seeded(sub) -> None:
        seed_group = sub.add_mutually_exclusive_group(required=True)
        seed_group.add_argument("--seed", help="Seed text (UTF-8)")
        seed_group.add_argument("--seed-hex", help="Seed bytes as hex")
        sub.add_argument(
            "-c",
            "--compression",
            type=_compression_arg,
            default=CompressionAlgorithm.NONE,
            help="Compression: none, lz4, brotli, huffman (default: none)"
        )
        _add_io(sub)

    enc = subparsers.add_parser("encode", help="Encode raw bytes into seeded base64 text")
    _add_seeded(enc)
    dec = subparsers.add_parser("decode", help="Decode seeded base64 text back to raw bytes")
    _add_seeded(dec)
    ver = subparsers.add_parser("verify", help="Keyless checksum check of encoded text")
    ver.add_argument("-i", "--input", default="-", help="Input file path (default: stdin)")
    crc = subparsers.add_parser("checksum", help="Print or check the CRC32 of raw bytes")
    crc.add_argument("-i", "--input", default="-", help="Input file path (default: stdin)")
    crc.add_argument("--expect", default=None, help="Expected CRC32 as hex; exit 1 on mismatch")

    args = parser.parse_args(argv)

    try:
        data = _read_input(args.input)
    except OSError as exc:
        print(_paint("err", f"Failed to read input: {exc}"), file=_sys_module.stderr)
        return 1

    if args.command == "verify":
        valid = cyphersolbase.partial_verify(data.rstrip(b"\r\n"))
        print(_paint("ok", "valid") if valid else _paint("err", "invalid"))
        return 0 if valid else 1

    if args.command == "checksum":
        value = cyphersolbase.checksum(data)
        if args.expect is None:
            print(f"{value:08x}")
            return 0
        try:
            expected = int(args.expect, 16)
        except ValueError:
            parser.error("--expect must be a hex CRC32 value")
        if cyphersolbase.checksum_verify(data, expected):
            print(_paint("ok", f"{value:08x}: match"))
            return 0
        print(_paint("err", f"{value:08x}: expected {expected:08x}"))
        return 1

    with _warnings_module.catch_warnings(record=True) as caught:
        _warnings_module.simplefilter("always", UserWarning)
        seed = _resolve_seed(args)
    for item in caught:
        msg = str(item.message).strip()
        if msg:
            print(_paint("warn", msg), file=_sys_module.stderr)

    try:
        if args.command == "encode":
            result = cyphersolbase.encode(data, seed, args.compression)
        else:
            result = cyphersolbase.decode(data.rstrip(b"\r\n"), seed, args.compression)
    except CompressionNotImplementedError as exc:
        print(_paint("err", str(exc)), file=_sys_module.stderr)
        return 2
    except DecodeError as exc:
        print(_paint("err", f"decode failed ({exc.kind}): {exc}"), file=_sys_module.stderr)
        return 1

    try:
        _write_output(args.output, result, newline=args.command == "encode")
    except OSError as exc:
        print(_paint("err", f"Failed to write output: {exc}"), file=_sys_module.stderr)
        return 1
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
