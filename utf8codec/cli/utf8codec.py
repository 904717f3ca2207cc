"""utf8codec CLI entrypoint."""

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from utf8codec.core import decode_chunks, encode, encode_string

logger = logging.getLogger(__name__)


class UsageError(ValueError):
    """Command-line input that cannot be parsed."""


def parse_code_point(token: str) -> int:
    """Parse ``U+65E5``, ``0x65E5`` or ``65E5``."""
    text = token.strip()
    if text[:2].upper() in ("U+", "0X"):
        text = text[2:]
    try:
        value = int(text, 16)
    except ValueError:
        raise UsageError(f"invalid code point: {token!r}") from None
    if value < 0:
        raise UsageError(f"invalid code point: {token!r}")
    return value


def parse_hex_bytes(tokens: List[str]) -> bytes:
    joined = "".join(tokens)
    try:
        return bytes.fromhex(joined)
    except ValueError:
        raise UsageError(f"invalid hex byte string: {' '.join(tokens)!r}") from None


def split_chunks(data: bytes, chunk_size: Optional[int]) -> List[bytes]:
    if not chunk_size:
        return [data]
    return [data[i : i + chunk_size] for i in range(0, len(data), chunk_size)]


def format_code_point(code_point: int) -> str:
    return f"U+{code_point:04X}"


def run_encode(args: argparse.Namespace) -> int:
    if args.text is not None and args.code_points:
        raise UsageError("give either code points or --text, not both")
    if args.text is not None:
        encoded = encode_string(args.text)
    elif not args.code_points:
        raise UsageError("no code points given")
    else:
        encoded = encode(parse_code_point(token) for token in args.code_points)

    if args.json:
        print(json.dumps({"bytes": encoded.hex(), "length": len(encoded)}, indent=2))
    else:
        print(" ".join(f"{byte:02X}" for byte in encoded))
    return 0


def run_decode(args: argparse.Namespace) -> int:
    if args.file is not None and args.hex_bytes:
        raise UsageError("give either hex bytes or --file, not both")
    if args.file is not None:
        path = Path(args.file)
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")
        data = path.read_bytes()
    elif not args.hex_bytes:
        raise UsageError("no input bytes given")
    else:
        data = parse_hex_bytes(args.hex_bytes)

    chunks = split_chunks(data, args.chunk_size)
    logger.debug("decoding %d bytes in %d chunk(s)", len(data), len(chunks))
    result = decode_chunks(chunks, strict=args.strict)

    if args.json:
        payload = {
            "code_points": [format_code_point(cp) for cp in result.code_points],
            "truncated": result.truncated,
        }
        print(json.dumps(payload, indent=2))
    elif args.as_text:
        print(result.text)
    else:
        print(" ".join(format_code_point(cp) for cp in result.code_points))

    if result.truncated:
        logger.warning("input ended inside a multi-byte sequence")
        if args.fail_on_truncation:
            return 1
    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("chunk size must be a positive integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UTF-8 encoder and streaming decoder")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log codec substitutions at DEBUG level"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode code points to UTF-8 bytes")
    encode_parser.add_argument(
        "code_points", nargs="*", default=[], help="Code points such as U+65E5 or 0x41"
    )
    encode_parser.add_argument("--text", help="Encode the characters of this string")
    encode_parser.add_argument("--json", action="store_true", help="Print a JSON object")
    encode_parser.set_defaults(func=run_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode UTF-8 bytes to code points")
    decode_parser.add_argument(
        "hex_bytes", nargs="*", default=[], help="Input bytes in hex, e.g. E6 97 A5"
    )
    decode_parser.add_argument("--file", help="Read the input bytes from this file")
    decode_parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=None,
        help="Feed the decoder in chunks of this many bytes",
    )
    decode_parser.add_argument(
        "--strict", action="store_true", help="Reject overlongs, surrogates and bad continuations"
    )
    decode_parser.add_argument(
        "--fail-on-truncation",
        action="store_true",
        help="Exit with status 1 if the input ends inside a multi-byte sequence",
    )
    decode_output = decode_parser.add_mutually_exclusive_group()
    decode_output.add_argument("--as-text", action="store_true", help="Print the decoded string")
    decode_output.add_argument("--json", action="store_true", help="Print a JSON object")
    decode_parser.set_defaults(func=run_decode)

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    try:
        return args.func(args)
    except UsageError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
