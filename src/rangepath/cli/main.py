"""Main CLI entry point for rangepath."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .. import __version__
from ..cli.analyze import analyze_range
from ..codec.path import decode, encode, encode_from
from ..exceptions import RangePathError
from ..log import get_logger, setup_root_logger
from ..utils.text import path_from_str, path_to_str

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rangepath",
        description="rangepath: Binary Search Path Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rangepath encode 0 256 200             Print the path of 200 in [0, 256)
  rangepath encode 0 16 3 --midpoint 4   Encode with a custom first split
  rangepath decode 0 256 1100            Decode a path back to its value
  rangepath decode 0 16 01 --midpoint 4 --strict
  rangepath analyze 0 1000               Show path length statistics
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"rangepath {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode a value as a path")
    encode_parser.add_argument("start", type=int, help="Inclusive lower bound")
    encode_parser.add_argument("end", type=int, help="Exclusive upper bound")
    encode_parser.add_argument("target", type=int, help="Value to encode")
    encode_parser.add_argument("--midpoint", type=int, help="Custom first midpoint")

    decode_parser = subparsers.add_parser("decode", help="Decode a path to its value")
    decode_parser.add_argument("start", type=int, help="Inclusive lower bound")
    decode_parser.add_argument("end", type=int, help="Exclusive upper bound")
    decode_parser.add_argument(
        "bits", help="Path as 0s and 1s ('' or '-' for the empty path)"
    )
    decode_parser.add_argument("--midpoint", type=int, help="Custom first midpoint")
    decode_parser.add_argument(
        "--strict", action="store_true", help="Reject paths that are not canonical"
    )

    analyze_parser = subparsers.add_parser("analyze", help="Show path length statistics")
    analyze_parser.add_argument("start", type=int, help="Inclusive lower bound")
    analyze_parser.add_argument("end", type=int, help="Exclusive upper bound")
    analyze_parser.add_argument("--midpoint", type=int, help="Custom first midpoint")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the rangepath CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_root_logger(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        handler=logging.StreamHandler(sys.stderr),
    )

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "encode":
            if args.midpoint is None:
                path = encode(args.start, args.end, args.target)
            else:
                path = encode_from(args.start, args.end, args.target, args.midpoint)
            print(path_to_str(path))
        elif args.command == "decode":
            bits = "" if args.bits == "-" else args.bits
            value = decode(
                args.start,
                args.end,
                path_from_str(bits),
                midpoint=args.midpoint,
                strict=args.strict,
            )
            print(value)
        elif args.command == "analyze":
            analyze_range(args.start, args.end, args.midpoint)
    except (RangePathError, ValidationError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
