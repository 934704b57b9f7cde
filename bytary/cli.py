import argparse
import sys
from typing import BinaryIO, List, Optional

from bytary import __version__
from bytary.encoding_schemes.formats import DEFAULT_FORMAT, list_formats
from bytary.errors import BytaryError
from bytary.pipeline.config import PipelineConfig
from bytary.pipeline.runner import convert_stream


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytary",
        description="A simple CLI tool for binary data manipulation.",
    )
    parser.add_argument(
        "-l",
        "--list-formats",
        action="store_true",
        help="List all supported formats and exit. Other arguments are ignored.",
    )
    parser.add_argument(
        "to_format",
        nargs="?",
        default=DEFAULT_FORMAT.value,
        metavar="TO",
        help="Output format (default: bytes).",
    )
    parser.add_argument(
        "from_format",
        nargs="?",
        default=DEFAULT_FORMAT.value,
        metavar="FROM",
        help="Input format (default: bytes).",
    )
    parser.add_argument(
        "-s",
        "--space",
        dest="space_interval",
        type=_non_negative_int,
        default=0,
        help="Space interval between bytes; 0 means no space.",
    )
    parser.add_argument(
        "-w",
        "--wrap",
        dest="wrap_interval",
        type=_non_negative_int,
        default=0,
        help="Line wrap interval in bytes; 0 means no line wrap.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Describe the conversion on stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
) -> int:
    args = build_parser().parse_args(argv)

    if args.list_formats:
        print("Available formats: " + ", ".join(list_formats()))
        return 0

    instream = stdin if stdin is not None else sys.stdin.buffer
    outstream = stdout if stdout is not None else sys.stdout.buffer

    try:
        cfg = PipelineConfig(
            to_format=args.to_format,
            from_format=args.from_format,
            space_interval=args.space_interval,
            wrap_interval=args.wrap_interval,
            verbose=args.verbose,
        )
        convert_stream(instream, outstream, cfg)
    except BytaryError as exc:
        print(exc, file=sys.stderr)
        return 1

    outstream.flush()
    return 0
