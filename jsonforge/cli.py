"""Format, validate, minify, fix or measure a JSON document from a file or stdin."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_INDENT, MAX_DEPTH, MAX_DEPTH_LIMIT, MAX_INPUT_SIZE, parse_indent
from .errors import JSONSyntaxError, describe
from .fixer import fix_and_format
from .formatter import format_text, minify_text
from .logging_config import setup_logging
from .parser import validate
from .stats import format_bytes, stats

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2


def _indent_arg(value: str) -> str:
    try:
        parse_indent(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))
    return value


def _depth_arg(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth {value!r}")
    if not 1 <= depth <= MAX_DEPTH_LIMIT:
        raise argparse.ArgumentTypeError(f"depth must be between 1 and {MAX_DEPTH_LIMIT}")
    return depth


def _size_arg(value: str) -> int:
    try:
        size = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size {value!r}")
    if size < 1:
        raise argparse.ArgumentTypeError("size must be positive")
    return size


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("file", nargs="?", default="-", help="JSON file to read (default: stdin)")
    common.add_argument("--max-depth", type=_depth_arg, default=MAX_DEPTH)
    common.add_argument("--max-input-size", type=_size_arg, default=MAX_INPUT_SIZE)
    common.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")

    indent = argparse.ArgumentParser(add_help=False)
    indent.add_argument("--indent", type=_indent_arg, default=DEFAULT_INDENT, help="1-8 spaces or 'tab'")

    parser = argparse.ArgumentParser(prog="jsonforge", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("format", parents=[common, indent], help="Pretty-print a document")
    sub.add_parser("validate", parents=[common], help="Check a document and report the first error")
    sub.add_parser("minify", parents=[common], help="Strip all insignificant whitespace")
    sub.add_parser("fix", parents=[common, indent], help="Repair trailing commas and bare keys, then format")
    sub.add_parser("stats", parents=[common], help="Report size and structure counts")
    return parser


def _read_input(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")


def _run(args: argparse.Namespace, text: str) -> str:
    limits = {"max_depth": args.max_depth, "max_input_size": args.max_input_size}

    if args.command == "format":
        return format_text(text, indent=args.indent, **limits)
    if args.command == "validate":
        validate(text.strip(), **limits)
        return "JSON is valid"
    if args.command == "minify":
        result = minify_text(text, **limits)
        logger.info("Reduced from %d to %d characters", result.original_length, result.minified_length)
        return result.text
    if args.command == "fix":
        return fix_and_format(text, indent=args.indent, **limits)

    result = stats(text)
    lines = [f"{name}: {value}" for name, value in result.model_dump().items()]
    lines.append(f"human_size: {format_bytes(result.byte_size)}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level or "WARNING")

    try:
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"jsonforge: cannot read {args.file}: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        output = _run(args, text)
    except JSONSyntaxError as exc:
        print(describe(exc.error), file=sys.stderr)
        return EXIT_PARSE_ERROR

    print(output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
