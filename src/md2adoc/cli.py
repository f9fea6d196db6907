#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/cli.py
"""Command-line interface for md2adoc.

Usage::

    md2adoc [options] FILE

``FILE`` may be ``-`` to read Markdown from stdin. By default the output is
written next to the input with an ``.adoc`` suffix (stdout when reading
from stdin).

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Optional, Sequence

from md2adoc import __version__
from md2adoc.api import convert, convert_file
from md2adoc.constants import (
    DEFAULT_AUTO_ID_PREFIX,
    DEFAULT_AUTO_ID_SEPARATOR,
    DEFAULT_HEADING_OFFSET,
    DEFAULT_MARKDOWN_INPUT,
    DEFAULT_SOURCE_STYLE,
    DEFAULT_WRAP_MODE,
    MARKDOWN_INPUTS,
    SOURCE_STYLES,
    WRAP_MODES,
)
from md2adoc.exceptions import FileError, Md2AdocError, ParsingError, RenderingError, ValidationError
from md2adoc.logging_utils import LOG_LEVEL_NAMES, configure_logging
from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

STDIO_PATH = "-"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def parse_attribute(value: str) -> tuple[str, Any]:
    """Parse a ``-a`` argument.

    ``KEY=VALUE`` sets an attribute, ``KEY`` sets it to the empty string and
    ``KEY!`` unsets it.

    Raises
    ------
    argparse.ArgumentTypeError
        If the attribute name is empty

    """
    name, sep, attr_value = value.partition("=")
    name = name.strip()
    result: Any = attr_value if sep else ""
    if not sep and name.endswith("!"):
        name, result = name[:-1], None
    if not name:
        raise argparse.ArgumentTypeError(f"Invalid attribute: {value!r} (expected KEY=VALUE or KEY!)")
    return name, result


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2adoc",
        description="Convert Markdown to AsciiDoc.",
    )
    parser.add_argument("input", metavar="FILE", help="Markdown file to convert, or - to read from stdin")
    parser.add_argument(
        "-o",
        "--output",
        metavar="PATH",
        help="Output file, or - for stdout (default: FILE with an .adoc suffix; stdout for stdin input)",
    )
    parser.add_argument(
        "-a",
        "--attribute",
        dest="attributes",
        action="append",
        type=parse_attribute,
        default=[],
        metavar="KEY=VALUE",
        help="Set a document attribute (KEY=VALUE), or unset one (KEY!). May be repeated.",
    )
    parser.add_argument(
        "--format",
        dest="input_format",
        choices=MARKDOWN_INPUTS,
        default=DEFAULT_MARKDOWN_INPUT,
        help="Markdown flavor of the input (default: %(default)s)",
    )
    parser.add_argument(
        "--wrap",
        choices=WRAP_MODES,
        default=DEFAULT_WRAP_MODE,
        help="How to treat soft line breaks in paragraphs (default: %(default)s)",
    )
    parser.add_argument("--imagesdir", metavar="DIR", help="Image directory prefix to strip from image targets")
    parser.add_argument(
        "--heading-offset",
        type=_non_negative_int,
        default=DEFAULT_HEADING_OFFSET,
        metavar="N",
        help="Add N levels to every section heading (default: %(default)s)",
    )
    parser.add_argument("--auto-ids", action="store_true", help="Emit an explicit id above every section heading")
    parser.add_argument(
        "--auto-id-prefix",
        default=DEFAULT_AUTO_ID_PREFIX,
        metavar="PREFIX",
        help="Prefix for generated section ids (default: %(default)r)",
    )
    parser.add_argument(
        "--auto-id-separator",
        default=DEFAULT_AUTO_ID_SEPARATOR,
        metavar="SEP",
        help="Word separator for generated section ids (default: %(default)r)",
    )
    parser.add_argument(
        "--lazy-ids",
        action="store_true",
        help="Skip generated ids that match the id AsciiDoc would generate on its own",
    )
    parser.add_argument(
        "--source-style",
        choices=SOURCE_STYLES,
        default=DEFAULT_SOURCE_STYLE,
        help="Attribute style for code blocks with a language (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_NAMES,
        default="WARNING",
        type=str.upper,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_options(parsed_args: argparse.Namespace) -> tuple[MarkdownParserOptions, AsciiDocRendererOptions]:
    parser_options = MarkdownParserOptions(input=parsed_args.input_format)
    renderer_options = AsciiDocRendererOptions(
        wrap=parsed_args.wrap,
        heading_offset=parsed_args.heading_offset,
        auto_ids=parsed_args.auto_ids,
        auto_id_prefix=parsed_args.auto_id_prefix,
        auto_id_separator=parsed_args.auto_id_separator,
        lazy_ids=parsed_args.lazy_ids,
        imagesdir=parsed_args.imagesdir,
        source_style=parsed_args.source_style,
    )
    return parser_options, renderer_options


def _run(parsed_args: argparse.Namespace) -> None:
    parser_options, renderer_options = _build_options(parsed_args)
    options: dict[str, Any] = {
        "attributes": dict(parsed_args.attributes),
        "parser_options": parser_options,
        "renderer_options": renderer_options,
    }

    to: Any
    if parsed_args.output == STDIO_PATH:
        to = sys.stdout
    else:
        to = parsed_args.output

    if parsed_args.input == STDIO_PATH:
        logger.debug("Reading Markdown from stdin")
        convert(sys.stdin.buffer, to if to is not None else sys.stdout, **options)
    elif to is None:
        convert_file(parsed_args.input, **options)
    else:
        convert_file(parsed_args.input, to, **options)


def main(args: Optional[Sequence[str]] = None) -> int:
    """Execute the CLI entry point.

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        _run(parsed_args)
    except Md2AdocError as exc:
        logger.error("%s", exc)
        return get_exit_code_for_exception(exc)
    except OSError as exc:
        logger.error("%s", exc)
        return EXIT_FILE_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
