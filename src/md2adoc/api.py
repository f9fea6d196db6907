#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/api.py
"""Public conversion API.

This module wires the conversion pipeline together:

normalize text -> preprocessors -> Markdown parser -> AsciiDoc renderer
-> postprocessors -> output destination

Preprocessors and postprocessors are plain callables. Their arity decides
how they are called: a preprocessor takes ``(text)`` or
``(text, attributes)``, a postprocessor takes ``(text)`` or
``(text, document)``.

"""

from __future__ import annotations

import builtins
import inspect
import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Callable, Iterable, MutableMapping, Optional, Union

from md2adoc.ast.nodes import Document
from md2adoc.constants import ASCIIDOC_EXTENSION
from md2adoc.exceptions import FileError, FileNotFoundError, ValidationError
from md2adoc.options.asciidoc import AsciiDocRendererOptions
from md2adoc.options.base import UNSET
from md2adoc.options.markdown import DEFAULT_PARSER_OPTIONS, MarkdownParserOptions
from md2adoc.parsers.markdown import MarkdownParser
from md2adoc.preprocessors import DEFAULT_PREPROCESSORS
from md2adoc.renderers.asciidoc import AsciiDocRenderer
from md2adoc.utils.encoding import TextSource, normalize_text
from md2adoc.utils.io_utils import Destination, ensure_trailing_newline, write_content

logger = logging.getLogger(__name__)

Postprocessor = Callable[..., Optional[str]]
ExtensionSpec = Union[Callable[..., Any], Iterable[Callable[..., Any]], None, bool]


def _takes_second_argument(func: Callable[..., Any]) -> bool:
    """Return True if ``func`` can be called with two positional arguments."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    positional = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


def _as_callables(spec: ExtensionSpec, parameter_name: str) -> list[Callable[..., Any]]:
    if spec is None or spec is False:
        return []
    if callable(spec):
        return [spec]
    try:
        callables = list(spec)  # type: ignore[arg-type]
    except TypeError as exc:
        raise ValidationError(
            f"{parameter_name} must be a callable or a list of callables",
            parameter_name=parameter_name,
            parameter_value=spec,
            original_error=exc,
        ) from exc
    for item in callables:
        if not callable(item):
            raise ValidationError(
                f"{parameter_name} contains a non-callable entry: {item!r}",
                parameter_name=parameter_name,
                parameter_value=item,
            )
    return callables


def _split_option_kwargs(kwargs: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split kwargs between parser and renderer based on their field names.

    Keywords matching neither options class are left with the renderer
    kwargs so that building the renderer options reports them.
    """
    parser_fields = {f.name for f in fields(MarkdownParserOptions)}
    parser_kwargs = {k: v for k, v in kwargs.items() if k in parser_fields}
    renderer_kwargs = {k: v for k, v in kwargs.items() if k not in parser_fields}
    return parser_kwargs, renderer_kwargs


def _resolve_options(
    parser_options: Optional[MarkdownParserOptions],
    renderer_options: Optional[AsciiDocRendererOptions],
    kwargs: dict[str, Any],
) -> tuple[MarkdownParserOptions, AsciiDocRendererOptions]:
    parser_kwargs, renderer_kwargs = _split_option_kwargs(kwargs)
    parser_options = parser_options or DEFAULT_PARSER_OPTIONS
    renderer_options = renderer_options or AsciiDocRendererOptions()
    if parser_kwargs:
        parser_options = parser_options.create_updated(**parser_kwargs)
    if renderer_kwargs:
        renderer_options = renderer_options.create_updated(**renderer_kwargs)
    return parser_options, renderer_options


def convert(
    source: TextSource,
    to: Destination = None,
    *,
    attributes: Optional[MutableMapping[str, Any]] = None,
    preprocessors: Any = UNSET,
    postprocessors: ExtensionSpec = None,
    postprocess: ExtensionSpec = None,
    encoding: Optional[str] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[AsciiDocRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    r"""Convert Markdown to AsciiDoc.

    Parameters
    ----------
    source : str, bytes, or file-like
        Markdown text, raw bytes, or a readable text or binary stream
    to : str, Path, IO[str], IO[bytes], or None, default None
        Output destination. None returns the AsciiDoc text; a path is written
        as UTF-8 (parent directories are created); a stream is written to.
    attributes : MutableMapping or None, default None
        Document attributes. After a successful conversion the mapping also
        holds the attributes derived from the document (front matter,
        ``doctype``, ``experimental``, ...).
    preprocessors : callable, list of callables, or None
        Text preprocessors. When omitted, front matter extraction and TOC
        replacement run; None, False or an empty list disables
        preprocessing.
    postprocessors : callable, list of callables, or None, default None
        Callables applied to the AsciiDoc text, in order. A None return keeps
        the previous text.
    postprocess : callable, list of callables, or None, default None
        Additional postprocessors, run after ``postprocessors``
    encoding : str or None, default None
        Character encoding of byte input. Detected when not given.
    parser_options : MarkdownParserOptions or None, default None
        Markdown parser configuration
    renderer_options : AsciiDocRendererOptions or None, default None
        AsciiDoc renderer configuration
    kwargs : Any
        Individual option overrides. Keywords naming a parser option field
        update ``parser_options``; all others update ``renderer_options``.

    Returns
    -------
    str or None
        The AsciiDoc text when ``to`` is None, otherwise None

    Raises
    ------
    EncodingError
        If byte input cannot be decoded
    InvalidOptionsError
        If an option keyword or value is invalid
    UnsupportedNodeError
        If the parsed document contains a node kind with no AsciiDoc mapping
    OutputWriteError
        If the destination cannot be written

    Examples
    --------
        >>> convert("Markdown was *here*, but it has become **AsciiDoc**!")
        'Markdown was _here_, but it has become *AsciiDoc*!\n'
        >>> attributes = {}
        >>> convert("**File > Save**", attributes=attributes)
        ':experimental:\n\nmenu:File[Save]\n'
        >>> attributes
        {'experimental': ''}

    """
    parser_opts, renderer_opts = _resolve_options(parser_options, renderer_options, kwargs)
    pre = _as_callables(DEFAULT_PREPROCESSORS if preprocessors is UNSET else preprocessors, "preprocessors")
    post = _as_callables(postprocessors, "postprocessors") + _as_callables(postprocess, "postprocess")

    working: dict[str, Any] = dict(attributes) if attributes else {}

    text = normalize_text(source, encoding=encoding)
    logger.debug("Normalized %d characters of Markdown", len(text))

    for preprocessor in pre:
        text = preprocessor(text, working) if _takes_second_argument(preprocessor) else preprocessor(text)

    document: Document = MarkdownParser(parser_opts).parse(text)
    logger.debug("Parsed %d top-level block(s)", len(document.children))

    rendered = AsciiDocRenderer(renderer_opts).render_to_string(document, working)

    result = rendered.rstrip("\n")
    for postprocessor in post:
        if _takes_second_argument(postprocessor):
            replacement = postprocessor(result, document)
        else:
            replacement = postprocessor(result)
        if replacement is not None:
            result = replacement

    output = write_content(ensure_trailing_newline(result), to)

    if attributes is not None:
        attributes.update(working)
    return output


def _read_source_file(source: Union[str, Path, IO[Any]]) -> tuple[Union[bytes, str], Optional[Path]]:
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            return path.read_bytes(), path
        except builtins.FileNotFoundError as exc:
            raise FileNotFoundError(str(path), original_error=exc) from exc
        except OSError as exc:
            raise FileError(f"Could not read input file: {path}", file_path=str(path), original_error=exc) from exc

    if hasattr(source, "read"):
        name = getattr(source, "name", None)
        try:
            data = source.read()
        except OSError as exc:
            raise FileError(f"Could not read input stream: {name}", file_path=name, original_error=exc) from exc
        return data, Path(name) if isinstance(name, str) and name else None

    raise ValidationError(
        f"Unsupported source type: {type(source).__name__}",
        parameter_name="source",
        parameter_value=source,
    )


def convert_file(source: Union[str, Path, IO[Any]], to: Any = UNSET, **options: Any) -> Optional[str]:
    """Convert a Markdown file to AsciiDoc.

    Parameters
    ----------
    source : str, Path, or file-like
        Path to a Markdown file, or an open file
    to : str, Path, IO, or None
        Output destination. When omitted, the output is written next to the
        source with an ``.adoc`` suffix; None returns the text instead.
    options : Any
        Keyword arguments accepted by :func:`convert`

    Returns
    -------
    str or None
        The AsciiDoc text when ``to`` is None, otherwise None

    Raises
    ------
    FileNotFoundError
        If the source path does not exist
    FileError
        If the source cannot be read
    ValidationError
        If no output path can be derived for the source

    """
    data, source_path = _read_source_file(source)

    if to is UNSET:
        if source_path is None:
            raise ValidationError(
                "Cannot derive an output path for a source without a file name; pass `to`",
                parameter_name="to",
            )
        to = source_path.with_suffix(ASCIIDOC_EXTENSION)
        if to == source_path:
            raise ValidationError(
                f"Output path would overwrite the source: {source_path}",
                parameter_name="to",
                parameter_value=str(to),
            )
        logger.debug("Writing %s to %s", source_path, to)

    return convert(data, to, **options)


__all__ = ["convert", "convert_file"]
