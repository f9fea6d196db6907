#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/preprocessors.py
"""Text preprocessors applied before Markdown parsing.

A preprocessor receives the normalized Markdown text and, optionally, the
working attributes mapping, and returns replacement text. Two ship with
md2adoc and run by default:

- :func:`extract_front_matter` removes a leading YAML (``---``) or TOML
  (``+++``) metadata block and seeds document attributes from it
- :func:`replace_toc` swaps a generated ``<!-- TOC -->`` block for the
  AsciiDoc ``toc::[]`` macro

"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, MutableMapping, Optional

import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

from md2adoc.constants import (
    IGNORED_FRONT_MATTER_KEYS,
    TOC_DIRECTIVE_PATTERN,
    TOC_MACRO,
    TOML_FRONT_MATTER_DELIMITER,
    YAML_FRONT_MATTER_DELIMITER,
)

logger = logging.getLogger(__name__)

Preprocessor = Callable[..., str]


def parse_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split a leading front matter block from Markdown text.

    Parameters
    ----------
    text : str
        Normalized Markdown text (``\\n`` line endings)

    Returns
    -------
    tuple[dict, str]
        The parsed metadata and the remaining text. When the text has no
        front matter the metadata is empty and the text is returned as-is.

    Notes
    -----
    The opening delimiter must be the very first line and a matching closing
    delimiter line is required. A block containing a blank line is not front
    matter; in Markdown it reads as a thematic break followed by content.
    Blank lines following the closing delimiter are dropped. Metadata that
    cannot be parsed, or that is not a mapping, is logged and discarded while
    the block itself is still removed.

    Examples
    --------
        >>> parse_front_matter("---\\ntitle: Intro\\n---\\n\\nBody\\n")
        ({'title': 'Intro'}, 'Body\\n')

    """
    lines = text.split("\n")
    delimiter = lines[0].rstrip() if lines else ""
    if delimiter not in (YAML_FRONT_MATTER_DELIMITER, TOML_FRONT_MATTER_DELIMITER):
        return {}, text

    end_index = -1
    for i in range(1, len(lines)):
        if lines[i].rstrip() == delimiter:
            end_index = i
            break
        if not lines[i].strip():
            return {}, text

    if end_index <= 0:
        return {}, text

    raw = "\n".join(lines[1:end_index])
    remaining = lines[end_index + 1 :]
    while remaining and not remaining[0].strip():
        remaining.pop(0)
    body = "\n".join(remaining)

    return _load_metadata(raw, delimiter), body


def _load_metadata(raw: str, delimiter: str) -> dict[str, Any]:
    try:
        if delimiter == TOML_FRONT_MATTER_DELIMITER:
            data = tomllib.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Ignoring invalid front matter: %s", exc)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring front matter that is not a mapping (got %s)", type(data).__name__)
        return {}
    return data


def _attribute_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(_attribute_value(item) for item in value)
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def extract_front_matter(text: str, attributes: Optional[MutableMapping[str, Any]] = None) -> str:
    """Remove front matter and seed document attributes from it.

    ``title`` becomes the ``doctitle`` attribute, ``layout`` is ignored,
    and every other key becomes an attribute with a string value.
    Attributes already present in the mapping are left alone.

    Parameters
    ----------
    text : str
        Markdown text
    attributes : MutableMapping or None, default None
        Working attributes mapping to seed

    Returns
    -------
    str
        The text without its front matter block

    """
    metadata, body = parse_front_matter(text)
    if attributes is None or not metadata:
        return body

    for key, value in metadata.items():
        name = str(key)
        if name in IGNORED_FRONT_MATTER_KEYS:
            continue
        if name == "title":
            name = "doctitle"
        attributes.setdefault(name, _attribute_value(value))

    logger.debug("Front matter supplied %d attribute(s)", len(metadata))
    return body


def replace_toc(text: str, attributes: Optional[MutableMapping[str, Any]] = None) -> str:
    """Replace a generated ``<!-- TOC -->`` block with ``toc::[]``.

    Sets the ``toc`` attribute to ``macro`` so the table of contents is
    placed where the block was.
    """
    replaced, count = TOC_DIRECTIVE_PATTERN.subn(TOC_MACRO, text, count=1)
    if count and attributes is not None:
        attributes.setdefault("toc", "macro")
    return replaced


DEFAULT_PREPROCESSORS: tuple[Preprocessor, ...] = (extract_front_matter, replace_toc)

__all__ = [
    "DEFAULT_PREPROCESSORS",
    "Preprocessor",
    "extract_front_matter",
    "parse_front_matter",
    "replace_toc",
]
