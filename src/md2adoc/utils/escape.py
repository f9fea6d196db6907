#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/utils/escape.py
"""Escaping helpers for AsciiDoc output.

Markdown text is mostly valid AsciiDoc text as-is, so escaping is kept
narrow. Only attribute references, macro brackets and formatting marks that
would pair up are escaped, plus the characters that would turn inline code
into formatted text.
"""

from __future__ import annotations

import re

_ATTRIBUTE_REFERENCE = re.compile(r"(?<!\\)\{([A-Za-z0-9_][A-Za-z0-9_-]*)\}")

# Characters (or sequences) that AsciiDoc would interpret inside backticks
_CODE_SPECIALS = re.compile(r"[*_#^~{}\[\]<>`+\\]|\.\.\.|--|\([CRM]\)|\(TM\)")

_FORMATTING_MARKS = ("*", "_", "`", "#", "+")


def _formatting_pair_pattern(mark: str) -> re.Pattern[str]:
    m = re.escape(mark)
    return re.compile(
        rf"(?P<unconstrained>(?<!\\){m}{m}.+?{m}{m})"
        rf"|(?P<lead>^|[^\w;:}}\\])(?P<constrained>{m}(?!{m})(?:\S|\S.*?\S){m})(?!\w)",
        re.DOTALL,
    )


_FORMATTING_PAIRS = {mark: _formatting_pair_pattern(mark) for mark in _FORMATTING_MARKS}


def escape_attribute_references(text: str) -> str:
    r"""Escape ``{name}`` so AsciiDoc does not substitute an attribute value.

    Examples
    --------
        >>> escape_attribute_references("Use {project} here")
        'Use \\{project} here'

    """
    if "{" not in text:
        return text
    return _ATTRIBUTE_REFERENCE.sub(r"\\{\1}", text)


def escape_formatting_marks(text: str) -> str:
    r"""Escape literal ``*``, ``_``, backtick, ``#`` and ``+`` marks that would pair up.

    A mark is only escaped when AsciiDoc would otherwise read it as the
    opening of a constrained (``*x*``) or unconstrained (``**x**``) span; a
    backslash in front of an unpaired mark would be printed as-is.
    Unconstrained pairs need a double backslash, except ``++``.

    Parameters
    ----------
    text : str
        Literal text

    Returns
    -------
    str
        Text in which no formatting span can form

    Examples
    --------
        >>> escape_formatting_marks("*not bold*")
        '\\*not bold*'
        >>> escape_formatting_marks("2 * 3 * 4 and snake_case_name")
        '2 * 3 * 4 and snake_case_name'

    """
    for mark, pattern in _FORMATTING_PAIRS.items():
        if text.count(mark) < 2:
            continue

        def _escape(match: re.Match[str], mark: str = mark) -> str:
            if match.group("unconstrained"):
                prefix = "\\" if mark == "+" else "\\\\"
                return prefix + match.group("unconstrained")
            return match.group("lead") + "\\" + match.group("constrained")

        text = pattern.sub(_escape, text)
    return text


def escape_macro_text(text: str) -> str:
    r"""Escape a closing bracket inside macro text such as ``link:url[text]``.

    Examples
    --------
        >>> escape_macro_text("see [1]")
        'see [1\\]'

    """
    return text.replace("]", r"\]")


def escape_attribute_value(text: str) -> str:
    """Escape text for a double-quoted named attribute, e.g. ``title="..."``."""
    return text.replace('"', r"\"")


def code_needs_passthrough(code: str) -> bool:
    """Whether inline code must be wrapped as ```+code+``` to stay literal."""
    return bool(_CODE_SPECIALS.search(code))


__all__ = [
    "code_needs_passthrough",
    "escape_attribute_references",
    "escape_attribute_value",
    "escape_formatting_marks",
    "escape_macro_text",
]
