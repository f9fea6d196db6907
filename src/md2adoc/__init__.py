"""md2adoc - convert Markdown documents to AsciiDoc.

md2adoc parses Markdown (GitHub Flavored Markdown by default) with mistune,
maps the token stream onto a typed document tree, and renders that tree as
AsciiDoc. A leading level-1 heading becomes the document title, documents
with several top-level parts are declared as books, and bold menu paths
such as ``**File > Save**`` become UI macros.

Key Features
------------
- YAML (``---``) and TOML (``+++``) front matter becomes document attributes
- Pluggable text preprocessors and postprocessors
- Output to a string, a file path (written atomically) or a stream
- Command-line interface: ``md2adoc README.md``

Examples
--------
Convert a string:

    >>> from md2adoc import convert
    >>> print(convert("# Hello\\n\\nThis is *AsciiDoc*."), end="")
    = Hello
    <BLANKLINE>
    This is _AsciiDoc_.

Convert a file next to itself (``README.adoc``):

    >>> from md2adoc import convert_file
    >>> convert_file("README.md")  # doctest: +SKIP

"""

import logging

from md2adoc.api import convert, convert_file
from md2adoc.exceptions import (
    EncodingError,
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    Md2AdocError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    UnsupportedNodeError,
    ValidationError,
)
from md2adoc.options import AsciiDocRendererOptions, MarkdownParserOptions

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AsciiDocRendererOptions",
    "EncodingError",
    "FileError",
    "FileNotFoundError",
    "InvalidOptionsError",
    "MarkdownParserOptions",
    "Md2AdocError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeError",
    "ValidationError",
    "__version__",
    "convert",
    "convert_file",
]
