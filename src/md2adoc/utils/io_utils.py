#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module delivers converted text to its destination: returned to the
caller, written to a file path, or written to an open stream. File writes
go through a temporary file in the target directory followed by an atomic
rename, so a failed write never leaves a partial destination file.

"""

from __future__ import annotations

import io
import logging
import os
import tempfile
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from md2adoc.constants import OUTPUT_ENCODING
from md2adoc.exceptions import OutputWriteError, ValidationError

logger = logging.getLogger(__name__)

Destination = Union[str, Path, IO[str], IO[bytes], None]


def ensure_trailing_newline(text: str) -> str:
    """Return ``text`` ending in exactly one newline, or ``""`` if it is empty.

    Examples
    --------
    >>> ensure_trailing_newline("= Title\\n\\n")
    '= Title\\n'
    >>> ensure_trailing_newline("")
    ''

    """
    stripped = text.rstrip("\n")
    return f"{stripped}\n" if stripped else ""


def is_binary_stream(output: object) -> bool:
    """Detect whether a writable stream expects bytes.

    Concrete io types are checked first, then the io base classes, and
    finally the ``mode`` attribute of generic file objects. Unknown objects
    are treated as text streams.
    """
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_atomically(content: str, path: Path) -> None:
    """Write UTF-8 text to ``path`` via a temporary file and ``os.replace``.

    Missing parent directories are created; a directory created concurrently
    by another writer is not an error.

    Raises
    ------
    OutputWriteError
        If the directory cannot be created or the file cannot be written

    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(str(path), original_error=exc) from exc

    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as exc:
        raise OutputWriteError(str(path), original_error=exc) from exc

    try:
        with os.fdopen(fd, "w", encoding=OUTPUT_ENCODING, newline="") as handle:
            handle.write(content)
        # mkstemp creates 0600 files; keep an existing file's mode instead
        os.chmod(tmp_name, path.stat().st_mode & 0o777 if path.exists() else 0o644)
        os.replace(tmp_name, path)
    except OSError as exc:
        try:
            os.unlink(tmp_name)
        except OSError:
            logger.debug("Could not remove temporary file %s", tmp_name)
        raise OutputWriteError(str(path), original_error=exc) from exc

    logger.debug("Wrote %d characters to %s", len(content), path)


def write_content(content: str, output: Destination) -> str | None:
    """Deliver converted text to its destination.

    Parameters
    ----------
    content : str
        Final text. It is written exactly as given; callers apply
        :func:`ensure_trailing_newline` beforehand.
    output : str, Path, IO[str], IO[bytes], or None
        Output destination. Can be:
        - None: the text is returned
        - str or Path: written as UTF-8 to that file (atomically)
        - IO[bytes]: UTF-8 bytes are written to the stream
        - IO[str]: text is written to the stream

    Returns
    -------
    str or None
        The text when ``output`` is None, otherwise None

    Raises
    ------
    OutputWriteError
        If the destination cannot be written
    ValidationError
        If the destination type is not supported

    Examples
    --------
    Return the text:
        >>> write_content("Hello\\n", None)
        'Hello\\n'

    Write to a stream:
        >>> buffer = BytesIO()
        >>> write_content("caf\\u00e9\\n", buffer)
        >>> buffer.getvalue()
        b'caf\\xc3\\xa9\\n'

    """
    if output is None:
        return content

    if isinstance(output, (str, Path)):
        write_atomically(content, Path(output))
        return None

    if hasattr(output, "write"):
        name = str(getattr(output, "name", type(output).__name__))
        try:
            if is_binary_stream(output):
                cast(IO[bytes], output).write(content.encode(OUTPUT_ENCODING))
            else:
                cast(IO[str], output).write(content)
            flush = getattr(output, "flush", None)
            if callable(flush):
                flush()
        except OSError as exc:
            raise OutputWriteError(name, original_error=exc) from exc
        return None

    raise ValidationError(
        f"Unsupported output type: {type(output).__name__}",
        parameter_name="to",
        parameter_value=output,
    )


__all__ = ["Destination", "ensure_trailing_newline", "is_binary_stream", "write_atomically", "write_content"]
