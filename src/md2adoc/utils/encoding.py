#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adoc/utils/encoding.py
"""Character encoding detection and text normalization.

Every conversion starts here: raw bytes, text, or a readable stream is
turned into a single ``str`` with ``\\n`` line endings. Decoding tries a
declared encoding first, then strict UTF-8, then chardet-based detection,
then single-byte fallbacks that accept any byte sequence.
"""

from __future__ import annotations

import codecs
import logging
import re
from typing import IO, Union

import chardet

from md2adoc.constants import ENCODING_DETECTION_CONFIDENCE, FALLBACK_ENCODINGS
from md2adoc.exceptions import EncodingError, ValidationError

logger = logging.getLogger(__name__)

_LINE_TERMINATOR = re.compile(r"\r\n?")

TextSource = Union[str, bytes, bytearray, IO[str], IO[bytes]]


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = ENCODING_DETECTION_CONFIDENCE,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or the confidence
        is below the threshold

    """
    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug("chardet detected encoding: %s (confidence: %.2f)", encoding, confidence)
    if confidence < confidence_threshold:
        logger.debug("chardet confidence %.2f below threshold %.2f", confidence, confidence_threshold)
        return None
    return encoding


def decode_bytes(data: bytes, encoding: str | None = None) -> str:
    """Decode bytes to text.

    Parameters
    ----------
    data : bytes
        Raw input
    encoding : str or None, default None
        Declared source encoding. When given it is authoritative: a failure
        raises instead of falling back to detection.

    Returns
    -------
    str
        Decoded text (a leading byte order mark is not included)

    Raises
    ------
    EncodingError
        If the declared encoding is unknown or cannot decode the data

    """
    if encoding is not None:
        try:
            codecs.lookup(encoding)
        except LookupError as exc:
            raise EncodingError(f"Unknown encoding: {encoding}", encoding=encoding, original_error=exc) from exc
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise EncodingError(
                f"Input cannot be decoded as {encoding}: {exc.reason} at byte {exc.start}",
                encoding=encoding,
                original_error=exc,
            ) from exc

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.debug("Input is not valid UTF-8, trying detection")

    detected = detect_encoding(data)
    if detected:
        try:
            return data.decode(detected)
        except (UnicodeDecodeError, LookupError) as exc:
            logger.debug("Detected encoding %s failed: %s", detected, exc)

    for fallback in FALLBACK_ENCODINGS:
        try:
            text = data.decode(fallback)
        except UnicodeDecodeError:
            continue
        logger.debug("Decoded input using fallback encoding %s", fallback)
        return text

    # latin-1 maps every byte, so this is unreachable unless the fallbacks change
    raise EncodingError("Input cannot be decoded with any supported encoding")


def normalize_newlines(text: str) -> str:
    r"""Rewrite ``\r\n`` and lone ``\r`` line terminators to ``\n``.

    Examples
    --------
    >>> normalize_newlines("one\r\ntwo\rthree\n")
    'one\ntwo\nthree\n'

    """
    if "\r" not in text:
        return text
    return _LINE_TERMINATOR.sub("\n", text)


def normalize_text(source: TextSource, encoding: str | None = None) -> str:
    """Turn raw input into canonical text.

    Parameters
    ----------
    source : str, bytes, or readable stream
        Markdown input. Text streams are read as-is; binary streams and
        bytes are decoded with :func:`decode_bytes`.
    encoding : str or None, default None
        Declared encoding for byte input

    Returns
    -------
    str
        Text with ``\\n`` line endings and no leading byte order mark.
        Already canonical text is returned unchanged.

    Raises
    ------
    EncodingError
        If byte input cannot be decoded
    ValidationError
        If ``source`` is not a supported input type

    """
    if isinstance(source, str):
        text = source
    elif isinstance(source, (bytes, bytearray)):
        text = decode_bytes(bytes(source), encoding)
    elif hasattr(source, "read"):
        data = source.read()
        if isinstance(data, (bytes, bytearray)):
            text = decode_bytes(bytes(data), encoding)
        elif isinstance(data, str):
            text = data
        else:
            raise ValidationError(
                f"Stream returned unsupported data type: {type(data).__name__}",
                parameter_name="source",
            )
    else:
        raise ValidationError(
            f"Unsupported input type: {type(source).__name__}",
            parameter_name="source",
            parameter_value=source,
        )

    if text.startswith("\ufeff"):
        text = text[1:]
    return normalize_newlines(text)


__all__ = ["detect_encoding", "decode_bytes", "normalize_newlines", "normalize_text"]
