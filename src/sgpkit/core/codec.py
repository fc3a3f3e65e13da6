"""ASCII codec for TLE text.

A TLE buffer holds one or more records of three lines each: a title line
followed by the two 69-character data lines. Blank lines between records
are ignored. Only ASCII is accepted in either direction.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Union

from sgpkit.core.tle import TLE
from sgpkit.exceptions import (
    CannotEncodeAsAscii,
    EmptyInput,
    EncodingError,
    InvalidLineLength,
    WrongLineCount,
)

logger = logging.getLogger(__name__)

Buffer = Union[bytes, bytearray, memoryview]

_LINES_PER_RECORD = 3

# Line terminators; ASCII file, group and record separators are not among them
_NEWLINE = re.compile(r"\r\n|[\n\r\v\f]")


def _split_lines(data: Buffer) -> list[str]:
    """Decode ``data`` as ASCII and return its stripped, non-blank lines.

    Raises:
        TypeError: If ``data`` is not a bytes-like object.
        EmptyInput: If ``data`` has zero length.
        EncodingError: If ``data`` contains non-ASCII bytes.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"TLE data must be bytes-like, not {type(data).__name__}")

    raw = bytes(data)
    if not raw:
        logger.error("Cannot decode an empty TLE buffer")
        raise EmptyInput()

    try:
        text = raw.decode("ascii")
    except UnicodeDecodeError as e:
        logger.error("TLE buffer is not ASCII: %s", e)
        raise EncodingError(f"TLE buffer is not ASCII-encoded: {e}") from e

    return [line.strip() for line in _NEWLINE.split(text) if line.strip()]


def _record(lines: list[str], record_index: int | None = None) -> TLE:
    """Build one record from a title line and two data lines."""
    title, line1, line2 = lines
    try:
        return TLE(title=title, line1=line1, line2=line2)
    except InvalidLineLength as e:
        if record_index is None:
            raise
        raise InvalidLineLength(e.line_lengths, record_index=record_index) from e


def decode_one(data: Buffer) -> TLE:
    """Decode exactly one TLE record from an ASCII buffer.

    Args:
        data: Raw bytes holding a title line and two data lines.

    Returns:
        The decoded TLE.

    Raises:
        EmptyInput: If ``data`` is empty.
        EncodingError: If ``data`` is not ASCII.
        WrongLineCount: If there are not exactly three non-blank lines.
        InvalidLineLength: If a data line is not 69 characters.
    """
    lines = _split_lines(data)
    if len(lines) != _LINES_PER_RECORD:
        logger.error("Expected 3 TLE lines, got %d", len(lines))
        raise WrongLineCount(len(lines))

    tle = _record(lines)
    logger.debug("Decoded TLE %r", tle.title)
    return tle


def decode_many(data: Buffer) -> list[TLE]:
    """Decode a sequence of TLE records from an ASCII buffer.

    Lines are grouped in threes in input order. Any malformed group aborts
    the whole decode; no partial result is returned.

    Args:
        data: Raw bytes holding zero or more three-line records.

    Returns:
        The decoded TLEs, in input order.

    Raises:
        EmptyInput: If ``data`` is empty.
        EncodingError: If ``data`` is not ASCII.
        WrongLineCount: If the non-blank line count is not a multiple of 3.
        InvalidLineLength: If a data line is not 69 characters; its
            ``record_index`` names the failing record.
    """
    lines = _split_lines(data)
    if len(lines) % _LINES_PER_RECORD != 0:
        logger.error("TLE line count %d is not a multiple of 3", len(lines))
        raise WrongLineCount(len(lines), expected="a multiple of 3")

    tles = [
        _record(lines[i:i + _LINES_PER_RECORD], record_index=i // _LINES_PER_RECORD)
        for i in range(0, len(lines), _LINES_PER_RECORD)
    ]
    logger.debug("Decoded %d TLEs", len(tles))
    return tles


def encode(tle: TLE) -> bytes:
    """Encode a TLE as ``title``, ``line1`` and ``line2`` joined by newlines.

    The result has no trailing newline. For any record returned by
    :func:`decode_one`, ``decode_one(encode(tle)) == tle``.

    Raises:
        CannotEncodeAsAscii: If a field contains non-ASCII characters.
    """
    text = "\n".join((tle.title, tle.line1, tle.line2))
    try:
        return text.encode("ascii")
    except UnicodeEncodeError as e:
        logger.error("Cannot encode TLE %r as ASCII: %s", tle.title, e)
        raise CannotEncodeAsAscii(f"TLE {tle.title!r} cannot be encoded as ASCII: {e}") from e


def encode_many(tles: Iterable[TLE]) -> bytes:
    """Encode several TLEs into one buffer, records separated by newlines."""
    return b"\n".join(encode(tle) for tle in tles)
