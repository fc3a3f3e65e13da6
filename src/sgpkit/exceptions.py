"""Exceptions raised by sgpkit.

Every error derives from :class:`ValueError`: all of them describe input
(a buffer, a record, an element set at an instant) that can never succeed
as given, so retrying the same call is pointless.
"""

from __future__ import annotations

from typing import Optional


class SGPKitError(ValueError):
    """Base class for all sgpkit errors."""


# --- TLE records and codec ---


class TLEError(SGPKitError):
    """A TLE record or buffer is structurally invalid."""


class InvalidLineLength(TLEError):
    """A TLE data line is not exactly 69 characters long.

    Attributes:
        line_lengths: Lengths of (line1, line2) as received.
        record_index: Zero-based position of the offending record when
            raised from a batch decode, otherwise ``None``.
    """

    def __init__(self, line_lengths: tuple[int, int], record_index: Optional[int] = None) -> None:
        self.line_lengths = line_lengths
        self.record_index = record_index
        where = f" in record {record_index}" if record_index is not None else ""
        super().__init__(
            f"TLE data lines must be 69 characters long{where}, "
            f"got {line_lengths[0]} and {line_lengths[1]}"
        )


class DecodeError(TLEError):
    """A byte buffer could not be decoded into TLE records."""


class EmptyInput(DecodeError):
    """The buffer to decode has zero length."""

    def __init__(self) -> None:
        super().__init__("TLE buffer is empty")


class EncodingError(DecodeError):
    """The buffer contains bytes outside the ASCII range."""


class WrongLineCount(DecodeError):
    """The buffer does not hold the expected number of non-blank lines.

    Attributes:
        count: Number of non-blank lines found.
    """

    def __init__(self, count: int, expected: str = "3") -> None:
        self.count = count
        super().__init__(f"Expected {expected} non-blank TLE lines, got {count}")


class EncodeError(TLEError):
    """A TLE record could not be encoded."""


class CannotEncodeAsAscii(EncodeError):
    """A TLE field contains characters outside the ASCII range."""


# --- Propagation ---


class PropagationError(SGPKitError):
    """The propagation engine could not produce a state."""


class InvalidElements(PropagationError):
    """The engine rejected the element set encoded in the TLE lines."""


class PropagationFailure(PropagationError):
    """The engine failed to propagate a valid element set to an instant.

    Attributes:
        code: SGP4 error code reported by the engine.
    """

    def __init__(self, message: str, code: int) -> None:
        self.code = code
        super().__init__(message)
