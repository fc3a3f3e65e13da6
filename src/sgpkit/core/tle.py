"""TLE (Two-Line Element) record model.

A :class:`TLE` holds the raw title and data lines of one element set. The
only rule enforced here is structural: both data lines are exactly 69
characters. Column contents are left to the propagation engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sgpkit.exceptions import InvalidLineLength
from sgpkit.utils.constants import TLE_LINE_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TLE:
    """A validated Two-Line Element set.

    Attributes:
        title: Satellite name (line 0). May be empty.
        line1: TLE data line 1 (69 characters).
        line2: TLE data line 2 (69 characters).

    Raises:
        InvalidLineLength: If ``line1`` or ``line2`` is not 69 characters.
    """

    title: str
    line1: str
    line2: str

    def __post_init__(self) -> None:
        if len(self.line1) != TLE_LINE_LENGTH or len(self.line2) != TLE_LINE_LENGTH:
            logger.error(
                "Invalid TLE line lengths for %r: %d, %d",
                self.title, len(self.line1), len(self.line2),
            )
            raise InvalidLineLength((len(self.line1), len(self.line2)))

    @classmethod
    def from_lines(cls, line1: str, line2: str, title: str = "") -> TLE:
        """Build a TLE from its two data lines.

        Args:
            line1: TLE line 1 (69 characters).
            line2: TLE line 2 (69 characters).
            title: Optional satellite name (line 0).

        Returns:
            A validated TLE object.
        """
        return cls(title=title, line1=line1, line2=line2)

    def __str__(self) -> str:
        return f"{self.title}\n{self.line1}\n{self.line2}"
