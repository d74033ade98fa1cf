"""Highlight spans over raw header lines."""

from dataclasses import dataclass
from enum import Enum


class HighlightType(Enum):
    """Colour applied to a span of a header line."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    NONE = "none"


@dataclass(frozen=True)
class HighlightSegment:
    """A coloured span of a header line.

    Offsets are character positions in the raw line, half-open ``[start, end)``.
    They are not validated: ``start`` may exceed ``end`` and either may be negative.
    """

    start: int
    end: int
    type: HighlightType
