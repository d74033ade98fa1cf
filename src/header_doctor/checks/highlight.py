"""Shared highlighting logic for all checks.

Colours a header line from two independent inputs: the verdict a check
returned, and the red/yellow/green substrings the check declares.
"""

import re
from typing import Callable, Sequence

from header_doctor.model.highlight import HighlightSegment, HighlightType
from header_doctor.model.verdict import Verdict, VerdictStatus

_STATUS_COLOURS = {
    VerdictStatus.OK: HighlightType.GREEN,
    VerdictStatus.WARN: HighlightType.YELLOW,
    VerdictStatus.FAIL: HighlightType.RED,
}


def highlight_type_for(
    line: str,
    verdict: Verdict | None,
    matches_line: Callable[[str], bool],
) -> HighlightType:
    """Whole-line colour for a verdict, NONE when the line is not ours."""
    if verdict is None or not matches_line(line):
        return HighlightType.NONE
    return _STATUS_COLOURS[verdict.status]


def highlight_segments_for(
    line: str,
    matches_line: Callable[[str], bool],
    red_patterns: Sequence[str] = (),
    yellow_patterns: Sequence[str] = (),
    green_patterns: Sequence[str] = (),
) -> list[HighlightSegment]:
    """Locate every pattern occurrence in ``line`` and return coloured segments.

    Spans are painted red, then yellow, then green, so green always wins
    where occurrences overlap. Runs of the same colour are merged.
    """
    if not line or not matches_line(line):
        return []
    if not (red_patterns or yellow_patterns or green_patterns):
        return []

    painted: list[HighlightType] = [HighlightType.NONE] * len(line)
    for colour, patterns in (
        (HighlightType.RED, red_patterns),
        (HighlightType.YELLOW, yellow_patterns),
        (HighlightType.GREEN, green_patterns),
    ):
        for pattern in patterns:
            for start in _find_all(line, pattern):
                for offset in range(start, min(start + len(pattern), len(painted))):
                    painted[offset] = colour

    return _collapse(painted)


def _find_all(line: str, needle: str) -> list[int]:
    """Start offsets of every (possibly overlapping) case-insensitive occurrence.

    Matching runs against the raw line so offsets never drift when case
    mapping changes a string's length.
    """
    if not needle:
        return []
    lookahead = re.compile(f"(?={re.escape(needle)})", re.IGNORECASE)
    return [match.start() for match in lookahead.finditer(line)]


def _collapse(painted: list[HighlightType]) -> list[HighlightSegment]:
    segments: list[HighlightSegment] = []
    run_start = 0
    for index in range(1, len(painted) + 1):
        if index < len(painted) and painted[index] == painted[run_start]:
            continue
        if painted[run_start] != HighlightType.NONE:
            segments.append(HighlightSegment(run_start, index, painted[run_start]))
        run_start = index
    return segments
