"""Analysis pass - Runs every check over one response's headers.

Each call to analyze() is one pass with its own context mapping; nothing
is shared between passes except the (read-only here) exclusion registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from header_doctor.checks import BaseCheck, load_builtin_checks
from header_doctor.exclusion.registry import ExclusionRuleRegistry
from header_doctor.model.headers import HttpHeaders
from header_doctor.model.highlight import HighlightSegment, HighlightType
from header_doctor.model.verdict import Verdict, VerdictStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckOutcome:
    """Verdict produced by one check in one pass."""

    check: BaseCheck
    verdict: Verdict


@dataclass(frozen=True)
class HighlightedLine:
    """A raw header line with its whole-line colour and pattern segments."""

    text: str
    line_type: HighlightType = HighlightType.NONE
    segments: tuple[HighlightSegment, ...] = ()
    check_name: str | None = None


@dataclass
class AnalysisReport:
    """Everything one pass produced."""

    headers: HttpHeaders
    outcomes: list[CheckOutcome] = field(default_factory=list)
    context: dict[str, Any] = field(default_factory=dict)
    method: str | None = None
    url: str | None = None
    excluded: bool = False

    @property
    def overall_status(self) -> VerdictStatus:
        """FAIL beats WARN beats OK, over checks that affect the overall status."""
        counted = [o.verdict for o in self.outcomes if o.check.affects_overall_status]
        if any(v.is_fail for v in counted):
            return VerdictStatus.FAIL
        if any(v.is_warn for v in counted):
            return VerdictStatus.WARN
        return VerdictStatus.OK

    def findings(self) -> list[CheckOutcome]:
        """Non-OK outcomes, or nothing when the request is excluded."""
        if self.excluded:
            return []
        return [o for o in self.outcomes if not o.verdict.is_ok]

    def verdict_for(self, check_name: str) -> Verdict | None:
        return next((o.verdict for o in self.outcomes if o.check.name == check_name), None)

    def highlighted_lines(self) -> list[HighlightedLine]:
        """Colour every header line using the first check that owns it."""
        lines = []
        for line in self.headers.lines:
            owner = next((o for o in self.outcomes if o.check.matches_header_line(line)), None)
            if owner is None:
                lines.append(HighlightedLine(text=line))
                continue
            lines.append(
                HighlightedLine(
                    text=line,
                    line_type=owner.check.get_highlight_type(line, owner.verdict),
                    segments=tuple(owner.check.get_highlight_segments(line, owner.verdict)),
                    check_name=owner.check.name,
                )
            )
        return lines


def analyze(
    headers: HttpHeaders,
    checks: list[BaseCheck] | None = None,
    *,
    method: str | None = None,
    url: str | None = None,
    registry: ExclusionRuleRegistry | None = None,
) -> AnalysisReport:
    """Run all checks against ``headers`` in a fresh context."""
    if checks is None:
        checks = load_builtin_checks()

    report = AnalysisReport(headers=headers, method=method, url=url)
    for check in checks:
        try:
            verdict = check.check(headers, report.context)
        except Exception as e:
            # Log error but don't fail the entire pass
            logger.warning(f"Check {check.__class__.__name__} failed: {e}")
            continue
        report.outcomes.append(CheckOutcome(check=check, verdict=verdict))

    if registry is not None and method and url:
        report.excluded = registry.should_exclude(method, url)

    return report
