"""Base Reporter Interface."""

from abc import ABC, abstractmethod

from rich.console import Console

from header_doctor.engine.analysis import AnalysisReport
from header_doctor.exclusion.rule import ExclusionRule
from header_doctor.model.verdict import VerdictStatus


class BaseReporter(ABC):
    """Abstract base class for all analysis reporters."""

    def __init__(self, console: Console) -> None:
        self.console = console

    @abstractmethod
    def report_analysis(self, report: AnalysisReport) -> int:
        """Report verdicts and highlighted headers. Returns the exit code."""
        pass

    @abstractmethod
    def report_rules(self, rules: tuple[ExclusionRule, ...]) -> None:
        """Report the current exclusion rules."""
        pass

    @staticmethod
    def exit_code(report: AnalysisReport) -> int:
        """1 when the response fails and is not excluded, else 0."""
        if report.excluded:
            return 0
        return 1 if report.overall_status is VerdictStatus.FAIL else 0
