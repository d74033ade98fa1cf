"""Engine package - Runs checks and aggregates their verdicts."""

from header_doctor.engine.analysis import AnalysisReport, CheckOutcome, HighlightedLine, analyze

__all__ = ["AnalysisReport", "CheckOutcome", "HighlightedLine", "analyze"]
