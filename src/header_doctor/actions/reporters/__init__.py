"""Reporters - Render an AnalysisReport for the terminal or for machines."""

from header_doctor.actions.reporters.base import BaseReporter
from header_doctor.actions.reporters.json_reporter import JsonReporter
from header_doctor.actions.reporters.rich_reporter import RichReporter

REPORTERS: dict[str, type[BaseReporter]] = {
    "rich": RichReporter,
    "json": JsonReporter,
}

__all__ = ["BaseReporter", "JsonReporter", "REPORTERS", "RichReporter"]
