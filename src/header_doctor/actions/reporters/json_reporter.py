"""JSON Reporter Implementation."""

import json
from dataclasses import asdict

from header_doctor.actions.reporters.base import BaseReporter
from header_doctor.engine.analysis import AnalysisReport
from header_doctor.exclusion.rule import ExclusionRule


class JsonReporter(BaseReporter):
    """Generates machine-readable JSON output."""

    def report_analysis(self, report: AnalysisReport) -> int:
        data = {
            "method": report.method,
            "url": report.url,
            "excluded": report.excluded,
            "overall_status": report.overall_status.name,
            "checks": [
                {
                    "name": o.check.name,
                    "column": o.check.column_name,
                    "status": o.verdict.status.name,
                    "display_value": o.verdict.display_value,
                    "raw_value": o.verdict.raw_value,
                    "affects_overall_status": o.check.affects_overall_status,
                }
                for o in report.outcomes
            ],
            "lines": [
                {
                    "text": line.text,
                    "check": line.check_name,
                    "type": line.line_type.name,
                    "segments": [
                        {"start": s.start, "end": s.end, "type": s.type.name}
                        for s in line.segments
                    ],
                }
                for line in report.highlighted_lines()
            ],
            "context": report.context,
        }
        # print_json would re-highlight; plain output keeps it pipeable
        self.console.print(json.dumps(data, indent=2, default=str), markup=False, highlight=False, soft_wrap=True)
        return self.exit_code(report)

    def report_rules(self, rules: tuple[ExclusionRule, ...]) -> None:
        data = []
        for rule in rules:
            item = asdict(rule)
            item["type"] = rule.type.value
            data.append(item)
        self.console.print(json.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)
