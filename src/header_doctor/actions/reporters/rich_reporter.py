"""Rich Reporter Implementation."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from header_doctor.actions.reporters.base import BaseReporter
from header_doctor.engine.analysis import AnalysisReport, HighlightedLine
from header_doctor.exclusion.rule import ExclusionRule
from header_doctor.model.highlight import HighlightType
from header_doctor.model.verdict import Verdict, VerdictStatus

STATUS_STYLES = {
    VerdictStatus.OK: "green",
    VerdictStatus.WARN: "yellow",
    VerdictStatus.FAIL: "red",
}

HIGHLIGHT_STYLES = {
    HighlightType.GREEN: "bold green",
    HighlightType.YELLOW: "bold yellow",
    HighlightType.RED: "bold red",
}

# Whole-line tint when a check owns the line but no pattern matched
LINE_STYLES = {
    HighlightType.GREEN: "green",
    HighlightType.YELLOW: "yellow",
    HighlightType.RED: "red",
}


class RichReporter(BaseReporter):
    """Generates colourised terminal output using Rich."""

    def report_analysis(self, report: AnalysisReport) -> int:
        self.console.print()
        if report.excluded:
            request = escape(f"{report.method} {report.url}")
            self.console.print(f"[dim]Excluded by rule: {request} (findings suppressed)[/]")

        table = Table(title="Security Header Checks", show_lines=False)
        table.add_column("Check", style="bold")
        table.add_column("Status")
        table.add_column("Value", overflow="fold")
        table.add_column("Counts", justify="center")
        for outcome in report.outcomes:
            table.add_row(
                outcome.check.column_name,
                self._status_text(outcome.verdict),
                Text(outcome.verdict.display_value),
                "yes" if outcome.check.affects_overall_status else "[dim]no[/]",
            )
        self.console.print(table)

        header_text = Text()
        if report.headers.status_line:
            header_text.append(report.headers.status_line + "\n", style="dim")
        for line in report.highlighted_lines():
            header_text.append_text(self.render_line(line))
            header_text.append("\n")
        self.console.print(Panel(header_text, title="Response Headers", title_align="left"))

        status = report.overall_status
        colour = STATUS_STYLES[status]
        self.console.print(f"[{colour}][bold]Overall:[/] {status.name}[/]")

        if not report.excluded:
            for outcome in report.findings():
                colour = STATUS_STYLES[outcome.verdict.status]
                self.console.print(
                    f"   [{colour}]{outcome.verdict.status_label}[/] {outcome.check.missing_message}"
                )

        return self.exit_code(report)

    def report_rules(self, rules: tuple[ExclusionRule, ...]) -> None:
        if not rules:
            self.console.print("[dim]No exclusion rules configured.[/]")
            return
        table = Table(title="Exclusion Rules")
        table.add_column("ID", style="dim")
        table.add_column("Type")
        table.add_column("Pattern")
        for rule in rules:
            table.add_row(rule.id, rule.type.display_name, rule.pattern)
        self.console.print(table)

    @staticmethod
    def render_line(line: HighlightedLine) -> Text:
        """Rich Text for one header line, segments over an optional whole-line tint."""
        text = Text(line.text, style=LINE_STYLES.get(line.line_type, ""))
        for segment in line.segments:
            style = HIGHLIGHT_STYLES.get(segment.type)
            if style and 0 <= segment.start < segment.end:
                text.stylize(style, segment.start, segment.end)
        return text

    @staticmethod
    def _status_text(verdict: Verdict) -> str:
        colour = STATUS_STYLES[verdict.status]
        return f"[{colour}]{verdict.status.name}[/]"
