"""
Click-based CLI for header-doctor.

IMPORTANT: This module only ORCHESTRATES. It never makes security judgments.
- Reads raw response headers
- Loads exclusion rules
- Invokes the analysis engine
- Formats output
"""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from header_doctor import __version__
from header_doctor.actions.reporters import REPORTERS
from header_doctor.checks import load_builtin_checks
from header_doctor.config import ExclusionRuleStore, default_config_dir
from header_doctor.engine.analysis import analyze
from header_doctor.exclusion.registry import ExclusionRuleRegistry
from header_doctor.exclusion.rule import ExclusionRule, ExclusionRuleType
from header_doctor.model.headers import HttpHeaders

console = Console()

RULE_TYPES = [t.value for t in ExclusionRuleType]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=__version__, prog_name="header-doctor")
@click.option("--config", "-c", type=click.Path(file_okay=False), help="Path to config directory")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """header-doctor: security verdicts for HTTP response headers.

    Analyze raw response headers, colourise them, and manage exclusion rules.
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    config_dir = Path(config).expanduser() if config else default_config_dir()
    ctx.obj["exclusions_path"] = config_dir / "exclusions.yaml"


def _open_store(ctx: click.Context, path: str | None = None) -> ExclusionRuleStore:
    """Create a registry bound to the exclusion rule file."""
    registry = ExclusionRuleRegistry()
    store = ExclusionRuleStore(registry, path or ctx.obj["exclusions_path"])
    store.load()
    return store


@main.command("analyze")
@click.argument("headers_file", type=click.File("rb"))
@click.option("--method", "-m", default="GET", show_default=True, help="Request method, for exclusions")
@click.option("--url", "-u", default=None, help="Full request URL, for exclusions")
@click.option("--exclusions", type=click.Path(dir_okay=False), help="Exclusion rule file to use")
@click.option(
    "--format", "output_format",
    type=click.Choice(sorted(REPORTERS)), default="rich", show_default=True,
    help="Output format",
)
@click.pass_context
def analyze_cmd(
    ctx: click.Context,
    headers_file,
    method: str,
    url: str | None,
    exclusions: str | None,
    output_format: str,
) -> None:
    """Analyze a raw HTTP response head (use - for stdin)."""
    headers = HttpHeaders.from_raw(headers_file.read())
    if not headers.lines:
        raise click.ClickException("No header lines found in input")

    store = _open_store(ctx, exclusions)
    # Read-only run: never write the rule file back
    store.detach()

    report = analyze(
        headers,
        load_builtin_checks(),
        method=method.upper(),
        url=url,
        registry=store.registry,
    )
    reporter = REPORTERS[output_format](console)
    ctx.exit(reporter.report_analysis(report))


@main.command("checks")
def list_checks() -> None:
    """List registered header checks."""
    from rich.table import Table

    table = Table(title="Registered Checks")
    table.add_column("Name", style="bold")
    table.add_column("Column")
    table.add_column("Header")
    table.add_column("Affects overall", justify="center")
    for check in load_builtin_checks():
        table.add_row(
            check.name,
            check.column_name,
            check.header_name,
            "yes" if check.affects_overall_status else "no",
        )
    console.print(table)


@main.group()
def rules() -> None:
    """Manage exclusion rules."""
    pass


@rules.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def rules_list(ctx: click.Context, as_json: bool) -> None:
    """List exclusion rules."""
    store = _open_store(ctx)
    reporter = REPORTERS["json" if as_json else "rich"](console)
    reporter.report_rules(store.registry.list())


@rules.command("add")
@click.argument("rule_type", type=click.Choice(RULE_TYPES, case_sensitive=False))
@click.argument("pattern")
@click.option("--id", "rule_id", default=None, help="Explicit rule id")
@click.pass_context
def rules_add(ctx: click.Context, rule_type: str, pattern: str, rule_id: str | None) -> None:
    """Add a rule: TYPE is host, path or endpoint."""
    if not pattern.strip():
        raise click.BadParameter("pattern must not be empty", param_hint="PATTERN")
    store = _open_store(ctx)
    rule_type_enum = ExclusionRuleType(rule_type.lower())
    if rule_id:
        rule = ExclusionRule(type=rule_type_enum, pattern=pattern, id=rule_id)
    else:
        rule = ExclusionRule(type=rule_type_enum, pattern=pattern)
    if store.registry.get(rule.id) is not None:
        raise click.ClickException(f"Rule {rule.id} already exists")
    store.registry.add(rule)
    console.print(f"[green]Added[/] {rule.id}  {escape(str(rule))}", highlight=False)


@rules.command("update")
@click.argument("rule_id")
@click.argument("rule_type", type=click.Choice(RULE_TYPES, case_sensitive=False))
@click.argument("pattern")
@click.pass_context
def rules_update(ctx: click.Context, rule_id: str, rule_type: str, pattern: str) -> None:
    """Replace the type and pattern of an existing rule."""
    store = _open_store(ctx)
    if store.registry.get(rule_id) is None:
        raise click.ClickException(f"No rule with id {rule_id}")
    store.registry.update(rule_id, ExclusionRuleType(rule_type.lower()), pattern)
    console.print(f"[green]Updated[/] {rule_id}", highlight=False)


@rules.command("remove")
@click.argument("rule_id")
@click.pass_context
def rules_remove(ctx: click.Context, rule_id: str) -> None:
    """Remove a rule by id."""
    store = _open_store(ctx)
    if store.registry.get(rule_id) is None:
        raise click.ClickException(f"No rule with id {rule_id}")
    store.registry.remove(rule_id)
    console.print(f"[green]Removed[/] {rule_id}", highlight=False)


@rules.command("clear")
@click.confirmation_option(prompt="Remove all exclusion rules?")
@click.pass_context
def rules_clear(ctx: click.Context) -> None:
    """Remove every rule."""
    store = _open_store(ctx)
    count = len(store.registry)
    store.registry.clear()
    console.print(f"[green]Removed {count} rule(s)[/]")


if __name__ == "__main__":
    main()
