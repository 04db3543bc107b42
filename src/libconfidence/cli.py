"""Click CLI for libconfidence — score library versions against an LLM."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from libconfidence.config.hierarchy import load_config_hierarchy
from libconfidence.errors.exceptions import LibConfidenceError
from libconfidence.types import RiskLevel, ScoreReport
from libconfidence.utils.dates import ensure_utc, parse_year_month

console = Console()
error_console = Console(stderr=True)

_RISK_STYLES: dict[RiskLevel, str] = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
}


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _parse_date(value: str | None) -> datetime | None:
    """Accept "YYYY-MM" or any ISO 8601 date/datetime."""
    if value is None:
        return None
    parsed = parse_year_month(value)
    if parsed is not None:
        return parsed
    try:
        return ensure_utc(datetime.fromisoformat(value))
    except ValueError as e:
        raise click.BadParameter(f"Not a date: {value!r}") from e


@click.group()
@click.version_option(package_name="libconfidence")
def cli() -> None:
    """libconfidence — how well does an LLM know this library version?"""


@cli.command()
@click.argument("request_path", type=click.Path(exists=True))
@click.option("--as-of", type=str, default=None, help="Reference date (YYYY-MM or ISO). Default: now.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the report as JSON.")
@click.option("--low-threshold", type=float, default=None, help="Lower bound of the low-risk tier.")
@click.option("--medium-threshold", type=float, default=None, help="Lower bound of the medium-risk tier.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def score(
    request_path: str,
    as_of: str | None,
    as_json: bool,
    low_threshold: float | None,
    medium_threshold: float | None,
    verbose: int,
) -> None:
    """Score every version in a request file (YAML or JSON)."""
    from libconfidence.config.loader import load_score_request
    from libconfidence.scoring.engine import ScoringEngine

    config = load_config_hierarchy(
        risk_low_threshold=low_threshold,
        risk_medium_threshold=medium_threshold,
        output_format="json" if as_json else None,
    )
    _setup_logging(verbose, str(config.get("log_level", "WARNING")))

    reference = _parse_date(as_of)
    try:
        engine = ScoringEngine.from_config(config)
        request = load_score_request(request_path, as_of=reference)
        report = engine.score_request(request, as_of=reference)
    except LibConfidenceError as e:
        error_console.print(f"[red]Error:[/red] {e.message}")
        sys.exit(1)

    if config.get("output_format") == "json":
        click.echo(report.model_dump_json(indent=2))
        return

    _print_report(report)


def _print_report(report: ScoreReport) -> None:
    """Print library, model and per-version tables."""
    console.print(f"[bold]{report.library}[/bold] × [bold]{report.model}[/bold]")

    breakdown = report.library_confidence.library_breakdown
    if breakdown is not None:
        lib_table = Table(title="Library Confidence", show_header=True)
        lib_table.add_column("Component", style="cyan")
        lib_table.add_column("Value")
        lib_table.add_column("Weight")
        lib_table.add_column("Contribution")
        for name, result in breakdown:
            lib_table.add_row(
                name, f"{result.value:.2f}", f"{result.weight:.2f}", f"{result.contribution:.3f}"
            )
        console.print(lib_table)

    model_table = Table(title=f"Model Score: {report.model_score.score:.2f}", show_header=True)
    model_table.add_column("Component", style="cyan")
    model_table.add_column("Value")
    model_table.add_column("Weight")
    model_table.add_column("Contribution")
    for name, result in report.model_score.breakdown:
        model_table.add_row(
            name, f"{result.value:.2f}", f"{result.weight:.2f}", f"{result.contribution:.3f}"
        )
    console.print(model_table)

    if not report.final.versions:
        console.print("[yellow]No versions to score.[/yellow]")
        return

    version_table = Table(title=f"Final Scores ({report.final.formula})", show_header=True)
    version_table.add_column("Major", style="cyan")
    version_table.add_column("Version")
    version_table.add_column("Score")
    version_table.add_column("Risk")
    version_table.add_column("Breaking")

    for bucket in report.buckets:
        for member in bucket.versions:
            style = _RISK_STYLES[member.risk]
            version_table.add_row(
                str(bucket.major),
                member.version,
                str(member.score),
                f"[{style}]{member.risk.value}[/{style}]",
                "yes" if member.breaking else "no",
            )
    console.print(version_table)


@cli.command("components")
def list_components() -> None:
    """List scoring components and their weights."""
    from libconfidence.scoring.library.calculator import LibraryCalculator
    from libconfidence.scoring.model.calculator import ModelCalculator

    table = Table(title="Scoring Components", show_header=True)
    table.add_column("Score", style="cyan")
    table.add_column("Component")
    table.add_column("Weight")

    for label, calculator in (("LCS", LibraryCalculator()), ("LGS", ModelCalculator())):
        for info in calculator.get_component_info():
            table.add_row(label, info.id, f"{info.weight:.2f}")

    console.print(table)


@cli.command("risk")
@click.argument("display_score", type=click.FloatRange(0, 100))
def risk(display_score: float) -> None:
    """Classify a 0-100 score into a risk tier."""
    from libconfidence.scoring.engine import ScoringEngine
    from libconfidence.scoring.risk import RISK_LABELS, classify_risk

    try:
        engine = ScoringEngine.from_config(load_config_hierarchy())
        level = classify_risk(
            display_score, engine.risk_low_threshold, engine.risk_medium_threshold
        )
    except LibConfidenceError as e:
        error_console.print(f"[red]Error:[/red] {e.message}")
        sys.exit(1)

    style = _RISK_STYLES[level]
    console.print(f"[{style}]{level.value}[/{style}]: {RISK_LABELS[level]}")


@cli.command("estimate")
@click.option("--released", required=True, help="Version release date (YYYY-MM or ISO).")
@click.option("--cutoff", required=True, help="Model knowledge cutoff (YYYY-MM or ISO).")
@click.option("--breaking", is_flag=True, default=False, help="Version is a breaking release.")
def estimate(released: str, cutoff: str, breaking: bool) -> None:
    """Quick 0-100 compatibility estimate from dates alone."""
    from libconfidence.scoring.compatibility import estimate_compatibility

    result = estimate_compatibility(_parse_date(released), _parse_date(cutoff), breaking=breaking)
    style = _RISK_STYLES[result.risk]
    console.print(f"Score: [{style}]{result.score}[/{style}] ({result.risk.value})")
    console.print(result.reason)


def main() -> None:
    """Entry point for the CLI."""
    cli()
