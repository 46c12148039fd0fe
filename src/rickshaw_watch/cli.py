"""CLI interface for Rickshaw Watch."""

import json
from datetime import datetime
from pathlib import Path

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .exceptions import AllowListConfigError
from .logging import configure_logging
from .models.content import AnalysisResult, ReportContent
from .models.credibility import CredibilityResult, ScoringInput
from .models.risk import RiskLevel

app = typer.Typer(
    name="rickshaw-watch",
    help="Credibility scoring for auto-rickshaw misconduct reports",
    add_completion=False,
)
console = Console()

RISK_STYLES = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
}


@app.callback()
def main():
    """Credibility scoring for auto-rickshaw misconduct reports."""
    from .config import get_settings

    configure_logging(get_settings().log_level)


def _fail(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]", soft_wrap=True)
    raise typer.Exit(1)


def _load_model(path: Path, model: type[BaseModel]):
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        _fail(f"cannot read {path}: {e}")
    except json.JSONDecodeError as e:
        _fail(f"{path} is not valid JSON: {e}")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        _fail(f"{path} does not match {model.__name__}:\n{e}")


def _parse_now(now: str | None) -> datetime | None:
    if not now:
        return None
    try:
        return datetime.fromisoformat(now)
    except ValueError:
        _fail(f"--now must be an ISO 8601 timestamp, got {now!r}")


def _allow_lists(path: Path | None):
    from .config import active_allow_lists, get_settings
    from .scoring.matchers import load_allow_lists

    try:
        if path is not None:
            return load_allow_lists(path)
        return active_allow_lists(get_settings())
    except AllowListConfigError as e:
        _fail(str(e))


def _print_json(model: BaseModel) -> None:
    typer.echo(model.model_dump_json(by_alias=True, indent=2))


def _risk(level: RiskLevel) -> str:
    style = RISK_STYLES[level]
    return f"[{style}]{level.value.upper()}[/{style}]"


def _flags_table(flags: tuple[str, ...]) -> Table:
    table = Table(title="Flags", show_header=False)
    table.add_column("Flag", style="yellow")
    for flag in flags:
        table.add_row(flag)
    return table


def _display_credibility(result: CredibilityResult) -> None:
    console.print(
        Panel(
            f"Score: [bold]{result.final_score}[/bold]  "
            f"(base {result.base_score} +{result.added_points} -{result.subtracted_points})\n"
            f"Risk: {_risk(result.risk_level)}\n"
            f"Auto-verify: {result.should_auto_verify}  Auto-hide: {result.should_auto_hide}",
            title="Credibility",
        )
    )
    if result.flags:
        console.print(_flags_table(result.flags))


def _display_analysis(result: AnalysisResult) -> None:
    table = Table(title="Content Analysis")
    table.add_column("Dimension", style="cyan")
    table.add_column("Score", justify="right")
    for name, value in result.details.model_dump().items():
        table.add_row(name.replace("_", " "), str(value))
    table.add_row("[bold]confidence[/bold]", f"[bold]{result.confidence}[/bold]")
    console.print(table)
    console.print(f"Risk: {_risk(result.risk_level)}")
    if result.flags:
        console.print(_flags_table(result.flags))


@app.command()
def score(
    input_file: Path = typer.Argument(..., help="JSON file with submission signals"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Score submission metadata for credibility."""
    from .scoring.credibility import score as score_submission

    result = score_submission(_load_model(input_file, ScoringInput))
    if as_json:
        _print_json(result)
    else:
        _display_credibility(result)


@app.command()
def analyze(
    input_file: Path = typer.Argument(..., help="JSON file with report content"),
    now: str = typer.Option(None, "--now", help="Reference time (ISO 8601), default: current time"),
    allow_lists: Path = typer.Option(None, "--allow-lists", help="Allow-list YAML file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Analyze report content for plausibility."""
    from .scoring.content import analyze as analyze_content

    content = _load_model(input_file, ReportContent)
    result = analyze_content(content, now=_parse_now(now), allow_lists=_allow_lists(allow_lists))
    if as_json:
        _print_json(result)
    else:
        _display_analysis(result)


@app.command()
def evaluate(
    input_file: Path = typer.Argument(..., help="JSON file with a full report submission"),
    now: str = typer.Option(None, "--now", help="Reference time (ISO 8601), default: current time"),
    allow_lists: Path = typer.Option(None, "--allow-lists", help="Allow-list YAML file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Run both scorers over a submission and print the merged evaluation."""
    from .review.evaluator import ReportSubmission, default_evaluator

    submission = _load_model(input_file, ReportSubmission)
    evaluator = default_evaluator(_allow_lists(allow_lists))
    evaluation = evaluator.evaluate(submission, now=_parse_now(now))

    if as_json:
        _print_json(evaluation)
        return

    _display_credibility(evaluation.credibility)
    _display_analysis(evaluation.analysis)
    console.print(
        Panel(
            f"{evaluation.summary}\n"
            f"RTO: {evaluation.rto_jurisdiction}\n"
            f"Flagged for review: {evaluation.is_flagged}",
            title=f"Overall: {_risk(evaluation.risk_level)}",
        )
    )


@app.command("allow-lists")
def show_allow_lists(
    allow_lists: Path = typer.Option(None, "--allow-lists", help="Allow-list YAML file"),
):
    """Show the active location and issue allow-lists."""
    lists = _allow_lists(allow_lists)

    table = Table(title="Allow-lists")
    table.add_column("Locations", style="cyan")
    table.add_column("Issues", style="magenta")
    for i in range(max(len(lists.locations), len(lists.issues))):
        table.add_row(
            lists.locations[i] if i < len(lists.locations) else "",
            lists.issues[i] if i < len(lists.issues) else "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
