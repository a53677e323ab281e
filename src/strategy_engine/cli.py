"""CLI interface using typer + rich."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from strategy_engine.catalog.loader import CatalogError, default_catalog, load_catalog
from strategy_engine.config import AppConfig, load_config
from strategy_engine.models.report import RecommendationReport
from strategy_engine.models.scores import ContentScoreResult
from strategy_engine.pipeline.composer import RecommendationComposer, profiles_from_payload
from strategy_engine.scoring.content_scores import calculate_content_scores

app = typer.Typer(
    name="strategy-engine",
    help="Rank instructional-design strategies and score content for e-learning conversion.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(config: AppConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.logging.numeric_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_request(path: Path) -> dict:
    if not path.exists():
        console.print(f"[red]Request file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        console.print(f"[red]Could not parse {path}: {e}[/red]")
        raise typer.Exit(1)
    if not isinstance(data, dict):
        console.print(f"[red]Request file must contain a mapping: {path}[/red]")
        raise typer.Exit(1)
    return data


def _score_color(score: float) -> str:
    if score >= 85:
        return "green"
    if score >= 70:
        return "yellow"
    return "red"


def _print_scores(scores: ContentScoreResult) -> None:
    lines = [
        f"Content suitability: {scores.content_suitability} | "
        f"Engagement: {scores.engagement_potential} | "
        f"Learning effectiveness: {scores.learning_effectiveness} | "
        f"[bold {_score_color(scores.overall_score)}]Overall: {scores.overall_score}"
        f"[/bold {_score_color(scores.overall_score)}]"
    ]
    for rec in scores.recommendations:
        lines.append(
            f"\n[bold]{rec.category}[/bold] ({rec.priority}, {rec.expected_improvement})\n"
            f"  {rec.recommendation}"
        )
    console.print(Panel("\n".join(lines), title="Content scores"))


def _print_report(report: RecommendationReport, verbose: bool) -> None:
    table = Table(title=f"Top {len(report.strategies)} of {report.total_strategies_analyzed} strategies")
    table.add_column("#", justify="right")
    table.add_column("Strategy", style="bold")
    table.add_column("Score", justify="right")
    if verbose:
        table.add_column("Content / SME / Feasibility / Innovation", justify="right")
    table.add_column("Reasoning")

    for item in report.strategies:
        row = [str(item.rank), item.strategy_name, f"[{_score_color(item.score)}]{item.score:.1f}[/]"]
        if verbose and item.breakdown:
            b = item.breakdown
            row.append(
                f"{b.content_match:.0f} / {b.sme_match:.0f} / {b.feasibility:.0f} / {b.innovation_bonus:.0f}"
            )
        row.append(item.reasoning)
        table.add_row(*row)

    console.print(table)
    _print_scores(report.content_scores)


@app.command()
def recommend(
    request: Path = typer.Argument(help="Request file (JSON or YAML) with contentAnalysis and smeInterview"),
    max_recommendations: int = typer.Option(None, "--max", "-n", help="Number of strategies to return"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the JSON report to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show score breakdowns and debug logs"),
) -> None:
    """Rank strategies and score content for one request."""
    config = load_config(config_path)
    _setup_logging(config, verbose)
    payload = _load_request(request)

    try:
        composer = RecommendationComposer(config)
    except (FileNotFoundError, CatalogError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    report = composer.compose_from_payload(payload, max_recommendations=max_recommendations)
    report_json = json.dumps(report.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(report_json, encoding="utf-8")
        console.print(f"[green]Report saved: {output}[/green]")

    if as_json:
        console.print_json(report_json)
    else:
        _print_report(report, verbose)


@app.command()
def scores(
    request: Path = typer.Argument(help="Request file (JSON or YAML) with contentAnalysis and smeInterview"),
    as_json: bool = typer.Option(False, "--json", help="Print the scores as JSON"),
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Compute content scores only."""
    _setup_logging(load_config(config_path), verbose)
    payload = _load_request(request)
    content, interview = profiles_from_payload(payload)
    result = calculate_content_scores(content, interview)

    if as_json:
        console.print_json(json.dumps(result.model_dump(mode="json", by_alias=True)))
    else:
        _print_scores(result)


@app.command()
def strategies(
    catalog_path: Path = typer.Option(None, "--catalog", help="Alternative catalog YAML file"),
) -> None:
    """List the strategies in the catalog."""
    try:
        catalog = load_catalog(catalog_path) if catalog_path else default_catalog()
    except (FileNotFoundError, CatalogError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if not len(catalog):
        console.print("[yellow]The catalog is empty.[/yellow]")
        return

    for strategy in catalog:
        console.print(
            f"  [bold]{strategy.name}[/bold] ({strategy.key}) "
            f"[dim]{strategy.ideal_for.complexity}, {strategy.implementation.duration}[/dim]"
        )


if __name__ == "__main__":
    app()
