#!/usr/bin/env python3
"""Stack Advisor CLI - technology stack recommendations from project requirements.

Usage:
    # Rule engine only, no API key needed
    python main.py recommend ./requirements.json --provider local

    # Ask OpenAI, write a markdown report
    python main.py recommend ./requirements.json -p openai -f markdown -o report.md

    # Compare providers side by side
    python main.py recommend ./requirements.json --compare openai --compare gemini

    # Serve the HTTP API
    python main.py serve --port 8000
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from advisor import RecommendationService, strategy_names
from config import settings
from contracts import ProjectRequirements, Recommendation
from engine import RequirementsError, UnknownProviderError
from providers import list_providers as get_available_providers


console = Console()


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def load_requirements(input_path: str) -> ProjectRequirements:
    """Read a requirements JSON file ("-" for stdin)."""
    if input_path == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(input_path).read_text(encoding="utf-8")
    return ProjectRequirements.model_validate(json.loads(raw))


def render(rec: Recommendation, output_format: str) -> str:
    if output_format == "markdown":
        return rec.to_markdown()
    return json.dumps(rec.to_wire(), indent=2, ensure_ascii=False)


def print_summary(rec: Recommendation) -> None:
    table = Table(title=f"{rec.metadata.project_name} ({rec.metadata.provider})", show_header=False)
    table.add_column("Section", style="bold")
    table.add_column("Recommendation")
    table.add_row("Frontend", rec.frontend.primary)
    table.add_row("Backend", f"{rec.backend.primary} / {rec.backend.database}")
    table.add_row("Deployment", rec.dev_tools.deployment)
    table.add_row("CI/CD", rec.dev_tools.cicd)
    table.add_row("Development cost", rec.estimated_cost.development)
    table.add_row("Hosting", rec.estimated_cost.hosting)
    est = rec.timeline.estimated
    table.add_row("Timeline", f"{rec.timeline.category}: {est.weeks} weeks ({est.months} months)")
    table.add_row("Roadmap", " -> ".join(phase.phase for phase in rec.roadmap))
    console.print(table)
    if rec.metadata.fallback_reason:
        console.print(f"[yellow]Rule engine fallback:[/yellow] {rec.metadata.fallback_reason}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def cli(verbose: bool):
    """Stack Advisor: technology stack recommendations from project requirements."""
    setup_logging(verbose)


@cli.command()
@click.argument("input_path", metavar="REQUIREMENTS_JSON")
@click.option(
    "--provider", "-p",
    type=click.Choice(strategy_names(), case_sensitive=False),
    default=None,
    help=f"Recommendation strategy (default: {settings.default_provider})"
)
@click.option(
    "--compare", "-c", "compare_providers",
    multiple=True,
    help="Compare several providers; repeat the option per provider"
)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["json", "markdown", "summary"]),
    default="summary",
    help="Output format (default: summary)"
)
@click.option(
    "--output", "-o", "output_path",
    default=None,
    help="Write the report to this file instead of stdout"
)
@click.option(
    "--strict",
    is_flag=True,
    default=None,
    help="Reject unknown labels and feature tags"
)
def recommend(
    input_path: str,
    provider: Optional[str],
    compare_providers: Tuple[str, ...],
    output_format: str,
    output_path: Optional[str],
    strict: Optional[bool],
):
    """Generate a recommendation for the requirements in REQUIREMENTS_JSON."""
    try:
        req = load_requirements(input_path)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]Error reading requirements:[/red] {e}")
        sys.exit(1)

    service = RecommendationService(strict=strict or None)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Generating recommendation...", total=None)
        try:
            if compare_providers:
                outcome = service.compare(req, list(compare_providers))
            else:
                outcome = service.generate(req, provider)
        except (RequirementsError, UnknownProviderError) as e:
            progress.stop()
            console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)
        progress.update(task, completed=True)

    if compare_providers:
        for name, error in outcome.errors.items():
            console.print(f"[red]{name}:[/red] {error}")
        recs = list(outcome.results.values())
        if not recs:
            sys.exit(1)
    else:
        recs = [outcome]

    if output_format == "summary":
        for rec in recs:
            print_summary(rec)
        return

    if compare_providers:
        if output_format == "json":
            text = json.dumps(
                {name: rec.to_wire() for name, rec in outcome.results.items()},
                indent=2,
                ensure_ascii=False,
            )
        else:
            text = "\n\n---\n\n".join(rec.to_markdown() for rec in recs)
    else:
        text = render(recs[0], output_format)

    if output_path:
        Path(output_path).write_text(text, encoding="utf-8")
        console.print(f"[bold]Report saved to:[/bold] {output_path}")
    else:
        click.echo(text)


@cli.command()
def providers():
    """List recommendation providers and their availability."""
    console.print("[bold]Recommendation providers:[/bold]\n")
    console.print(f"  {'local':12} [green]✓ Ready[/green] [dim](rule engine)[/dim]")
    for name, info in get_available_providers().items():
        status = "[green]✓ Ready[/green]" if info["available"] else "[red]✗ No API key[/red]"
        console.print(f"  {name:12} {status} [dim]({info['name']}, {info['model']})[/dim]")
    console.print("\n[dim]Set API keys via environment variables:[/dim]")
    console.print("  OPENAI_API_KEY, GOOGLE_API_KEY")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Bind address")
@click.option("--port", default=8000, type=int, help="Port")
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool):
    """Run the HTTP API."""
    import uvicorn

    console.print(Panel.fit(
        "[bold blue]Stack Advisor API[/bold blue]\n"
        f"[dim]http://{host}:{port}/docs[/dim]",
        border_style="blue"
    ))
    uvicorn.run("api.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    cli()
