"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from matchcraft.clients.llm_client import LLMClient
from matchcraft.config import AppConfig, load_config
from matchcraft.exceptions import TailoringError
from matchcraft.logging.cost_calculator import calculate_cost
from matchcraft.logging.models import UsageLog
from matchcraft.logging.usage_store import UsageStore
from matchcraft.models.analysis import AnalysisResult
from matchcraft.models.request import ExperienceLevel, Industry, TailoringRequest, TemplateId
from matchcraft.pipeline.document_writer import DocumentWriter
from matchcraft.pipeline.orchestrator import PipelineState, TailoringOrchestrator
from matchcraft.templates.loader import list_templates

app = typer.Typer(
    name="matchcraft",
    help="Tailor a resume and cover letter to a job description.",
    no_args_is_help=True,
)
console = Console()

TEXT_SUFFIXES = {".txt", ".md"}


def score_band(score: int) -> str:
    """Rich colour for a 0-100 score."""
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _read_text(path: Path, label: str) -> str:
    if not path.exists():
        console.print(f"[red]{label} file not found: {path}[/red]")
        raise typer.Exit(1)
    if path.suffix.lower() not in TEXT_SUFFIXES:
        console.print(f"[red]{label} must be a .txt or .md file: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _print_analysis(analysis: AnalysisResult) -> None:
    match_color = score_band(analysis.match_score)
    ats_color = score_band(analysis.ats_score)
    lines = [
        f"[bold {match_color}]Match: {analysis.match_score}[/bold {match_color}] | "
        f"[bold {ats_color}]ATS: {analysis.ats_score}[/bold {ats_color}] | "
        f"Industry fit: {analysis.industry_fit}",
    ]
    for title, items in (
        ("Key strengths", analysis.key_strengths),
        ("Skill gaps", analysis.skill_gaps),
        ("Recommendations", analysis.recommendations),
    ):
        if items:
            lines.append(f"\n[bold]{title}[/bold]")
            lines.extend(f"  - {item}" for item in items)
    console.print(Panel("\n".join(lines), title="Analysis"))

    if analysis.degraded_reasons:
        console.print("\n[yellow]Warnings:[/yellow]")
        for reason in analysis.degraded_reasons:
            console.print(f"  - {reason}")


def _record_usage(config: AppConfig, log: UsageLog) -> None:
    if not config.usage.enabled:
        return
    UsageStore(config.usage.resolved_db_path).save_log(log)


@app.command()
def tailor(
    resume: Path = typer.Option(..., "--resume", help="Resume text file (.txt/.md)"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file (.txt/.md)"),
    template: TemplateId = typer.Option(TemplateId.EXECUTIVE, "--template", "-t", help="Resume template"),
    industry: Industry = typer.Option(None, "--industry", "-i", case_sensitive=False, help="Target industry"),
    level: ExperienceLevel = typer.Option(None, "--level", "-l", help="Experience level"),
    output_dir: Path = typer.Option(Path("./output"), "--output-dir", "-o", help="Where to write the documents"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Generate a tailored resume and cover letter."""
    _setup_logging(verbose)
    request = TailoringRequest(
        resume_text=_read_text(resume, "Resume"),
        job_description=_read_text(jd, "Job description"),
        template=template,
        target_industry=industry,
        experience_level=level,
    )

    config = load_config()
    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    writer = DocumentWriter(
        llm,
        model=config.llm.model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )
    orchestrator = TailoringOrchestrator(writer, config=config)
    log = UsageLog(
        command="tailor",
        template=template.value,
        target_industry=industry.value if industry else None,
        experience_level=level.value if level else None,
    )

    error: TailoringError | None = None
    result = None
    start = time.monotonic()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Starting...", total=None)

        def on_state(state: PipelineState, detail: str) -> None:
            progress.update(task, description=detail or state.value)

        try:
            result = asyncio.run(orchestrator.run(request, on_state=on_state))
        except TailoringError as exc:
            error = exc

    tokens = llm.get_token_summary()
    log.elapsed_seconds = time.monotonic() - start
    log.total_input_tokens = tokens["input"]
    log.total_output_tokens = tokens["output"]
    log.estimated_cost_usd = calculate_cost(tokens["calls"])

    if error is not None:
        log.success = False
        log.error_kind = error.kind
        _record_usage(config, log)
        console.print(f"[red]{error.message}[/red] [dim]({error.user_action})[/dim]")
        raise typer.Exit(1)

    log.match_score = result.analysis.match_score
    log.ats_score = result.analysis.ats_score
    log.industry_fit = result.analysis.industry_fit
    _record_usage(config, log)

    output_dir.mkdir(parents=True, exist_ok=True)
    resume_path = output_dir / "resume.md"
    letter_path = output_dir / "cover_letter.md"
    resume_path.write_text(result.resume, encoding="utf-8")
    letter_path.write_text(result.cover_letter, encoding="utf-8")
    console.print(f"\n[green]Resume saved: {resume_path}[/green]")
    console.print(f"[green]Cover letter saved: {letter_path}[/green]")

    _print_analysis(result.analysis)
    console.print(
        f"[dim]{log.elapsed_seconds:.1f}s, "
        f"{log.total_input_tokens + log.total_output_tokens} tokens, "
        f"${log.estimated_cost_usd:.4f}[/dim]"
    )


@app.command()
def analyze(
    resume: Path = typer.Option(..., "--resume", help="Resume text file (.txt/.md)"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file (.txt/.md)"),
    template: TemplateId = typer.Option(TemplateId.EXECUTIVE, "--template", "-t", help="Resume template"),
    industry: Industry = typer.Option(None, "--industry", "-i", case_sensitive=False, help="Target industry"),
    level: ExperienceLevel = typer.Option(None, "--level", "-l", help="Experience level"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Score a resume against a job description without generating documents."""
    _setup_logging(verbose)
    request = TailoringRequest(
        resume_text=_read_text(resume, "Resume"),
        job_description=_read_text(jd, "Job description"),
        template=template,
        target_industry=industry,
        experience_level=level,
    )
    config = load_config()
    orchestrator = TailoringOrchestrator(config=config)
    log = UsageLog(
        command="analyze",
        template=template.value,
        target_industry=industry.value if industry else None,
        experience_level=level.value if level else None,
    )
    start = time.monotonic()
    try:
        analysis = orchestrator.analyze(request)
    except TailoringError as exc:
        log.elapsed_seconds = time.monotonic() - start
        log.success = False
        log.error_kind = exc.kind
        _record_usage(config, log)
        console.print(f"[red]{exc.message}[/red] [dim]({exc.user_action})[/dim]")
        raise typer.Exit(1)

    log.elapsed_seconds = time.monotonic() - start
    log.match_score = analysis.match_score
    log.ats_score = analysis.ats_score
    log.industry_fit = analysis.industry_fit
    _record_usage(config, log)
    _print_analysis(analysis)


@app.command()
def templates() -> None:
    """List the available resume templates."""
    for tmpl in list_templates():
        industries = ", ".join(i.value for i in tmpl.industries)
        sections = ", ".join(tmpl.section_order)
        console.print(f"  [bold]{tmpl.id.value}[/bold]: {tmpl.name} ({industries})")
        console.print(f"    {tmpl.description}")
        console.print(f"    [dim]{sections}[/dim]")


@app.command()
def usage() -> None:
    """Show this month's usage statistics."""
    config = load_config()
    stats = UsageStore(config.usage.resolved_db_path).get_monthly_stats()

    table = Table(title=f"Usage {stats['month']}")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Runs", str(stats["total_runs"]))
    table.add_row("Success rate", f"{stats['success_rate']:.0f}%")
    table.add_row("Input tokens", f"{stats['total_input_tokens']:,}")
    table.add_row("Output tokens", f"{stats['total_output_tokens']:,}")
    table.add_row("Estimated cost", f"${stats['total_cost_usd']:.4f}")
    if stats["avg_match_score"] is not None:
        table.add_row("Avg match score", str(stats["avg_match_score"]))
    if stats["avg_ats_score"] is not None:
        table.add_row("Avg ATS score", str(stats["avg_ats_score"]))
    console.print(table)


if __name__ == "__main__":
    app()
