# src/mathquest/cli/app.py
"""Command-line interface for MathQuest.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Creates progress callbacks (for Rich display)
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import logging
import string

try:
    import typer
    from rich.console import Console
    from rich.panel import Panel
    from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install mathquest[cli]"
    ) from e

from mathquest import __version__
from mathquest.commands import (
    ProgressUpdate,
    archetypes_cmd,
    config_cmd,
    generate,
    stress,
)
from mathquest.commands.base import StressResult
from mathquest.models import Question
from mathquest.random_source import RandomSource

app = typer.Typer(
    name="mathquest",
    help="MathQuest - grade-scaled math questions for battle games.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"mathquest {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show debug logging.",
    ),
) -> None:
    """MathQuest - grade-scaled math questions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(error: str | None, plain: bool = False) -> None:
    if plain:
        console.print(f"Error: {error}")
    else:
        console.print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)


def _render_question(
    number: int,
    question: Question,
    rng: RandomSource,
    show_answers: bool,
    plain: bool,
) -> None:
    """Render one question with lettered answer choices."""
    answers = question.all_answers(rng)
    lines = []
    for letter, answer in zip(string.ascii_uppercase, answers):
        marker = ""
        if show_answers and answer == question.correct_answer:
            marker = " *" if plain else " [green]✓[/green]"
        lines.append(f"  {letter}) {answer}{marker}")

    if plain:
        console.print(f"{number}. {question.question_text}", markup=False)
        for line in lines:
            console.print(line, markup=False, highlight=False)
        if show_answers:
            console.print(f"  Hint: {question.feedback}", markup=False)
        console.print()
        return

    body = "\n".join(lines)
    if show_answers:
        body += f"\n\n[dim]{question.feedback}[/dim]"
    console.print(
        Panel(
            body,
            title=f"[bold]{number}. {question.question_text}[/bold]",
            title_align="left",
            subtitle=f"{question.kind.value} · difficulty {question.difficulty}",
            subtitle_align="right",
        )
    )


@app.command(name="generate")
def generate_cmd(
    grade: float = typer.Argument(..., help="Grade level, 0.0 (kindergarten) to 3.0"),
    count: int = typer.Option(
        1,
        "--count",
        "-n",
        help="Number of questions to generate",
    ),
    seed: int = typer.Option(
        None,
        "--seed",
        "-s",
        help="Random seed for reproducible questions",
    ),
    show_answers: bool = typer.Option(
        False,
        "--show-answers",
        "-a",
        help="Mark the correct answer and show the hint",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Generate questions for a grade."""
    result = generate.generate(grade, count=count, seed=seed, config_path=config_file)

    if not result.success:
        _fail(result.error, plain)

    display_rng = RandomSource(result.seed)
    for number, question in enumerate(result.questions, start=1):
        _render_question(number, question, display_rng, show_answers, plain)


@app.command(name="archetypes")
def archetypes_cmd_handler(
    grade: float = typer.Argument(..., help="Grade level"),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """List the question types offered at a grade."""
    result = archetypes_cmd.archetypes(grade, config_path=config_file)

    if not result.success:
        _fail(result.error, plain)

    if plain:
        console.print(f"Question types for grade {grade}:")
        for info in result.archetypes:
            status = "" if info.enabled else " (disabled)"
            console.print(
                f"  {info.kind}: grades {info.min_grade}-{info.max_grade}{status}",
                markup=False,
            )
        return

    table = Table(title=f"Question Types for Grade {grade}")
    table.add_column("Archetype", style="cyan")
    table.add_column("Grades", justify="right")
    table.add_column("Enabled", justify="center")

    for info in result.archetypes:
        table.add_row(
            info.kind,
            f"{info.min_grade}-{info.max_grade}",
            "[green]yes[/green]" if info.enabled else "[dim]no[/dim]",
        )

    console.print(table)


def _render_stress_result(result: StressResult, plain: bool) -> None:
    """Render stress result to console."""
    if plain:
        console.print(f"Generated {result.iterations} questions")
        console.print(f"Failures: {len(result.failures)}")
        console.print(f"Short wrong-answer lists: {result.shortfalls}")
        console.print(
            f"Time per question: mean {result.mean_ms:.3f} ms, "
            f"p95 {result.p95_ms:.3f} ms, max {result.max_ms:.3f} ms"
        )
        for kind, count in result.kind_counts.items():
            console.print(f"  {kind}: {count}")
        for failure in result.failures[:10]:
            console.print(
                f"  grade {failure.grade} {failure.kind or '-'}: {failure.message}",
                markup=False,
            )
    else:
        table = Table(title="Stress Test")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")

        table.add_row("Questions", str(result.iterations))
        table.add_row("Failures", str(len(result.failures)))
        table.add_row("Short wrong-answer lists", str(result.shortfalls))
        table.add_row("Mean time", f"{result.mean_ms:.3f} ms")
        table.add_row("p95 time", f"{result.p95_ms:.3f} ms")
        table.add_row("Max time", f"{result.max_ms:.3f} ms")
        console.print(table)

        kinds_table = Table(title="Questions by Archetype")
        kinds_table.add_column("Archetype", style="cyan")
        kinds_table.add_column("Count", justify="right", style="green")
        for kind, count in result.kind_counts.items():
            kinds_table.add_row(kind, str(count))
        console.print(kinds_table)

        if result.failures:
            failures_table = Table(title="First Failures")
            failures_table.add_column("Grade", justify="right")
            failures_table.add_column("Archetype", style="cyan")
            failures_table.add_column("Problem", style="red")
            for failure in result.failures[:10]:
                failures_table.add_row(str(failure.grade), failure.kind or "-", failure.message)
            console.print(failures_table)

    if result.failures:
        raise typer.Exit(1)


@app.command(name="stress")
def stress_cmd(
    iterations: int = typer.Option(
        1000,
        "--iterations",
        "-n",
        help="Number of questions to generate",
    ),
    min_grade: float = typer.Option(
        0.0,
        "--min-grade",
        help="Lowest grade to test",
    ),
    max_grade: float = typer.Option(
        3.0,
        "--max-grade",
        help="Highest grade to test",
    ),
    seed: int = typer.Option(
        None,
        "--seed",
        "-s",
        help="Random seed for a reproducible run",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Plain output (no colors/formatting)",
    ),
) -> None:
    """Generate many questions and check every answer invariant."""
    show_progress = not plain and console.is_terminal

    if show_progress:
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description:>12}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Loading", total=iterations)

            def on_progress(update: ProgressUpdate) -> None:
                progress.update(task, description=update.stage.value, completed=update.current)

            result = stress.stress(
                iterations=iterations,
                min_grade=min_grade,
                max_grade=max_grade,
                seed=seed,
                config_path=config_file,
                on_progress=on_progress,
            )
    else:
        result = stress.stress(
            iterations=iterations,
            min_grade=min_grade,
            max_grade=max_grade,
            seed=seed,
            config_path=config_file,
        )

    if not result.success:
        _fail(result.error, plain)

    _render_stress_result(result, plain)


@app.command(name="config")
def config_cmd_handler(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        _fail(result.error)

    table = Table(title="MathQuest Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")

