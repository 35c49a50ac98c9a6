#!/usr/bin/env python3
"""
Assertive CLI - fluent assertion samples

Usage:
    assertive samples [OPTIONS]
    assertive info
    assertive --version
"""

import logging
from enum import Enum
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .assertions import format_value
from .samples import SAMPLES, Outcome, SampleResult, run_sample

app = typer.Typer(
    name="assertive",
    help="✔ Assertive - fluent, chainable assertions for Python tests",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)


def version_callback(value: bool):
    if value:
        console.print(f"✔ Assertive v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    ✔ Assertive - fluent, chainable assertions for Python tests
    """
    pass


class LogLevel(str, Enum):
    """Logging levels accepted by --log-level."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def configure_logging(level: LogLevel) -> None:
    """Route log records through rich at the given level."""
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def print_results(results: List[SampleResult], max_value_length: int) -> None:
    """Print a table of sample outcomes followed by failure details."""
    table = Table(title="Assertive samples")
    table.add_column("ID", style="cyan")
    table.add_column("Chain")
    table.add_column("Outcome")
    table.add_column("Duration", justify="right")

    styles = {
        Outcome.PASSED: "green",
        Outcome.EXPECTED_FAILURE: "green",
        Outcome.FAILED: "red",
        Outcome.ERROR: "yellow",
    }
    for result in results:
        style = styles[result.outcome]
        table.add_row(
            escape(result.sample.id),
            escape(result.sample.title),
            f"[{style}]{result.outcome.value}[/{style}]",
            f"{result.duration_ms:.2f}ms",
        )

    console.print()
    console.print(table)

    for result in results:
        if result.outcome == Outcome.ERROR:
            console.print("\n[yellow]⚠️ Error:[/yellow] " + escape(f"[{result.sample.id}] {result.message}"))
        elif result.message:
            label = "Expected failure" if result.outcome.ok else "Failed"
            console.print(f"\n[bold]{label}:[/bold] " + escape(f"[{result.sample.id}] {result.message}"))
            if result.expected is not None:
                console.print("   Expected: " + escape(format_value(result.expected, max_value_length)))
            if result.actual is not None:
                console.print("   Actual:   " + escape(format_value(result.actual, max_value_length)))

    ok = sum(1 for result in results if result.outcome.ok)
    console.print(f"\n{ok} of {len(results)} samples behaved as expected")


@app.command()
def samples(
    only: Optional[List[str]] = typer.Option(
        None, "--sample", "-s",
        help="Run only the given sample ID (repeatable)"
    ),
    max_value_length: int = typer.Option(
        100, "--max-value-length",
        help="Truncate expected/actual values longer than this"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show the final status"
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", "-l",
        help="Logging level"
    ),
):
    """
    Run the built-in sample assertion chains.

    The intentional-failure sample counts as passing when it raises the
    expected assertion failure.
    """
    configure_logging(log_level)

    known = {sample.id for sample in SAMPLES}
    unknown = sorted(set(only or []) - known)
    if unknown:
        console.print(f"[red]❌ Unknown sample(s):[/red] {', '.join(unknown)}")
        console.print(f"   Available: {', '.join(sample.id for sample in SAMPLES)}")
        raise typer.Exit(code=1)

    selected = [sample for sample in SAMPLES if not only or sample.id in only]
    logger.info(f"Running {len(selected)} sample(s)")
    results = [run_sample(sample) for sample in selected]

    if not quiet:
        print_results(results, max_value_length)

    if all(result.outcome.ok for result in results):
        console.print("\n[green]✅ All samples behaved as expected[/green]")
        raise typer.Exit(code=0)
    else:
        console.print("\n[red]❌ Some samples did not behave as expected[/red]")
        raise typer.Exit(code=1)


@app.command()
def info():
    """
    Show information about Assertive.
    """
    console.print(f"""
✔ [bold]Assertive[/bold] v{__version__}

Fluent, chainable assertions for Python tests

[bold]Features:[/bold]
  • Nullability, equality and type checks
  • Predicate checks with custom messages
  • Inclusive range checks for any orderable value
  • Collection checks (contains, empty, count)
  • Context labels prefixed onto failure messages
  • Structured failures carrying expected and actual values

[bold]Quick Start:[/bold]
  from assertive import assert_that
  assert_that([1, 2, 3]).is_not_empty().has_count(3).contains(2)

  assertive samples
""")


if __name__ == "__main__":
    app()
