# Copyright (c) Syntropy Systems
"""sortbench run command."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from sortbench.cli.common import configure_logging
from sortbench.config import load_config
from sortbench.engine import BenchmarkRunner
from sortbench.errors import SortbenchError
from sortbench.registry import default_algorithms, select_algorithms
from sortbench.scenarios import default_scenarios, select_scenarios

console = Console()


def run(
    algorithm: Optional[list[str]] = typer.Option(
        None,
        "--algorithm", "-a",
        help="Only run this algorithm (repeatable)",
    ),
    scenario: Optional[list[str]] = typer.Option(
        None,
        "--scenario", "-s",
        help="Only run this scenario (repeatable)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Results file (default: from config)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Config file (default: nearest .sortbench/config.yaml)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only warnings"),
) -> None:
    """Benchmark the registered algorithms and save the trial records.

    Examples:
        sortbench run
        sortbench run -a "Merge Sort" -a "Quick Sort" -s random-integers
        sortbench run --output reports/quick.json

    """
    configure_logging(console, verbose=verbose, quiet=quiet)

    try:
        settings = load_config(config)
        algorithms = select_algorithms(default_algorithms(), algorithm)
        scenarios = select_scenarios(default_scenarios(), scenario)
        runner = BenchmarkRunner.from_settings(
            settings, algorithms, scenarios, output_path=output
        )
        records = runner.run()
    except SortbenchError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    abandoned = sum(1 for p in runner.progress.values() if p.abandoned)
    console.print(
        f"[green]Recorded {len(records)} trial(s)[/green] "
        f"across {len(runner.progress)} pair(s), {abandoned} abandoned early"
    )
