# Copyright (c) Syntropy Systems
"""sortbench show command - summarize a results file."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from sortbench.config import load_config
from sortbench.errors import SortbenchError
from sortbench.results import load_results

if TYPE_CHECKING:
    from sortbench.models.results import TrialRecord

console = Console()


@dataclass
class PairSummary:
    """Trials of one (algorithm, scenario) pair in a results file."""

    algorithm_name: str
    scenario_name: str
    trials: int
    largest_size: int
    time_at_largest_ms: float


def summarize(records: list[TrialRecord]) -> list[PairSummary]:
    """Collapse trial records to one summary per pair, in file order."""
    summaries: dict[str, PairSummary] = {}
    for record in records:
        summary = summaries.get(record.pair_key)
        if summary is None:
            summaries[record.pair_key] = PairSummary(
                algorithm_name=record.algorithm_name,
                scenario_name=record.scenario_name,
                trials=1,
                largest_size=record.array_size,
                time_at_largest_ms=record.execution_time_ms,
            )
            continue
        summary.trials += 1
        if record.array_size >= summary.largest_size:
            summary.largest_size = record.array_size
            summary.time_at_largest_ms = record.execution_time_ms
    return list(summaries.values())


def read_results_or_exit(results: Path) -> list[TrialRecord]:
    """Load a results file, exiting with an error message on failure."""
    if not results.exists():
        console.print(f"[red]Results file not found:[/red] {results}")
        raise typer.Exit(1)
    try:
        return load_results(results)
    except ValidationError as e:
        console.print(f"[red]Invalid results file {results}:[/red] {e}")
        raise typer.Exit(1) from e


def show(
    results: Optional[Path] = typer.Argument(
        None,
        help="Results file (default: from config)",
    ),
    algorithm: Optional[str] = typer.Option(
        None,
        "--algorithm", "-a",
        help="Only show pairs for this algorithm",
    ),
    max_size: Optional[int] = typer.Option(
        None,
        "--max-size",
        help="Largest scheduled size (default: from config)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Config file (default: nearest .sortbench/config.yaml)",
    ),
) -> None:
    """Summarize a results file, one row per algorithm/scenario pair.

    Pairs that stopped before the largest scheduled array size were abandoned
    by the bail-out policy and are highlighted.
    """
    try:
        settings = load_config(config)
        if max_size is None:
            max_size = max(settings.size_schedule(), default=None)
    except SortbenchError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if results is None:
        results = settings.results_path

    records = read_results_or_exit(results)
    if not records:
        console.print("[dim]No trials recorded[/dim]")
        return

    if max_size is None:
        max_size = max(r.array_size for r in records)

    summaries = summarize(records)
    if algorithm:
        summaries = [
            s for s in summaries if s.algorithm_name.lower() == algorithm.lower()
        ]
        if not summaries:
            console.print(f"[yellow]No trials for algorithm '{algorithm}'[/yellow]")
            return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Algorithm")
    table.add_column("Scenario")
    table.add_column("Trials", justify="right")
    table.add_column("Largest size", justify="right")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Status")

    for summary in summaries:
        stopped_early = summary.largest_size < max_size
        status = "[yellow]abandoned[/yellow]" if stopped_early else "[green]complete[/green]"
        table.add_row(
            summary.algorithm_name,
            summary.scenario_name,
            str(summary.trials),
            f"{summary.largest_size:,}",
            f"{summary.time_at_largest_ms:.4f}",
            status,
        )

    console.print(table)
    console.print(
        f"[dim]{len(records)} trial(s) from {results}, "
        f"scheduled up to size {max_size:,}[/dim]"
    )
