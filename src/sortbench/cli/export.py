# Copyright (c) Syntropy Systems
"""Export command - write trial records to CSV."""
from __future__ import annotations

import csv
from pathlib import Path

import typer
from rich.console import Console

from sortbench.cli.show import read_results_or_exit

console = Console()

CSV_FIELDS = ["algorithm_name", "scenario_name", "array_size", "execution_time_ms"]


def export(
    results: Path = typer.Argument(..., help="Results file written by `sortbench run`"),
    output: Path = typer.Argument(..., help="Output file path (.csv)"),
) -> None:
    """Export trial records to a flat CSV file.

    Examples:
        sortbench export reports/performance-results.json results.csv

    """
    if output.suffix.lower() != ".csv":
        console.print("[red]Output must be .csv[/red]")
        raise typer.Exit(1)

    records = read_results_or_exit(results)

    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for record in records:
            writer.writerow(record.model_dump(include=set(CSV_FIELDS)))

    console.print(f"[green]Exported {len(records)} record(s) to {output}[/green]")
