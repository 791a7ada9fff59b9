# Copyright (c) Syntropy Systems
"""sortbench verify command."""
from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from sortbench.errors import SortbenchError
from sortbench.registry import default_algorithms, select_algorithms
from sortbench.scenarios import default_scenarios, select_scenarios
from sortbench.verify import CORRECTNESS_TEST_SIZES, VerificationResult, verify_all

console = Console()


def _describe_failures(failures: list[VerificationResult]) -> str:
    parts: list[str] = []
    for result in failures:
        if result.error is not None:
            parts.append(f"n={result.size}: {result.error}")
            continue
        problems: list[str] = []
        if not result.sorted_ok:
            problems.append("wrong order")
        if not result.unmutated_ok:
            problems.append("mutated input")
        parts.append(f"n={result.size}: {', '.join(problems)}")
    return "; ".join(parts)


def verify(
    algorithm: Optional[list[str]] = typer.Option(
        None,
        "--algorithm", "-a",
        help="Only verify this algorithm (repeatable)",
    ),
    scenario: Optional[list[str]] = typer.Option(
        None,
        "--scenario", "-s",
        help="Only verify against this scenario (repeatable)",
    ),
) -> None:
    """Check that every algorithm sorts correctly without mutating its input.

    Each algorithm is run on every compatible scenario at a few small sizes
    and compared with Python's sorted().
    """
    try:
        algorithms = select_algorithms(default_algorithms(), algorithm)
        scenarios = select_scenarios(default_scenarios(), scenario)
    except SortbenchError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    results = verify_all(algorithms, scenarios)

    # Group by pair, keeping run order
    grouped: dict[tuple[str, str], list[VerificationResult]] = {}
    for result in results:
        key = (result.algorithm_name, result.scenario_name)
        grouped.setdefault(key, []).append(result)

    sizes = ", ".join(str(s) for s in CORRECTNESS_TEST_SIZES)
    table = Table(
        show_header=True,
        header_style="bold",
        title=f"Correctness (sizes {sizes})",
    )
    table.add_column("Algorithm")
    table.add_column("Scenario")
    table.add_column("Result")
    table.add_column("Details", style="dim")

    failed_pairs = 0
    for (algo_name, scenario_name), pair_results in grouped.items():
        failures = [r for r in pair_results if not r.passed]
        if failures:
            failed_pairs += 1
            table.add_row(
                algo_name,
                scenario_name,
                "[red]FAIL[/red]",
                _describe_failures(failures),
            )
        else:
            table.add_row(algo_name, scenario_name, "[green]ok[/green]", "")

    console.print(table)

    if failed_pairs:
        console.print(f"[red]{failed_pairs} of {len(grouped)} pair(s) failed[/red]")
        raise typer.Exit(1)

    console.print(f"[green]All {len(grouped)} pair(s) passed[/green]")
