# Copyright (c) Syntropy Systems
"""sortbench list command."""

from rich.console import Console
from rich.table import Table

from sortbench.registry import AcceptedDomain, default_algorithms
from sortbench.scenarios import default_scenarios

console = Console()


def list_catalog() -> None:
    """List the registered algorithms and test scenarios."""
    algo_table = Table(show_header=True, header_style="bold", title="Algorithms")
    algo_table.add_column("Name")
    algo_table.add_column("Accepts")

    for algorithm in default_algorithms():
        accepts = algorithm.accepted_domain.value
        if algorithm.accepted_domain is AcceptedDomain.NON_NEGATIVE_INTEGERS:
            accepts = f"[yellow]{accepts}[/yellow]"
        algo_table.add_row(algorithm.name, accepts)

    console.print(algo_table)

    scenario_table = Table(show_header=True, header_style="bold", title="Scenarios")
    scenario_table.add_column("Name")
    scenario_table.add_column("Kind")
    scenario_table.add_column("Description", style="dim")

    for scenario in default_scenarios():
        scenario_table.add_row(
            scenario.name,
            scenario.element_kind.value,
            scenario.description,
        )

    console.print(scenario_table)
