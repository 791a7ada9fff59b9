# Copyright (c) Syntropy Systems
"""sortbench init command."""

from pathlib import Path

import typer
import yaml
from rich.console import Console

from sortbench.config import CONFIG_DIR_NAME, CONFIG_FILENAME, BenchmarkSettings

console = Console()


def init(
    path: Path = typer.Argument(
        Path(),
        help="Directory to initialize (default: current directory)",
    ),
) -> None:
    """Initialize a sortbench project.

    Creates a .sortbench directory holding config.yaml with the default
    bail-out thresholds, sample table and size schedule.
    """
    target = path.resolve()
    config_dir = target / CONFIG_DIR_NAME
    config_path = config_dir / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]Already initialized:[/yellow] {config_dir}")
        return

    config_dir.mkdir(parents=True, exist_ok=True)

    settings = BenchmarkSettings()
    with config_path.open("w") as f:
        yaml.safe_dump(settings.to_dict(), f, default_flow_style=False, sort_keys=False)

    console.print(f"[green]Initialized sortbench project:[/green] {config_dir}")
    console.print(f"  [dim]config:[/dim] {config_path}")
    console.print(f"  [dim]results:[/dim] {target / settings.results_path}")
