# Copyright (c) Syntropy Systems
"""Main CLI entry point for sortbench."""

import typer

from sortbench.cli.export import export
from sortbench.cli.init_cmd import init
from sortbench.cli.list_cmd import list_catalog
from sortbench.cli.run_cmd import run
from sortbench.cli.show import show
from sortbench.cli.verify_cmd import verify

app = typer.Typer(
    name="sortbench",
    help=(
        "Sorting algorithm benchmarks. Time every algorithm on every input "
        "shape, and stop growing the ones that go quadratic."
    ),
    no_args_is_help=True,
    add_completion=False,
)

# Register commands
_ = app.command()(init)
_ = app.command(name="list")(list_catalog)
_ = app.command()(run)
_ = app.command()(verify)
_ = app.command()(show)
_ = app.command(name="export")(export)


if __name__ == "__main__":
    app()
