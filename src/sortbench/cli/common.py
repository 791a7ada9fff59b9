# Copyright (c) Syntropy Systems
"""Helpers shared by sortbench commands."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.logging import RichHandler

if TYPE_CHECKING:
    from rich.console import Console


def configure_logging(
    console: Console,
    *,
    verbose: bool = False,
    quiet: bool = False,
) -> None:
    """Route sortbench log records to ``console`` through rich.

    Replaces any handler installed by a previous command in the same process.
    """
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING

    package_logger = logging.getLogger("sortbench")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
