# Copyright (c) Syntropy Systems
"""Exception types raised by sortbench."""
from __future__ import annotations

from typing_extensions import override


class SortbenchError(Exception):
    """Base class for sortbench errors reported to the user."""


class ConfigError(SortbenchError, ValueError):
    """Malformed benchmark configuration."""


class UnknownNameError(SortbenchError, KeyError):
    """An algorithm or scenario name is not in the catalog."""

    def __init__(self, kind: str, name: str, available: list[str]) -> None:
        self.kind = kind
        self.name = name
        self.available = available
        super().__init__(name)

    @override
    def __str__(self) -> str:
        choices = ", ".join(self.available) or "none"
        return f"Unknown {self.kind} '{self.name}' (available: {choices})"


class AlgorithmError(SortbenchError, RuntimeError):
    """A sort function raised while it was being measured."""

    def __init__(self, algorithm_name: str, scenario_name: str, size: int) -> None:
        self.algorithm_name = algorithm_name
        self.scenario_name = scenario_name
        self.size = size
        super().__init__(
            f"{algorithm_name} failed on {scenario_name} at size {size}"
        )
