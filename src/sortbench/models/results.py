# Copyright (c) Syntropy Systems
"""Pydantic models for persisted benchmark results."""

from __future__ import annotations

from pydantic import Field, TypeAdapter

from .base import FrozenModel


class TrialRecord(FrozenModel):
    """One averaged trial of an algorithm on a scenario at one array size.

    Serialized with camelCase keys so the results file reads the same as the
    reports consuming it; either spelling is accepted when loading.
    """

    algorithm_name: str = Field(alias="algorithmName")
    scenario_name: str = Field(alias="scenarioName")
    array_size: int = Field(alias="arraySize", ge=0)
    execution_time_ms: float = Field(alias="executionTimeMs", ge=0.0)

    @property
    def pair_key(self) -> str:
        """Key of the (algorithm, scenario) pair this trial belongs to."""
        return f"{self.algorithm_name}|{self.scenario_name}"


TRIAL_RECORDS_ADAPTER = TypeAdapter(list[TrialRecord])
