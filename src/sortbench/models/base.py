# Copyright (c) Syntropy Systems
"""Shared Pydantic model helpers for sortbench."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Immutable record; fields cannot be reassigned after validation."""

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )
