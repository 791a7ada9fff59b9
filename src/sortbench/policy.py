# Copyright (c) Syntropy Systems
"""Bail-out policy for the benchmark loop.

After every trial the engine asks whether the (algorithm, scenario) pair is
still worth growing. A pair is dropped when one trial is simply too slow, or
when its time grows much faster than its input size between consecutive
trials.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

DEFAULT_MAX_EXECUTION_TIME_MS = 60.0
DEFAULT_QUADRATIC_BEHAVIOR_THRESHOLD = 500.0
DEFAULT_MIN_TIME_FOR_DETECTION_MS = 10.0


class BailOutReason(str, Enum):
    """Why a pair was abandoned."""

    TIME_CAP = "time-cap"
    QUADRATIC_GROWTH = "quadratic-growth"


@dataclass(frozen=True)
class PreviousTrial:
    """The last measurement taken for a pair."""

    size: int
    time_ms: float


@dataclass(frozen=True)
class BailOutPolicy:
    """Thresholds deciding when to stop growing a pair.

    Attributes:
        max_execution_time_ms: Average trial time above which the pair is
            dropped immediately.
        quadratic_behavior_threshold: Largest tolerated ratio of time growth
            to size growth between consecutive trials.
        min_time_for_detection_ms: Noise floor; below it the growth ratio is
            not evaluated.

    """

    max_execution_time_ms: float = DEFAULT_MAX_EXECUTION_TIME_MS
    quadratic_behavior_threshold: float = DEFAULT_QUADRATIC_BEHAVIOR_THRESHOLD
    min_time_for_detection_ms: float = DEFAULT_MIN_TIME_FOR_DETECTION_MS

    def evaluate(
        self,
        average_time_ms: float,
        size: int,
        previous: PreviousTrial | None = None,
    ) -> BailOutReason | None:
        """Return the reason to abandon the pair, or None to keep going.

        The time cap is checked first and short-circuits the trend check.
        """
        if average_time_ms > self.max_execution_time_ms:
            return BailOutReason.TIME_CAP

        if previous is None or average_time_ms <= self.min_time_for_detection_ms:
            return None
        if previous.size <= 0:
            return None

        size_ratio = size / previous.size
        time_ratio = (
            average_time_ms / previous.time_ms if previous.time_ms > 0 else math.inf
        )
        if size_ratio > 1 and time_ratio > 1:
            degradation_ratio = time_ratio / size_ratio
            if degradation_ratio > self.quadratic_behavior_threshold:
                return BailOutReason.QUADRATIC_GROWTH

        return None

    def should_abandon(
        self,
        average_time_ms: float,
        size: int,
        previous: PreviousTrial | None = None,
    ) -> bool:
        """Return True when the pair should not be tested at larger sizes."""
        return self.evaluate(average_time_ms, size, previous) is not None
