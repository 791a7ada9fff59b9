# Copyright (c) Syntropy Systems
"""Configuration management for sortbench."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import cast

import yaml

from sortbench.errors import ConfigError
from sortbench.measure import (
    DEFAULT_MIN_SAMPLES,
    DEFAULT_SAMPLE_BREAKPOINTS,
    sample_size_for,
)
from sortbench.policy import (
    DEFAULT_MAX_EXECUTION_TIME_MS,
    DEFAULT_MIN_TIME_FOR_DETECTION_MS,
    DEFAULT_QUADRATIC_BEHAVIOR_THRESHOLD,
    BailOutPolicy,
)

CONFIG_DIR_NAME = ".sortbench"
CONFIG_FILENAME = "config.yaml"


@dataclass
class DynamicSizes:
    """Geometrically growing size sequence."""

    enabled: bool = True
    starting_size: int = 5
    max_size: int = 30_000
    growth_factor: float = 1.1


@dataclass
class BenchmarkSettings:
    """Configuration for a benchmark run."""

    # Bail-out thresholds
    max_execution_time_ms: float = DEFAULT_MAX_EXECUTION_TIME_MS
    quadratic_behavior_threshold: float = DEFAULT_QUADRATIC_BEHAVIOR_THRESHOLD
    min_time_for_detection_ms: float = DEFAULT_MIN_TIME_FOR_DETECTION_MS

    # (exclusive upper bound on size, samples), ascending by bound
    sample_breakpoints: list[tuple[int, int]] = field(
        default_factory=lambda: list(DEFAULT_SAMPLE_BREAKPOINTS)
    )
    min_samples: int = DEFAULT_MIN_SAMPLES

    # Size schedule
    static_sizes: list[int] = field(default_factory=lambda: [100_000])
    dynamic_sizes: DynamicSizes = field(default_factory=DynamicSizes)

    # Output
    reports_dir: Path = field(default_factory=lambda: Path("reports"))
    results_filename: str = "performance-results.json"

    @property
    def results_path(self) -> Path:
        """Where the results file is written."""
        return self.reports_dir / self.results_filename

    def policy(self) -> BailOutPolicy:
        """Build the bail-out policy from the configured thresholds."""
        return BailOutPolicy(
            max_execution_time_ms=self.max_execution_time_ms,
            quadratic_behavior_threshold=self.quadratic_behavior_threshold,
            min_time_for_detection_ms=self.min_time_for_detection_ms,
        )

    def sample_size_for(self, size: int) -> int:
        """Number of samples per trial at ``size``."""
        return sample_size_for(size, self.sample_breakpoints, self.min_samples)

    def size_schedule(self) -> list[int]:
        """Ascending, deduplicated array sizes to benchmark."""
        dynamic = self.dynamic_sizes if self.dynamic_sizes.enabled else None
        return build_size_schedule(self.static_sizes, dynamic)

    def to_dict(self) -> dict[str, object]:
        """Plain representation suitable for writing back to YAML."""
        return {
            "max_execution_time_ms": self.max_execution_time_ms,
            "quadratic_behavior_threshold": self.quadratic_behavior_threshold,
            "min_time_for_detection_ms": self.min_time_for_detection_ms,
            "sample_breakpoints": [list(bp) for bp in self.sample_breakpoints],
            "min_samples": self.min_samples,
            "static_sizes": list(self.static_sizes),
            "dynamic_sizes": {
                "enabled": self.dynamic_sizes.enabled,
                "starting_size": self.dynamic_sizes.starting_size,
                "max_size": self.dynamic_sizes.max_size,
                "growth_factor": self.dynamic_sizes.growth_factor,
            },
            "reports_dir": str(self.reports_dir),
            "results_filename": self.results_filename,
        }


def build_size_schedule(
    static_sizes: list[int],
    dynamic: DynamicSizes | None = None,
) -> list[int]:
    """Union static sizes with a geometric sequence, sorted and deduplicated.

    The geometric part is ``floor(start * growth**k)`` for every term not
    exceeding ``max_size``. Zero sizes are dropped.
    """
    sizes: set[int] = set()
    for size in static_sizes:
        if size < 0:
            msg = f"Array sizes must be non-negative, got {size}"
            raise ConfigError(msg)
        sizes.add(size)

    if dynamic is not None:
        if dynamic.starting_size <= 0:
            msg = "dynamic_sizes.starting_size must be positive"
            raise ConfigError(msg)
        if dynamic.growth_factor <= 1:
            msg = "dynamic_sizes.growth_factor must be greater than 1"
            raise ConfigError(msg)

        current = float(dynamic.starting_size)
        while current <= dynamic.max_size:
            sizes.add(math.floor(current))
            current *= dynamic.growth_factor

    sizes.discard(0)
    return sorted(sizes)


def find_sortbench_dir(start_path: Path | None = None) -> Path | None:
    """Find the nearest .sortbench directory by walking up from start_path.

    Returns None if no .sortbench directory is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        candidate = current / CONFIG_DIR_NAME
        if candidate.is_dir():
            return candidate
        current = current.parent

    # Check root
    candidate = current / CONFIG_DIR_NAME
    if candidate.is_dir():
        return candidate

    return None


def get_global_config_dir() -> Path:
    """Get the global sortbench config directory (~/.sortbench)."""
    return Path.home() / CONFIG_DIR_NAME


def _number(data: dict[str, object], key: str, default: float) -> float:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        msg = f"'{key}' must be a number, got {value!r}"
        raise ConfigError(msg)
    return float(value)


def _integer(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{key}' must be an integer, got {value!r}"
        raise ConfigError(msg)
    return value


def _string(data: dict[str, object], key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        msg = f"'{key}' must be a string, got {value!r}"
        raise ConfigError(msg)
    return value


def _int_list(data: dict[str, object], key: str, default: list[int]) -> list[int]:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(
        isinstance(v, int) and not isinstance(v, bool) for v in value
    ):
        msg = f"'{key}' must be a list of integers, got {value!r}"
        raise ConfigError(msg)
    return cast("list[int]", value)


def _parse_breakpoints(raw: object) -> list[tuple[int, int]]:
    if not isinstance(raw, list):
        msg = f"'sample_breakpoints' must be a list of [size, samples] pairs, got {raw!r}"
        raise ConfigError(msg)

    breakpoints: list[tuple[int, int]] = []
    for item in cast("list[object]", raw):
        pair = cast("list[object]", item) if isinstance(item, (list, tuple)) else []
        if len(pair) != 2 or not all(  # noqa: PLR2004
            isinstance(v, int) and not isinstance(v, bool) for v in pair
        ):
            msg = f"Invalid sample breakpoint {item!r}; expected [size, samples]"
            raise ConfigError(msg)
        breakpoints.append((cast("int", pair[0]), cast("int", pair[1])))
    return breakpoints


def validate_sample_breakpoints(
    breakpoints: list[tuple[int, int]],
    min_samples: int,
) -> None:
    """Reject tables that would make the sample count grow with size."""
    previous_bound = 0
    previous_samples: int | None = None
    for bound, samples in breakpoints:
        if bound <= previous_bound:
            msg = "sample_breakpoints must be strictly ascending by size"
            raise ConfigError(msg)
        if samples < 1:
            msg = "sample_breakpoints sample counts must be at least 1"
            raise ConfigError(msg)
        if previous_samples is not None and samples > previous_samples:
            msg = "sample_breakpoints sample counts must not increase with size"
            raise ConfigError(msg)
        previous_bound = bound
        previous_samples = samples

    if min_samples < 1:
        msg = "min_samples must be at least 1"
        raise ConfigError(msg)
    if previous_samples is not None and min_samples > previous_samples:
        msg = "min_samples must not exceed the last breakpoint's sample count"
        raise ConfigError(msg)


def settings_from_dict(data: dict[str, object]) -> BenchmarkSettings:
    """Build settings from a parsed YAML mapping; missing keys use defaults."""
    settings = BenchmarkSettings()

    settings.max_execution_time_ms = _number(
        data, "max_execution_time_ms", settings.max_execution_time_ms
    )
    settings.quadratic_behavior_threshold = _number(
        data, "quadratic_behavior_threshold", settings.quadratic_behavior_threshold
    )
    settings.min_time_for_detection_ms = _number(
        data, "min_time_for_detection_ms", settings.min_time_for_detection_ms
    )

    if data.get("sample_breakpoints") is not None:
        settings.sample_breakpoints = _parse_breakpoints(data["sample_breakpoints"])
    settings.min_samples = _integer(data, "min_samples", settings.min_samples)
    validate_sample_breakpoints(settings.sample_breakpoints, settings.min_samples)

    settings.static_sizes = _int_list(data, "static_sizes", settings.static_sizes)

    dynamic = data.get("dynamic_sizes")
    if dynamic is not None:
        if not isinstance(dynamic, dict):
            msg = f"'dynamic_sizes' must be a mapping, got {dynamic!r}"
            raise ConfigError(msg)
        dynamic_data = cast("dict[str, object]", dynamic)
        defaults = DynamicSizes()
        enabled = dynamic_data.get("enabled", defaults.enabled)
        if not isinstance(enabled, bool):
            msg = f"'dynamic_sizes.enabled' must be true or false, got {enabled!r}"
            raise ConfigError(msg)
        settings.dynamic_sizes = DynamicSizes(
            enabled=enabled,
            starting_size=_integer(dynamic_data, "starting_size", defaults.starting_size),
            max_size=_integer(dynamic_data, "max_size", defaults.max_size),
            growth_factor=_number(dynamic_data, "growth_factor", defaults.growth_factor),
        )

    settings.reports_dir = Path(
        _string(data, "reports_dir", str(settings.reports_dir))
    )
    settings.results_filename = _string(
        data, "results_filename", settings.results_filename
    )

    return settings


def find_config_file(config_dir: Path | None = None) -> Path | None:
    """Locate the config file to load, or None to use defaults.

    Looks for config in:
    1. Provided config_dir
    2. Nearest .sortbench directory walking up
    3. ~/.sortbench/config.yaml
    """
    if config_dir is not None:
        return config_dir / CONFIG_FILENAME

    found_dir = find_sortbench_dir()
    if found_dir is not None:
        return found_dir / CONFIG_FILENAME

    global_config = get_global_config_dir() / CONFIG_FILENAME
    if global_config.exists():
        return global_config

    return None


def load_config(
    config_path: Path | None = None,
    config_dir: Path | None = None,
) -> BenchmarkSettings:
    """Load settings from a YAML file or fall back to defaults.

    An explicit ``config_path`` must exist; otherwise the search in
    ``find_config_file`` applies.
    """
    if config_path is not None:
        if not config_path.exists():
            msg = f"Config file not found: {config_path}"
            raise ConfigError(msg)
    else:
        config_path = find_config_file(config_dir)

    if config_path is None or not config_path.exists():
        return BenchmarkSettings()

    try:
        with config_path.open() as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {config_path}: {e}"
        raise ConfigError(msg) from e

    if raw is None:
        return BenchmarkSettings()
    if not isinstance(raw, dict):
        msg = f"{config_path} must contain a mapping at the top level"
        raise ConfigError(msg)

    return settings_from_dict(cast("dict[str, object]", raw))
