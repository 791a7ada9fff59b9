# Copyright (c) Syntropy Systems
"""Pytest fixtures for sortbench tests."""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import yaml

# Store original cwd at module load time
_original_cwd = Path.cwd()

SMALL_CONFIG = {
    "max_execution_time_ms": 1000.0,
    "static_sizes": [3, 10],
    "dynamic_sizes": {"enabled": False},
    "reports_dir": "reports",
    "results_filename": "results.json",
}


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sortbench_project(temp_dir: Path) -> Generator[Path, None, None]:
    """Create a temporary sortbench project with a small, fast config."""
    config_dir = temp_dir / ".sortbench"
    config_dir.mkdir()
    with (config_dir / "config.yaml").open("w") as f:
        yaml.safe_dump(SMALL_CONFIG, f)

    # Change to temp directory
    os.chdir(temp_dir)

    yield temp_dir

    # Always return to original cwd
    os.chdir(_original_cwd)
