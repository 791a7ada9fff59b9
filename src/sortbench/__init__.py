"""
sortbench - Benchmark and verify in-memory sorting algorithms.

Time every algorithm on every data shape, drop the ones that stop scaling.
"""

from sortbench.engine import BenchmarkRunner
from sortbench.registry import Algorithm, AcceptedDomain, default_algorithms
from sortbench.scenarios import Scenario, default_scenarios

__version__ = "0.1.0"
__all__ = [
    "AcceptedDomain",
    "Algorithm",
    "BenchmarkRunner",
    "Scenario",
    "__version__",
    "default_algorithms",
    "default_scenarios",
]
