"""Sort benchmarks and input generation."""

from .benchmarks import LatencyStats, SortBenchmarkResult, benchmark_sort, compare_algorithms
from .input_generator import InputConfig, generate_input

__all__ = [
    "LatencyStats",
    "SortBenchmarkResult",
    "benchmark_sort",
    "compare_algorithms",
    "InputConfig",
    "generate_input",
]
