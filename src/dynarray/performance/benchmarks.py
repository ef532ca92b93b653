"""Sort benchmarks for DynamicArray.

Measures wall-clock latency of the built-in comparator sort and the
hand-written quicksort over generated inputs, and verifies each run
actually produced sorted output.
"""

import logging
import statistics
import time
from dataclasses import dataclass
from typing import Optional

from ..array_list import DynamicArray
from ..interfaces import Comparator, SortAlgorithm
from ..sorting import natural_order
from .input_generator import InputConfig, generate_input

logger = logging.getLogger(__name__)


@dataclass
class LatencyStats:
    """Latency percentile statistics in milliseconds."""
    p50: float
    p95: float
    p99: float
    mean: float
    min: float
    max: float


@dataclass
class SortBenchmarkResult:
    """Result of a sort latency benchmark."""
    algorithm: SortAlgorithm
    size: int
    order: str
    runs: int
    stats: LatencyStats
    sorted_ok: bool


def benchmark_sort(
    algorithm: SortAlgorithm,
    input_config: Optional[InputConfig] = None,
    runs: int = 5,
    comparator: Comparator = natural_order,
) -> SortBenchmarkResult:
    """Benchmark one sort strategy.

    Each run fills a fresh DynamicArray with the same generated input
    and times only the sort call.

    Args:
        algorithm: Which sort to run.
        input_config: Shape of the input. Uses defaults if None.
        runs: Number of timed runs.
        comparator: Compare function passed to the sort.

    Returns:
        SortBenchmarkResult with p50/p95/p99 latency stats.
    """
    if runs < 1:
        raise ValueError("runs must be >= 1")
    input_config = input_config or InputConfig()
    values = generate_input(input_config)

    latencies: list[float] = []
    sorted_ok = True
    for _ in range(runs):
        array: DynamicArray[int] = DynamicArray()
        for value in values:
            array.append(value)

        start = time.perf_counter()
        array.sort(comparator, algorithm)
        latencies.append((time.perf_counter() - start) * 1000)

        sorted_ok = sorted_ok and _is_sorted(array, comparator)

    stats = LatencyStats(
        p50=_percentile(latencies, 50),
        p95=_percentile(latencies, 95),
        p99=_percentile(latencies, 99),
        mean=statistics.mean(latencies),
        min=min(latencies),
        max=max(latencies),
    )
    logger.info(
        f"{algorithm.value} sort of {input_config.size} {input_config.order} "
        f"elements: p50={stats.p50:.3f}ms over {runs} runs"
    )

    return SortBenchmarkResult(
        algorithm=algorithm,
        size=input_config.size,
        order=input_config.order,
        runs=runs,
        stats=stats,
        sorted_ok=sorted_ok,
    )


def compare_algorithms(
    input_config: Optional[InputConfig] = None,
    runs: int = 5,
) -> dict[SortAlgorithm, SortBenchmarkResult]:
    """Run benchmark_sort for every SortAlgorithm on the same input."""
    return {
        algorithm: benchmark_sort(algorithm, input_config, runs)
        for algorithm in SortAlgorithm
    }


def _is_sorted(array: DynamicArray, comparator: Comparator) -> bool:
    previous = None
    for i, value in enumerate(array):
        if i > 0 and comparator(previous, value) > 0:
            return False
        previous = value
    return True


def _percentile(data: list[float], pct: int) -> float:
    """Calculate percentile using linear interpolation.

    Uses ``statistics.quantiles`` for accurate interpolation, which
    handles small sample sizes better than nearest-rank.
    """
    if not data:
        return 0.0
    if len(data) == 1:
        return data[0]
    quantile_points = statistics.quantiles(sorted(data), n=100)
    idx = min(pct - 1, len(quantile_points) - 1)
    return quantile_points[idx]
