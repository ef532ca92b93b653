"""Synthetic input generator for sort benchmarks.

Generates integer sequences with a chosen shape so the two sort
strategies can be compared on their best and worst cases.
"""

import random
from dataclasses import dataclass
from typing import Optional

from ..config import INPUT_ORDERS

# Number of distinct values used by the "duplicates" order
_DUPLICATE_POOL = 5


@dataclass
class InputConfig:
    """Configuration for input generation."""
    size: int = 1000
    order: str = "descending"
    seed: Optional[int] = None
    max_value: int = 1_000_000

    def __post_init__(self):
        if self.order not in INPUT_ORDERS:
            raise ValueError(
                f"Invalid order: {self.order}. "
                f"Valid options: {', '.join(INPUT_ORDERS)}"
            )
        if self.size < 0:
            raise ValueError("size must be non-negative")


def generate_input(config: Optional[InputConfig] = None) -> list[int]:
    """Generate a list of integers shaped by ``config.order``.

    Args:
        config: Input generation configuration. Uses defaults if None.

    Returns:
        ``ascending`` and ``descending`` give 1..size in that order.
        ``random`` gives values in ``[0, max_value]``. ``duplicates``
        draws from a handful of distinct values.
    """
    config = config or InputConfig()
    rng = random.Random(config.seed)

    if config.order == "ascending":
        return list(range(1, config.size + 1))
    if config.order == "descending":
        return list(range(config.size, 0, -1))
    if config.order == "duplicates":
        pool = rng.sample(range(config.max_value + 1), k=min(_DUPLICATE_POOL, config.max_value + 1))
        return [rng.choice(pool) for _ in range(config.size)]
    return [rng.randint(0, config.max_value) for _ in range(config.size)]
