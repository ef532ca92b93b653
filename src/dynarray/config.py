"""dynarray configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .array_list import DEFAULT_CAPACITY, DEFAULT_GROWTH_FACTOR, DynamicArray

DEFAULT_CONFIG_PATH = "~/.dynarray/config.yaml"
LOG_LEVELS = ("debug", "info", "warning", "error")
INPUT_ORDERS = ("ascending", "descending", "random", "duplicates")


def _check_int(name: str, value) -> None:
    """Reject floats, strings and bools where a whole number is required."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass
class ArrayConfig:
    """Backing store sizing for new arrays."""
    default_capacity: int = DEFAULT_CAPACITY
    growth_factor: int = DEFAULT_GROWTH_FACTOR

    def __post_init__(self):
        _check_int("default_capacity", self.default_capacity)
        _check_int("growth_factor", self.growth_factor)
        if self.default_capacity < 1:
            raise ValueError("default_capacity must be >= 1")
        if self.growth_factor < 2:
            raise ValueError("growth_factor must be >= 2")


@dataclass
class DemoConfig:
    """Settings for `dynarray demo`."""
    large_list_size: int = 1000

    def __post_init__(self):
        _check_int("large_list_size", self.large_list_size)
        if self.large_list_size < 0:
            raise ValueError("large_list_size must be non-negative")


@dataclass
class BenchmarkConfig:
    """Settings for `dynarray bench`."""
    size: int = 1000
    runs: int = 5
    seed: int = 42
    order: str = "descending"

    def __post_init__(self):
        _check_int("size", self.size)
        _check_int("runs", self.runs)
        _check_int("seed", self.seed)
        if self.size < 0:
            raise ValueError("size must be non-negative")
        if self.runs < 1:
            raise ValueError("runs must be >= 1")


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "warning"


@dataclass
class DynArrayConfig:
    """Full configuration."""
    array: ArrayConfig = field(default_factory=ArrayConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: str | Path) -> "DynArrayConfig":
        """Load configuration from YAML file."""
        path = Path(path).expanduser()
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "DynArrayConfig":
        """Create configuration from dictionary.

        Raises:
            ValueError: If ``data`` or one of its sections is not a mapping.
        """
        if not isinstance(data, dict):
            raise ValueError(f"config must be a mapping, got {type(data).__name__}")

        array_data = data.get("array", {})
        demo_data = data.get("demo", {})
        benchmark_data = data.get("benchmark", {})
        logging_data = data.get("logging", {})

        for name, section in (
            ("array", array_data),
            ("demo", demo_data),
            ("benchmark", benchmark_data),
            ("logging", logging_data),
        ):
            if section and not isinstance(section, dict):
                raise ValueError(
                    f"config section '{name}' must be a mapping, "
                    f"got {type(section).__name__}"
                )

        return cls(
            array=ArrayConfig(**array_data) if array_data else ArrayConfig(),
            demo=DemoConfig(**demo_data) if demo_data else DemoConfig(),
            benchmark=BenchmarkConfig(**benchmark_data) if benchmark_data else BenchmarkConfig(),
            logging=LoggingConfig(**logging_data) if logging_data else LoggingConfig(),
        )

    @classmethod
    def from_env(cls) -> "DynArrayConfig":
        """Load the file named by DYNARRAY_CONFIG (or the default path)."""
        config_path = os.environ.get("DYNARRAY_CONFIG", DEFAULT_CONFIG_PATH)
        return cls.from_file(config_path)

    def new_array(self) -> DynamicArray:
        """Create an empty array sized by this configuration."""
        return DynamicArray(
            capacity=self.array.default_capacity,
            growth_factor=self.array.growth_factor,
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        if not isinstance(self.logging.level, str):
            errors.append(
                f"logging.level must be a string, got {self.logging.level!r}"
            )
        elif self.logging.level.lower() not in LOG_LEVELS:
            errors.append(
                f"logging.level must be one of {', '.join(LOG_LEVELS)}, "
                f"got '{self.logging.level}'"
            )

        if self.benchmark.order not in INPUT_ORDERS:
            errors.append(
                f"benchmark.order must be one of {', '.join(INPUT_ORDERS)}, "
                f"got '{self.benchmark.order}'"
            )

        return errors
