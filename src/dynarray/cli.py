"""dynarray CLI — demo, sort, bench, and init entry points.

Usage:
    dynarray demo                         # Walk through every container operation
    dynarray sort 34 7 23 --algorithm quick
    dynarray sort b a c --type str --reverse
    dynarray bench --size 2000 --order random
    dynarray init                         # Write the config file (default ~/.dynarray/config.yaml)
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Callable

import yaml

from .config import INPUT_ORDERS, LOG_LEVELS, DynArrayConfig
from .interfaces import SortAlgorithm
from .performance.benchmarks import compare_algorithms
from .performance.input_generator import InputConfig
from .sorting import natural_order, reverse_order

DYNARRAY_DIR = Path.home() / ".dynarray"
CONFIG_FILE = DYNARRAY_DIR / "config.yaml"

CONFIG_TEMPLATE = """\
# dynarray configuration
# Loaded by every command; override the path with --config or DYNARRAY_CONFIG.

array:
  default_capacity: 10   # Slots allocated by a new array
  growth_factor: 2       # Capacity multiplier when the store is full

demo:
  large_list_size: 1000  # Length of the descending list sorted by `dynarray demo`

benchmark:
  size: 1000
  runs: 5
  seed: 42
  order: descending      # ascending | descending | random | duplicates

logging:
  level: warning         # debug | info | warning | error
"""

VALUE_PARSERS: dict[str, Callable[[str], object]] = {
    "int": int,
    "float": float,
    "str": str,
}

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    """Send log records to stderr; stdout carries command output."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _config_path(args: argparse.Namespace) -> Path:
    """Resolve the config file: --config, then DYNARRAY_CONFIG, then the default."""
    config_path = getattr(args, "config", None) or os.environ.get("DYNARRAY_CONFIG")
    if config_path:
        return Path(config_path).expanduser()
    return CONFIG_FILE


def _load_config(args: argparse.Namespace) -> DynArrayConfig:
    """Load config from the resolved path."""
    return DynArrayConfig.from_file(_config_path(args))


def cmd_init(args: argparse.Namespace) -> int:
    """Write a commented config template to the resolved config path."""
    config_file = _config_path(args)
    if config_file.exists() and not args.force:
        print(f"⚠️  Config already exists: {config_file}")
        print("   Use --force to overwrite.")
        return 1

    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(CONFIG_TEMPLATE)
    print(f"✅ Config written: {config_file}")
    return 0


def cmd_demo(args: argparse.Namespace, config: DynArrayConfig) -> int:
    """Exercise every container operation and print the results."""
    names = config.new_array()
    names.append("Aston")
    names.append("Homework")
    names.insert_at(2, "Lesson")

    print(f"Element at index 1: {names.get_at(1)}")
    print(f"Removed element: {names.remove_at(2)}")
    print(f"Current number of elements in the list: {names.size()}")

    names.sort_with_comparator(natural_order)
    print(f"List: {names}")

    names.clear()
    print(f"After clear: {names}")

    numbers = config.new_array()
    for value in (34, 7, 23, 32, 5, 62):
        numbers.append(value)
    print(f"Before quickSort: {numbers}")
    numbers.quick_sort(natural_order)
    print(f"After quickSort: {numbers}")

    large = config.new_array()
    for value in range(config.demo.large_list_size, 0, -1):
        large.append(value)
    print(f"Before sorting large list: {large}")
    large.quick_sort(natural_order)
    print(f"After sorting large list: {large}")

    doubles = config.new_array()
    for value in (5.6, 3.1, 9.8, 1.4):
        doubles.append(value)
    print(f"Before sorting double list: {doubles}")
    doubles.quick_sort(natural_order)
    print(f"After sorting double list: {doubles}")

    return 0


def cmd_sort(args: argparse.Namespace, config: DynArrayConfig) -> int:
    """Sort the given values and print them."""
    parse = VALUE_PARSERS[args.type]
    array = config.new_array()
    for raw in args.values:
        try:
            array.append(parse(raw))
        except ValueError:
            print(f"❌ Invalid {args.type} value: {raw!r}")
            return 1

    comparator = reverse_order if args.reverse else natural_order
    array.sort(comparator, SortAlgorithm(args.algorithm))
    print(array)
    return 0


def cmd_bench(args: argparse.Namespace, config: DynArrayConfig) -> int:
    """Time both sort strategies on generated input."""
    bench = config.benchmark
    runs = args.runs if args.runs is not None else bench.runs
    try:
        input_config = InputConfig(
            size=args.size if args.size is not None else bench.size,
            order=args.order or bench.order,
            seed=args.seed if args.seed is not None else bench.seed,
        )
        results = compare_algorithms(input_config, runs=runs)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    print(f"Sorting {input_config.size} {input_config.order} integers, {runs} runs")
    for algorithm, result in results.items():
        status = "ok" if result.sorted_ok else "NOT SORTED"
        print(
            f"  {algorithm.value:<8} p50={result.stats.p50:9.3f}ms "
            f"p95={result.stats.p95:9.3f}ms mean={result.stats.mean:9.3f}ms  [{status}]"
        )

    if not all(result.sorted_ok for result in results.values()):
        return 1
    return 0


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="dynarray",
        description="dynarray — a hand-built dynamic array with two sorts",
    )
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="Path to a YAML config file")
    parser.add_argument("--log-level", type=str, default=None,
                        choices=list(LOG_LEVELS))
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Write a config template")
    init_parser.add_argument("--force", action="store_true",
                             help="Overwrite existing config")

    # demo
    subparsers.add_parser("demo", help="Demonstrate every container operation")

    # sort
    sort_parser = subparsers.add_parser("sort", help="Sort values given on the command line")
    sort_parser.add_argument("values", nargs="+")
    sort_parser.add_argument("--algorithm", "-a", default=SortAlgorithm.QUICK.value,
                             choices=[a.value for a in SortAlgorithm])
    sort_parser.add_argument("--type", "-t", default="int",
                             choices=list(VALUE_PARSERS))
    sort_parser.add_argument("--reverse", "-r", action="store_true",
                             help="Sort in descending order")

    # bench
    bench_parser = subparsers.add_parser("bench", help="Benchmark both sort strategies")
    bench_parser.add_argument("--size", "-n", type=int, default=None)
    bench_parser.add_argument("--runs", type=int, default=None)
    bench_parser.add_argument("--seed", type=int, default=None)
    bench_parser.add_argument("--order", type=str, default=None,
                              choices=list(INPUT_ORDERS))

    args = parser.parse_args()

    if args.command == "init":
        sys.exit(cmd_init(args))

    commands = {
        "demo": cmd_demo,
        "sort": cmd_sort,
        "bench": cmd_bench,
    }
    if args.command not in commands:
        parser.print_help()
        sys.exit(1)

    try:
        config = _load_config(args)
    except (ValueError, TypeError, yaml.YAMLError) as e:
        print(f"❌ Invalid config: {e}")
        sys.exit(1)

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"❌ {error}")
        sys.exit(1)

    _configure_logging(args.log_level or config.logging.level)
    logger.debug(f"Running command: {args.command}")
    sys.exit(commands[args.command](args, config))


if __name__ == "__main__":
    main()
