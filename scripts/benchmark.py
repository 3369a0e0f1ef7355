#!/usr/bin/env python3
"""
statekit Performance Benchmarks

Measures throughput of the hot paths of a store: merge and replacement
updates, path patches, undo/redo walks and subscriber fan-out, and renders
the results as a rich table.

Usage:
    python scripts/benchmark.py               # Run all benchmarks
    python scripts/benchmark.py --config      # Show current benchmark configuration
    python scripts/benchmark.py --quiet       # Only show the final table

Configuration:
    Adjust the constants at the top of the file to change benchmark parameters.
"""

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, List

# Add the project root to the Python path
sys.path.insert(0, ".")

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from statekit import create_store

OPERATIONS = 20_000
HISTORY_LENGTH = 100
FANOUT_SUBSCRIBERS = 200
NESTED_DEPTH = 6


@dataclass
class BenchmarkResult:
    """Timing for one benchmark run."""

    name: str
    workload: str
    operations: int
    elapsed: float

    @property
    def operations_per_second(self) -> float:
        return self.operations / self.elapsed if self.elapsed > 0 else float("inf")


def _timed(func: Callable[[], None]) -> float:
    start = time.perf_counter()
    func()
    return time.perf_counter() - start


def _nested_state(depth: int) -> Dict:
    state: Dict = {"leaf": 0, "sibling": list(range(10))}
    for level in range(depth):
        state = {f"level{level}": state, f"untouched{level}": {"x": level}}
    return state


def bench_merge_updates() -> BenchmarkResult:
    store = create_store(
        {"count": 0, "label": "bench"}, max_history_length=HISTORY_LENGTH
    )

    def run():
        for i in range(OPERATIONS):
            store.set_state({"count": i})

    return BenchmarkResult(
        "Merge Updates", f"{OPERATIONS} updates", OPERATIONS, _timed(run)
    )


def bench_function_updates() -> BenchmarkResult:
    store = create_store({"count": 0}, max_history_length=HISTORY_LENGTH)

    def run():
        for _ in range(OPERATIONS):
            store.set_state(lambda prev: {**prev, "count": prev["count"] + 1})

    return BenchmarkResult(
        "Function Updates", f"{OPERATIONS} updates", OPERATIONS, _timed(run)
    )


def bench_patches() -> BenchmarkResult:
    store = create_store(
        _nested_state(NESTED_DEPTH), max_history_length=HISTORY_LENGTH
    )
    levels = [f"level{level}" for level in reversed(range(NESTED_DEPTH))]
    path = ".".join([*levels, "leaf"])

    def run():
        for i in range(OPERATIONS):
            store.patch(path, i)

    return BenchmarkResult(
        "Nested Patches", f"{NESTED_DEPTH}-deep path", OPERATIONS, _timed(run)
    )


def bench_undo_redo() -> BenchmarkResult:
    store = create_store({"count": 0}, max_history_length=HISTORY_LENGTH)
    for i in range(HISTORY_LENGTH):
        store.set_state({"count": i})
    rounds = max(OPERATIONS // (2 * HISTORY_LENGTH), 1)

    def run():
        for _ in range(rounds):
            while store.can_undo():
                store.undo()
            while store.can_redo():
                store.redo()

    steps = rounds * 2 * (HISTORY_LENGTH - 1)
    return BenchmarkResult(
        "Undo/Redo Walk", f"{HISTORY_LENGTH} entries", steps, _timed(run)
    )


def bench_fanout() -> BenchmarkResult:
    store = create_store({"count": 0}, max_history_length=HISTORY_LENGTH)
    for _ in range(FANOUT_SUBSCRIBERS):
        store.subscribe(lambda state: state["count"])
    updates = max(OPERATIONS // FANOUT_SUBSCRIBERS, 1)

    def run():
        for i in range(updates):
            store.set_state({"count": i})

    return BenchmarkResult(
        "Subscriber Fan-out",
        f"{FANOUT_SUBSCRIBERS} subscribers",
        updates * FANOUT_SUBSCRIBERS,
        _timed(run),
    )


BENCHMARKS: List[Callable[[], BenchmarkResult]] = [
    bench_merge_updates,
    bench_function_updates,
    bench_patches,
    bench_undo_redo,
    bench_fanout,
]


def run_benchmarks(quiet: bool = False) -> List[BenchmarkResult]:
    console = Console()
    console.print(
        Panel(
            Align.center("statekit Performance Benchmark Suite"),
            title="statekit Benchmarks",
            border_style="blue",
        )
    )

    results = []
    for bench in BENCHMARKS:
        result = bench()
        results.append(result)
        if not quiet:
            console.print(
                f"[green]✓[/green] {result.name}: "
                f"{result.operations_per_second:,.0f} ops/sec ({result.workload})"
            )

    table = Table(title="Final Benchmark Results")
    table.add_column("Benchmark", style="cyan", no_wrap=True)
    table.add_column("Workload", style="magenta")
    table.add_column("Performance", style="green", justify="right")
    table.add_column("Time", style="yellow", justify="right")

    for result in results:
        table.add_row(
            result.name,
            result.workload,
            f"{result.operations_per_second / 1000:.1f}K ops/sec",
            f"{result.elapsed * 1000:.1f} ms",
        )

    console.print()
    console.print(table)
    return results


def print_config():
    """Print current benchmark configuration."""
    print("Benchmark Configuration:")
    print(f"  OPERATIONS: {OPERATIONS}")
    print(f"  HISTORY_LENGTH: {HISTORY_LENGTH}")
    print(f"  FANOUT_SUBSCRIBERS: {FANOUT_SUBSCRIBERS}")
    print(f"  NESTED_DEPTH: {NESTED_DEPTH}")


def main():
    """Main entry point for the benchmark script."""
    parser = argparse.ArgumentParser(description="statekit Performance Benchmarks")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output, show only final results",
    )

    args = parser.parse_args()

    if args.config:
        print_config()
        return

    if not args.quiet:
        print_config()
        print()

    run_benchmarks(quiet=args.quiet)


if __name__ == "__main__":
    main()
