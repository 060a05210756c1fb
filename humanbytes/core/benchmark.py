"""
Benchmark harness for humanbytes.

Times the public conversion operations over fixed input sets. Results are
plain records; presentation is left to the caller.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from humanbytes.core.converter import ByteConverter

logger = logging.getLogger("humanbytes.benchmark")

FORMAT_INPUTS = (
    0,
    1024,
    2048,
    4096,
    8192,
    1048576,
    2097152,
    4194304,
    8388608,
    1073741824,
    2147483648,
    4294967296,
    1099511627776,
    1234567,
    987654321,
    12345678901,
)

PARSE_INPUTS = (
    "0",
    "1kb",
    "1KB",
    "1 MB",
    "1GB",
    "1 TB",
    "2kb",
    "4kb",
    "8mb",
    "16gb",
    "100mb",
    "500gb",
    "1 kb",
    "2 mb",
    "4 gb",
)

WARMUP_CALLS = 1000


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing summary of one benchmark case."""

    group: str
    name: str
    calls: int
    total_ms: float
    ops_per_sec: int
    mean_us: float
    p95_us: float


def benchmark(
    group: str, name: str, fn: Callable[[], object], iterations: int, rounds: int = 5
) -> BenchmarkResult:
    """Warm up, then time ``rounds`` runs of ``iterations`` calls to ``fn``."""
    if iterations < 1 or rounds < 1:
        raise ValueError("iterations and rounds must be positive")

    for _ in range(min(WARMUP_CALLS, iterations)):
        fn()

    timings = np.empty(rounds)
    for i in range(rounds):
        start = time.perf_counter()
        for _ in range(iterations):
            fn()
        timings[i] = time.perf_counter() - start

    per_call_us = timings / iterations * 1e6
    total = float(timings.sum())
    calls = iterations * rounds

    result = BenchmarkResult(
        group=group,
        name=name,
        calls=calls,
        total_ms=total * 1000,
        ops_per_sec=int(calls / total) if total > 0 else 0,
        mean_us=float(per_call_us.mean()),
        p95_us=float(np.percentile(per_call_us, 95)),
    )
    logger.debug(f"{group}/{name}: {result.mean_us:.3f}us per call")
    return result


def run_benchmarks(
    converter: Optional[ByteConverter] = None,
    iterations: int = 100000,
    rounds: int = 5,
    seed: int = 0,
) -> List[BenchmarkResult]:
    """Run every benchmark case against ``converter`` (a fresh one by default)."""
    converter = converter or ByteConverter()
    rng = random.Random(seed)
    fmt = converter.format
    parse = converter.parse

    def sequential(inputs: tuple, fn: Callable[[object], object]) -> Callable[[], None]:
        def run() -> None:
            for value in inputs:
                fn(value)

        return run

    def round_trip() -> None:
        parse(fmt(1048576))

    seq_format_iterations = max(1, iterations // len(FORMAT_INPUTS))
    seq_parse_iterations = max(1, iterations // len(PARSE_INPUTS))

    cases = [
        ("format", "Common values (cached)", lambda: fmt(rng.choice(FORMAT_INPUTS)), iterations),
        ("format", "Sequential common values", sequential(FORMAT_INPUTS, fmt), seq_format_iterations),
        ("format", "1KB (most common)", lambda: fmt(1024), iterations),
        ("format", "1MB (very common)", lambda: fmt(1048576), iterations),
        ("format", "1GB (very common)", lambda: fmt(1073741824), iterations),
        ("format", "Random values (no cache)", lambda: fmt(rng.randrange(10000000000)), iterations),
        (
            "format",
            "With options (no cache)",
            lambda: fmt(1048576, {"decimal_places": 3}),
            max(1, iterations // 10),
        ),
        ("parse", "Common values (cached)", lambda: parse(rng.choice(PARSE_INPUTS)), iterations),
        ("parse", "Sequential common values", sequential(PARSE_INPUTS, parse), seq_parse_iterations),
        ("parse", '"1KB" (most common)', lambda: parse("1KB"), iterations),
        ("parse", '"1MB" (very common)', lambda: parse("1MB"), iterations),
        ("parse", '"1GB" (very common)', lambda: parse("1GB"), iterations),
        ("parse", "Numbers (fast path)", lambda: parse(1024), iterations),
        ("combined", "Round-trip: format -> parse", round_trip, max(1, iterations // 2)),
    ]

    logger.info(f"Running {len(cases)} benchmarks ({iterations} iterations x {rounds} rounds)")
    return [benchmark(group, name, fn, n, rounds) for group, name, fn, n in cases]
