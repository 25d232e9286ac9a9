"""Synthetic CPU workloads and the CPU test suite that runs them."""

from __future__ import annotations

import math
import os
import re
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from .results import CPUResults, FrequencyStats, Temperature

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_PIECE = r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:ns|us|µs|μs|ms|s|m|h)"
_DURATION_RE = re.compile(rf"[+-]?(?:{_PIECE})+")
_PIECE_RE = re.compile(r"([0-9]+\.?[0-9]*|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)")

_PATTERN_1MB = bytes(range(256)) * 4096
_PATTERN_512KB = bytes(range(256)) * 2048

_GIB = 1024 * 1024 * 1024


def parse_duration(text: str) -> float:
    """Parse a duration such as ``60s``, ``2m`` or ``1h30m`` into seconds.

    Raises ValueError for anything that is not a valid duration.
    """
    if text in ("0", "+0", "-0"):
        return 0.0
    if not _DURATION_RE.fullmatch(text):
        raise ValueError(f"invalid duration {text!r}")
    sign = -1.0 if text.startswith("-") else 1.0
    total = sum(float(number) * _UNIT_SECONDS[unit] for number, unit in _PIECE_RE.findall(text))
    return sign * total


def _format_seconds(duration: float) -> str:
    return f"{duration:g}s"


def _per_second(amount: float, duration: float) -> float:
    """Rate over the planned duration; a non-positive duration gives no rate."""
    if duration <= 0:
        return 0.0
    return amount / duration


def _run_workers(threads: int, worker: Callable[[], int]) -> int:
    if threads <= 0:
        return 0
    with ThreadPoolExecutor(max_workers=threads) as pool:
        return sum(pool.map(lambda _: worker(), range(threads)))


def calculate_percentile(score: int) -> int:
    """Rough percentile for a score."""
    if score > 2000:
        return 95
    if score > 1500:
        return 85
    if score > 1000:
        return 75
    if score > 500:
        return 50
    return 25


def run_single_core_test(duration: float) -> int:
    """Run floating-point work on one thread for ``duration`` seconds; return the score."""
    print("Running single-core integer performance test...")
    start = time.monotonic()
    operations = 0
    while time.monotonic() - start < duration:
        for i in range(10000):
            _ = math.sqrt(i) * math.sin(i)
        operations += 10000
    score = operations // 1000
    print(f"Single-core test completed: {operations} operations, score: {score}")
    return score


def run_multi_core_test(threads: int, duration: float) -> int:
    """Run the same kind of work on ``threads`` workers; return the combined score."""
    print(f"Running multi-core test with {threads} threads...")
    start = time.monotonic()

    def worker() -> int:
        operations = 0
        while time.monotonic() - start < duration:
            for j in range(5000):
                _ = math.sqrt(j) * math.cos(j)
            operations += 5000
        return operations

    total = _run_workers(threads, worker)
    score = total // 1000
    print(f"Multi-core test completed: {total} total operations, score: {score}")
    return score


def _fill_blocks(block: bytes, duration: float) -> int:
    start = time.monotonic()
    processed = 0
    while time.monotonic() - start < duration:
        data = bytearray(block)
        processed += len(data)
    return processed


def run_aes_test(duration: float) -> float:
    """Simulated AES-256 throughput in GB/s."""
    print("Running AES-256 encryption test...")
    processed = _fill_blocks(_PATTERN_1MB, duration)
    rate = _per_second(processed, duration) / _GIB
    print(f"AES-256 test: {rate:.2f} GB/s")
    return rate


def run_sha256_test(duration: float) -> float:
    """Simulated SHA-256 throughput in GB/s."""
    print("Running SHA-256 hash test...")
    processed = _fill_blocks(_PATTERN_512KB, duration)
    rate = _per_second(processed, duration) / _GIB
    print(f"SHA-256 test: {rate:.2f} GB/s")
    return rate


def run_rsa_test(duration: float) -> int:
    """Simulated RSA-2048 operations per second."""
    print("Running RSA-2048 test...")
    start = time.monotonic()
    operations = 0
    while time.monotonic() - start < duration:
        for i in range(100):
            _ = math.pow(i, 2.0)
        operations += 100
    rate = int(_per_second(operations, duration))
    print(f"RSA-2048 test: {rate} ops/sec")
    return rate


def run_gzip_test(threads: int, duration: float) -> int:
    """Simulated gzip throughput in MB/s across ``threads`` workers."""
    print("Running Gzip compression test...")
    start = time.monotonic()

    def worker() -> int:
        megabytes = 0
        while time.monotonic() - start < duration:
            _ = bytearray(_PATTERN_1MB)
            megabytes += 1
        return megabytes

    total = _run_workers(threads, worker)
    rate = int(_per_second(total, duration))
    print(f"Gzip test: {rate} MB/s")
    return rate


def run_lz4_test(threads: int, duration: float) -> int:
    """Simulated LZ4 throughput: half again as fast as gzip."""
    print("Running LZ4 compression test...")
    return int(run_gzip_test(threads, duration) * 1.5)


def run_zstd_test(threads: int, duration: float) -> int:
    """Simulated Zstd throughput: a fifth faster than gzip."""
    print("Running Zstd compression test...")
    return int(run_gzip_test(threads, duration) * 1.2)


def _cryptography_tests(threads: int, duration: float, results: CPUResults) -> None:
    print("Running cryptography tests...")
    crypto = results.tests.single_core.cryptography
    crypto.aes_256 = run_aes_test(duration / 3)
    crypto.sha256 = run_sha256_test(duration / 3)
    crypto.rsa_2048 = run_rsa_test(duration / 3)


def _compression_tests(threads: int, duration: float, results: CPUResults) -> None:
    print("Running compression tests...")
    compression = results.tests.multi_core.compression
    compression.gzip = run_gzip_test(threads, duration / 3)
    compression.lz4 = run_lz4_test(threads, duration / 3)
    compression.zstd = run_zstd_test(threads, duration / 3)


def _all_tests(threads: int, duration: float, results: CPUResults) -> None:
    print(f"Running comprehensive CPU tests with {threads} threads for {_format_seconds(duration)}...")
    single = results.tests.single_core.integer_performance
    single.score = run_single_core_test(duration / 4)
    single.unit = "points"
    single.percentile = calculate_percentile(single.score)

    multi = results.tests.multi_core.integer_performance
    multi.score = run_multi_core_test(threads, duration / 2)
    multi.unit = "points"
    multi.percentile = calculate_percentile(multi.score)

    _cryptography_tests(threads, duration / 4, results)
    _compression_tests(threads, duration / 4, results)


def _compute_tests(threads: int, duration: float, results: CPUResults) -> None:
    print(f"Running compute-focused CPU test with {threads} threads...")
    results.tests.single_core.integer_performance.score = run_single_core_test(duration / 2)
    results.tests.multi_core.integer_performance.score = run_multi_core_test(threads, duration / 2)


def _crypto_suite(threads: int, duration: float, results: CPUResults) -> None:
    print("Running crypto-focused CPU test...")
    _cryptography_tests(threads, duration, results)


def _compression_suite(threads: int, duration: float, results: CPUResults) -> None:
    print("Running compression-focused CPU test...")
    _compression_tests(threads, duration, results)


_SUITES: dict[str, Callable[[int, float, CPUResults], None]] = {
    "all": _all_tests,
    "compute": _compute_tests,
    "crypto": _crypto_suite,
    "compress": _compression_suite,
}


def execute_cpu_test(threads: int, duration: str, test_type: str = "all") -> CPUResults:
    """Run a CPU test suite (all, compute, crypto or compress).

    ``threads`` of 0 uses every CPU. Raises ValueError for a bad duration
    or an unknown test type.
    """
    try:
        seconds = parse_duration(duration)
    except ValueError as exc:
        raise ValueError(f"invalid duration format: {exc}") from exc

    if threads == 0:
        threads = os.cpu_count() or 1

    results = CPUResults(
        test_suite="octane-cpu-test",
        duration=duration,
        temperature=Temperature(idle=35.0, load=65.0, max=78.0),
        frequencies=FrequencyStats(average_all_cores=3200.0, stability=98.5),
    )

    suite = _SUITES.get(test_type)
    if suite is None:
        raise ValueError(f"unknown test type: {test_type}")
    suite(threads, seconds, results)
    return results