"""Command-line interface of the performance analyzer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from .benchmark import execute_cpu_test
from .config import Config, load_config
from .cpuinfo import get_cpu_info
from .report import CPUInfo
from .results import CPUResults

_FEATURES_PER_ROW = 8
_DEFAULT_CONFIG = ".octane.yaml"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the ``cpu`` and ``cpu info`` commands."""
    parser = argparse.ArgumentParser(
        prog="octane",
        description="Octane Performance Analyzer: a comprehensive tool to evaluate "
        "the performance of your system.",
    )
    parser.add_argument(
        "-c", "--config", default="", help="config file (default is $HOME/.octane.yaml)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable verbose output")
    parser.set_defaults(handler=None)

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    cpu = commands.add_parser(
        "cpu",
        help="Test CPU performance",
        description="Run various CPU performance tests to evaluate the processing "
        "power of the system.",
    )
    cpu.add_argument(
        "-t", "--threads", type=int, default=0,
        help="Number of threads to use (default is auto)",
    )
    cpu.add_argument(
        "-d", "--duration", default="60s", help="Duration of the test (e.g., 60s, 2m)"
    )
    cpu.add_argument(
        "-T", "--test", default="all",
        help="Type of test to run (all|compute|crypto|compress)",
    )
    cpu.set_defaults(handler=_run_cpu_test)

    cpu_commands = cpu.add_subparsers(dest="cpu_command", metavar="COMMAND")
    cpu_info = cpu_commands.add_parser(
        "info",
        help="Show CPU information",
        description="Display detailed information about the current CPU platform.",
    )
    cpu_info.set_defaults(handler=_run_cpu_info)
    return parser


def format_cpu_info(info: CPUInfo) -> str:
    """Render CPU platform details as printable text."""
    lines = [
        "💻 CPU Platform Information:",
        f"Model Name: {info.model_name}",
        f"Brand: {info.brand}",
        f"Architecture: {info.architecture}",
        f"Physical Cores: {info.physical_cores}",
        f"Logical Cores: {info.logical_cores}",
        f"Base Frequency: {info.base_frequency:.2f} GHz",
        f"Max Frequency: {info.max_frequency:.2f} GHz",
    ]

    if info.cache_l1_data:
        lines += [
            "",
            "🗄️  Cache Information:",
            f"L1 Data Cache: {info.cache_l1_data}",
            f"L1 Instruction Cache: {info.cache_l1_instruction}",
            f"L2 Cache: {info.cache_l2}",
            f"L3 Cache: {info.cache_l3}",
        ]

    if info.features:
        lines += ["", "⚡ CPU Features:"]
        features = list(info.features)
        for start in range(0, len(features), _FEATURES_PER_ROW):
            row = features[start:start + _FEATURES_PER_ROW]
            lines.append("".join(f"{feature:<12}" for feature in row))

    if info.tdp > 0:
        lines += ["", f"🔥 Thermal Design Power: {info.tdp} W"]

    return "\n".join(lines) + "\n"


def format_cpu_results(results: CPUResults) -> str:
    """Render the results of a CPU test run as printable text."""
    single = results.tests.single_core
    multi = results.tests.multi_core
    temperature = results.temperature
    frequencies = results.frequencies

    lines = [
        "🔥 CPU Performance Test Results:",
        f"Test Suite: {results.test_suite}",
        f"Duration: {results.duration}",
        f"Temperature: {temperature.idle:.1f}°C (Idle) / {temperature.load:.1f}°C (Load)"
        f" / {temperature.max:.1f}°C (Max)",
        f"Average Frequency: {frequencies.average_all_cores:.1f} MHz"
        f" ({frequencies.stability:.1f}% stable)",
        "",
        "📊 Single-Core Performance:",
        f"  Integer Performance: {single.integer_performance.score}"
        f" {single.integer_performance.unit}"
        f" (Percentile: {single.integer_performance.percentile}%)",
        "",
        "🚀 Multi-Core Performance:",
        f"  Integer Performance: {multi.integer_performance.score}"
        f" {multi.integer_performance.unit}"
        f" (Percentile: {multi.integer_performance.percentile}%)",
    ]

    crypto = single.cryptography
    if crypto.aes_256 > 0:
        lines += [
            "",
            "🔐 Cryptography Performance:",
            f"  AES-256: {crypto.aes_256:.2f} GB/s",
            f"  SHA-256: {crypto.sha256:.2f} GB/s",
            f"  RSA-2048: {crypto.rsa_2048} ops/sec",
        ]

    compression = multi.compression
    if compression.gzip > 0:
        lines += [
            "",
            "📦 Compression Performance:",
            f"  Gzip: {compression.gzip} MB/s",
            f"  LZ4: {compression.lz4} MB/s",
            f"  Zstd: {compression.zstd} MB/s",
        ]

    return "\n".join(lines) + "\n"


def _load_settings(path: str, verbose: bool) -> Config:
    """Read the settings file, reporting problems on stderr and falling back to defaults."""
    if path:
        try:
            return load_config(path)
        except (OSError, ValueError, TypeError) as exc:
            print(f"Error reading config file {path}: {exc}", file=sys.stderr)
            return Config()

    default_path = Path.home() / _DEFAULT_CONFIG
    try:
        return load_config(default_path)
    except (OSError, ValueError, TypeError) as exc:
        if verbose:
            print(f"Config file not found (this is optional): {exc}", file=sys.stderr)
        return Config()


def _run_cpu_test(args: argparse.Namespace) -> int:
    try:
        results = execute_cpu_test(args.threads, args.duration, args.test)
    except ValueError as exc:
        print(f"Error executing CPU test: {exc}")
        return 1
    print(format_cpu_results(results), end="")
    return 0


def _run_cpu_info(args: argparse.Namespace) -> int:
    try:
        info = get_cpu_info()
    except OSError as exc:
        print(f"Error getting CPU info: {exc}")
        return 1
    print(format_cpu_info(info), end="")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _load_settings(args.config, args.verbose)

    handler: Callable[[argparse.Namespace], int] | None = args.handler
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


if __name__ == "__main__":
    raise SystemExit(main())