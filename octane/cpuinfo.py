"""Detection of the CPU model, cores, clocks, caches and features."""

from __future__ import annotations

import dataclasses
import os
import platform
import re
import subprocess

from .report import CPUInfo

_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}

_MACOS_FEATURES = {
    "machdep.cpu.feature.SSE": "SSE",
    "machdep.cpu.feature.SSE2": "SSE2",
    "machdep.cpu.feature.SSE3": "SSE3",
    "machdep.cpu.feature.SSSE3": "SSSE3",
    "machdep.cpu.feature.SSE4_1": "SSE4.1",
    "machdep.cpu.feature.SSE4_2": "SSE4.2",
    "machdep.cpu.feature.AVX": "AVX",
    "machdep.cpu.feature.AVX2": "AVX2",
    "machdep.cpu.feature.AES": "AES",
}

_APPLE_FREQUENCIES = (
    ("M4", 3.2, 4.4),
    ("M3", 3.0, 4.0),
    ("M2", 2.4, 3.5),
    ("M1", 2.0, 3.2),
)

_APPLE_TDP = (("Apple M4", 22), ("Apple M3", 20), ("Apple M2", 18), ("Apple M1", 15))

_APPLE_FEATURES = ("ARM64", "NEON", "Crypto", "CRC32", "SHA1", "SHA256", "AES")

_MACOS_CACHES = (
    ("cache_l1_data", "hw.l1dcachesize"),
    ("cache_l1_instruction", "hw.l1icachesize"),
    ("cache_l2", "hw.l2cachesize"),
    ("cache_l3", "hw.l3cachesize"),
)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _architecture() -> str:
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine or "unknown")


def _logical_cores() -> int:
    return os.cpu_count() or 1


def _atoi(text: str) -> int | None:
    return int(text) if _INT_RE.fullmatch(text) else None


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def extract_brand(model_name: str) -> str:
    """Vendor named in a CPU model string, or ``Unknown``."""
    lowered = model_name.lower()
    for needle, brand in (("intel", "Intel"), ("amd", "AMD"), ("apple", "Apple"), ("arm", "ARM")):
        if needle in lowered:
            return brand
    return "Unknown"


def format_cache_size(size: int) -> str:
    """Render a cache size in bytes as B, KB or MB."""
    if size >= 1024 * 1024:
        return f"{size / (1024 * 1024):.1f} MB"
    if size >= 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size} B"


def _sysctl(key: str) -> str | None:
    try:
        completed = subprocess.run(
            ["sysctl", "-n", key], capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return completed.stdout


def _sysctl_int(key: str) -> int | None:
    output = _sysctl(key)
    return None if output is None else _atoi(output.strip())


def _sysctl_float(key: str) -> float | None:
    output = _sysctl(key)
    return None if output is None else _parse_float(output.strip())


def _macos_features() -> list[str]:
    features = []
    for key, name in _MACOS_FEATURES.items():
        output = _sysctl(key)
        if output is not None and output.strip() == "1":
            features.append(name)
    return features


def cpu_info_macos() -> CPUInfo:
    """Gather CPU details through ``sysctl``."""
    info = CPUInfo(logical_cores=_logical_cores())

    brand = _sysctl("machdep.cpu.brand_string")
    if brand is not None:
        info.model_name = brand.strip()
        info.brand = extract_brand(brand)

    cores = _sysctl_int("hw.physicalcpu")
    if cores is not None:
        info.physical_cores = cores

    info.architecture = _architecture()
    apple_silicon = "Apple M" in info.model_name

    if apple_silicon:
        for chip, base, maximum in _APPLE_FREQUENCIES:
            if chip in info.model_name:
                info.base_frequency = base
                info.max_frequency = maximum
                break
    else:
        base_hz = _sysctl_float("hw.cpufrequency")
        if base_hz is not None:
            info.base_frequency = base_hz / 1e9
        max_hz = _sysctl_float("hw.cpufrequency_max")
        if max_hz is not None:
            info.max_frequency = max_hz / 1e9

    for attribute, key in _MACOS_CACHES:
        size = _sysctl_int(key)
        if size is not None:
            setattr(info, attribute, format_cache_size(size))

    if not info.cache_l3 and apple_silicon:
        info.cache_l3 = "Unified Memory Architecture"

    info.features = _macos_features()
    if apple_silicon:
        info.features.extend(_APPLE_FEATURES)

    for chip, tdp in _APPLE_TDP:
        if chip in info.model_name:
            info.tdp = tdp
            break

    return info


def parse_proc_cpuinfo(text: str) -> CPUInfo:
    """Read model, cores, clock, cache and flags from ``/proc/cpuinfo`` text."""
    info = CPUInfo()
    for line in text.splitlines():
        if ":" not in line:
            continue
        parts = line.split(":")
        if len(parts) != 2:
            continue
        key, value = parts[0].strip(), parts[1].strip()
        if key == "model name":
            if not info.model_name:
                info.model_name = value
                info.brand = extract_brand(value)
        elif key == "cpu cores":
            cores = _atoi(value)
            if cores is not None:
                info.physical_cores = cores
        elif key == "cpu MHz":
            mhz = _parse_float(value)
            if mhz is not None:
                info.base_frequency = mhz / 1000
        elif key == "cache size":
            info.cache_l2 = value
        elif key == "flags":
            info.features = value.split()
    return info


def cpu_info_linux(path: str = "/proc/cpuinfo") -> CPUInfo:
    """Gather CPU details from a cpuinfo file; raises OSError if it cannot be read."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        text = handle.read()
    return dataclasses.replace(
        parse_proc_cpuinfo(text), logical_cores=_logical_cores(), architecture=_architecture()
    )


def parse_wmic_output(text: str) -> CPUInfo:
    """Read cores, maximum clock and model from ``wmic cpu get ... /format:csv`` output."""
    info = CPUInfo()
    for line in text.split("\n"):
        if "," not in line:
            continue
        parts = line.split(",")
        if len(parts) < 4:
            continue
        if parts[2] and parts[2] != "MaxClockSpeed":
            mhz = _parse_float(parts[2])
            if mhz is not None:
                info.max_frequency = mhz / 1000
        if parts[3] and parts[3] != "Name":
            info.model_name = parts[3].strip()
            info.brand = extract_brand(parts[3])
        if parts[1] and parts[1] != "NumberOfCores":
            cores = _atoi(parts[1])
            if cores is not None:
                info.physical_cores = cores
    return info


def cpu_info_windows() -> CPUInfo:
    """Gather CPU details through ``wmic``; missing details stay empty."""
    base = CPUInfo(logical_cores=_logical_cores(), architecture=_architecture())
    try:
        completed = subprocess.run(
            [
                "wmic",
                "cpu",
                "get",
                "Name,NumberOfCores,NumberOfLogicalProcessors,MaxClockSpeed",
                "/format:csv",
            ],
            capture_output=True,
            text=True,
            errors="replace",
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return base
    return dataclasses.replace(
        parse_wmic_output(completed.stdout),
        logical_cores=base.logical_cores,
        architecture=base.architecture,
    )


def cpu_info_generic() -> CPUInfo:
    """Minimal details for platforms without a specific probe."""
    cores = _logical_cores()
    return CPUInfo(
        model_name="Unknown CPU",
        brand="Unknown",
        architecture=_architecture(),
        physical_cores=cores,
        logical_cores=cores,
    )


def get_cpu_info() -> CPUInfo:
    """CPU details for the running platform."""
    system = platform.system()
    if system == "Darwin":
        return cpu_info_macos()
    if system == "Linux":
        return cpu_info_linux()
    if system == "Windows":
        return cpu_info_windows()
    return cpu_info_generic()