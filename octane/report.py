"""Structures describing a full performance report and the platform it ran on."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from .results import TestResults


@dataclass
class CPUInfo:
    """Details of the CPU platform; frequencies in GHz, temperature in Celsius."""

    model_name: str = ""
    brand: str = ""
    architecture: str = ""
    physical_cores: int = 0
    logical_cores: int = 0
    base_frequency: float = 0.0
    max_frequency: float = 0.0
    current_frequency: float = 0.0
    current_temperature: float = 0.0
    cache_l1_data: str = ""
    cache_l1_instruction: str = ""
    cache_l2: str = ""
    cache_l3: str = ""
    features: list[str] = field(default_factory=list)
    tdp: int = 0
    family: int = 0
    model: int = 0
    stepping: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the information keyed by its serialised field names."""
        return {
            "model_name": self.model_name,
            "brand": self.brand,
            "architecture": self.architecture,
            "physical_cores": self.physical_cores,
            "logical_cores": self.logical_cores,
            "base_frequency_ghz": self.base_frequency,
            "max_frequency_ghz": self.max_frequency,
            "current_frequency_ghz": self.current_frequency,
            "current_temperature_celsius": self.current_temperature,
            "cache_l1_data": self.cache_l1_data,
            "cache_l1_instruction": self.cache_l1_instruction,
            "cache_l2": self.cache_l2,
            "cache_l3": self.cache_l3,
            "features": list(self.features),
            "tdp_watts": self.tdp,
            "family": self.family,
            "model": self.model,
            "stepping": self.stepping,
        }


@dataclass
class Metadata:
    version: str = ""
    test_id: str = ""
    timestamp: str = ""
    user: str = ""
    hostname: str = ""
    duration: str = ""
    upload_consent: bool = False
    tags: list[str] = field(default_factory=list)


@dataclass
class HostInfo:
    os: str = ""
    kernel: str = ""
    architecture: str = ""
    hostname: str = ""
    uptime: str = ""
    timezone: str = ""


@dataclass
class CPUCores:
    physical: int = 0
    logical: int = 0


@dataclass
class CPUFrequencies:
    """Clock speeds in MHz."""

    base: int = 0
    boost: int = 0


@dataclass
class CPUCache:
    l1d: str = ""
    l1i: str = ""
    l2: str = ""
    l3: str = ""


@dataclass
class MemorySlots:
    used: int = 0
    total: int = 0


@dataclass
class MemoryModule:
    """One installed module; size in MB."""

    size: int = 0
    manufacturer: str = ""
    part_number: str = ""


@dataclass
class MemoryInfo:
    """Installed memory; sizes in MB, frequency in MHz."""

    total: int = 0
    available: int = 0
    type: str = ""
    frequency: int = 0
    timing: str = ""
    slots: MemorySlots = field(default_factory=MemorySlots)
    modules: list[MemoryModule] = field(default_factory=list)


@dataclass
class StorageInfo:
    """A storage device; sizes in MB, health in percent, temperature in Celsius."""

    name: str = ""
    model: str = ""
    type: str = ""
    interface: str = ""
    capacity: int = 0
    used: int = 0
    health: int = 0
    temperature: int = 0


@dataclass
class GPUMemory:
    """Total in MB, bandwidth in GB/s, bus width in bits."""

    total: int = 0
    type: str = ""
    bandwidth: int = 0
    bus_width: int = 0


@dataclass
class GPUFrequencies:
    """Clock speeds in MHz."""

    base: int = 0
    boost: int = 0
    memory: int = 0


@dataclass
class GPUPower:
    """Power figures in watts."""

    tdp: int = 0
    current: int = 0


@dataclass
class GPUDriver:
    version: str = ""
    cuda_version: str = ""
    opengl_version: str = ""
    vulkan_version: str = ""


@dataclass
class GPUInfo:
    index: int = 0
    name: str = ""
    architecture: str = ""
    pci_bus: str = ""
    cuda_cores: int = 0
    rt_cores: int = 0
    tensor_cores: int = 0
    memory: GPUMemory = field(default_factory=GPUMemory)
    frequencies: GPUFrequencies = field(default_factory=GPUFrequencies)
    power: GPUPower = field(default_factory=GPUPower)
    temperature: int = 0
    driver: GPUDriver = field(default_factory=GPUDriver)


_OPTIONAL_NETWORK_FIELDS = ("ipv4", "ipv6", "ssid", "signal")


@dataclass
class NetworkInfo:
    """A network interface; speed in Mbps, signal in dBm."""

    name: str = ""
    type: str = ""
    mac: str = ""
    model: str = ""
    driver: str = ""
    speed: int = 0
    duplex: str = ""
    status: str = ""
    ipv4: str = ""
    ipv6: str = ""
    ssid: str = ""
    signal: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the interface as a mapping, leaving out empty optional fields."""
        data = dataclasses.asdict(self)
        for key in _OPTIONAL_NETWORK_FIELDS:
            if not data[key]:
                del data[key]
        return data


@dataclass
class SystemInfo:
    host: HostInfo = field(default_factory=HostInfo)
    cpu: CPUInfo = field(default_factory=CPUInfo)
    memory: MemoryInfo = field(default_factory=MemoryInfo)
    storage: list[StorageInfo] = field(default_factory=list)
    gpu: list[GPUInfo] = field(default_factory=list)
    network: list[NetworkInfo] = field(default_factory=list)


@dataclass
class OctaneRating:
    ron: float = 0.0
    grade: str = ""
    description: str = ""
    color: str = ""


@dataclass
class ProfessionalScore:
    score: float = 0.0
    grade: str = ""
    description: str = ""


@dataclass
class ProfessionalScenarios:
    gaming: ProfessionalScore = field(default_factory=ProfessionalScore)
    ai_machine_learning: ProfessionalScore = field(default_factory=ProfessionalScore)
    server_workload: ProfessionalScore = field(default_factory=ProfessionalScore)
    workstation: ProfessionalScore = field(default_factory=ProfessionalScore)


@dataclass
class Scores:
    overall: float = 0.0
    breakdown: dict[str, float] = field(default_factory=dict)
    professional_scenarios: ProfessionalScenarios = field(default_factory=ProfessionalScenarios)


@dataclass
class SimilarSystem:
    hostname: str = ""
    overall_score: float = 0.0
    cpu_model: str = ""
    gpu_model: str = ""
    location: str = ""
    test_date: str = ""


@dataclass
class Recommendation:
    category: str = ""
    suggestion: str = ""
    impact: str = ""


@dataclass
class Comparisons:
    percentile_ranking: int = 0
    similar_systems_count: int = 0
    similar_systems: list[SimilarSystem] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)


@dataclass
class FuelOptimizationTip:
    category: str = ""
    tip: str = ""
    octane_boost: str = ""


@dataclass
class Recommendations:
    fuel_optimization_tips: list[FuelOptimizationTip] = field(default_factory=list)


@dataclass
class UploadInfo:
    uploaded: bool = False
    upload_time: str = ""
    server: str = ""
    anonymized: bool = False
    report_id: str = ""


@dataclass
class OctaneRatings:
    overall: OctaneRating = field(default_factory=OctaneRating)
    breakdown: dict[str, OctaneRating] = field(default_factory=dict)


@dataclass
class Report:
    """A complete performance report."""

    metadata: Metadata = field(default_factory=Metadata)
    system_info: SystemInfo = field(default_factory=SystemInfo)
    test_results: TestResults = field(default_factory=TestResults)
    scores: Scores = field(default_factory=Scores)
    comparisons: Comparisons = field(default_factory=Comparisons)
    recommendations: Recommendations = field(default_factory=Recommendations)
    upload_info: UploadInfo = field(default_factory=UploadInfo)
    octane_ratings: OctaneRatings = field(default_factory=OctaneRatings)

    def to_dict(self) -> dict[str, Any]:
        """Return the report as plain data ready for YAML or JSON output."""
        system = self.system_info
        return {
            "metadata": dataclasses.asdict(self.metadata),
            "system_info": {
                "host": dataclasses.asdict(system.host),
                "cpu": system.cpu.to_dict(),
                "memory": dataclasses.asdict(system.memory),
                "storage": [dataclasses.asdict(device) for device in system.storage],
                "gpu": [dataclasses.asdict(gpu) for gpu in system.gpu],
                "network": [iface.to_dict() for iface in system.network],
            },
            "test_results": self.test_results.to_dict(),
            "scores": dataclasses.asdict(self.scores),
            "comparisons": dataclasses.asdict(self.comparisons),
            "recommendations": dataclasses.asdict(self.recommendations),
            "upload_info": dataclasses.asdict(self.upload_info),
            "octane_ratings": dataclasses.asdict(self.octane_ratings),
        }