"""Reference performance levels and the octane grade scale."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BaselineData:
    """Reference values: scores for CPU and GPU, MB/s for memory and storage, Mbps for network."""

    cpu: float = 0.0
    memory: float = 0.0
    storage: float = 0.0
    gpu: float = 0.0
    network: float = 0.0


@dataclass(frozen=True)
class OctaneGrade:
    """One step on the octane scale, starting at ``ron``."""

    ron: float
    grade: str
    description: str
    color: str


BASELINE_DB: dict[str, BaselineData] = {
    "default": BaselineData(cpu=1000.0, memory=25000.0, storage=500.0, gpu=10000.0, network=100.0),
    "entry_level": BaselineData(cpu=500.0, memory=15000.0, storage=150.0, gpu=3000.0, network=50.0),
    "mid_range": BaselineData(cpu=1500.0, memory=35000.0, storage=1000.0, gpu=15000.0, network=200.0),
    "high_end": BaselineData(cpu=2500.0, memory=50000.0, storage=2000.0, gpu=25000.0, network=500.0),
    "enthusiast": BaselineData(cpu=4000.0, memory=70000.0, storage=5000.0, gpu=40000.0, network=1000.0),
}

OCTANE_GRADES: tuple[OctaneGrade, ...] = (
    OctaneGrade(95, "racing_fuel", "Ultimate performance for extreme workloads", "🔥 RED"),
    OctaneGrade(90, "premium_plus", "High performance for demanding applications", "🟠 ORANGE"),
    OctaneGrade(85, "premium", "Good performance for most applications", "🟡 YELLOW"),
    OctaneGrade(80, "regular_plus", "Standard performance for regular use", "🟢 GREEN"),
    OctaneGrade(70, "regular", "Basic performance for light workloads", "🔵 BLUE"),
)


def get_baseline(category: str) -> BaselineData:
    """Return the baseline for a category, or the default one if it is unknown."""
    return BASELINE_DB.get(category, BASELINE_DB["default"])


def update_baseline(category: str, data: BaselineData) -> None:
    """Add or replace the baseline for a category."""
    BASELINE_DB[category] = data


def get_all_baselines() -> dict[str, BaselineData]:
    """Return the live mapping of every baseline category."""
    return BASELINE_DB