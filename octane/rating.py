"""Octane ratings computed from benchmark results."""

from __future__ import annotations

import math
from typing import Mapping

from .baseline import OCTANE_GRADES, BaselineData, OctaneGrade, get_all_baselines
from .report import OctaneRating, ProfessionalScenarios, ProfessionalScore
from .results import (
    CPUResults,
    GPUResults,
    MemoryResults,
    NetworkResults,
    StorageResults,
    TestResults,
)

MIN_RON = 70.0
MAX_RON = 100.0

_WEIGHTS = {"cpu": 0.20, "memory": 0.15, "storage": 0.15, "gpu": 0.25, "network": 0.15}


def _ratio(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics instead of raising on a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _log10(x: float) -> float:
    """Base-10 logarithm that yields -inf for zero and nan for negatives."""
    if math.isnan(x) or x < 0:
        return math.nan
    if x == 0:
        return -math.inf
    return math.log10(x)


def _log_octane(measured: float, reference: float) -> float:
    return MIN_RON + 30 * _log10(_ratio(measured, reference))


def _linear_octane(score: float) -> float:
    return MIN_RON + 30 * (score / 100)


def _clamp(ron: float) -> float:
    if math.isnan(ron):
        return math.nan
    return min(MAX_RON, max(MIN_RON, ron))


def _grade_for(ron: float) -> OctaneGrade:
    for grade in OCTANE_GRADES:
        if ron >= grade.ron:
            return grade
    return OCTANE_GRADES[-1]


def grade_from_ron(ron: float) -> str:
    """Name of the grade a RON falls into."""
    return _grade_for(ron).grade


def description_from_ron(ron: float) -> str:
    """Description of the grade a RON falls into."""
    return _grade_for(ron).description


def color_from_ron(ron: float) -> str:
    """Display colour of the grade a RON falls into."""
    return _grade_for(ron).color


def _rating(ron: float) -> OctaneRating:
    grade = _grade_for(ron)
    return OctaneRating(ron=ron, grade=grade.grade, description=grade.description, color=grade.color)


def _score(value: float, description: str) -> ProfessionalScore:
    return ProfessionalScore(score=value, grade=grade_from_ron(value), description=description)


class OctaneCalculator:
    """Turns test results into octane ratings against a baseline database."""

    def __init__(self, baseline_db: Mapping[str, BaselineData] | None = None) -> None:
        self.baseline_db = get_all_baselines() if baseline_db is None else baseline_db

    @property
    def _baseline(self) -> BaselineData:
        return self.baseline_db["default"]

    def cpu_octane(self, results: CPUResults) -> float:
        """Rate CPU results, weighting single-core 40% and multi-core 60%."""
        baseline = self._baseline.cpu
        single = float(results.tests.single_core.integer_performance.score)
        multi = float(results.tests.multi_core.integer_performance.score)
        overall = _log_octane(single, baseline) * 0.4 + _log_octane(multi, baseline * 8) * 0.6
        if results.temperature.max > 85:
            overall *= 0.95
        return _clamp(overall)

    def memory_octane(self, results: MemoryResults) -> float:
        """Rate memory from bandwidth, main-memory latency and stability."""
        bandwidth = results.bandwidth
        average = (bandwidth.sequential_read + bandwidth.sequential_write + bandwidth.copy) / 3
        bandwidth_octane = _log_octane(average, self._baseline.memory)
        latency_octane = _linear_octane(100 - results.latency.main_memory)
        bonus = 5.0 if results.stability.errors_detected == 0 else 0.0
        return _clamp(bandwidth_octane * 0.7 + latency_octane * 0.3 + bonus)

    def storage_octane(self, results: StorageResults) -> float:
        """Rate storage as the mean rating of its devices; no devices rate 70."""
        if not results.devices:
            return MIN_RON
        baseline = self._baseline.storage
        total = 0.0
        for device in results.devices:
            tests = device.tests
            parts = (
                _log_octane(tests.sequential.read_1mb, baseline),
                _log_octane(tests.sequential.write_1mb, baseline),
                _log_octane(tests.random.read_4k_iops, baseline * 1000),
                _log_octane(tests.random.write_4k_iops, baseline * 1000),
                _linear_octane(100 - (tests.latency.read_avg + tests.latency.write_avg)),
            )
            total += sum(part * 0.2 for part in parts)
        return _clamp(total / len(results.devices))

    def gpu_octane(self, results: GPUResults) -> float:
        """Rate the GPU from graphics and compute, with heat and power penalties."""
        baseline = self._baseline.gpu
        graphics_octane = _log_octane(results.tests.graphics.score, baseline)
        compute_octane = _log_octane(results.tests.compute.single_precision, baseline * 10)
        ml_octane = graphics_octane
        temp_penalty = 0.95 if results.temperature.max > 80 else 1.0
        power_penalty = 0.98 if results.power_consumption.peak > 400 else 1.0
        overall = (graphics_octane * 0.4 + compute_octane * 0.4 + ml_octane * 0.2) * temp_penalty * power_penalty
        return _clamp(overall)

    def network_octane(self, results: NetworkResults) -> float:
        """Rate the network from domestic bandwidth, latency and service reachability.

        With no services listed the connectivity share is undefined and the result is nan.
        """
        domestic = results.bandwidth.domestic.values()
        downloads = [result.download for result in domestic]
        average = sum(downloads) / len(downloads) if downloads else 0.0
        bandwidth_octane = _log_octane(average, self._baseline.network)

        latency_score = 100.0 - 10 * sum(1 for result in domestic if result.latency > 50)
        latency_octane = _linear_octane(latency_score)

        services = results.connectivity.service_accessibility
        reachable = sum(1 for accessible in services.values() if accessible)
        connectivity_octane = MIN_RON + 30 * _ratio(float(reachable), float(len(services)))

        return _clamp(bandwidth_octane * 0.5 + latency_octane * 0.3 + connectivity_octane * 0.2)

    def _components(self, results: TestResults) -> dict[str, float]:
        return {
            "cpu": self.cpu_octane(results.cpu),
            "memory": self.memory_octane(results.memory),
            "storage": self.storage_octane(results.storage),
            "gpu": self.gpu_octane(results.gpu),
            "network": self.network_octane(results.network),
        }

    def calculate_octane(self, results: TestResults) -> OctaneRating:
        """Overall weighted rating of a full run."""
        components = self._components(results)
        overall = sum(components[name] * weight for name, weight in _WEIGHTS.items())
        return _rating(overall)

    def calculate_component_octanes(self, results: TestResults) -> dict[str, OctaneRating]:
        """Separate rating for each component, keyed by component name."""
        return {name: _rating(ron) for name, ron in self._components(results).items()}

    def calculate_professional_scenarios(self, results: TestResults) -> ProfessionalScenarios:
        """Ratings for gaming, AI, server and workstation use."""
        cpu = self.cpu_octane(results.cpu)
        gpu = self.gpu_octane(results.gpu)
        memory = self.memory_octane(results.memory)
        storage = self.storage_octane(results.storage)
        return ProfessionalScenarios(
            gaming=_score(
                gpu * 0.6 + cpu * 0.3 + memory * 0.1,
                "Gaming performance rating based on GPU and CPU capabilities",
            ),
            ai_machine_learning=_score(
                gpu * 0.7 + cpu * 0.2 + memory * 0.1,
                "AI/ML performance rating based on compute capabilities",
            ),
            server_workload=_score(
                cpu * 0.4 + memory * 0.3 + storage * 0.3,
                "Server workload performance rating",
            ),
            workstation=_score(
                cpu * 0.3 + gpu * 0.3 + memory * 0.2 + storage * 0.2,
                "Professional workstation performance rating",
            ),
        )


def calculate_octane(results: TestResults) -> OctaneRating:
    """Overall rating of a full run against the shared baselines."""
    return OctaneCalculator().calculate_octane(results)


def get_octane_scale() -> dict[str, OctaneGrade]:
    """Every grade on the octane scale, keyed by grade name."""
    return {grade.grade: grade for grade in OCTANE_GRADES}