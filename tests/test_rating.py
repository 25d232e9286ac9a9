import math

import pytest

from octane.baseline import BaselineData
from octane.rating import (
    OctaneCalculator,
    calculate_octane,
    color_from_ron,
    description_from_ron,
    get_octane_scale,
    grade_from_ron,
)
from octane.results import (
    BandwidthResult,
    CPUResults,
    DeviceResults,
    GPUResults,
    MemoryResults,
    NetworkResults,
    StorageResults,
    TestResults,
)


def _cpu(single, multi, max_temp=0.0):
    results = CPUResults()
    results.tests.single_core.integer_performance.score = single
    results.tests.multi_core.integer_performance.score = multi
    results.temperature.max = max_temp
    return results


def _gpu(graphics, compute, max_temp=0.0, peak=0.0):
    results = GPUResults()
    results.tests.graphics.score = graphics
    results.tests.compute.single_precision = compute
    results.temperature.max = max_temp
    results.power_consumption.peak = peak
    return results


def _memory(bandwidth, main_latency, errors=0):
    results = MemoryResults()
    results.bandwidth.sequential_read = bandwidth
    results.bandwidth.sequential_write = bandwidth
    results.bandwidth.copy = bandwidth
    results.latency.main_memory = main_latency
    results.stability.errors_detected = errors
    return results


def _network(download=100.0, latency=10.0, services=None):
    results = NetworkResults()
    results.bandwidth.domestic = {"a": BandwidthResult(download=download, latency=latency)}
    results.connectivity.service_accessibility = services if services is not None else {"x": True, "y": False}
    return results


def _device(read, write, read_iops, write_iops, read_lat=1.0, write_lat=1.0):
    device = DeviceResults(name="disk")
    device.tests.sequential.read_1mb = read
    device.tests.sequential.write_1mb = write
    device.tests.random.read_4k_iops = read_iops
    device.tests.random.write_4k_iops = write_iops
    device.tests.latency.read_avg = read_lat
    device.tests.latency.write_avg = write_lat
    return device


def _full_results():
    return TestResults(
        cpu=_cpu(1500, 10000),
        memory=_memory(30000.0, 60.0),
        storage=StorageResults(devices=[_device(800.0, 700.0, 600000.0, 500000.0)]),
        gpu=_gpu(12000.0, 130000.0),
        network=_network(),
    )


@pytest.mark.parametrize(
    "ron, grade",
    [
        (95, "racing_fuel"),
        (100, "racing_fuel"),
        (94.99, "premium_plus"),
        (90, "premium_plus"),
        (85, "premium"),
        (80, "regular_plus"),
        (79.9, "regular"),
        (70, "regular"),
        (math.nan, "regular"),
    ],
)
def test_grade_thresholds(ron, grade):
    assert grade_from_ron(ron) == grade


def test_grade_helpers_agree_with_scale():
    scale = get_octane_scale()
    assert set(scale) == {"racing_fuel", "premium_plus", "premium", "regular_plus", "regular"}
    for name, grade in scale.items():
        assert grade.grade == name
        assert grade_from_ron(grade.ron) == name
        assert description_from_ron(grade.ron) == grade.description
        assert color_from_ron(grade.ron) == grade.color


def test_scale_bottom_grade():
    scale = get_octane_scale()
    assert scale["regular"].ron == 70
    assert scale["racing_fuel"].ron == 95


def test_top_grade_texts():
    assert description_from_ron(99) == "Ultimate performance for extreme workloads"
    assert color_from_ron(99) == "🔥 RED"
    assert color_from_ron(50) == "🔵 BLUE"


def test_cpu_at_baseline_is_minimum():
    calc = OctaneCalculator()
    assert calc.cpu_octane(_cpu(1000, 8000)) == pytest.approx(70.0)


def test_cpu_zero_scores_clamp_to_minimum():
    assert OctaneCalculator().cpu_octane(_cpu(0, 0)) == 70.0


def test_cpu_large_scores_clamp_to_maximum():
    assert OctaneCalculator().cpu_octane(_cpu(10**9, 10**9)) == 100.0


def test_cpu_temperature_penalty():
    calc = OctaneCalculator()
    cool = calc.cpu_octane(_cpu(10000, 80000, max_temp=85))
    hot = calc.cpu_octane(_cpu(10000, 80000, max_temp=86))
    assert hot == pytest.approx(cool * 0.95)


def test_cpu_rating_is_monotonic():
    calc = OctaneCalculator()
    scores = [calc.cpu_octane(_cpu(s, s * 8)) for s in (1200, 2000, 4000, 8000)]
    assert scores == sorted(scores)
    assert all(70 <= s <= 100 for s in scores)


def test_custom_baseline_changes_reference():
    calc = OctaneCalculator({"default": BaselineData(cpu=500.0, memory=1.0, storage=1.0, gpu=1.0, network=1.0)})
    assert calc.cpu_octane(_cpu(500, 4000)) == pytest.approx(70.0)
    assert OctaneCalculator().cpu_octane(_cpu(2000, 16000)) == calc.cpu_octane(_cpu(1000, 8000))


def test_memory_stability_bonus():
    calc = OctaneCalculator()
    clean = calc.memory_octane(_memory(25000.0, 50.0, errors=0))
    faulty = calc.memory_octane(_memory(25000.0, 50.0, errors=1))
    assert clean - faulty == pytest.approx(5.0)


def test_memory_zero_bandwidth_is_minimum():
    assert OctaneCalculator().memory_octane(_memory(0.0, 50.0)) == 70.0


def test_memory_lower_latency_scores_higher():
    calc = OctaneCalculator()
    assert calc.memory_octane(_memory(25000.0, 20.0, 1)) > calc.memory_octane(_memory(25000.0, 80.0, 1))


def test_storage_without_devices_is_minimum():
    assert OctaneCalculator().storage_octane(StorageResults()) == 70.0


def test_storage_averages_devices():
    calc = OctaneCalculator()
    fast = _device(4000.0, 4000.0, 4e6, 4e6)
    slow = _device(600.0, 600.0, 6e5, 6e5)
    both = calc.storage_octane(StorageResults(devices=[fast, slow]))
    alone_fast = calc.storage_octane(StorageResults(devices=[fast]))
    alone_slow = calc.storage_octane(StorageResults(devices=[slow]))
    assert alone_slow <= both <= alone_fast


def test_storage_zero_device_clamps():
    calc = OctaneCalculator()
    assert calc.storage_octane(StorageResults(devices=[_device(0.0, 0.0, 0.0, 0.0)])) == 70.0


def test_gpu_penalties():
    calc = OctaneCalculator()
    base = calc.gpu_octane(_gpu(100000.0, 1e6))
    hot = calc.gpu_octane(_gpu(100000.0, 1e6, max_temp=81))
    hungry = calc.gpu_octane(_gpu(100000.0, 1e6, peak=401))
    assert base == 100.0
    assert hot == pytest.approx(base * 0.95)
    assert hungry == pytest.approx(base * 0.98)


def test_gpu_thresholds_are_strict():
    calc = OctaneCalculator()
    base = calc.gpu_octane(_gpu(100000.0, 1e6))
    assert calc.gpu_octane(_gpu(100000.0, 1e6, max_temp=80, peak=400)) == base


def test_gpu_zero_scores_minimum():
    assert OctaneCalculator().gpu_octane(GPUResults()) == 70.0


def test_network_without_services_is_nan():
    value = OctaneCalculator().network_octane(_network(services={}))
    assert str(value) == "nan"
    assert grade_from_ron(value) == "regular"


def test_network_latency_penalty_lowers_score():
    calc = OctaneCalculator()
    quick = calc.network_octane(_network(download=150.0, latency=10.0))
    slow = calc.network_octane(_network(download=150.0, latency=60.0))
    assert slow < quick
    assert 70 <= slow <= 100


def test_network_more_reachable_services_scores_higher():
    calc = OctaneCalculator()
    some = calc.network_octane(_network(download=120.0, services={"x": True, "y": False}))
    all_up = calc.network_octane(_network(download=120.0, services={"x": True, "y": True}))
    assert all_up > some


def test_overall_rating_is_consistent():
    rating = calculate_octane(_full_results())
    assert rating.grade == grade_from_ron(rating.ron)
    assert rating.description == description_from_ron(rating.ron)
    assert rating.color == color_from_ron(rating.ron)
    assert OctaneCalculator().calculate_octane(_full_results()) == rating


def test_overall_rating_grows_with_cpu():
    weak = _full_results()
    strong = _full_results()
    strong.cpu = _cpu(5000, 40000)
    assert calculate_octane(strong).ron > calculate_octane(weak).ron


def test_component_octanes():
    calc = OctaneCalculator()
    results = _full_results()
    components = calc.calculate_component_octanes(results)
    assert set(components) == {"cpu", "memory", "storage", "gpu", "network"}
    assert components["cpu"].ron == calc.cpu_octane(results.cpu)
    assert components["gpu"].ron == calc.gpu_octane(results.gpu)
    assert components["storage"].ron == calc.storage_octane(results.storage)
    for rating in components.values():
        assert 70 <= rating.ron <= 100
        assert rating.grade == grade_from_ron(rating.ron)


def test_professional_scenarios():
    scenarios = OctaneCalculator().calculate_professional_scenarios(_full_results())
    scores = [scenarios.gaming, scenarios.ai_machine_learning, scenarios.server_workload, scenarios.workstation]
    for score in scores:
        assert 70 <= score.score <= 100
        assert score.grade == grade_from_ron(score.score)
    assert scenarios.server_workload.description == "Server workload performance rating"
    assert scenarios.gaming.description == "Gaming performance rating based on GPU and CPU capabilities"


def test_professional_scenarios_at_maximum():
    results = TestResults(
        cpu=_cpu(10**9, 10**9),
        memory=_memory(1e9, 0.0),
        storage=StorageResults(devices=[_device(1e9, 1e9, 1e12, 1e12, 0.0, 0.0)]),
        gpu=_gpu(1e9, 1e12),
    )
    scenarios = OctaneCalculator().calculate_professional_scenarios(results)
    assert scenarios.workstation.score == pytest.approx(100.0)
    assert scenarios.workstation.grade == "racing_fuel"