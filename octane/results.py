"""Benchmark result structures for every tested component."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Mapping, get_args, get_origin


@dataclass
class Temperature:
    """Temperatures in degrees Celsius."""

    idle: float = 0.0
    load: float = 0.0
    max: float = 0.0


@dataclass
class FrequencyStats:
    """Average clock in MHz and its stability in percent."""

    average_all_cores: float = 0.0
    stability: float = 0.0


@dataclass
class IntegerPerformance:
    score: int = 0
    unit: str = ""
    percentile: int = 0


@dataclass
class FloatingPoint:
    score: float = 0.0
    unit: str = ""
    percentile: int = 0


@dataclass
class Cryptography:
    """AES and SHA throughput in GB/s, RSA in operations per second."""

    aes_256: float = 0.0
    sha256: float = 0.0
    rsa_2048: int = 0


@dataclass
class Compression:
    """Compression throughput in MB/s."""

    gzip: int = 0
    lz4: int = 0
    zstd: int = 0


@dataclass
class SingleCoreTests:
    integer_performance: IntegerPerformance = field(default_factory=IntegerPerformance)
    floating_point: FloatingPoint = field(default_factory=FloatingPoint)
    cryptography: Cryptography = field(default_factory=Cryptography)


@dataclass
class MultiCoreTests:
    integer_performance: IntegerPerformance = field(default_factory=IntegerPerformance)
    floating_point: FloatingPoint = field(default_factory=FloatingPoint)
    compression: Compression = field(default_factory=Compression)


@dataclass
class CPUTests:
    single_core: SingleCoreTests = field(default_factory=SingleCoreTests)
    multi_core: MultiCoreTests = field(default_factory=MultiCoreTests)


@dataclass
class CPUResults:
    test_suite: str = ""
    duration: str = ""
    temperature: Temperature = field(default_factory=Temperature)
    frequencies: FrequencyStats = field(default_factory=FrequencyStats)
    tests: CPUTests = field(default_factory=CPUTests)


@dataclass
class MemoryBandwidth:
    """Memory bandwidth figures in MB/s."""

    sequential_read: float = 0.0
    sequential_write: float = 0.0
    random_read: float = 0.0
    random_write: float = 0.0
    copy: float = 0.0


@dataclass
class MemoryLatency:
    """Access latencies in nanoseconds."""

    l1_cache: float = 0.0
    l2_cache: float = 0.0
    l3_cache: float = 0.0
    main_memory: float = 0.0


@dataclass
class MemoryStability:
    errors_detected: int = 0
    test_duration: str = ""
    memory_tested: float = 0.0
    passes: int = 0


@dataclass
class MemoryResults:
    test_suite: str = ""
    duration: str = ""
    bandwidth: MemoryBandwidth = field(default_factory=MemoryBandwidth)
    latency: MemoryLatency = field(default_factory=MemoryLatency)
    stability: MemoryStability = field(default_factory=MemoryStability)


@dataclass
class SequentialTests:
    """Sequential throughput in MB/s."""

    read_1mb: float = 0.0
    write_1mb: float = 0.0
    read_4k: float = 0.0
    write_4k: float = 0.0


@dataclass
class RandomTests:
    """Random access rates in IOPS."""

    read_4k_iops: float = 0.0
    write_4k_iops: float = 0.0
    mixed_70_30: float = 0.0


@dataclass
class LatencyTests:
    """Storage latencies in milliseconds."""

    read_avg: float = 0.0
    write_avg: float = 0.0
    read_99p: float = 0.0
    write_99p: float = 0.0


@dataclass
class DeviceTests:
    sequential: SequentialTests = field(default_factory=SequentialTests)
    random: RandomTests = field(default_factory=RandomTests)
    latency: LatencyTests = field(default_factory=LatencyTests)


@dataclass
class DeviceResults:
    name: str = ""
    tests: DeviceTests = field(default_factory=DeviceTests)


@dataclass
class StorageResults:
    test_suite: str = ""
    duration: str = ""
    devices: list[DeviceResults] = field(default_factory=list)


@dataclass
class PowerConsumption:
    """Power draw in watts."""

    idle: float = 0.0
    average: float = 0.0
    peak: float = 0.0


@dataclass
class GraphicsAPI:
    score: int = 0
    fps_1080p: int = 0
    fps_1440p: int = 0
    fps_4k: int = 0


@dataclass
class GraphicsTests:
    opengl: GraphicsAPI = field(default_factory=GraphicsAPI)
    directx12: GraphicsAPI = field(default_factory=GraphicsAPI)
    vulkan: GraphicsAPI = field(default_factory=GraphicsAPI)
    score: float = 0.0


@dataclass
class CUDACompute:
    """CUDA throughput in TFLOPS (tensor operations in TOPS)."""

    single_precision: float = 0.0
    half_precision: float = 0.0
    tensor_ops: float = 0.0


@dataclass
class OpenCLCompute:
    """OpenCL throughput in TFLOPS."""

    single_precision: float = 0.0
    double_precision: float = 0.0


@dataclass
class ComputeTests:
    cuda: CUDACompute = field(default_factory=CUDACompute)
    opencl: OpenCLCompute = field(default_factory=OpenCLCompute)
    single_precision: float = 0.0


@dataclass
class ResNet50:
    batch_1: int = 0
    batch_32: int = 0


@dataclass
class BertBase:
    batch_1: int = 0
    batch_16: int = 0


@dataclass
class Inference:
    resnet50_fp32: ResNet50 = field(default_factory=ResNet50)
    bert_base: BertBase = field(default_factory=BertBase)


@dataclass
class SimpleCNN:
    batch_32: int = 0
    batch_128: int = 0


@dataclass
class Training:
    simple_cnn: SimpleCNN = field(default_factory=SimpleCNN)


@dataclass
class MachineLearningTests:
    inference: Inference = field(default_factory=Inference)
    training: Training = field(default_factory=Training)


@dataclass
class VideoEncoding:
    """Encoding speed in frames per second."""

    h264_1080p: int = 0
    h264_4k: int = 0
    h265_1080p: int = 0
    h265_4k: int = 0
    av1_1080p: int = 0
    av1_4k: int = 0


@dataclass
class GPUMemoryTests:
    """Bandwidth in GB/s and latency in microseconds."""

    bandwidth: float = 0.0
    latency: float = 0.0


@dataclass
class GPUTests:
    graphics: GraphicsTests = field(default_factory=GraphicsTests)
    compute: ComputeTests = field(default_factory=ComputeTests)
    machine_learning: MachineLearningTests = field(default_factory=MachineLearningTests)
    video_encoding: VideoEncoding = field(default_factory=VideoEncoding)
    memory: GPUMemoryTests = field(default_factory=GPUMemoryTests)


@dataclass
class GPUResults:
    test_suite: str = ""
    duration: str = ""
    temperature: Temperature = field(default_factory=Temperature)
    power_consumption: PowerConsumption = field(default_factory=PowerConsumption)
    tests: GPUTests = field(default_factory=GPUTests)


@dataclass
class BandwidthResult:
    """Link speeds in Mbps, timings in ms, loss in percent."""

    download: float = 0.0
    upload: float = 0.0
    latency: float = 0.0
    jitter: float = 0.0
    packet_loss: float = 0.0


@dataclass
class NetworkBandwidth:
    domestic: dict[str, BandwidthResult] = field(default_factory=dict)
    international: dict[str, BandwidthResult] = field(default_factory=dict)


@dataclass
class Connectivity:
    dns_resolution: dict[str, float] = field(default_factory=dict)
    service_accessibility: dict[str, bool] = field(default_factory=dict)
    port_scan: dict[str, str] = field(default_factory=dict)


@dataclass
class NetworkResults:
    test_suite: str = ""
    duration: str = ""
    bandwidth: NetworkBandwidth = field(default_factory=NetworkBandwidth)
    connectivity: Connectivity = field(default_factory=Connectivity)


@dataclass
class TestResults:
    """Results of a full run across all components."""

    __test__ = False

    cpu: CPUResults = field(default_factory=CPUResults)
    memory: MemoryResults = field(default_factory=MemoryResults)
    storage: StorageResults = field(default_factory=StorageResults)
    gpu: GPUResults = field(default_factory=GPUResults)
    network: NetworkResults = field(default_factory=NetworkResults)

    def to_dict(self) -> dict[str, Any]:
        """Return the results as plain, JSON-ready data."""
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TestResults":
        """Build results from plain data; unknown keys are ignored.

        Raises TypeError when a value has the wrong type.
        """
        return _build(cls, data, "")


def _zero(tp: Any) -> Any:
    origin = get_origin(tp)
    return (origin or tp)()


def _build(cls: type, data: Any, path: str) -> Any:
    if not isinstance(data, Mapping):
        where = path or cls.__name__
        raise TypeError(f"{where}: expected a mapping, got {type(data).__name__}")
    kwargs = {
        f.name: _convert(f.type, data[f.name], f"{path}.{f.name}" if path else f.name)
        for f in dataclasses.fields(cls)
        if f.name in data
    }
    return cls(**kwargs)


def _convert(tp: Any, value: Any, path: str) -> Any:
    if value is None:
        return _zero(tp)
    if dataclasses.is_dataclass(tp):
        return _build(tp, value, path)
    origin = get_origin(tp)
    if origin is dict:
        _, value_type = get_args(tp)
        if not isinstance(value, Mapping):
            raise TypeError(f"{path}: expected a mapping, got {type(value).__name__}")
        converted = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{path}: keys must be strings, got {type(key).__name__}")
            converted[key] = _convert(value_type, item, f"{path}.{key}")
        return converted
    if origin is list:
        (item_type,) = get_args(tp)
        if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, "__iter__"):
            raise TypeError(f"{path}: expected a list, got {type(value).__name__}")
        return [_convert(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]
    if tp is bool:
        if not isinstance(value, bool):
            raise TypeError(f"{path}: expected a boolean, got {type(value).__name__}")
        return value
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{path}: expected an integer, got {type(value).__name__}")
        return value
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{path}: expected a number, got {type(value).__name__}")
        return float(value)
    if tp is str:
        if not isinstance(value, str):
            raise TypeError(f"{path}: expected a string, got {type(value).__name__}")
        return value
    raise TypeError(f"{path}: unsupported field type {tp!r}")