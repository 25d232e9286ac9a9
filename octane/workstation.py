"""Workstation performance test scenario."""

from __future__ import annotations

from dataclasses import dataclass, field

from .report import CPUInfo, GPUInfo, MemoryInfo


@dataclass
class WorkstationTest:
    """A workstation scenario over a machine's CPU, memory and GPU."""

    __test__ = False

    cpu: CPUInfo = field(default_factory=CPUInfo)
    memory: MemoryInfo = field(default_factory=MemoryInfo)
    gpu: GPUInfo = field(default_factory=GPUInfo)

    def run(self) -> None:
        """Run the workstation test, announcing its start and end."""
        print("Starting workstation performance test...")
        print("Workstation performance test completed.")

    def generate_report(self) -> None:
        """Announce generation of the workstation report."""
        print("Generating workstation performance report...")