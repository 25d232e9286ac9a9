"""System performance analyzer: CPU benchmarks, platform details and octane-style ratings."""

__version__ = "0.1.0"