[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "octane"
version = "0.1.0"
description = "System performance analyzer that rates hardware on an octane-style scale"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["benchmark", "performance", "cpu", "hardware", "rating"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
octane = "octane.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["octane"]

[tool.pytest.ini_options]
addopts = "-ra"
