# octane

A command-line system performance analyzer. It runs synthetic CPU workloads,
reports CPU platform details, and turns benchmark results into an
octane-style rating (RON) from `regular` up to `racing_fuel`.

## Installation

```
pip install .
```

## Command line

Show help (running `octane` with no command does the same):

```
octane --help
```

Run the CPU test suite (all tests, 60 seconds, one thread per CPU):

```
octane cpu
```

Choose the thread count, duration and test type
(`all`, `compute`, `crypto` or `compress`):

```
octane cpu --threads 4 --duration 30s --test crypto
```

Durations take the forms `60s`, `2m`, `1h30m`, `500ms` and so on. An invalid
duration or an unknown test type is reported and the command exits with
status 1.

Show CPU platform information (model, brand, cores, frequencies, caches,
features, TDP). It is gathered with `sysctl` on macOS, from `/proc/cpuinfo`
on Linux and with `wmic` on Windows:

```
octane cpu info
```

Global options:

- `-c/--config PATH` reads a YAML settings file; without it, `~/.octane.yaml`
  is read if present. A file given with `-c` that cannot be read is reported
  on stderr; a missing default file is only mentioned with `--verbose`.
- `-v/--verbose` turns on verbose output.

## Library use

Rate a set of results:

```python
from octane.results import TestResults
from octane.rating import OctaneCalculator

results = TestResults.from_dict(data)
calculator = OctaneCalculator()
rating = calculator.calculate_octane(results)
print(rating.ron, rating.grade, rating.color)

per_component = calculator.calculate_component_octanes(results)
scenarios = calculator.calculate_professional_scenarios(results)
```

Modules:

- `octane.results`: dataclasses for CPU, memory, storage, GPU and network
  results; `TestResults.to_dict()` and `TestResults.from_dict()`
- `octane.rating`: `OctaneCalculator`, `calculate_octane`, `get_octane_scale`,
  `grade_from_ron`, `description_from_ron`, `color_from_ron`
- `octane.baseline`: reference baselines per tier (`default`, `entry_level`,
  `mid_range`, `high_end`, `enthusiast`) with `get_baseline`,
  `update_baseline`, `get_all_baselines`
- `octane.benchmark`: `execute_cpu_test(threads, duration, test_type)`,
  `parse_duration` and the individual workloads
- `octane.cpuinfo`: `get_cpu_info()`, plus `parse_proc_cpuinfo` and
  `parse_wmic_output` for parsing captured output
- `octane.report`: dataclasses for a full report and platform details
- `octane.config`: `Config` and `load_config(path)`
- `octane.yamlio`: `format_yaml`, `validate_yaml`, `write_yaml`
- `octane.uploader`: `anonymize`, `anonymize_json`, `anonymize_string`, and
  `Uploader(server_url, timeout).upload(data)`, which POSTs JSON and raises
  `UploadError` on any status other than 200
- `octane.database`: `Database` over SQLite, with `initialize_database` to
  create tables for `TestResult`, `SystemInfoRecord` and `UploadRecord`
- `octane.scripts`: `ScriptRunner` runs a script with `python3` and returns
  its combined output
- `octane.progress`, `octane.colors`, `octane.formatting`: terminal helpers

## Rating scale

| RON  | Grade          | Colour    |
|------|----------------|-----------|
| ≥ 95 | racing_fuel    | 🔥 RED    |
| ≥ 90 | premium_plus   | 🟠 ORANGE |
| ≥ 85 | premium        | 🟡 YELLOW |
| ≥ 80 | regular_plus   | 🟢 GREEN  |
| < 80 | regular        | 🔵 BLUE   |

Component ratings are clamped to the range 70–100.

## What it does not do

- Only the CPU is benchmarked. Memory, storage, GPU and network results can
  be rated, but must be supplied as data; nothing here measures them.
- The cryptography and compression figures are simulated: the workloads fill
  buffers rather than running AES, SHA-256, RSA, gzip, LZ4 or Zstd. The
  temperature and frequency figures in CPU results are fixed values.
- The command line has no commands for reports, uploads or stored results;
  those are available only through the library.
- `WorkstationTest` only prints that it started and finished.
- Settings read from the config file are not yet used by any command.

## Running the tests

```
pip install .[test]
pytest
```