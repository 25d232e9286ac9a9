"""Application settings and loading them from YAML."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Mapping, Union, get_args, get_origin

import yaml


@dataclass
class OctaneSettings:
    rating_system: str = ""
    scale_max: float = 0.0
    scale_min: float = 0.0
    precision: int = 0


@dataclass
class UploadSettings:
    enabled: bool = False
    server_url: str = ""
    api_key: str = ""
    anonymous: bool = False
    auto_upload: bool = False
    tags: list = field(default_factory=list)


@dataclass
class TestSettings:
    __test__ = False

    boost_mode: bool = False
    fuel_analysis: bool = False
    temperature_monitoring: bool = False
    power_monitoring: bool = False


@dataclass
class Config:
    """Top-level settings."""

    log_level: str = ""
    output_format: str = ""
    progress_bar: bool = False
    temp_dir: str = ""
    theme: str = ""
    octane: OctaneSettings = field(default_factory=OctaneSettings)
    upload: UploadSettings = field(default_factory=UploadSettings)
    tests: TestSettings = field(default_factory=TestSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Config:
        """Build settings from a mapping; unknown keys are ignored.

        Raises TypeError when a value has the wrong type.
        """
        return _section(cls, data, "")


_FIELD_TYPES: dict[type, dict[str, Any]] = {
    OctaneSettings: {"rating_system": str, "scale_max": float, "scale_min": float, "precision": int},
    UploadSettings: {
        "enabled": bool,
        "server_url": str,
        "api_key": str,
        "anonymous": bool,
        "auto_upload": bool,
        "tags": list[str],
    },
    TestSettings: {
        "boost_mode": bool,
        "fuel_analysis": bool,
        "temperature_monitoring": bool,
        "power_monitoring": bool,
    },
    Config: {
        "log_level": str,
        "output_format": str,
        "progress_bar": bool,
        "temp_dir": str,
        "theme": str,
        "octane": OctaneSettings,
        "upload": UploadSettings,
        "tests": TestSettings,
    },
}


def _section(cls: type, data: Any, path: str) -> Any:
    if data is None:
        return cls()
    if not isinstance(data, Mapping):
        raise TypeError(f"{path or 'config'}: expected a mapping, got {type(data).__name__}")
    types = _FIELD_TYPES[cls]
    kwargs = {}
    for f in dataclasses.fields(cls):
        if f.name not in data or data[f.name] is None:
            continue
        where = f"{path}.{f.name}" if path else f.name
        kwargs[f.name] = _value(types[f.name], data[f.name], where)
    return cls(**kwargs)


def _value(tp: Any, value: Any, path: str) -> Any:
    if tp in _FIELD_TYPES:
        return _section(tp, value, path)
    if get_origin(tp) is list:
        (item_type,) = get_args(tp)
        if not isinstance(value, list):
            raise TypeError(f"{path}: expected a list, got {type(value).__name__}")
        return [_value(item_type, item, f"{path}[{i}]") for i, item in enumerate(value)]
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
    if not isinstance(value, str):
        raise TypeError(f"{path}: expected a string, got {type(value).__name__}")
    return value


def load_config(path: Union[str, PathLike]) -> Config:
    """Read settings from a YAML file; an empty file gives the defaults.

    Raises ValueError when the file is not valid YAML or not a mapping.
    """
    with open(path, encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid YAML in {path}: {exc}") from exc
    if data is None:
        return Config()
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: top level must be a mapping")
    return Config.from_dict(data)