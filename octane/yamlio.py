"""Formatting, validating and writing YAML documents."""

from __future__ import annotations

import dataclasses
from os import PathLike
from typing import Any, Mapping, Union

import yaml


class _IndentedDumper(yaml.SafeDumper):
    """Safe dumper that indents sequences nested in mappings."""

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def _plain(data: Any) -> Any:
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        to_dict = getattr(data, "to_dict", None)
        if callable(to_dict):
            return _plain(to_dict())
        return {f.name: _plain(getattr(data, f.name)) for f in dataclasses.fields(data)}
    if isinstance(data, Mapping):
        return {key: _plain(item) for key, item in data.items()}
    if isinstance(data, (list, tuple)):
        return [_plain(item) for item in data]
    return data


def _dump(data: Any) -> str:
    try:
        return yaml.dump(
            _plain(data),
            Dumper=_IndentedDumper,
            indent=2,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    except yaml.YAMLError as exc:
        raise TypeError(f"cannot encode as YAML: {exc}") from exc


def format_yaml(data: Any) -> str:
    """Render data, including dataclasses, as a YAML document with two-space indentation.

    Raises TypeError when the data cannot be represented in YAML.
    """
    return _dump(data)


def validate_yaml(data: Union[str, bytes]) -> Any:
    """Parse a YAML document and return its contents.

    Raises ValueError when the document is not valid YAML.
    """
    try:
        return yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML format: {exc}") from exc


def write_yaml(path: Union[str, PathLike], data: Any) -> None:
    """Write data as YAML to a file, replacing its contents."""
    text = _dump(data)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)