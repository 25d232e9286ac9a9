import pytest

from octane.report import CPUInfo
from octane.yamlio import format_yaml, validate_yaml, write_yaml


def test_nested_mapping_uses_two_space_indent():
    assert format_yaml({"outer": {"inner": 1}}) == "outer:\n  inner: 1\n"


def test_sequence_inside_mapping_is_indented():
    text = format_yaml({"items": [1, 2]})
    assert "\n  - 1\n" in text


def test_round_trip_keeps_order_and_values():
    data = {"b": [1, 2, 3], "a": {"x": "text", "y": 2.5, "z": True}}
    text = format_yaml(data)
    assert validate_yaml(text) == data
    assert text.index("b:") < text.index("a:")


def test_dataclass_uses_serialised_names():
    info = CPUInfo(model_name="Example CPU", base_frequency=3.2, features=["sse", "avx"])
    parsed = validate_yaml(format_yaml(info))
    assert parsed == info.to_dict()
    assert parsed["base_frequency_ghz"] == 3.2


def test_validate_accepts_bytes():
    assert validate_yaml(b"key: value\n") == {"key": "value"}


def test_invalid_yaml_raises_value_error():
    with pytest.raises(ValueError, match="^invalid YAML format: "):
        validate_yaml("a: [1, 2")


def test_unrepresentable_data_raises_type_error():
    with pytest.raises(TypeError):
        format_yaml({"thing": object()})


def test_write_yaml_round_trip(tmp_path):
    target = tmp_path / "report.yaml"
    data = {"metadata": {"version": "1.0.0", "tags": ["a", "b"]}}
    write_yaml(target, data)
    assert validate_yaml(target.read_text(encoding="utf-8")) == data


def test_write_yaml_replaces_existing_file(tmp_path):
    target = tmp_path / "out.yaml"
    write_yaml(target, {"first": 1})
    write_yaml(target, {"second": 2})
    assert validate_yaml(target.read_bytes()) == {"second": 2}