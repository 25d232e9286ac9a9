import dataclasses

import pytest

from octane import baseline


@pytest.fixture(autouse=True)
def restore_db():
    saved = dict(baseline.BASELINE_DB)
    yield
    baseline.BASELINE_DB.clear()
    baseline.BASELINE_DB.update(saved)


def test_default_baseline_values():
    data = baseline.get_baseline("default")
    assert data == baseline.BaselineData(
        cpu=1000.0, memory=25000.0, storage=500.0, gpu=10000.0, network=100.0
    )


def test_unknown_category_falls_back_to_default():
    assert baseline.get_baseline("no-such-tier") == baseline.get_baseline("default")


def test_known_category_is_returned():
    assert baseline.get_baseline("enthusiast").cpu == 4000.0
    assert baseline.get_baseline("entry_level").network == 50.0


def test_update_baseline_adds_category():
    custom = baseline.BaselineData(cpu=1.0, memory=2.0, storage=3.0, gpu=4.0, network=5.0)
    baseline.update_baseline("custom", custom)
    assert baseline.get_baseline("custom") == custom
    assert "custom" in baseline.get_all_baselines()


def test_update_baseline_replaces_default():
    custom = baseline.BaselineData(cpu=2.0)
    baseline.update_baseline("default", custom)
    assert baseline.get_baseline("unknown") == custom


def test_all_baselines_lists_every_category():
    assert set(baseline.get_all_baselines()) == {
        "default",
        "entry_level",
        "mid_range",
        "high_end",
        "enthusiast",
    }


def test_tiers_increase_on_every_metric():
    tiers = ["entry_level", "mid_range", "high_end", "enthusiast"]
    for name in ("cpu", "memory", "storage", "gpu", "network"):
        values = [getattr(baseline.get_baseline(t), name) for t in tiers]
        assert values == sorted(values)
        assert len(set(values)) == len(values)


def test_baseline_data_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        baseline.get_baseline("default").cpu = 5.0