import dataclasses

import pytest

from driftpatch import DiffEngine, EngineConfig


def test_defaults():
    cfg = EngineConfig()
    assert cfg.fuzzy_threshold == 1.0
    assert cfg.buffer_lines == 40
    assert cfg.min_window_score == 0.5
    assert cfg.max_unanchored_lines is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"fuzzy_threshold": 1.5},
        {"fuzzy_threshold": -0.1},
        {"min_window_score": 2},
        {"buffer_lines": -1},
        {"max_unanchored_lines": -5},
    ],
)
def test_out_of_range_values_raise(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)


def test_config_is_frozen():
    cfg = EngineConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.buffer_lines = 3  # type: ignore[misc]


def test_engine_exposes_its_config():
    engine = DiffEngine(EngineConfig(fuzzy_threshold=0.8, buffer_lines=5))
    assert engine.fuzzy_threshold == 0.8
    assert engine.buffer_lines == 5
    assert DiffEngine().config == EngineConfig()


def test_engine_carries_no_display_name():
    assert not hasattr(DiffEngine(), "name")
