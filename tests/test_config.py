import json

import pytest

from splineomatic.config import Config, PreviewConfig, load_config


def test_defaults():
    cfg = Config()
    assert cfg.preview.steps_per_curve == 10
    assert cfg.preview.direction_scale == 0.5
    assert cfg.spline.new_curve_offset == (1.0, 0.0, 0.0)
    assert cfg.walker.mode == "once"


def test_partial_dict():
    cfg = Config.from_dict({"preview": {"steps_per_curve": 4}, "spline": {"new_curve_offset": [0, 2, 0]}})
    assert cfg.preview == PreviewConfig(steps_per_curve=4)
    assert cfg.spline.new_curve_offset == (0.0, 2.0, 0.0)
    assert cfg.walker.duration == 1.0


@pytest.mark.parametrize(
    "data",
    [
        {"render": {}},
        {"preview": {"colour": "red"}},
        {"preview": {"steps_per_curve": 0}},
        {"preview": []},
        {"walker": {"mode": "bounce"}},
        {"spline": {"new_curve_offset": [1, 2]}},
        {"preview": {"steps_per_curve": "4"}},
        {"preview": {"steps_per_curve": 2.5}},
        {"preview": {"direction_scale": None}},
        {"spline": {"new_curve_offset": 5}},
        {"walker": {"duration": [1]}},
    ],
)
def test_invalid(data):
    with pytest.raises(ValueError):
        Config.from_dict(data)


def test_load_config(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"walker": {"duration": 3.5, "mode": "loop"}}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.walker.duration == 3.5
    assert cfg.walker.mode == "loop"
