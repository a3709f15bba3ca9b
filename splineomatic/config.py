"""Settings for previews, editing and walking, loadable from JSON"""
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Tuple

from .walker import WalkerMode


@dataclass
class PreviewConfig:
    """How a spline is sampled for display.

    Attributes:
        steps_per_curve: Number of samples per curve segment.
        direction_scale: Length of direction lines.
    """

    steps_per_curve: int = 10
    direction_scale: float = 0.5


@dataclass
class SplineConfig:
    """Editing defaults.

    Attributes:
        new_curve_offset: Displacement between points of an appended curve.
            The points are placeholders, callers are expected to move them.
    """

    new_curve_offset: Tuple[float, float, float] = (1.0, 0.0, 0.0)


@dataclass
class WalkerConfig:
    duration: float = 1.0
    mode: str = "once"
    look_forward: bool = False


@dataclass
class Config:
    preview: PreviewConfig = field(default_factory=PreviewConfig)
    spline: SplineConfig = field(default_factory=SplineConfig)
    walker: WalkerConfig = field(default_factory=WalkerConfig)

    @classmethod
    def from_dict(cls, data):
        sections = {f.name: f.default_factory for f in fields(cls)}
        unknown = set(data) - set(sections)
        if unknown:
            raise ValueError(f"unknown config sections: {', '.join(sorted(unknown))}")
        return cls(**{name: _section(factory, data.get(name, {})) for name, factory in sections.items()})


def _section(factory, values):
    if not isinstance(values, dict):
        raise ValueError(f"config section for {factory.__name__} must be an object")
    known = {f.name for f in fields(factory)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"unknown {factory.__name__} keys: {', '.join(sorted(unknown))}")
    try:
        section = factory(**values)
        _check(section)
    except TypeError as exc:
        raise ValueError(f"invalid {factory.__name__}: {exc}") from exc
    return section


def _check(section):
    if isinstance(section, SplineConfig):
        offset = tuple(float(c) for c in section.new_curve_offset)
        if len(offset) != 3:
            raise ValueError("new_curve_offset must have 3 components")
        section.new_curve_offset = offset
    if isinstance(section, PreviewConfig):
        if isinstance(section.steps_per_curve, bool) or not isinstance(section.steps_per_curve, int):
            raise TypeError(f"steps_per_curve must be an integer, got {section.steps_per_curve!r}")
        if section.steps_per_curve < 1:
            raise ValueError("steps_per_curve must be >= 1")
        section.direction_scale = float(section.direction_scale)
    if isinstance(section, WalkerConfig):
        section.duration = float(section.duration)
        WalkerMode.parse(section.mode)


def load_config(path):
    "load `Config` from JSON file"
    with Path(path).open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError("config file must contain an object")
    return Config.from_dict(data)
