"""Moving along a spline over time"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)


class WalkerMode(enum.Enum):
    ONCE = "once"
    LOOP = "loop"
    PING_PONG = "ping_pong"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower().replace("-", "_"))
        except ValueError:
            raise ValueError(f"invalid walker mode {value!r}") from None


@dataclass
class WalkerState:
    progress: float
    position: np.ndarray
    direction: Optional[np.ndarray] = None


class SplineWalker:
    """Traverses a spline in given duration.

    Options:
        mode
            ONCE stops at the end,
            LOOP starts over from the beginning,
            PING_PONG turns back at both ends.
        look_forward
            Report direction of movement along with position.

    The host calls `step` with elapsed time whenever it advances.
    """

    def __init__(self, spline, duration, mode=WalkerMode.ONCE, look_forward=False):
        if not duration > 0:
            raise ValueError(f"duration must be positive, got {duration}")
        self.spline = spline
        self.duration = float(duration)
        self.mode = WalkerMode.parse(mode)
        self.look_forward = look_forward
        self.progress = 0.0
        self.going_forward = True

    def step(self, dt):
        if self.going_forward:
            self.progress += dt / self.duration
            if self.progress > 1.0:
                if self.mode is WalkerMode.ONCE:
                    self.progress = 1.0
                elif self.mode is WalkerMode.LOOP:
                    self.progress -= 1.0
                else:
                    self.progress = 2.0 - self.progress
                    self.going_forward = False
                    logger.debug("walker turned back")
        else:
            self.progress -= dt / self.duration
            if self.progress < 0.0:
                self.progress = -self.progress
                self.going_forward = True
                logger.debug("walker turned forward")
        return self.state()

    def state(self):
        position = self.spline.point(self.progress)
        direction = self.spline.direction(self.progress) if self.look_forward else None
        return WalkerState(self.progress, position, direction)
