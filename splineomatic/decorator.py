"""Distributing items along a spline"""
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np


@dataclass
class Placement:
    item: Any
    position: np.ndarray
    direction: Optional[np.ndarray] = None


def decorate(spline, frequency, items, look_forward=False):
    """Place items evenly along the spline.

    Items are placed in order, the whole sequence repeated `frequency` times.
    An open spline gets items at both of its ends,
    a loop leaves the end free because it coincides with the start.

    Returns:
        list of `Placement`, empty if frequency is not positive or there are no items
    """
    items = list(items or ())
    if frequency <= 0 or not items:
        return []

    step = frequency * len(items)
    if spline.loop or step == 1:
        step = 1.0 / step
    else:
        step = 1.0 / (step - 1)

    placements = []
    p = 0
    for _ in range(frequency):
        for item in items:
            t = p * step
            direction = spline.direction(t) if look_forward else None
            placements.append(Placement(item, spline.point(t), direction))
            p += 1
    return placements
