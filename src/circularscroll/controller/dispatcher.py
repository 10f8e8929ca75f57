"""
Motion Dispatch
===============
Turns translator events and button presses into box commands and fans them out
to every box, in collection order.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, TYPE_CHECKING

from circularscroll.controller.input_translator import ContinuousMove, GestureEnd, InputEvent
from circularscroll.model.geometry_primitives import Axis, Vector
from circularscroll.model.settings import ControlMode

if TYPE_CHECKING:
    from circularscroll.model.list_box import Box

logger = logging.getLogger(__name__)


def find_delta_to_center(boxes: Sequence[Box], axis: Axis) -> Vector:
    """
    Find the box closest to the center and return the delta that moves it
    exactly onto the center, on `axis` only.

    On an exact tie the first box in iteration order wins. Without boxes the
    delta is zero.
    """
    min_delta = math.inf
    for box in boxes:
        delta = -box.position.component(axis)
        if abs(delta) < abs(min_delta):
            min_delta = delta

    if math.isinf(min_delta):
        return Vector.zero()
    return Vector.on_axis(axis, min_delta)


class MotionDispatcher:
    def __init__(self, boxes: Sequence[Box], axis: Axis, mode: ControlMode):
        self.boxes = tuple(boxes)
        self.axis = axis
        self.mode = mode

    def dispatch(self, event: Optional[InputEvent]) -> None:
        match event:
            case None:
                return
            case ContinuousMove(delta=delta):
                self.move(delta)
            case GestureEnd(delta=delta):
                self.release(delta)
            case _:
                raise TypeError(f"Unexpected input event: {event!r}")

    def move(self, delta: Vector) -> None:
        for box in self.boxes:
            box.apply_continuous_delta(delta)

    def release_delta(self, raw_delta: Vector) -> Vector:
        if self.mode == ControlMode.ALIGN_TO_CENTER:
            return find_delta_to_center(self.boxes, self.axis)
        return raw_delta

    def release(self, raw_delta: Vector) -> None:
        """The gesture has ended, let every box slide."""
        delta = self.release_delta(raw_delta)
        logger.debug(f"Sliding {len(self.boxes)} boxes by {delta.component(self.axis):.4f}")
        for box in self.boxes:
            box.begin_slide(delta)

    def step(self, forward: bool, count: int = 1) -> None:
        for box in self.boxes:
            box.step_units(count, forward)
