"""
List Settings (Configuration Model)
===================================
Holds the startup configuration of the scrolling list.

The settings are fixed once the controller is constructed; there is no
hot-reloading. Every field is validated on creation so a bad configuration
fails at startup instead of mid-gesture.

Classes:
    ControlMode: The three mutually exclusive controlling modes.
    ListSettings: The validated configuration container.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import StrEnum
import logging
from typing import Any, Dict, Optional

from circularscroll.model.geometry_primitives import Axis

logger = logging.getLogger(__name__)


_FLOAT_FIELDS = ("canvas_distance", "divide_factor", "sliding_factor", "angularity", "scale_factor")
_BOOL_FIELDS = ("control_by_button", "align_to_center")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ControlMode(StrEnum):
    """
    Mode                  control_by_button   align_to_center
    -----------------------------------------------------------
    FREE_MOVING           False               False
    ALIGN_TO_CENTER       False               True
    BUTTON_CONTROLLED     True                (ignored)
    """
    FREE_MOVING = "free moving"
    ALIGN_TO_CENTER = "align to center"
    BUTTON_CONTROLLED = "button controlled"


@dataclass(frozen=True)
class ListSettings:
    axis: Axis = Axis.VERTICAL
    # For a perspective camera, the distance between the canvas plane and the camera.
    canvas_distance: float = 100.0
    # Distance between boxes. The larger, the closer.
    divide_factor: float = 2.0
    # Sliding duration in frames. The larger, the longer.
    sliding_frames: int = 35
    # Sliding speed in [0, 1]. The larger, the quicker.
    sliding_factor: float = 0.2
    # Curving of the list in [-1, 1]. Positive curves right (up), negative left (down).
    angularity: float = 0.3
    # Extra scale of the box at the center.
    scale_factor: float = 0.32
    control_by_button: bool = False
    align_to_center: bool = False
    # Expected number of boxes; None accepts any collection.
    box_count: Optional[int] = None

    def __post_init__(self):
        errors = []

        # Accept the axis by name when loaded from JSON
        if not isinstance(self.axis, Axis):
            try:
                object.__setattr__(self, 'axis', Axis(str(self.axis).lower()))
            except ValueError:
                errors.append(f"axis must be one of {[a.value for a in Axis]}, got {self.axis!r}")

        for name in _FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"{name} must be a number, got {value!r}")
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                errors.append(f"{name} must be true or false, got {value!r}")
        if not _is_int(self.sliding_frames):
            errors.append(f"sliding_frames must be an integer, got {self.sliding_frames!r}")
        if self.box_count is not None and not _is_int(self.box_count):
            errors.append(f"box_count must be an integer or null, got {self.box_count!r}")

        # Range checks only make sense on well-typed values
        if not errors:
            if not self.divide_factor > 0.0:
                errors.append(f"divide_factor must be positive, got {self.divide_factor}")
            if self.sliding_frames < 1:
                errors.append(f"sliding_frames must be at least 1, got {self.sliding_frames}")
            if not 0.0 <= self.sliding_factor <= 1.0:
                errors.append(f"sliding_factor must be within [0, 1], got {self.sliding_factor}")
            if not -1.0 <= self.angularity <= 1.0:
                errors.append(f"angularity must be within [-1, 1], got {self.angularity}")
            if self.box_count is not None and self.box_count < 0:
                errors.append(f"box_count must not be negative, got {self.box_count}")

        if errors:
            msg = "Invalid list settings: " + "; ".join(errors)
            logger.error(msg)
            raise ValueError(msg)

    @property
    def mode(self) -> ControlMode:
        if self.control_by_button:
            return ControlMode.BUTTON_CONTROLLED
        if self.align_to_center:
            return ControlMode.ALIGN_TO_CENTER
        return ControlMode.FREE_MOVING

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["axis"] = self.axis.value
        return data

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ListSettings:
        known = set(ListSettings.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown list settings: {', '.join(unknown)}")
        return ListSettings(**data)
