"""
List Boxes
==========
A box is one positionable slot of the list. The controller only issues the
three commands of the `Box` protocol; how a box animates, clamps or recycles
its content is its own business.

`ListBox` is the reference in-memory implementation. It keeps a local position,
animates slides frame by frame and reports rendering hints derived from the
list's angularity and scale factor.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Optional, Protocol, TYPE_CHECKING, runtime_checkable

import numpy as np

from circularscroll.model.geometry_primitives import Axis, Vector

if TYPE_CHECKING:
    from circularscroll.model.geometry import ListGeometry
    from circularscroll.model.settings import ListSettings


@runtime_checkable
class Box(Protocol):
    @property
    def position(self) -> Vector: ...
    def apply_continuous_delta(self, delta: Vector) -> None: ...
    def begin_slide(self, delta: Vector) -> None: ...
    def step_units(self, count: int, forward: bool) -> None: ...


@dataclass(frozen=True)
class BoxPresentation:
    """Rendering hints of a box at its current position."""
    curve_offset: float
    scale: float


class ListBox:
    """In-memory box driven by a `ListPositionController`."""

    def __init__(
        self,
        position: Optional[Vector] = None,
        index: Optional[int] = None,
        name: str = ""
    ):
        """
        Args:
            position: Initial local position. Ignored when `index` is given.
            index: Slot of the box in the list; the box lays itself out on
                attach, the first box at the top (left) of the list.
            name: Label used in logs.
        """
        self.name = name or (f"box {index}" if index is not None else "")
        self.index = index
        self._position = position if position is not None else Vector.zero()
        self._geometry: Optional[ListGeometry] = None
        self._settings: Optional[ListSettings] = None

        self._slide_remaining = Vector.zero()
        self._slide_frames_left = 0

    def __repr__(self) -> str:
        return f"ListBox(name={self.name!r}, position={self._position})"

    def attach(self, geometry: ListGeometry, settings: ListSettings) -> None:
        """Receive the list constants. Called once by the controller."""
        self._geometry = geometry
        self._settings = settings

        if self.index is not None:
            unit = geometry.unit_spacing.component(settings.axis)
            offset = geometry.box_count // 2 - self.index
            if settings.axis == Axis.HORIZONTAL:
                offset = -offset
            self._position = Vector.on_axis(settings.axis, unit * offset)

    @property
    def position(self) -> Vector:
        return self._position

    @property
    def is_sliding(self) -> bool:
        return self._slide_frames_left > 0

    def _require_attached(self) -> tuple[ListGeometry, ListSettings]:
        if self._geometry is None or self._settings is None:
            raise RuntimeError(f"{self!r} is not attached to a list controller.")
        return self._geometry, self._settings

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def apply_continuous_delta(self, delta: Vector) -> None:
        self._position = self._position + delta

    def begin_slide(self, delta: Vector) -> None:
        _, settings = self._require_attached()
        self._slide_remaining = delta
        self._slide_frames_left = settings.sliding_frames

    def step_units(self, count: int, forward: bool) -> None:
        geometry, settings = self._require_attached()
        sign = 1.0 if forward else -1.0
        unit = geometry.unit_spacing.component(settings.axis)
        step = Vector.on_axis(settings.axis, sign * count * unit)

        # Steps accumulate so that opposite steps cancel each other out
        self._slide_remaining = self._slide_remaining + step
        self._slide_frames_left = settings.sliding_frames

    # ------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------
    def update(self) -> None:
        """Advance the slide by one frame."""
        if self._slide_frames_left <= 0:
            return
        _, settings = self._require_attached()

        self._slide_frames_left -= 1
        if self._slide_frames_left == 0:
            # Land exactly on the target
            move = self._slide_remaining
        else:
            move = self._slide_remaining * settings.sliding_factor

        self._position = self._position + move
        self._slide_remaining = self._slide_remaining - move

    def presentation(self) -> BoxPresentation:
        geometry, settings = self._require_attached()
        axis = settings.axis

        upper = geometry.upper_bound.component(axis)
        t = float(np.clip(self._position.component(axis) / upper, -1.0, 1.0)) if upper else 0.0
        closeness = math.cos(t * math.pi / 2.0)

        # The curve runs along the other axis
        extent = geometry.canvas_extent
        other_extent = extent.x if axis == Axis.VERTICAL else extent.y

        return BoxPresentation(
            curve_offset=settings.angularity * other_extent * (1.0 - closeness),
            scale=1.0 + settings.scale_factor * closeness,
        )
