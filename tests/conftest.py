from __future__ import annotations

import pytest

from circularscroll.controller.projection import ScreenProjection
from circularscroll.model.geometry_primitives import Axis, Vector
from circularscroll.model.settings import ListSettings


class RecordingBox:
    """Box double that records every command it receives."""

    def __init__(self, coord: float = 0.0, axis: Axis = Axis.VERTICAL):
        self._position = Vector.on_axis(axis, coord)
        self.calls: list[tuple[str, object]] = []

    @property
    def position(self) -> Vector:
        return self._position

    def apply_continuous_delta(self, delta: Vector) -> None:
        self.calls.append(("move", delta))
        self._position = self._position + delta

    def begin_slide(self, delta: Vector) -> None:
        self.calls.append(("slide", delta))

    def step_units(self, count: int, forward: bool) -> None:
        self.calls.append(("step", (count, forward)))

    def commands(self, name: str) -> list:
        return [arg for kind, arg in self.calls if kind == name]


class FakeButton:
    def __init__(self):
        self.active = None

    def set_active(self, active: bool) -> None:
        self.active = active


@pytest.fixture
def projection() -> ScreenProjection:
    # 100 pixels per world unit, world spans [-5, 5] on both axes
    return ScreenProjection(
        pixel_width=1000.0,
        pixel_height=1000.0,
        orthographic=True,
        orthographic_size=5.0,
    )


@pytest.fixture
def settings() -> ListSettings:
    return ListSettings()


@pytest.fixture
def recording_boxes() -> list[RecordingBox]:
    return [RecordingBox(c) for c in (-3.0, 1.0, 5.0)]
