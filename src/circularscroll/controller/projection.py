"""
Screen Projection (Geometry Provider)
=====================================
The controller never talks to a rendering engine directly. Everything it needs
from the camera and the transform hierarchy goes through the narrow
`GeometryProvider` interface defined here.

`ScreenProjection` is a self-contained numpy implementation of that interface
for a camera looking down the -z axis at the canvas. It is used by the demo and
the tests; a host embedding the list in a real engine supplies its own provider.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple, runtime_checkable
import math

import numpy as np

from circularscroll.model.geometry_primitives import Vector


@runtime_checkable
class GeometryProvider(Protocol):
    def unproject(self, screen_point: Tuple[float, float], depth: float) -> Vector: ...
    def parent_scale(self) -> float: ...
    def viewport_size(self) -> Tuple[float, float]: ...


@dataclass
class ScreenProjection:
    """
    Pinhole or orthographic camera centred on the canvas.

    Screen coordinates have their origin at the bottom-left corner and grow
    right/up, in pixels. World coordinates are centred on the camera axis.
    """
    pixel_width: float = 1080.0
    pixel_height: float = 1920.0
    # Vertical field of view in degrees. Ignored when orthographic.
    fov_deg: float = 60.0
    orthographic: bool = False
    # Half of the visible world height for the orthographic camera.
    orthographic_size: float = 5.0
    # Lossy scale of the list's parent transform.
    scale: float = 1.0

    def viewport_size(self) -> Tuple[float, float]:
        return self.pixel_width, self.pixel_height

    def parent_scale(self) -> float:
        return self.scale

    def _half_height_at(self, depth: float) -> float:
        if self.orthographic:
            return self.orthographic_size
        return depth * math.tan(math.radians(self.fov_deg) / 2.0)

    def unproject(self, screen_point: Tuple[float, float], depth: float) -> Vector:
        """Screen point (pixels) at `depth` in front of the camera -> world point."""
        half_h = self._half_height_at(depth)
        half_w = half_h * self.pixel_width / self.pixel_height

        # Normalized device coordinates in [-1, 1]
        screen = np.asarray(screen_point, dtype=np.float64)
        size = np.array([self.pixel_width, self.pixel_height])
        ndc = screen / size * 2.0 - 1.0

        world_xy = ndc * np.array([half_w, half_h])
        return Vector(float(world_xy[0]), float(world_xy[1]), float(depth))
