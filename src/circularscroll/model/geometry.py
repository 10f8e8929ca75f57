"""
List Geometry
=============
Derives, once at startup, the usable canvas extent in the list's local space
and partitions it into per-box unit spacing and bounds.

The minimum screen position is the bottom-left corner of the camera (0, 0), the
maximum the top-right corner. For a perspective camera the distance between the
canvas plane and the camera has to be taken into account, which is why the
corners are unprojected at `canvas_distance`. The world-space difference is then
converted to the local space of the list by dividing by the parent's scale, and
halved to get the maximum coordinate (the list's pivot is at the centre).
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from circularscroll.model.geometry_primitives import Vector

if TYPE_CHECKING:
    from circularscroll.controller.projection import GeometryProvider
    from circularscroll.model.settings import ListSettings

logger = logging.getLogger(__name__)

SHIFT_BOUND_RATIO = 0.3


@dataclass(frozen=True)
class ListGeometry:
    """The constraints of position in the local space of the list."""
    canvas_extent: Vector
    unit_spacing: Vector
    lower_bound: Vector
    upper_bound: Vector
    range_bound: Vector
    shift_bound: Vector
    box_count: int

    @classmethod
    def from_extent(cls, canvas_extent: Vector, divide_factor: float, box_count: int) -> ListGeometry:
        if not divide_factor > 0.0:
            raise ValueError(f"divide_factor must be positive, got {divide_factor}")

        unit = canvas_extent / divide_factor
        half = box_count // 2 + 1
        return cls(
            canvas_extent=canvas_extent,
            unit_spacing=unit,
            lower_bound=unit * -half,
            upper_bound=unit * half,
            range_bound=unit * box_count,
            shift_bound=unit * SHIFT_BOUND_RATIO,
            box_count=box_count,
        )

    def is_finite(self) -> bool:
        return all(
            v.is_finite() for v in (
                self.canvas_extent, self.unit_spacing, self.lower_bound,
                self.upper_bound, self.range_bound, self.shift_bound,
            )
        )


def compute_geometry(
    provider: GeometryProvider,
    settings: ListSettings,
    box_count: int
) -> ListGeometry:
    """
    Compute the geometry constants for `box_count` boxes.

    Raises:
        ValueError: if the parent scale is not positive or the result is not finite.
    """
    if box_count < 0:
        raise ValueError(f"box_count must not be negative, got {box_count}")

    scale = provider.parent_scale()
    if not scale > 0.0:
        msg = f"Parent scale must be positive, got {scale}"
        logger.error(msg)
        raise ValueError(msg)

    width, height = provider.viewport_size()
    depth = settings.canvas_distance
    canvas_size = provider.unproject((width, height), depth) - provider.unproject((0.0, 0.0), depth)
    # Depth is not part of the canvas
    canvas_size = Vector(canvas_size.x, canvas_size.y, 0.0)

    geometry = ListGeometry.from_extent(
        canvas_extent=canvas_size / (2.0 * scale),
        divide_factor=settings.divide_factor,
        box_count=box_count,
    )

    if not geometry.is_finite():
        msg = f"Geometry of the list is not finite: {geometry}"
        logger.error(msg)
        raise ValueError(msg)

    logger.info(
        f"List geometry computed for {box_count} boxes: "
        f"extent=({geometry.canvas_extent.x:.3f}, {geometry.canvas_extent.y:.3f}), "
        f"unit=({geometry.unit_spacing.x:.3f}, {geometry.unit_spacing.y:.3f})"
    )
    return geometry
