"""
Geometric Primitives for the list's local space.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING
import math

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


class Axis(StrEnum):
    """The axis the list scrolls along."""
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing a position or an offset.
    The z component carries the canvas depth and is never scrolled.
    """
    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if scalar == 0.0: raise ZeroDivisionError
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def on_axis(cls, axis: Axis, value: float) -> Vector:
        """Vector with only the `axis` component set."""
        match axis:
            case Axis.VERTICAL:
                return cls(0.0, value, 0.0)
            case Axis.HORIZONTAL:
                return cls(value, 0.0, 0.0)
        raise ValueError(f"Unknown axis: {axis}")

    @classmethod
    def from_array(cls, arr: npt.ArrayLike) -> Vector:
        values = np.asarray(arr, dtype=np.float64).ravel()
        if values.size == 2:
            return cls(float(values[0]), float(values[1]))
        if values.size == 3:
            return cls(float(values[0]), float(values[1]), float(values[2]))
        raise ValueError(f"Expected 2 or 3 components, got {values.size}.")

    def component(self, axis: Axis) -> float:
        """The scalar that is active on `axis`."""
        match axis:
            case Axis.VERTICAL:
                return self.y
            case Axis.HORIZONTAL:
                return self.x
        raise ValueError(f"Unknown axis: {axis}")

    def project(self, axis: Axis) -> Vector:
        """Keep the `axis` component, zero everything else."""
        return Vector.on_axis(axis, self.component(axis))

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.to_array())))

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])
