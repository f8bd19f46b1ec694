"""
Immutable 2D vector used for every position, velocity and force in the
simulation. Operations always return new vectors.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np


def rad_to_deg(rad: float) -> float:
    return 360 * rad / (2 * math.pi)


def deg_to_rad(deg: float) -> float:
    return (deg / 360) * 2 * math.pi


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Vector2:
        arr = np.asarray(list(values), dtype=float)
        if arr.shape != (2,):
            raise ValueError("vector must have exactly 2 components")
        return cls(float(arr[0]), float(arr[1]))

    def rotated(self, angle: float) -> Vector2:
        """Rotate counter-clockwise by ``angle`` radians."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Angle relative to the x-axis in radians."""
        return math.atan2(self.y, self.x)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def scale(self, k: float) -> Vector2:
        return Vector2(k * self.x, k * self.y)

    def distance_to(self, other: Vector2) -> float:
        return other.add(self.scale(-1)).magnitude()

    def normalized(self) -> Vector2:
        mag = self.magnitude()
        if mag == 0:
            return Vector2.zero()
        return Vector2(self.x / mag, self.y / mag)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def to_list(self) -> List[float]:
        return [self.x, self.y]

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.add(other.scale(-1))

    def __neg__(self) -> Vector2:
        return self.scale(-1)

    def __mul__(self, k: float) -> Vector2:
        return self.scale(k)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return f"Vector2 ({self.x} , {self.y})"
