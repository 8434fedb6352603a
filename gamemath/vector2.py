"""Two-dimensional vector type with the usual game-math operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

__all__ = ["Vector2"]


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        """Vector with both components equal to 0."""
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        """Vector with both components equal to 1."""
        return cls(1.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def add_value(self, value: float) -> Vector2:
        """Add ``value`` to both components."""
        return Vector2(self.x + value, self.y + value)

    def __sub__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def subtract_value(self, value: float) -> Vector2:
        """Subtract ``value`` from both components."""
        return Vector2(self.x - value, self.y - value)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_sqr(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vector2) -> float:
        """Dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vector2) -> float:
        """Distance between the two points."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def angle(self, other: Vector2) -> float:
        """Angle in degrees, in ``[0, 360)``, of the direction from self to ``other``."""
        result = math.degrees(math.atan2(other.y - self.y, other.x - self.x))
        if result < 0:
            result += 360.0
        return result

    def scale(self, factor: float) -> Vector2:
        """Multiply both components by ``factor``."""
        return Vector2(self.x * factor, self.y * factor)

    def __mul__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x * other.x, self.y * other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __truediv__(self, other: object) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x / other.x, self.y / other.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            return Vector2(self.x / length, self.y / length)
        return Vector2(0.0, 0.0)

    def lerp(self, other: Vector2, amount: float) -> Vector2:
        """Linear interpolation towards ``other``."""
        return Vector2(
            self.x + amount * (other.x - self.x),
            self.y + amount * (other.y - self.y),
        )

    def reflect(self, normal: Vector2) -> Vector2:
        """Reflect this vector about ``normal``."""
        d = self.dot(normal)
        return Vector2(
            self.x - (2.0 * normal.x) * d,
            self.y - (2.0 * normal.y) * d,
        )

    def rotate(self, angle: float) -> Vector2:
        """Rotate counter-clockwise by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector2(self.x * c - self.y * s, self.x * s + self.y * c)

    def move_towards(self, target: Vector2, max_distance: float) -> Vector2:
        """Step towards ``target`` by at most ``max_distance``."""
        dx = target.x - self.x
        dy = target.y - self.y
        value = dx * dx + dy * dy
        if value == 0 or (max_distance >= 0 and value <= max_distance * max_distance):
            return target
        dist = math.sqrt(value)
        return Vector2(
            self.x + dx / dist * max_distance,
            self.y + dy / dist * max_distance,
        )