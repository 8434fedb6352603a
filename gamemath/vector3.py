"""Three-dimensional vector type with the usual game-math operations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Protocol

from gamemath.vector2 import Vector2

__all__ = ["Vector3", "orthonormalize"]


class _MatrixLike(Protocol):
    m0: float
    m1: float
    m2: float
    m4: float
    m5: float
    m6: float
    m8: float
    m9: float
    m10: float
    m12: float
    m13: float
    m14: float


class _QuaternionLike(Protocol):
    x: float
    y: float
    z: float
    w: float


def _fmin(a: float, b: float) -> float:
    """Smaller of two values, ignoring a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a <= b else b


def _fmax(a: float, b: float) -> float:
    """Larger of two values, ignoring a NaN operand."""
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return a if a >= b else b


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        """Vector with all components equal to 0."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        """Vector with all components equal to 1."""
        return cls(1.0, 1.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_tuple(self) -> tuple[float, float, float]:
        """Components as a ``(x, y, z)`` tuple."""
        return (self.x, self.y, self.z)

    def __add__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def add_value(self, value: float) -> Vector3:
        """Add ``value`` to every component."""
        return Vector3(self.x + value, self.y + value, self.z + value)

    def __sub__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def subtract_value(self, value: float) -> Vector3:
        """Subtract ``value`` from every component."""
        return Vector3(self.x - value, self.y - value, self.z - value)

    def scale(self, factor: float) -> Vector3:
        """Multiply every component by ``factor``."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def __mul__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def cross(self, other: Vector3) -> Vector3:
        """Cross product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def perpendicular(self) -> Vector3:
        """A vector perpendicular to this one.

        The result is the cross product with the cardinal axis along which
        this vector has its smallest absolute component.
        """
        smallest = abs(self.x)
        axis = Vector3(1.0, 0.0, 0.0)
        if abs(self.y) < smallest:
            smallest = abs(self.y)
            axis = Vector3(0.0, 1.0, 0.0)
        if abs(self.z) < smallest:
            axis = Vector3(0.0, 0.0, 1.0)
        return self.cross(axis)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: Vector3) -> float:
        """Dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def distance(self, other: Vector3) -> float:
        """Distance between the two points."""
        return (other - self).length()

    def angle(self, other: Vector3) -> Vector2:
        """Angles in radians of the direction from self to ``other``.

        ``x`` holds the angle in the XZ plane, ``y`` the elevation.
        """
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return Vector2(
            math.atan2(dx, dz),
            math.atan2(dy, math.sqrt(dx * dx + dz * dz)),
        )

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __truediv__(self, other: object) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def normalize(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            length = 1.0
        inverse = 1.0 / length
        return Vector3(self.x * inverse, self.y * inverse, self.z * inverse)

    def transform(self, matrix: _MatrixLike) -> Vector3:
        """Transform this point by a column-major 4x4 matrix."""
        x, y, z = self.x, self.y, self.z
        return Vector3(
            matrix.m0 * x + matrix.m4 * y + matrix.m8 * z + matrix.m12,
            matrix.m1 * x + matrix.m5 * y + matrix.m9 * z + matrix.m13,
            matrix.m2 * x + matrix.m6 * y + matrix.m10 * z + matrix.m14,
        )

    def rotate_by_quaternion(self, q: _QuaternionLike) -> Vector3:
        """Rotate this vector by the quaternion ``q``."""
        x, y, z = self.x, self.y, self.z
        return Vector3(
            x * (q.x * q.x + q.w * q.w - q.y * q.y - q.z * q.z)
            + y * (2 * q.x * q.y - 2 * q.w * q.z)
            + z * (2 * q.x * q.z + 2 * q.w * q.y),
            x * (2 * q.w * q.z + 2 * q.x * q.y)
            + y * (q.w * q.w - q.x * q.x + q.y * q.y - q.z * q.z)
            + z * (-2 * q.w * q.x + 2 * q.y * q.z),
            x * (-2 * q.w * q.y + 2 * q.x * q.z)
            + y * (2 * q.w * q.x + 2 * q.y * q.z)
            + z * (q.w * q.w - q.x * q.x - q.y * q.y + q.z * q.z),
        )

    def lerp(self, other: Vector3, amount: float) -> Vector3:
        """Linear interpolation towards ``other``."""
        return Vector3(
            self.x + amount * (other.x - self.x),
            self.y + amount * (other.y - self.y),
            self.z + amount * (other.z - self.z),
        )

    def reflect(self, normal: Vector3) -> Vector3:
        """Reflect this vector about ``normal``."""
        d = self.dot(normal)
        return Vector3(
            self.x - (2.0 * normal.x) * d,
            self.y - (2.0 * normal.y) * d,
            self.z - (2.0 * normal.z) * d,
        )

    def min(self, other: Vector3) -> Vector3:
        """Component-wise minimum."""
        return Vector3(
            _fmin(self.x, other.x), _fmin(self.y, other.y), _fmin(self.z, other.z)
        )

    def max(self, other: Vector3) -> Vector3:
        """Component-wise maximum."""
        return Vector3(
            _fmax(self.x, other.x), _fmax(self.y, other.y), _fmax(self.z, other.z)
        )

    def barycenter(self, a: Vector3, b: Vector3, c: Vector3) -> Vector3:
        """Barycentric coordinates ``(u, v, w)`` of this point in triangle ``abc``.

        The point is assumed to lie in the triangle's plane. Raises
        ZeroDivisionError for a degenerate triangle.
        """
        v0 = b - a
        v1 = c - a
        v2 = self - a
        d00 = v0.dot(v0)
        d01 = v0.dot(v1)
        d11 = v1.dot(v1)
        d20 = v2.dot(v0)
        d21 = v2.dot(v1)
        denom = d00 * d11 - d01 * d01
        v = (d11 * d20 - d01 * d21) / denom
        w = (d00 * d21 - d01 * d20) / denom
        return Vector3(1.0 - (w + v), v, w)


def orthonormalize(v1: Vector3, v2: Vector3) -> tuple[Vector3, Vector3]:
    """Gram-Schmidt: return ``v1`` normalized and a unit vector orthogonal to it.

    The second result lies in the plane spanned by ``v1`` and ``v2``.
    """
    n1 = v1.normalize()
    vn1 = n1.cross(v2).normalize()
    vn2 = vn1.cross(n1)
    return n1, vn2