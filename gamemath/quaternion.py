"""Quaternion type for 3D rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from gamemath.matrix import Matrix
from gamemath.vector3 import Vector3

__all__ = ["Quaternion"]


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion ``x*i + y*j + z*k + w``."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def identity(cls) -> Quaternion:
        """The identity rotation."""
        return cls(0.0, 0.0, 0.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def add_value(self, value: float) -> Quaternion:
        """Add ``value`` to every component."""
        return Quaternion(
            self.x + value, self.y + value, self.z + value, self.w + value
        )

    def __sub__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def subtract_value(self, value: float) -> Quaternion:
        """Subtract ``value`` from every component."""
        return Quaternion(
            self.x - value, self.y - value, self.z - value, self.w - value
        )

    def length(self) -> float:
        """Euclidean length of the four components."""
        return math.sqrt(
            self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        )

    def normalize(self) -> Quaternion:
        """Unit quaternion in the same direction; the zero quaternion stays zero."""
        length = self.length()
        if length == 0.0:
            length = 1.0
        inverse = 1.0 / length
        return Quaternion(
            self.x * inverse, self.y * inverse, self.z * inverse, self.w * inverse
        )

    def invert(self) -> Quaternion:
        """The multiplicative inverse; the zero quaternion is returned unchanged."""
        length = self.length()
        length_sq = length * length
        if length_sq == 0.0:
            return self
        inverse = 1.0 / length_sq
        return Quaternion(
            self.x * -inverse, self.y * -inverse, self.z * -inverse, self.w * inverse
        )

    def __mul__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        ax, ay, az, aw = self
        bx, by, bz, bw = other
        return Quaternion(
            ax * bw + aw * bx + ay * bz - az * by,
            ay * bw + aw * by + az * bx - ax * bz,
            az * bw + aw * bz + ax * by - ay * bx,
            aw * bw - ax * bx - ay * by - az * bz,
        )

    def scale(self, factor: float) -> Quaternion:
        """Multiply by the scalar ``factor`` taken as a quaternion product of sums."""
        ax, ay, az, aw = self
        m = factor
        return Quaternion(
            ax * m + aw * m + ay * m - az * m,
            ay * m + aw * m + az * m - ax * m,
            az * m + aw * m + ax * m - ay * m,
            aw * m - ax * m - ay * m - az * m,
        )

    def __truediv__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.x / other.x, self.y / other.y, self.z / other.z, self.w / other.w
        )

    def lerp(self, other: Quaternion, amount: float) -> Quaternion:
        """Component-wise linear interpolation towards ``other``."""
        return Quaternion(
            self.x + amount * (other.x - self.x),
            self.y + amount * (other.y - self.y),
            self.z + amount * (other.z - self.z),
            self.w + amount * (other.w - self.w),
        )

    def nlerp(self, other: Quaternion, amount: float) -> Quaternion:
        """Normalized linear interpolation towards ``other``."""
        return self.lerp(other, amount).normalize()

    def slerp(self, other: Quaternion, amount: float) -> Quaternion:
        """Spherical linear interpolation towards ``other``."""
        cos_half_theta = (
            self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w
        )
        if cos_half_theta < 0:
            other = Quaternion(-other.x, -other.y, -other.z, -other.w)
            cos_half_theta = -cos_half_theta

        if abs(cos_half_theta) >= 1.0:
            return self
        if cos_half_theta > 0.95:
            return self.nlerp(other, amount)

        half_theta = math.acos(cos_half_theta)
        sin_half_theta = math.sqrt(1.0 - cos_half_theta * cos_half_theta)
        if abs(sin_half_theta) < 0.001:
            return Quaternion(
                self.x * 0.5 + other.x * 0.5,
                self.y * 0.5 + other.y * 0.5,
                self.z * 0.5 + other.z * 0.5,
                self.w * 0.5 + other.w * 0.5,
            )
        ratio_a = math.sin((1 - amount) * half_theta) / sin_half_theta
        ratio_b = math.sin(amount * half_theta) / sin_half_theta
        return Quaternion(
            self.x * ratio_a + other.x * ratio_b,
            self.y * ratio_a + other.y * ratio_b,
            self.z * ratio_a + other.z * ratio_b,
            self.w * ratio_a + other.w * ratio_b,
        )

    @classmethod
    def from_vector3_to_vector3(cls, source: Vector3, target: Vector3) -> Quaternion:
        """Rotation taking the direction ``source`` onto ``target``."""
        cross = source.cross(target)
        return cls(cross.x, cross.y, cross.z, 1.0 + source.dot(target)).normalize()

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> Quaternion:
        """Quaternion for a rotation matrix.

        Raises ValueError or ZeroDivisionError for matrices that are not
        rotations.
        """
        m = matrix
        if m.m0 > m.m5 and m.m0 > m.m10:
            s = math.sqrt(1.0 + m.m0 - m.m5 - m.m10) * 2
            return cls(
                0.25 * s,
                (m.m4 + m.m1) / s,
                (m.m2 + m.m8) / s,
                (m.m9 - m.m6) / s,
            )
        if m.m5 > m.m10:
            s = math.sqrt(1.0 + m.m5 - m.m0 - m.m10) * 2
            return cls(
                (m.m4 + m.m1) / s,
                0.25 * s,
                (m.m9 + m.m6) / s,
                (m.m2 - m.m8) / s,
            )
        s = math.sqrt(1.0 + m.m10 - m.m0 - m.m5) * 2
        return cls(
            (m.m2 + m.m8) / s,
            (m.m9 + m.m6) / s,
            0.25 * s,
            (m.m4 - m.m1) / s,
        )

    def to_matrix(self) -> Matrix:
        """Rotation matrix for this quaternion."""
        x, y, z, w = self
        a2 = x * x
        b2 = y * y
        c2 = z * z
        ac = x * z
        ab = x * y
        bc = y * z
        ad = w * x
        bd = w * y
        cd = w * z
        return Matrix(
            m0=1 - 2 * (b2 + c2),
            m1=2 * (ab + cd),
            m2=2 * (ac - bd),
            m4=2 * (ab - cd),
            m5=1 - 2 * (a2 + c2),
            m6=2 * (bc + ad),
            m8=2 * (ac + bd),
            m9=2 * (bc - ad),
            m10=1 - 2 * (a2 + b2),
            m15=1.0,
        )

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation by ``angle`` radians about ``axis``; a zero axis gives identity."""
        if axis.length() == 0.0:
            return cls.identity()
        half = angle * 0.5
        unit = axis.normalize()
        s = math.sin(half)
        return cls(unit.x * s, unit.y * s, unit.z * s, math.cos(half)).normalize()

    def to_axis_angle(self) -> tuple[Vector3, float]:
        """Rotation axis and angle in radians.

        For a zero angle the axis is the x axis.
        """
        q = self.normalize() if abs(self.w) > 1.0 else self
        angle = 2.0 * math.acos(q.w)
        den = math.sqrt(1.0 - q.w * q.w)
        if den > 0.0001:
            axis = Vector3(q.x / den, q.y / den, q.z / den)
        else:
            axis = Vector3(1.0, 0.0, 0.0)
        return axis, angle

    @classmethod
    def from_euler(cls, pitch: float, yaw: float, roll: float) -> Quaternion:
        """Rotation from Euler angles in radians, applied in ZYX order."""
        x0 = math.cos(pitch * 0.5)
        x1 = math.sin(pitch * 0.5)
        y0 = math.cos(yaw * 0.5)
        y1 = math.sin(yaw * 0.5)
        z0 = math.cos(roll * 0.5)
        z1 = math.sin(roll * 0.5)
        return cls(
            x1 * y0 * z0 - x0 * y1 * z1,
            x0 * y1 * z0 + x1 * y0 * z1,
            x0 * y0 * z1 - x1 * y1 * z0,
            x0 * y0 * z0 + x1 * y1 * z1,
        )

    def to_euler(self) -> Vector3:
        """Euler angles in radians: rotation about x, y and z."""
        x, y, z, w = self
        roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))
        y0 = 2.0 * (w * y - z * x)
        y0 = min(1.0, max(-1.0, y0))
        pitch = math.asin(y0)
        yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return Vector3(roll, pitch, yaw)

    def transform(self, matrix: Matrix) -> Quaternion:
        """Multiply this quaternion, as a 4-vector, by ``matrix``."""
        m = matrix
        x, y, z, w = self
        return Quaternion(
            m.m0 * x + m.m4 * y + m.m8 * z + m.m12 * w,
            m.m1 * x + m.m5 * y + m.m9 * z + m.m13 * w,
            m.m2 * x + m.m6 * y + m.m10 * z + m.m14 * w,
            m.m3 * x + m.m7 * y + m.m11 * z + m.m15 * w,
        )