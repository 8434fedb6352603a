"""4x4 matrix type (OpenGL style, right handed, column major) and unprojection."""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import Iterator

from gamemath.vector3 import Vector3

__all__ = ["Matrix", "unproject"]


@dataclass(frozen=True)
class Matrix:
    """An immutable 4x4 matrix.

    Fields are stored column by column: ``m0..m3`` form the first column,
    ``m12..m14`` hold the translation.
    """

    m0: float = 0.0
    m1: float = 0.0
    m2: float = 0.0
    m3: float = 0.0
    m4: float = 0.0
    m5: float = 0.0
    m6: float = 0.0
    m7: float = 0.0
    m8: float = 0.0
    m9: float = 0.0
    m10: float = 0.0
    m11: float = 0.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m15: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    def to_list(self) -> list[float]:
        """The sixteen fields as a list, ``m0`` first."""
        return list(astuple(self))

    @classmethod
    def identity(cls) -> Matrix:
        """The identity matrix."""
        return cls(m0=1.0, m5=1.0, m10=1.0, m15=1.0)

    def determinant(self) -> float:
        """Determinant of the matrix."""
        a00, a01, a02, a03 = self.m0, self.m1, self.m2, self.m3
        a10, a11, a12, a13 = self.m4, self.m5, self.m6, self.m7
        a20, a21, a22, a23 = self.m8, self.m9, self.m10, self.m11
        a30, a31, a32, a33 = self.m12, self.m13, self.m14, self.m15
        return (
            a30 * a21 * a12 * a03 - a20 * a31 * a12 * a03
            - a30 * a11 * a22 * a03 + a10 * a31 * a22 * a03
            + a20 * a11 * a32 * a03 - a10 * a21 * a32 * a03
            - a30 * a21 * a02 * a13 + a20 * a31 * a02 * a13
            + a30 * a01 * a22 * a13 - a00 * a31 * a22 * a13
            - a20 * a01 * a32 * a13 + a00 * a21 * a32 * a13
            + a30 * a11 * a02 * a23 - a10 * a31 * a02 * a23
            - a30 * a01 * a12 * a23 + a00 * a31 * a12 * a23
            + a10 * a01 * a32 * a23 - a00 * a11 * a32 * a23
            - a20 * a11 * a02 * a33 + a10 * a21 * a02 * a33
            + a20 * a01 * a12 * a33 - a00 * a21 * a12 * a33
            - a10 * a01 * a22 * a33 + a00 * a11 * a22 * a33
        )

    def trace(self) -> float:
        """Sum of the diagonal elements."""
        return self.m0 + self.m5 + self.m10 + self.m15

    def transpose(self) -> Matrix:
        """The transposed matrix."""
        values = self.to_list()
        return Matrix(*(values[col * 4 + row] for row in range(4) for col in range(4)))

    def invert(self) -> Matrix:
        """The inverse matrix.

        Raises ZeroDivisionError when the matrix is singular.
        """
        a00, a01, a02, a03 = self.m0, self.m1, self.m2, self.m3
        a10, a11, a12, a13 = self.m4, self.m5, self.m6, self.m7
        a20, a21, a22, a23 = self.m8, self.m9, self.m10, self.m11
        a30, a31, a32, a33 = self.m12, self.m13, self.m14, self.m15

        b00 = a00 * a11 - a01 * a10
        b01 = a00 * a12 - a02 * a10
        b02 = a00 * a13 - a03 * a10
        b03 = a01 * a12 - a02 * a11
        b04 = a01 * a13 - a03 * a11
        b05 = a02 * a13 - a03 * a12
        b06 = a20 * a31 - a21 * a30
        b07 = a20 * a32 - a22 * a30
        b08 = a20 * a33 - a23 * a30
        b09 = a21 * a32 - a22 * a31
        b10 = a21 * a33 - a23 * a31
        b11 = a22 * a33 - a23 * a32

        inv_det = 1.0 / (
            b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06
        )

        return Matrix(
            (a11 * b11 - a12 * b10 + a13 * b09) * inv_det,
            (-a01 * b11 + a02 * b10 - a03 * b09) * inv_det,
            (a31 * b05 - a32 * b04 + a33 * b03) * inv_det,
            (-a21 * b05 + a22 * b04 - a23 * b03) * inv_det,
            (-a10 * b11 + a12 * b08 - a13 * b07) * inv_det,
            (a00 * b11 - a02 * b08 + a03 * b07) * inv_det,
            (-a30 * b05 + a32 * b02 - a33 * b01) * inv_det,
            (a20 * b05 - a22 * b02 + a23 * b01) * inv_det,
            (a10 * b10 - a11 * b08 + a13 * b06) * inv_det,
            (-a00 * b10 + a01 * b08 - a03 * b06) * inv_det,
            (a30 * b04 - a31 * b02 + a33 * b00) * inv_det,
            (-a20 * b04 + a21 * b02 - a23 * b00) * inv_det,
            (-a10 * b09 + a11 * b07 - a12 * b06) * inv_det,
            (a00 * b09 - a01 * b07 + a02 * b06) * inv_det,
            (-a30 * b03 + a31 * b01 - a32 * b00) * inv_det,
            (a20 * b03 - a21 * b01 + a22 * b00) * inv_det,
        )

    def normalize(self) -> Matrix:
        """Every element divided by the determinant.

        Raises ZeroDivisionError when the determinant is zero.
        """
        det = self.determinant()
        return Matrix(*(value / det for value in self))

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(*(a - b for a, b in zip(self, other)))

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product; the order of the operands matters."""
        a = self.to_list()
        b = other.to_list()
        return Matrix(
            *(
                sum(a[i * 4 + k] * b[k * 4 + j] for k in range(4))
                for i in range(4)
                for j in range(4)
            )
        )

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> Matrix:
        """Translation matrix."""
        return cls(m0=1.0, m5=1.0, m10=1.0, m12=x, m13=y, m14=z, m15=1.0)

    @classmethod
    def rotate(cls, axis: Vector3, angle: float) -> Matrix:
        """Rotation by ``angle`` radians about ``axis``."""
        x, y, z = axis.x, axis.y, axis.z
        length_squared = x * x + y * y + z * z
        if length_squared != 1.0 and length_squared != 0.0:
            inverse = 1.0 / math.sqrt(length_squared)
            x *= inverse
            y *= inverse
            z *= inverse

        s = math.sin(angle)
        c = math.cos(angle)
        t = 1.0 - c

        return cls(
            m0=x * x * t + c,
            m1=y * x * t + z * s,
            m2=z * x * t - y * s,
            m3=0.0,
            m4=x * y * t - z * s,
            m5=y * y * t + c,
            m6=z * y * t + x * s,
            m7=0.0,
            m8=x * z * t + y * s,
            m9=y * z * t - x * s,
            m10=z * z * t + c,
            m11=0.0,
            m12=0.0,
            m13=0.0,
            m14=0.0,
            m15=1.0,
        )

    @classmethod
    def rotate_x(cls, angle: float) -> Matrix:
        """Rotation about the x axis by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls(m0=1.0, m5=c, m6=-s, m9=s, m10=c, m15=1.0)

    @classmethod
    def rotate_y(cls, angle: float) -> Matrix:
        """Rotation about the y axis by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls(m0=c, m2=s, m5=1.0, m8=-s, m10=c, m15=1.0)

    @classmethod
    def rotate_z(cls, angle: float) -> Matrix:
        """Rotation about the z axis by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls(m0=c, m1=-s, m4=s, m5=c, m10=1.0, m15=1.0)

    @classmethod
    def rotate_xyz(cls, angles: Vector3) -> Matrix:
        """Rotation from the x, y and z angles (radians) held in ``angles``."""
        cosz = math.cos(-angles.z)
        sinz = math.sin(-angles.z)
        cosy = math.cos(-angles.y)
        siny = math.sin(-angles.y)
        cosx = math.cos(-angles.x)
        sinx = math.sin(-angles.x)
        return cls(
            m0=cosz * cosy,
            m1=sinz * cosy,
            m2=-siny,
            m4=(cosz * siny * sinx) - (sinz * cosx),
            m5=(sinz * siny * sinx) + (cosz * cosx),
            m6=cosy * sinx,
            m8=(cosz * siny * cosx) + (sinz * sinx),
            m9=(sinz * siny * cosx) - (cosz * sinx),
            m10=cosy * cosx,
            m15=1.0,
        )

    @classmethod
    def rotate_zyx(cls, angles: Vector3) -> Matrix:
        """Rotation applied in z, y, x order from the angles (radians) in ``angles``."""
        cz = math.cos(angles.z)
        sz = math.sin(angles.z)
        cy = math.cos(angles.y)
        sy = math.sin(angles.y)
        cx = math.cos(angles.x)
        sx = math.sin(angles.x)
        return cls(
            m0=cz * cy,
            m1=cz * sy * sx - cx * sz,
            m2=sz * sx + cz * cx * sy,
            m3=0.0,
            m4=cy * sz,
            m5=cz * cx + sz * sy * sx,
            m6=cx * sz * sy - cz * sx,
            m7=0.0,
            m8=-sy,
            m9=cy * sx,
            m10=cy * cx,
            m11=0.0,
            m12=0.0,
            m13=0.0,
            m14=0.0,
            m15=1.0,
        )

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> Matrix:
        """Scaling matrix."""
        return cls(m0=x, m5=y, m10=z, m15=1.0)

    @classmethod
    def frustum(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Matrix:
        """Perspective projection from the clipping planes."""
        rl = right - left
        tb = top - bottom
        fn = far - near
        return cls(
            m0=(near * 2.0) / rl,
            m5=(near * 2.0) / tb,
            m8=(right + left) / rl,
            m9=(top + bottom) / tb,
            m10=-(far + near) / fn,
            m11=-1.0,
            m14=-(far * near * 2.0) / fn,
            m15=0.0,
        )

    @classmethod
    def perspective(
        cls, fovy: float, aspect: float, near: float, far: float
    ) -> Matrix:
        """Perspective projection from a vertical field of view in radians."""
        top = near * math.tan(fovy * 0.5)
        bottom = -top
        right = top * aspect
        left = -right
        rl = right - left
        tb = top - bottom
        fn = far - near
        return cls(
            m0=(near * 2.0) / rl,
            m5=(near * 2.0) / tb,
            m8=(right + left) / rl,
            m9=(top + bottom) / tb,
            m10=-(far + near) / fn,
            m11=-1.0,
            m14=-(far * near * 2.0) / fn,
        )

    @classmethod
    def ortho(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Matrix:
        """Orthographic projection."""
        rl = right - left
        tb = top - bottom
        fn = far - near
        return cls(
            m0=2.0 / rl,
            m5=2.0 / tb,
            m10=-2.0 / fn,
            m12=-(left + right) / rl,
            m13=-(top + bottom) / tb,
            m14=-(far + near) / fn,
            m15=1.0,
        )

    @classmethod
    def look_at(cls, eye: Vector3, target: Vector3, up: Vector3) -> Matrix:
        """View matrix for a camera at ``eye`` looking at ``target``."""
        vz = (eye - target).normalize()
        vx = up.cross(vz).normalize()
        vy = vz.cross(vx)
        return cls(
            m0=vx.x,
            m1=vy.x,
            m2=vz.x,
            m3=0.0,
            m4=vx.y,
            m5=vy.y,
            m6=vz.y,
            m7=0.0,
            m8=vx.z,
            m9=vy.z,
            m10=vz.z,
            m11=0.0,
            m12=-vx.dot(eye),
            m13=-vy.dot(eye),
            m14=-vz.dot(eye),
            m15=1.0,
        )


def unproject(source: Vector3, projection: Matrix, view: Matrix) -> Vector3:
    """Map a point from screen space back into object space.

    Raises ZeroDivisionError when the combined view-projection matrix is
    singular or the point maps to infinity.
    """
    inverse = view.multiply(projection).invert()
    x, y, z, w = source.x, source.y, source.z, 1.0
    qx = inverse.m0 * x + inverse.m4 * y + inverse.m8 * z + inverse.m12 * w
    qy = inverse.m1 * x + inverse.m5 * y + inverse.m9 * z + inverse.m13 * w
    qz = inverse.m2 * x + inverse.m6 * y + inverse.m10 * z + inverse.m14 * w
    qw = inverse.m3 * x + inverse.m7 * y + inverse.m11 * z + inverse.m15 * w
    return Vector3(qx / qw, qy / qw, qz / qw)