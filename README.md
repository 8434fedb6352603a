# gamemath

Small, dependency-free math types for 2D and 3D games: vectors, 4×4
matrices and quaternions, plus a few scalar helpers. All types are frozen
dataclasses; every operation returns a new object.

## Installation

```
pip install gamemath
```

## Modules

- `gamemath.scalar`: `clamp`, `lerp`, `normalize`, `remap`
- `gamemath.vector2`: `Vector2`
- `gamemath.vector3`: `Vector3` and `orthonormalize`
- `gamemath.matrix`: `Matrix` (OpenGL style, right handed, column major) and `unproject`
- `gamemath.quaternion`: `Quaternion`

## Examples

```python
from gamemath.scalar import clamp, remap
from gamemath.vector2 import Vector2
from gamemath.vector3 import Vector3
from gamemath.matrix import Matrix
from gamemath.quaternion import Quaternion

clamp(12.0, 0.0, 10.0)                 # 10.0
remap(5.0, 0.0, 10.0, 0.0, 100.0)      # 50.0

a = Vector2(3.0, 4.0)
a.length()                             # 5.0
(a + Vector2.one()).normalize()

v = Vector3(1.0, 0.0, 0.0)
v.cross(Vector3(0.0, 1.0, 0.0))        # Vector3(x=0.0, y=0.0, z=1.0)

m = Matrix.translate(1.0, 2.0, 3.0) * Matrix.rotate_z(0.5)
m.invert().determinant()

q = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), 1.0)
axis, angle = q.to_axis_angle()
Vector3(1.0, 0.0, 0.0).rotate_by_quaternion(q)
```

## Notes on behaviour

- Angles are in radians, except `Vector2.angle`, which returns degrees in
  `[0, 360)`. `Vector3.angle` returns a `Vector2` holding the angle in the
  XZ plane and the elevation, both in radians.
- `+`, `-`, `*` and `/` between two vectors (or two quaternions) work
  component by component; `*` between two quaternions is the Hamilton
  product, and between two matrices the matrix product. Scalar operations
  use `scale`, `add_value` and `subtract_value`.
- Normalizing a zero vector or zero quaternion returns it unchanged.
- `Matrix.normalize` divides every element by the determinant.
- Singular or degenerate input raises `ZeroDivisionError`, for example
  `Matrix.invert`, `unproject`, `Vector3.barycenter` and the scalar
  `normalize` and `remap` with an empty range.
- `Quaternion.to_axis_angle` returns an `(axis, angle)` tuple; for a zero
  angle the axis is the x axis. `orthonormalize` returns a tuple of two
  vectors.

## What it does not do

This is a math library only: it has no drawing, windowing, input or audio,
and no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```