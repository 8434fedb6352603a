import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gamemath.matrix import Matrix, unproject
from gamemath.vector3 import Vector3


def assert_matrix_close(actual, expected, tol=1e-9):
    assert actual.to_list() == pytest.approx(expected.to_list(), abs=tol)


def assert_vector_close(actual, expected, tol=1e-9):
    assert actual.to_tuple() == pytest.approx(expected.to_tuple(), abs=tol)


def homogeneous(point, matrix):
    x, y, z, w = point.x, point.y, point.z, 1.0
    qx = matrix.m0 * x + matrix.m4 * y + matrix.m8 * z + matrix.m12 * w
    qy = matrix.m1 * x + matrix.m5 * y + matrix.m9 * z + matrix.m13 * w
    qz = matrix.m2 * x + matrix.m6 * y + matrix.m10 * z + matrix.m14 * w
    qw = matrix.m3 * x + matrix.m7 * y + matrix.m11 * z + matrix.m15 * w
    return Vector3(qx / qw, qy / qw, qz / qw)


SAMPLE = Matrix(*range(1, 17))

finite = st.floats(min_value=-100, max_value=100, allow_nan=False)
nonzero = st.floats(min_value=0.5, max_value=10, allow_nan=False)


def test_identity_diagonal():
    identity = Matrix.identity()
    assert identity.trace() == 4.0
    assert identity.determinant() == 1.0
    assert identity.m12 == 0.0 and identity.m1 == 0.0


def test_to_list_order_and_iteration():
    assert SAMPLE.to_list() == [float(i) for i in range(1, 17)]
    assert list(SAMPLE) == SAMPLE.to_list()


def test_transpose_twice_is_original():
    assert SAMPLE.transpose().transpose() == SAMPLE
    assert SAMPLE.transpose().m1 == SAMPLE.m4
    assert SAMPLE.transpose().m12 == SAMPLE.m3


def test_trace_unchanged_by_transpose():
    assert SAMPLE.transpose().trace() == SAMPLE.trace()


def test_add_and_subtract_are_inverse():
    other = Matrix.scale(2, 3, 4)
    assert (SAMPLE + other) - other == SAMPLE
    assert (SAMPLE - SAMPLE) == Matrix()


def test_multiply_by_identity():
    assert SAMPLE.multiply(Matrix.identity()) == SAMPLE
    assert Matrix.identity() * SAMPLE == SAMPLE


def test_mul_operator_matches_multiply():
    a = Matrix.translate(1, 2, 3)
    b = Matrix.rotate_x(0.3)
    assert a * b == a.multiply(b)


def test_mul_with_non_matrix_raises():
    with pytest.raises(TypeError):
        Matrix.identity() * 2


def test_translate_moves_point():
    moved = Vector3(1, 1, 1).transform(Matrix.translate(1, 2, 3))
    assert moved == Vector3(2, 3, 4)


def test_scale_determinant_is_product():
    assert Matrix.scale(2, 3, 4).determinant() == 2 * 3 * 4


def test_singular_matrix_cannot_be_inverted():
    with pytest.raises(ZeroDivisionError):
        SAMPLE.invert()


def test_zero_matrix_cannot_be_normalized():
    with pytest.raises(ZeroDivisionError):
        Matrix().normalize()


def test_normalize_divides_by_determinant():
    m = Matrix.scale(2, 2, 2)
    normalized = m.normalize()
    assert normalized.to_list() == pytest.approx(
        [v / m.determinant() for v in m.to_list()]
    )


def test_translate_inverse():
    assert_matrix_close(Matrix.translate(1, 2, 3).invert(), Matrix.translate(-1, -2, -3))


@given(finite, finite, finite, nonzero, nonzero, nonzero)
def test_invert_round_trip(tx, ty, tz, sx, sy, sz):
    m = Matrix.scale(sx, sy, sz).multiply(Matrix.translate(tx, ty, tz))
    assert_matrix_close(m.multiply(m.invert()), Matrix.identity(), tol=1e-7)


@pytest.mark.parametrize("factory", [Matrix.rotate_x, Matrix.rotate_y, Matrix.rotate_z])
@pytest.mark.parametrize("angle", [0.0, 0.5, math.pi / 2, 2.0, -1.3])
def test_axis_rotations_are_orthonormal(factory, angle):
    m = factory(angle)
    assert_matrix_close(m.multiply(m.transpose()), Matrix.identity())
    assert m.determinant() == pytest.approx(1.0)


@pytest.mark.parametrize("angle", [0.2, 1.0, -2.5])
def test_axis_rotation_conventions(angle):
    assert_matrix_close(
        Matrix.rotate_z(angle), Matrix.rotate(Vector3(0, 0, 1), angle).transpose()
    )
    assert_matrix_close(
        Matrix.rotate_x(angle), Matrix.rotate(Vector3(1, 0, 0), angle).transpose()
    )


def test_rotate_normalizes_axis():
    assert_matrix_close(
        Matrix.rotate(Vector3(0, 0, 5), 0.7), Matrix.rotate(Vector3(0, 0, 1), 0.7)
    )


def test_rotate_preserves_axis():
    axis = Vector3(1, 2, 3)
    rotated = axis.transform(Matrix.rotate(axis, 1.1))
    assert_vector_close(rotated, axis)


def test_rotate_xyz_single_axis_matches():
    assert_matrix_close(Matrix.rotate_xyz(Vector3(0, 0, 0.4)), Matrix.rotate_z(0.4))
    assert_matrix_close(Matrix.rotate_xyz(Vector3(0.4, 0, 0)), Matrix.rotate_x(0.4))


def test_rotate_zyx_is_orthonormal():
    m = Matrix.rotate_zyx(Vector3(0.3, -0.8, 1.2))
    assert_matrix_close(m.multiply(m.transpose()), Matrix.identity())
    assert m.m15 == 1.0


def test_rotate_zyx_of_zero_is_identity():
    assert_matrix_close(Matrix.rotate_zyx(Vector3(0, 0, 0)), Matrix.identity())


def test_perspective_matches_symmetric_frustum():
    fovy, aspect, near, far = 1.0, 16 / 9, 0.1, 100.0
    top = near * math.tan(fovy / 2)
    right = top * aspect
    assert_matrix_close(
        Matrix.perspective(fovy, aspect, near, far),
        Matrix.frustum(-right, right, -top, top, near, far),
    )


def test_perspective_fixed_entries():
    m = Matrix.perspective(1.0, 1.5, 0.1, 50.0)
    assert m.m11 == -1.0
    assert m.m15 == 0.0


def test_ortho_maps_box_to_unit_cube():
    m = Matrix.ortho(-4, 6, -2, 8, 1, 11)
    assert_vector_close(Vector3(-4, -2, -1).transform(m), Vector3(-1, -1, -1))
    assert_vector_close(Vector3(6, 8, -11).transform(m), Vector3(1, 1, 1))


def test_frustum_maps_near_and_far_planes():
    m = Matrix.frustum(-1, 1, -1, 1, 1, 10)
    near = homogeneous(Vector3(1, 1, -1), m)
    far = homogeneous(Vector3(10, 10, -10), m)
    assert_vector_close(near, Vector3(1, 1, -1))
    assert_vector_close(far, Vector3(1, 1, 1))


def test_look_at_puts_eye_at_origin_and_target_ahead():
    eye = Vector3(3, 4, 5)
    target = Vector3(-1, 0, 2)
    view = Matrix.look_at(eye, target, Vector3(0, 1, 0))
    assert_vector_close(eye.transform(view), Vector3(0, 0, 0))
    seen = target.transform(view)
    assert seen.x == pytest.approx(0.0, abs=1e-9)
    assert seen.y == pytest.approx(0.0, abs=1e-9)
    assert seen.z == pytest.approx(-eye.distance(target))


def test_unproject_with_translation_view():
    result = unproject(Vector3(5, 6, 7), Matrix.identity(), Matrix.translate(1, 2, 3))
    assert_vector_close(result, Vector3(4, 4, 4))


def test_unproject_round_trip():
    view = Matrix.look_at(Vector3(2, 3, 10), Vector3(0, 0, 0), Vector3(0, 1, 0))
    projection = Matrix.perspective(1.2, 1.5, 0.5, 100.0)
    point = Vector3(0.5, -1.0, 1.5)
    screen = homogeneous(point, view.multiply(projection))
    assert_vector_close(unproject(screen, projection, view), point, tol=1e-7)


def test_unproject_singular_raises():
    with pytest.raises(ZeroDivisionError):
        unproject(Vector3(1, 2, 3), Matrix(), Matrix.identity())