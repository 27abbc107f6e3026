import math

import pytest

from gamemaths.matrices import (
    Matrix2,
    Matrix3,
    Matrix4,
    direction_to_euler_angles,
    euler_angles_to_direction,
)
from gamemaths.vectors import Vector2, Vector3, Vector4

PI = math.pi


def _flat(matrix):
    return [value for row in matrix for value in row]


def test_euler_angles_x():
    assert Matrix3.from_angle_x(PI) == Matrix3.from_euler_angles(Vector3(PI, 0.0, 0.0))


def test_euler_angles_y():
    assert Matrix3.from_angle_y(PI) == Matrix3.from_euler_angles(Vector3(0.0, PI, 0.0))


def test_euler_angles_z():
    assert Matrix3.from_angle_z(PI) == Matrix3.from_euler_angles(Vector3(0.0, 0.0, PI))


def test_euler_angles_all():
    from_angles = Matrix3.from_euler_angles([PI, PI, PI])
    from_multiply = Matrix3.from_angle_x(PI) @ Matrix3.from_angle_y(PI) @ Matrix3.from_angle_z(PI)
    assert from_multiply - Matrix3.EPSILON <= from_angles
    assert from_multiply + Matrix3.EPSILON >= from_angles


def test_determinants():
    mat2 = Matrix2.from_values(2.0, 1.0, -1.0, 3.0)
    mat3 = Matrix3.from_values(3.0, 4.0, 6.0, 7.0, 8.0, 9.0, 2.0, 1.0, 3.0)
    mat4 = Matrix4.from_values(
        1.0, 2.0, 3.0, 4.0,
        6.0, 7.0, 3.0, 4.0,
        3.0, 2.0, 7.0, 9.0,
        10.0, 11.0, 5.0, 4.0,
    )
    assert mat2.det() == 7.0
    assert mat3.determinant() == -21.0
    assert mat4.determinant() == 130.0


def test_from_rows():
    r0 = Vector3(3.0, 4.0, 6.0)
    r1 = Vector3(7.0, 8.0, 9.0)
    r2 = Vector3(2.0, 1.0, 3.0)
    assert Matrix3.from_rows(r0, r1, r2) == Matrix3.from_values(
        3.0, 4.0, 6.0, 7.0, 8.0, 9.0, 2.0, 1.0, 3.0
    )


def test_from_columns():
    c0 = Vector3(3.0, 7.0, 2.0)
    c1 = Vector3(4.0, 8.0, 1.0)
    c2 = Vector3(6.0, 9.0, 3.0)
    assert Matrix3.from_columns(c0, c1, c2) == Matrix3.from_values(
        3.0, 4.0, 6.0, 7.0, 8.0, 9.0, 2.0, 1.0, 3.0
    )


def test_inverses():
    mat2 = Matrix2.from_values(2.0, 5.0, -4.0, 2.0)
    res2 = mat2.inverted() @ mat2
    mat3 = Matrix3.from_values(3.0, 4.0, 6.0, 7.0, 8.0, 9.0, 2.0, 1.0, 3.0)
    res3 = mat3.inverted() @ mat3
    mat4 = Matrix4.from_values(
        5.0, -2.0, 1.0, 23.0,
        0.0, 3.0, 4.5, 5.5,
        3.3, 4.5, 1.2, 0.7,
        4.5, 6.6, 7.4, 8.8,
    )
    res4 = mat4.inverted() @ mat4

    assert Matrix2.IDENTITY - Matrix2.EPSILON <= res2 <= Matrix2.IDENTITY + Matrix2.EPSILON
    assert Matrix3.IDENTITY - Matrix3.EPSILON <= res3 <= Matrix3.IDENTITY + Matrix3.EPSILON
    assert Matrix4.IDENTITY - Matrix4.EPSILON <= res4 <= Matrix4.IDENTITY + Matrix4.EPSILON

    assert _flat(res2) == pytest.approx(_flat(Matrix2.IDENTITY), abs=1e-9)
    assert _flat(res3) == pytest.approx(_flat(Matrix3.IDENTITY), abs=1e-9)
    assert _flat(res4) == pytest.approx(_flat(Matrix4.IDENTITY), abs=1e-9)


def test_axis_angle():
    axis = Vector3(0.0, 0.0, math.sqrt(0.5))
    result = Matrix3.from_angle_and_axis(-PI / 4.0, axis)
    expected = Matrix3.from_values(
        0.70710677, 0.70710677, 0.0,
        -0.70710677, 0.70710677, 0.0,
        0.0, 0.0, 1.0,
    )
    assert _flat(result) == pytest.approx(_flat(expected), rel=1e-6, abs=1e-7)


def test_axis_angle_zero_is_identity():
    assert Matrix3.from_angle_and_axis(0.0, [1, 2, 3]) == Matrix3.IDENTITY


def test_identity_products():
    vector2 = Vector2(15.0, 6.7)
    vector3 = Vector3(56.7, 125.5, 197.2)
    vector4 = Vector4(653.0, 56.8, 328.5, 674.6)
    assert Matrix2.IDENTITY @ vector2 == vector2
    assert Matrix3.IDENTITY @ vector3 == vector3
    assert Matrix4.IDENTITY @ vector4 == vector4


def test_constants_are_independent_copies():
    first = Matrix3.ONE
    first.x.normalise()
    assert first.x.magnitude() == pytest.approx(1.0)
    assert Matrix3.ONE == Matrix3.from_values(1, 1, 1, 1, 1, 1, 1, 1, 1)


def test_matrix3_transposed_twice_is_original():
    mat = Matrix3.from_values(1, 2, 3, 4, 5, 6, 7, 8, 10)
    assert mat.transposed().transposed() == mat
    assert mat.transposed().c0() == mat.x


def test_matrix3_singular_inverse_returns_copy():
    mat = Matrix3.from_values(1, 2, 3, 2, 4, 6, 7, 8, 9)
    inverse = mat.inverted()
    assert inverse == mat
    assert inverse is not mat


def test_matrix4_singular_inverse_returns_copy():
    mat = Matrix4.ONE
    assert mat.inverted() == mat


def test_matrix2_singular_inverse_gives_infinities():
    inverse = Matrix2.from_values(1.0, 2.0, 2.0, 4.0).inverted()
    assert inverse.x.x == math.inf
    assert inverse.x.y == -math.inf
    assert inverse.y.x == -math.inf
    assert inverse.y.y == math.inf


def test_matrix4_transpose_in_place():
    mat = Matrix4.from_values(*range(16))
    expected = mat.transposed()
    mat.transpose()
    assert mat == expected
    assert mat.c0() == Vector4(0, 1, 2, 3)


def test_extend_truncate_round_trip():
    mat3 = Matrix3.from_values(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert mat3.extend().truncate() == mat3
    mat2 = Matrix2.from_values(1, 2, 3, 4)
    assert mat2.extend().truncate() == mat2
    assert mat3.extend().determinant() == mat3.determinant()


def test_to_lists():
    mat = Matrix4.from_values(*range(16))
    assert mat.to_lists()[1] == [4.0, 5.0, 6.0, 7.0]
    assert Matrix4.from_rows(*mat.to_lists()) == mat


def test_scalar_and_elementwise_ops():
    mat = Matrix3.from_values(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert mat * 2 == mat + mat
    assert 2 * mat == mat + mat
    assert (mat * 4) / 4 == mat
    assert mat - mat == Matrix3()


def test_scale_matrix_scales_vector():
    vector = Vector3(1.0, -2.0, 3.0)
    assert Matrix3.from_scale(2.0) @ vector == vector * 2.0


def test_perspective_matrix_structure():
    mat = Matrix4.perspective_matrix(PI / 2.0, 2.0, 0.1, 100.0)
    assert mat.z.w == -1.0
    assert mat.w.w == 0.0
    assert mat.x.x == pytest.approx(mat.y.y / 2.0)


def test_euler_angles_from_round_trip():
    angles = Vector3(0.3, -0.2, 0.5)
    result = Matrix3.euler_angles_from(Matrix3.from_euler_angles(angles))
    assert list(result) == pytest.approx(list(angles))


def test_euler_angles_from_gimbal_case():
    rot = Matrix3.from_euler_angles(Vector3(0.0, -PI / 2.0, 0.0))
    rot.z.x = 1.0
    result = Matrix3.euler_angles_from(rot)
    assert result.y == -PI / 2.0
    assert result.z == 0.0


def test_direction_to_euler_special_cases():
    assert direction_to_euler_angles([0, -3, 0]) == Vector3(PI, 0.0, 0.0)
    assert direction_to_euler_angles([0, 2, 0]) == Vector3.ZERO


def test_euler_angles_to_direction_zero_is_up():
    assert euler_angles_to_direction(Vector3.ZERO) == Vector3.Y


def test_str_format():
    expected = "[\n   [1, 0],\n   [0, 1]\n]"
    assert str(Matrix2.from_values(1, 0, 0, 1)) == expected
    assert str(Matrix2.IDENTITY) == expected


def test_from_values_wrong_count():
    with pytest.raises(TypeError):
        Matrix3.from_values(1, 2, 3)


def test_matmul_with_wrong_type():
    with pytest.raises(TypeError):
        Matrix3.IDENTITY @ Vector2(1, 2)