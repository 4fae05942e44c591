"""Vector2d 测试"""
import math

import numpy as np
import pytest

from robot_lib.geometry import Angle, Vector2d, UNIT_X, ORIGIN, to_array_of_points


def test_add_then_subtract_is_identity():
    """测试 v + w - w == v"""
    cases = [
        (Vector2d(1.5, -2.25), Vector2d(0.1, 0.2)),
        (Vector2d(-1e6, 3e-4), Vector2d(7.0, -7.0)),
        (Vector2d(0.0, 0.0), Vector2d(-3.3, 4.4)),
    ]
    for v, w in cases:
        result = v.add(w).subtract(w)
        assert result.x == pytest.approx(v.x)
        assert result.y == pytest.approx(v.y)


def test_add_subtract_components():
    """测试按分量加减"""
    v = Vector2d(1.0, 2.0)
    assert v.add(3.0, 4.0) == Vector2d(4.0, 6.0)
    assert v.subtract(1.0, 1.0) == Vector2d(0.0, 1.0)
    assert v + Vector2d(1.0, 1.0) == Vector2d(2.0, 3.0)
    assert v - Vector2d(1.0, 1.0) == Vector2d(0.0, 1.0)


def test_immutable():
    """测试向量不可变"""
    v = Vector2d(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 5.0
    v.add(1.0, 1.0)
    assert v == Vector2d(1.0, 2.0)


def test_multiply_divide():
    """测试标量与逐分量乘除"""
    v = Vector2d(2.0, -4.0)
    assert v.multiply(0.5) == Vector2d(1.0, -2.0)
    assert v.multiply(Vector2d(3.0, 2.0)) == Vector2d(6.0, -8.0)
    assert v.divide(2.0) == Vector2d(1.0, -2.0)
    assert v.divide(Vector2d(4.0, -2.0)) == Vector2d(0.5, 2.0)
    assert 2 * v == Vector2d(4.0, -8.0)
    assert v / 4.0 == Vector2d(0.5, -1.0)
    assert -v == Vector2d(-2.0, 4.0)


def test_divide_by_zero_is_non_finite():
    """测试除以零得到 inf/NaN 而不是抛出异常"""
    v = Vector2d(1.0, 0.0)
    result = v.divide(0.0)
    assert math.isinf(result.x)
    assert math.isnan(result.y)

    result = Vector2d(-2.0, 3.0).divide(Vector2d(0.0, 1.0))
    assert result.x == -math.inf
    assert result.y == 3.0


def test_pow_scales_by_magnitude():
    """测试 pow 按 magnitude^exponent 缩放"""
    v = Vector2d(3.0, 4.0)
    result = v.pow(2.0)
    assert result.x == pytest.approx(75.0)
    assert result.y == pytest.approx(100.0)

    # 方向不变
    assert result.normalized().x == pytest.approx(0.6)
    assert result.normalized().y == pytest.approx(0.8)


def test_pow_zero_vector_negative_exponent():
    """测试零向量的负数次幂得到非有限值"""
    result = ORIGIN.pow(-1.0)
    assert not math.isfinite(result.x)
    assert not math.isfinite(result.y)


def test_dot_and_cross():
    """测试点积与叉积"""
    a = Vector2d(1.0, 2.0)
    b = Vector2d(3.0, -1.0)
    assert a.dot(b) == 1.0
    assert a.cross(b) == -7.0
    assert UNIT_X.cross(Vector2d(0.0, 1.0)) == 1.0


def test_rotate_zero_is_identity():
    """测试旋转 0 为恒等变换"""
    v = Vector2d(1.25, -3.5)
    assert v.rotate(0.0) == v
    assert v.rotate(Angle(0.0)) == v


def test_rotate_then_negated_is_identity():
    """测试先旋转再反向旋转得到原向量"""
    v = Vector2d(2.0, 1.0)
    for theta in (0.3, -1.2, math.pi, 5.0):
        result = v.rotate(theta).rotate(-theta)
        assert result.x == pytest.approx(v.x)
        assert result.y == pytest.approx(v.y)


def test_rotate_quarter_turn():
    """测试旋转 90 度"""
    result = UNIT_X.rotate(Angle.from_degrees(90.0))
    assert result.x == pytest.approx(0.0, abs=1e-12)
    assert result.y == pytest.approx(1.0)


def test_rotate_around_point():
    """测试绕任意点旋转"""
    origin = Vector2d(1.0, 1.0)
    result = Vector2d(2.0, 1.0).rotate_around(Angle(math.pi / 2), origin)
    assert result.x == pytest.approx(1.0)
    assert result.y == pytest.approx(2.0)

    # 旋转中心自身不动
    assert origin.rotate_around(1.234, origin) == origin


def test_normalized_unit_length():
    """测试归一化得到同方向单位向量"""
    v = Vector2d(-3.0, 4.0)
    n = v.normalized()
    assert n.magnitude == pytest.approx(1.0)
    assert n.x == pytest.approx(-0.6)
    assert n.y == pytest.approx(0.8)


def test_normalized_near_zero_returns_unit_x():
    """测试模长 <= 1e-9 时返回单位 X 向量"""
    assert ORIGIN.normalized() == UNIT_X
    assert Vector2d(1e-10, -1e-10).normalized() == UNIT_X
    assert Vector2d(1e-9, 0.0).normalized() == UNIT_X
    assert ORIGIN.normalized() is UNIT_X


def test_normalized_just_above_threshold():
    """测试略大于阈值的向量正常归一化"""
    n = Vector2d(0.0, 2e-9).normalized()
    assert n.x == pytest.approx(0.0)
    assert n.y == pytest.approx(1.0)


def test_magnitude_and_distance():
    """测试 magnitude 与 distance 相同"""
    v = Vector2d(6.0, 8.0)
    assert v.magnitude == 10.0
    assert v.distance == v.magnitude


def test_numpy_interop():
    """测试 numpy 转换"""
    v = Vector2d(1.0, 2.0)
    array = v.to_array()
    assert array.dtype == np.float64
    assert np.array_equal(array, np.array([1.0, 2.0]))
    assert Vector2d.from_array(array) == v

    points = to_array_of_points([Vector2d(1.0, 2.0), Vector2d(3.0, 4.0)])
    assert points.shape == (2, 2)
    assert to_array_of_points([]).shape == (0, 2)


def test_class_constants():
    """测试类常量"""
    assert Vector2d.ORIGIN == Vector2d(0.0, 0.0)
    assert Vector2d.UNIT_X == Vector2d(1.0, 0.0)
    assert Vector2d.UNIT_Y == Vector2d(0.0, 1.0)
