"""
二维向量

Vector2d 为不可变值类型，所有运算返回新向量。

除法相关运算遵循 IEEE 754: 除以零得到 inf/NaN，不抛出异常。
唯一的例外是 normalized()，近零向量返回单位 X 向量。
"""
from dataclasses import dataclass
from typing import Iterable, Union
import math

import numpy as np

from ..core.constants import NORMALIZE_EPSILON, safe_divide, safe_power
from .angle import Angle, as_radians


Scalar = Union[int, float]


@dataclass(frozen=True)
class Vector2d:
    """二维向量 (x, y)"""
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    # ------------------------------------------------------------------
    # 加减
    # ------------------------------------------------------------------

    def add(self, other, y: Scalar = None) -> 'Vector2d':
        """加上另一个向量，或加上 (x, y) 分量"""
        ox, oy = _components(other, y)
        return Vector2d(self.x + ox, self.y + oy)

    def subtract(self, other, y: Scalar = None) -> 'Vector2d':
        """减去另一个向量，或减去 (x, y) 分量"""
        ox, oy = _components(other, y)
        return Vector2d(self.x - ox, self.y - oy)

    # ------------------------------------------------------------------
    # 乘除 (标量或逐分量)
    # ------------------------------------------------------------------

    def multiply(self, other) -> 'Vector2d':
        if isinstance(other, Vector2d):
            return Vector2d(self.x * other.x, self.y * other.y)
        return Vector2d(self.x * other, self.y * other)

    def divide(self, other) -> 'Vector2d':
        if isinstance(other, Vector2d):
            return Vector2d(safe_divide(self.x, other.x), safe_divide(self.y, other.y))
        return Vector2d(safe_divide(self.x, other), safe_divide(self.y, other))

    def pow(self, exponent: float) -> 'Vector2d':
        """按 magnitude^exponent 缩放，方向不变"""
        return self.multiply(safe_power(self.magnitude, exponent))

    # ------------------------------------------------------------------
    # 积
    # ------------------------------------------------------------------

    def dot(self, other: 'Vector2d') -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Vector2d') -> float:
        """三维叉积的 z 分量"""
        return self.x * other.y - self.y * other.x

    # ------------------------------------------------------------------
    # 旋转
    # ------------------------------------------------------------------

    def rotate(self, angle) -> 'Vector2d':
        """绕原点旋转 (angle 为 Angle 或弧度)"""
        cos, sin = _cos_sin(angle)
        return Vector2d(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def rotate_around(self, angle, origin: 'Vector2d') -> 'Vector2d':
        """绕任意点旋转: 平移到原点 -> 旋转 -> 平移回去"""
        cos, sin = _cos_sin(angle)
        dx = self.x - origin.x
        dy = self.y - origin.y
        return Vector2d(dx * cos - dy * sin + origin.x,
                        dx * sin + dy * cos + origin.y)

    # ------------------------------------------------------------------
    # 模长与归一化
    # ------------------------------------------------------------------

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def distance(self) -> float:
        """到原点的距离，与 magnitude 相同"""
        return self.magnitude

    def normalized(self) -> 'Vector2d':
        """
        单位向量

        模长 <= 1e-9 时返回单位 X 向量，避免除以近零值。
        """
        magnitude = self.magnitude
        if magnitude <= NORMALIZE_EPSILON:
            return UNIT_X
        return self.divide(magnitude)

    def negate(self) -> 'Vector2d':
        return Vector2d(-self.x, -self.y)

    def angle(self) -> Angle:
        """向量方向"""
        return Angle.from_vector(self.x, self.y)

    # ------------------------------------------------------------------
    # numpy 互操作
    # ------------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, array) -> 'Vector2d':
        return cls(array[0], array[1])

    # ------------------------------------------------------------------
    # 运算符
    # ------------------------------------------------------------------

    def __add__(self, other: 'Vector2d') -> 'Vector2d':
        return self.add(other)

    def __sub__(self, other: 'Vector2d') -> 'Vector2d':
        return self.subtract(other)

    def __mul__(self, other) -> 'Vector2d':
        return self.multiply(other)

    def __rmul__(self, other) -> 'Vector2d':
        return self.multiply(other)

    def __truediv__(self, other) -> 'Vector2d':
        return self.divide(other)

    def __neg__(self) -> 'Vector2d':
        return self.negate()

    def __iter__(self):
        yield self.x
        yield self.y


def _components(other, y):
    if y is not None:
        return float(other), float(y)
    return other.x, other.y


def _cos_sin(angle):
    if isinstance(angle, Angle):
        return angle.cos, angle.sin
    radians = as_radians(angle)
    return math.cos(radians), math.sin(radians)


def to_array_of_points(vectors: Iterable[Vector2d]) -> np.ndarray:
    """将向量序列转换为 (N, 2) 数组"""
    points = [(v.x, v.y) for v in vectors]
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(points, dtype=np.float64)


ORIGIN = Vector2d(0.0, 0.0)
UNIT_X = Vector2d(1.0, 0.0)
UNIT_Y = Vector2d(0.0, 1.0)

Vector2d.ORIGIN = ORIGIN
Vector2d.UNIT_X = UNIT_X
Vector2d.UNIT_Y = UNIT_Y


__all__ = ['Vector2d', 'ORIGIN', 'UNIT_X', 'UNIT_Y', 'to_array_of_points']
