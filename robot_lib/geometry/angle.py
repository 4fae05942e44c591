"""
平面角度

Angle 为不可变值类型，构造时计算 cos/sin 并缓存，
之后任何操作都返回新的 Angle。相等性只比较弧度值。
"""
from dataclasses import dataclass, field
import math

from ..core.constants import (
    PI, TWO_PI, HALF_PI, QUARTER_PI,
    DEG_TO_RAD, RAD_TO_DEG, RAD_TO_ROTATIONS,
    normalize_angle,
)


@dataclass(frozen=True)
class Angle:
    """平面朝向 (弧度)

    Attributes:
        radians: 弧度值 (构造时不归一化)
        cos: cos(radians)
        sin: sin(radians)
    """
    radians: float
    cos: float = field(init=False, repr=False, compare=False)
    sin: float = field(init=False, repr=False, compare=False)

    PI = PI
    TWO_PI = TWO_PI
    HALF_PI = HALF_PI
    QUARTER_PI = QUARTER_PI

    def __post_init__(self):
        radians = float(self.radians)
        object.__setattr__(self, 'radians', radians)
        object.__setattr__(self, 'cos', math.cos(radians))
        object.__setattr__(self, 'sin', math.sin(radians))

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Angle':
        return cls(degrees * DEG_TO_RAD)

    @classmethod
    def from_rotations(cls, rotations: float) -> 'Angle':
        return cls(rotations * TWO_PI)

    @classmethod
    def from_vector(cls, x, y: float = None) -> 'Angle':
        """
        由向量方向构造角度

        可传入 (x, y) 两个分量，也可传入带 x/y 属性的向量对象。
        使用 atan2，零向量返回 0。
        """
        if y is None:
            x, y = x.x, x.y
        return cls(math.atan2(y, x))

    @classmethod
    def from_slope(cls, slope: float) -> 'Angle':
        """
        由斜率构造角度

        注意: atan 的值域为 [-π/2, π/2]，无法区分方向与其反方向。
        """
        return cls(math.atan(slope))

    def to_degrees(self) -> float:
        return self.radians * RAD_TO_DEG

    def to_rotations(self) -> float:
        return self.radians * RAD_TO_ROTATIONS

    def rotate_by(self, other) -> 'Angle':
        """叠加另一个角度 (Angle 或弧度)，结果归一化到 (-π, π]"""
        delta = other.radians if isinstance(other, Angle) else float(other)
        return Angle(normalize_angle(self.radians + delta))

    def normalized(self) -> 'Angle':
        return Angle(normalize_angle(self.radians))

    @staticmethod
    def normalize(angle: float) -> float:
        """将弧度值归一化到 (-π, π]"""
        return normalize_angle(angle)

    def __neg__(self) -> 'Angle':
        return Angle(-self.radians)

    def __float__(self) -> float:
        return self.radians


def as_radians(angle) -> float:
    """接受 Angle 或弧度值，返回弧度值"""
    if isinstance(angle, Angle):
        return angle.radians
    return float(angle)


__all__ = ['Angle', 'as_radians']
