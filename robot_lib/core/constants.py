"""
通用常量和基础数学函数定义

本模块定义了整个库使用的通用常量和不依赖其他模块的基础数学函数。

=============================================================================
常量分类
=============================================================================

1. 数学常量 (Mathematical Constants)
   - PI, TWO_PI, HALF_PI, QUARTER_PI
   - DEG_TO_RAD, RAD_TO_DEG, RAD_TO_ROTATIONS

2. 数值稳定性常量 (Numerical Stability)
   - NORMALIZE_EPSILON: 向量归一化的近零阈值

3. 时间单位 (Time Units)
   - NS_PER_MS, NS_PER_SEC: 计时使用整数纳秒

=============================================================================
不放在本模块的内容
=============================================================================

可调参数（超时阈值、上报间隔、场地尺寸）放在 config/*.py 中。

使用示例:

    from robot_lib.core.constants import PI, normalize_angle

    theta = normalize_angle(theta + PI)
"""
import math

import numpy as np


# =============================================================================
# 数学常量
# =============================================================================

PI = math.pi
TWO_PI = 2.0 * math.pi
HALF_PI = math.pi / 2.0
QUARTER_PI = math.pi / 4.0

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
RAD_TO_ROTATIONS = 1.0 / TWO_PI


# =============================================================================
# 数值稳定性常量
# =============================================================================

# 模长小于等于该值的向量视为零向量，归一化时返回单位 X 向量
NORMALIZE_EPSILON = 1e-9


# =============================================================================
# 时间单位
# =============================================================================

NS_PER_MS = 1_000_000
NS_PER_SEC = 1_000_000_000


# =============================================================================
# 基础数学函数 (不依赖其他模块，避免循环导入)
# =============================================================================

def normalize_angle(angle: float) -> float:
    """
    将角度归一化到 (-π, π] 范围

    Args:
        angle: 输入角度 (弧度)

    Returns:
        归一化后的角度 (弧度)，范围 (-π, π]

    Examples:
        >>> normalize_angle(3 * PI)  # 约等于 π
        >>> normalize_angle(-PI)     # π
    """
    wrapped = angle - TWO_PI * np.floor((angle + PI) / TWO_PI)
    # floor 结果落在 [-π, π)，下界 -π 映射到 π
    if wrapped <= -PI:
        wrapped += TWO_PI
    return float(wrapped)


def normalize_degrees(angle: float) -> float:
    """将角度 (度) 归一化到 (-180, 180] 范围"""
    wrapped = angle - 360.0 * np.floor((angle + 180.0) / 360.0)
    if wrapped <= -180.0:
        wrapped += 360.0
    return float(wrapped)


def wrap_degrees_360(angle: float) -> float:
    """将角度 (度) 归一化到 [0, 360) 范围"""
    wrapped = float(np.mod(angle, 360.0))
    # 极小负数取模后会舍入为 360.0
    if wrapped >= 360.0:
        wrapped -= 360.0
    return wrapped


def safe_divide(numerator: float, denominator: float) -> float:
    """
    IEEE 754 除法

    除数为零时返回 inf/NaN 而不是抛出 ZeroDivisionError，
    调用者需要自行检查非有限值。
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def safe_power(base: float, exponent: float) -> float:
    """IEEE 754 幂运算，0 的负数次幂返回 inf 而不是抛出异常"""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.power(np.float64(base), np.float64(exponent)))


__all__ = [
    'PI', 'TWO_PI', 'HALF_PI', 'QUARTER_PI',
    'DEG_TO_RAD', 'RAD_TO_DEG', 'RAD_TO_ROTATIONS',
    'NORMALIZE_EPSILON', 'NS_PER_MS', 'NS_PER_SEC',
    'normalize_angle', 'normalize_degrees', 'wrap_degrees_360',
    'safe_divide', 'safe_power',
]
