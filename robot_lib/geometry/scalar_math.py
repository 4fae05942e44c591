"""标量辅助函数: 保号幂、角度回绕、车轮单位换算"""
import numpy as np

from ..core.constants import (
    normalize_angle, normalize_degrees, wrap_degrees_360, safe_divide, safe_power,
)


def copy_pow(base: float, exponent: float) -> float:
    """
    保持底数符号的幂运算: sign(base) * |base|^exponent

    Examples:
        >>> copy_pow(-2.0, 2.0)
        -4.0
    """
    return safe_power(abs(base), exponent) * float(np.sign(base))


def wrap_to_360(angle_deg: float) -> float:
    """角度 (度) -> [0, 360)"""
    return wrap_degrees_360(angle_deg)


def wrap_to_pi(angle_rad: float) -> float:
    """角度 (弧度) -> (-π, π]"""
    return normalize_angle(angle_rad)


def wrap_to_180(angle_deg: float) -> float:
    """角度 (度) -> (-180, 180]"""
    return normalize_degrees(angle_deg)


# =============================================================================
# 车轮换算 (circumference 单位: 米)
# =============================================================================

def rps_to_mps(wheel_rps: float, circumference: float) -> float:
    """车轮转速 (转/秒) -> 线速度 (米/秒)"""
    return wheel_rps * circumference


def mps_to_rps(wheel_mps: float, circumference: float) -> float:
    """线速度 (米/秒) -> 车轮转速 (转/秒)"""
    return safe_divide(wheel_mps, circumference)


def rotations_to_meters(wheel_rotations: float, circumference: float) -> float:
    """车轮圈数 -> 行驶距离 (米)"""
    return wheel_rotations * circumference


def meters_to_rotations(wheel_meters: float, circumference: float) -> float:
    """行驶距离 (米) -> 车轮圈数"""
    return safe_divide(wheel_meters, circumference)


__all__ = [
    'copy_pow', 'wrap_to_360', 'wrap_to_pi', 'wrap_to_180',
    'rps_to_mps', 'mps_to_rps', 'rotations_to_meters', 'meters_to_rotations',
]
