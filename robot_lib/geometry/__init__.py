"""
几何基础类型

- Angle: 平面角度
- Vector2d: 二维向量
- Vector3d / Pose2d / Pose3d: 位置与位姿
- scalar_math: 标量辅助函数
"""
from .angle import Angle
from .vector2d import Vector2d, ORIGIN, UNIT_X, UNIT_Y, to_array_of_points
from .pose import Vector3d, Pose2d, Pose3d
from .scalar_math import (
    copy_pow, wrap_to_360, wrap_to_pi, wrap_to_180,
    rps_to_mps, mps_to_rps, rotations_to_meters, meters_to_rotations,
)

__all__ = [
    'Angle', 'Vector2d', 'ORIGIN', 'UNIT_X', 'UNIT_Y', 'to_array_of_points',
    'Vector3d', 'Pose2d', 'Pose3d',
    'copy_pow', 'wrap_to_360', 'wrap_to_pi', 'wrap_to_180',
    'rps_to_mps', 'mps_to_rps', 'rotations_to_meters', 'meters_to_rotations',
]
