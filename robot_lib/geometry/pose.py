"""
位置与位姿类型

- Vector3d: 三维位置
- Pose2d: 平面位姿 (Vector2d + Angle)
- Pose3d: 空间位姿 (Vector3d + scipy Rotation)
"""
from dataclasses import dataclass, field

import numpy as np
from scipy.spatial.transform import Rotation

from .angle import Angle
from .vector2d import Vector2d


@dataclass(frozen=True)
class Vector3d:
    """三维位置 (x, y, z)"""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))

    def to_vector2d(self) -> Vector2d:
        """投影到水平面"""
        return Vector2d(self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, array) -> 'Vector3d':
        return cls(array[0], array[1], array[2])


@dataclass(frozen=True)
class Pose2d:
    """平面位姿"""
    position: Vector2d = field(default_factory=Vector2d)
    heading: Angle = field(default_factory=lambda: Angle(0.0))

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y


@dataclass(frozen=True, eq=False)
class Pose3d:
    """
    空间位姿

    scipy Rotation 没有值相等语义，因此 Pose3d 不定义 ==，
    比较请使用 is_close()。
    """
    position: Vector3d = field(default_factory=Vector3d)
    rotation: Rotation = field(default_factory=Rotation.identity)

    def to_pose2d(self) -> Pose2d:
        """投影到平面，航向取绕 Z 轴的 yaw"""
        yaw = self.rotation.as_euler('xyz')[2]
        return Pose2d(self.position.to_vector2d(), Angle(yaw))

    def is_close(self, other: 'Pose3d', atol: float = 1e-9) -> bool:
        return (np.allclose(self.position.to_array(), other.position.to_array(), atol=atol)
                and np.allclose(self.rotation.as_matrix(), other.rotation.as_matrix(), atol=atol))


__all__ = ['Vector3d', 'Pose2d', 'Pose3d']
