"""
联盟坐标变换模块

规范坐标系为 BLUE 联盟。机器人在 RED 联盟时，场地坐标关于场地中心镜像:

    x' = length - x
    y' = width - y
    heading' = heading + π   (三维时仅绕 Z 轴旋转半圈，z 不变)

联盟信号在每次调用时重新读取，不做缓存，避免比赛阶段之间联盟重新分配后使用过期值。
同一次复合调用 (如 apply_pose) 内只读取一次，位置与朝向使用同一个镜像决策。
"""
from typing import Any, Dict, Optional
import logging

import numpy as np
from scipy.spatial.transform import Rotation

from ..config.validation import validate_config as _validate_config
from ..core.constants import PI
from ..core.enums import Alliance
from ..core.interfaces import IAllianceSource, IFieldGeometry
from ..geometry.angle import Angle
from ..geometry.pose import Pose2d, Pose3d, Vector3d
from ..geometry.vector2d import Vector2d
from .field_geometry import load_field_geometry

logger = logging.getLogger(__name__)


# 绕 Z 轴旋转半圈
_HALF_TURN_Z = Rotation.from_euler('z', PI)


class AllianceTransform:
    """
    联盟相关坐标变换

    该类不持有可变状态，可从多个调用者并发使用。
    注意两次独立调用之间联盟信号可能变化，逻辑上同一时刻的多个坐标
    应通过一次复合调用 (apply_pose / apply_points) 变换。

    使用示例:
        source = FixedAllianceSource(Alliance.RED)
        transform = AllianceTransform(source, FieldGeometry(16.0, 8.0))

        target = transform.apply_pose(Pose2d(Vector2d(3.0, 2.0), Angle(0.3)))
    """

    def __init__(self, alliance_source: IAllianceSource,
                 field: Optional[IFieldGeometry] = None,
                 config: Optional[Dict[str, Any]] = None,
                 validate_config: bool = True):
        """
        Args:
            alliance_source: 联盟信号源
            field: 场地尺寸；为 None 时根据 config 加载
            config: 配置字典，读取 'field' 段
            validate_config: 是否在构造时验证 'field' 段

        Raises:
            ConfigValidationError: 'field' 段参数非法
        """
        if validate_config and config is not None:
            _validate_config({'field': config.get('field', {})})
        if field is None:
            field = load_field_geometry(config)
        self._alliance_source = alliance_source
        self._field_length = float(field.length)
        self._field_width = float(field.width)

    @property
    def field_length(self) -> float:
        return self._field_length

    @property
    def field_width(self) -> float:
        return self._field_width

    def should_mirror(self) -> bool:
        """联盟已知且为 RED 时返回 True；未知联盟不镜像"""
        return self._alliance_source.get_alliance() == Alliance.RED

    # ------------------------------------------------------------------
    # 标量坐标
    # ------------------------------------------------------------------

    def apply_x(self, x: float) -> float:
        return self._mirror_x(x) if self.should_mirror() else x

    def apply_y(self, y: float) -> float:
        return self._mirror_y(y) if self.should_mirror() else y

    # ------------------------------------------------------------------
    # 位置
    # ------------------------------------------------------------------

    def apply_position(self, position: Vector2d) -> Vector2d:
        if not self.should_mirror():
            return position
        return self._mirror_position(position)

    def apply_position_3d(self, position: Vector3d) -> Vector3d:
        """镜像 x/y，z 保持不变"""
        if not self.should_mirror():
            return position
        return self._mirror_position_3d(position)

    # ------------------------------------------------------------------
    # 朝向
    # ------------------------------------------------------------------

    def apply_heading(self, heading: Angle) -> Angle:
        """镜像时旋转半圈，结果归一化到 (-π, π]"""
        if not self.should_mirror():
            return heading
        return heading.rotate_by(PI)

    def apply_rotation_3d(self, rotation: Rotation) -> Rotation:
        """镜像时在外部坐标系中绕 Z 轴旋转半圈"""
        if not self.should_mirror():
            return rotation
        return _HALF_TURN_Z * rotation

    # ------------------------------------------------------------------
    # 位姿
    # ------------------------------------------------------------------

    def apply_pose(self, pose: Pose2d) -> Pose2d:
        """不镜像时原样返回输入对象"""
        if not self.should_mirror():
            return pose
        return Pose2d(self._mirror_position(pose.position), pose.heading.rotate_by(PI))

    def apply_pose_3d(self, pose: Pose3d) -> Pose3d:
        """不镜像时原样返回输入对象"""
        if not self.should_mirror():
            return pose
        return Pose3d(self._mirror_position_3d(pose.position), _HALF_TURN_Z * pose.rotation)

    def apply_points(self, points: np.ndarray) -> np.ndarray:
        """
        批量镜像点集

        Args:
            points: (N, 2) 或 (N, 3) 数组，第三列 (z) 不变

        Returns:
            镜像后的新数组；不镜像时返回输入本身
        """
        points = np.asarray(points, dtype=np.float64)
        if points.ndim != 2 or points.shape[1] not in (2, 3):
            raise ValueError(f"Expected points of shape (N, 2) or (N, 3), got {points.shape}")
        if not self.should_mirror():
            return points
        mirrored = points.copy()
        mirrored[:, 0] = self._field_length - points[:, 0]
        mirrored[:, 1] = self._field_width - points[:, 1]
        return mirrored

    def apply(self, value):
        """
        按类型分派的通用变换

        支持 Vector2d, Vector3d, Angle, scipy Rotation, Pose2d, Pose3d, numpy 点集。
        """
        if isinstance(value, Pose2d):
            return self.apply_pose(value)
        if isinstance(value, Pose3d):
            return self.apply_pose_3d(value)
        if isinstance(value, Vector2d):
            return self.apply_position(value)
        if isinstance(value, Vector3d):
            return self.apply_position_3d(value)
        if isinstance(value, Angle):
            return self.apply_heading(value)
        if isinstance(value, Rotation):
            return self.apply_rotation_3d(value)
        if isinstance(value, np.ndarray):
            return self.apply_points(value)
        raise TypeError(f"Unsupported type for alliance transform: {type(value).__name__}")

    # ------------------------------------------------------------------
    # 内部实现 (不读取联盟信号)
    # ------------------------------------------------------------------

    def _mirror_x(self, x: float) -> float:
        return self._field_length - x

    def _mirror_y(self, y: float) -> float:
        return self._field_width - y

    def _mirror_position(self, position: Vector2d) -> Vector2d:
        return Vector2d(self._mirror_x(position.x), self._mirror_y(position.y))

    def _mirror_position_3d(self, position: Vector3d) -> Vector3d:
        return Vector3d(self._mirror_x(position.x), self._mirror_y(position.y), position.z)


__all__ = ['AllianceTransform']
