"""
机器人支持库 (Robot Lib)

版本: v1.0.0

比赛机器人控制程序的基础支持库。

特性:
- 几何基础: 不可变的二维向量、角度和位姿类型
- 联盟坐标变换: RED 联盟时将场地坐标与朝向关于场地中心镜像
- 虚拟子系统: 每个控制周期按注册顺序运行周期任务，测量耗时并节流上报超时

使用示例:
    from robot_lib import PeriodicRegistry, AllianceTransform, FixedAllianceSource, DEFAULT_CONFIG

    registry = PeriodicRegistry(DEFAULT_CONFIG)
    registry.register(my_task)

    transform = AllianceTransform(FixedAllianceSource(), config=DEFAULT_CONFIG)

    # 在控制循环中调用
    registry.run_all()
"""

__version__ = "1.0.0"
__author__ = "Robot Lib Team"

from .config import DEFAULT_CONFIG, get_config_value, validate_config, ConfigValidationError
from .core.enums import Alliance, Severity
from .core.interfaces import IAllianceSource, IFieldGeometry, IPeriodicTask, IDiagnosticsSink
from .geometry import Angle, Vector2d, Vector3d, Pose2d, Pose3d
from .alliance import (
    AllianceTransform, FieldGeometry, FieldGeometryError, load_field_geometry,
    FixedAllianceSource, CallableAllianceSource,
)
from .periodic import PeriodicTask, FunctionTask, PeriodicRegistry, TaskStats
from .diagnostics import LoggingDiagnosticsSink, CallbackDiagnosticsSink

__all__ = [
    # 版本
    '__version__',
    # 配置
    'DEFAULT_CONFIG', 'get_config_value', 'validate_config', 'ConfigValidationError',
    # 枚举
    'Alliance', 'Severity',
    # 接口
    'IAllianceSource', 'IFieldGeometry', 'IPeriodicTask', 'IDiagnosticsSink',
    # 几何
    'Angle', 'Vector2d', 'Vector3d', 'Pose2d', 'Pose3d',
    # 联盟变换
    'AllianceTransform', 'FieldGeometry', 'FieldGeometryError', 'load_field_geometry',
    'FixedAllianceSource', 'CallableAllianceSource',
    # 周期任务
    'PeriodicTask', 'FunctionTask', 'PeriodicRegistry', 'TaskStats',
    # 诊断
    'LoggingDiagnosticsSink', 'CallbackDiagnosticsSink',
]
