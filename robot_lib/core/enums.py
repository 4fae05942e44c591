"""枚举定义"""
from enum import Enum


class Alliance(Enum):
    """联盟 (比赛双方之一)

    BLUE 为规范坐标系，RED 需要镜像。
    "未知联盟" 用 None 表示，不是枚举成员。
    """
    BLUE = "blue"
    RED = "red"


class Severity(Enum):
    """诊断消息严重级别"""
    WARNING = "warning"
    ERROR = "error"
