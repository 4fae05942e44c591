"""
核心接口定义

使用 Protocol 定义静态接口，避免运行时继承耦合。
外部协作者 (比赛控制系统、场地几何数据库、诊断输出) 只通过这些接口接入。
"""
from typing import Optional, Protocol, runtime_checkable

from .enums import Alliance, Severity


@runtime_checkable
class IAllianceSource(Protocol):
    """联盟信号源接口

    每次调用都应返回当前值，调用者不会缓存结果。
    """

    def get_alliance(self) -> Optional[Alliance]:
        """返回当前联盟，未知时返回 None"""
        ...


@runtime_checkable
class IFieldGeometry(Protocol):
    """场地几何接口 (单位: 米)"""

    @property
    def length(self) -> float:
        """场地长度 (X 方向)"""
        ...

    @property
    def width(self) -> float:
        """场地宽度 (Y 方向)"""
        ...


@runtime_checkable
class IPeriodicTask(Protocol):
    """周期任务接口"""

    @property
    def name(self) -> str:
        """任务名称，用于诊断输出"""
        ...

    def periodic(self) -> None:
        """每个控制周期调用一次，应同步且不阻塞"""
        ...


@runtime_checkable
class IDiagnosticsSink(Protocol):
    """诊断消息输出接口"""

    def report(self, severity: Severity, message: str) -> None:
        """输出一条诊断消息"""
        ...
