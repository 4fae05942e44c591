"""
诊断消息输出

- LoggingDiagnosticsSink: 默认输出，写入 logging
- CallbackDiagnosticsSink: 分发给注册的回调函数，用于测试或转发到其他系统
"""
from typing import Callable, List, Optional, Tuple
import logging

from ..core.enums import Severity

logger = logging.getLogger(__name__)


DiagnosticsCallback = Callable[[Severity, str], None]


class LoggingDiagnosticsSink:
    """将诊断消息写入 logger (WARNING -> warning, ERROR -> error)"""

    def __init__(self, target_logger: Optional[logging.Logger] = None):
        self._logger = target_logger if target_logger is not None else logger

    def report(self, severity: Severity, message: str) -> None:
        if severity == Severity.ERROR:
            self._logger.error(message)
        else:
            self._logger.warning(message)


class CallbackDiagnosticsSink:
    """
    回调分发的诊断输出

    回调函数签名: callback(severity: Severity, message: str) -> None
    """

    def __init__(self):
        self._callbacks: List[DiagnosticsCallback] = []
        self._last_report: Optional[Tuple[Severity, str]] = None

    def add_callback(self, callback: DiagnosticsCallback) -> None:
        if not callable(callback):
            raise ValueError(f"Diagnostics callback must be callable, got {type(callback)}")
        self._callbacks.append(callback)

    def report(self, severity: Severity, message: str) -> None:
        self._last_report = (severity, message)
        for callback in self._callbacks:
            callback(severity, message)

    def get_last_report(self) -> Optional[Tuple[Severity, str]]:
        """获取最后一次输出的 (severity, message)"""
        return self._last_report


__all__ = ['LoggingDiagnosticsSink', 'CallbackDiagnosticsSink', 'DiagnosticsCallback']
