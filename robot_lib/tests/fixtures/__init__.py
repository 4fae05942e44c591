"""
测试夹具模块

此模块仅用于测试，不应在生产代码中使用。

包含:
- FakeClock: 可手动推进的单调时钟 (整数纳秒)
- RecordingSink: 记录所有诊断输出
- RecordingTask: 记录执行顺序的周期任务
- SlowTask: 执行时推进假时钟，模拟耗时任务
"""
from typing import List, Optional, Tuple

from robot_lib.core.constants import NS_PER_MS, NS_PER_SEC
from robot_lib.core.enums import Severity
from robot_lib.periodic.task import PeriodicTask


class FakeClock:
    """可手动推进的时钟，读数为整数纳秒，与 time.perf_counter_ns 一致"""

    def __init__(self, start: float = 100.0):
        self.now_ns = int(round(start * NS_PER_SEC))

    def __call__(self) -> int:
        return self.now_ns

    def advance(self, seconds: float) -> None:
        self.now_ns += int(round(seconds * NS_PER_SEC))

    def advance_ms(self, milliseconds: float) -> None:
        self.now_ns += int(round(milliseconds * NS_PER_MS))


class RecordingSink:
    """记录所有诊断输出的 sink"""

    def __init__(self):
        self.reports: List[Tuple[Severity, str]] = []

    def report(self, severity: Severity, message: str) -> None:
        self.reports.append((severity, message))

    def of(self, severity: Severity) -> List[str]:
        return [msg for sev, msg in self.reports if sev == severity]

    def clear(self) -> None:
        self.reports.clear()


class RecordingTask(PeriodicTask):
    """每次执行时把名称追加到共享列表"""

    def __init__(self, log: List[str], name: Optional[str] = None):
        super().__init__(name)
        self.log = log
        self.calls = 0

    def periodic(self) -> None:
        self.calls += 1
        self.log.append(self.name)


class SlowTask(PeriodicTask):
    """执行时将假时钟推进 duration_ms"""

    def __init__(self, clock: FakeClock, duration_ms: float, name: Optional[str] = None):
        super().__init__(name)
        self.clock = clock
        self.duration_ms = duration_ms
        self.calls = 0

    def periodic(self) -> None:
        self.calls += 1
        self.clock.advance_ms(self.duration_ms)


__all__ = ['FakeClock', 'RecordingSink', 'RecordingTask', 'SlowTask']
