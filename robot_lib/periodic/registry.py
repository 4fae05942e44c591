"""周期任务注册表与执行时间监控"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional
import logging
import time

from ..config.periodic_config import PERIODIC_CONFIG
from ..config.validation import validate_config as _validate_config
from ..core.constants import NS_PER_MS, NS_PER_SEC
from ..core.enums import Severity
from ..core.interfaces import IDiagnosticsSink, IPeriodicTask
from ..diagnostics.sink import LoggingDiagnosticsSink

logger = logging.getLogger(__name__)


def _get_monotonic_time_ns() -> int:
    """
    获取单调时钟时间（整数纳秒）

    使用 time.perf_counter_ns()：单调且分辨率优于微秒。
    整数相减没有浮点舍入，恰好 20ms 的耗时不会被误判为超时。
    """
    return time.perf_counter_ns()


@dataclass
class TaskStats:
    """单个任务的执行时间统计 (ms)"""
    name: str
    run_count: int = 0
    overrun_count: int = 0
    last_ms: float = 0.0
    max_ms: float = 0.0
    total_ms: float = 0.0

    @property
    def mean_ms(self) -> float:
        return self.total_ms / self.run_count if self.run_count > 0 else 0.0

    def record(self, elapsed_ms: float, overrun: bool) -> None:
        self.run_count += 1
        self.last_ms = elapsed_ms
        self.total_ms += elapsed_ms
        if elapsed_ms > self.max_ms:
            self.max_ms = elapsed_ms
        if overrun:
            self.overrun_count += 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'run_count': self.run_count,
            'overrun_count': self.overrun_count,
            'last_ms': self.last_ms,
            'max_ms': self.max_ms,
            'mean_ms': self.mean_ms,
        }


class PeriodicRegistry:
    """
    周期任务注册表

    每个控制周期由宿主程序调用一次 run_all()，按注册顺序依次执行所有任务，
    并测量每个任务的执行时间。

    上报节流:
        - 完整耗时报告: 最多每 report_interval_sec 输出一次 (WARNING)
        - 超时警告: 本周期有任务超过 overrun_threshold_ms，且距上次超时警告
          至少 overrun_report_interval_sec 时输出 (ERROR)
        - 两个计时器相互独立，只在对应报告实际输出时重置

    线程安全性说明:
        - run_all() 在调用者线程上同步执行，不是线程安全的
        - register() 应在单线程启动阶段调用，否则调用者需要自行加锁

    注意:
        - 不强制超时，只在事后测量和报告；任务阻塞会阻塞整个周期
        - 任务抛出的异常直接传播给调用者

    使用示例:
        registry = PeriodicRegistry(config)
        registry.register(LedController())

        # 在 robotPeriodic 中调用
        registry.run_all()
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None,
                 sink: Optional[IDiagnosticsSink] = None,
                 clock: Optional[Callable[[], int]] = None,
                 validate_config: bool = True):
        """
        Args:
            config: 配置字典，读取 'periodic' 段
            sink: 诊断输出，默认写入 logging
            clock: 单调时钟 (整数纳秒)，默认 time.perf_counter_ns
            validate_config: 是否在构造时验证 'periodic' 段

        Raises:
            ConfigValidationError: 'periodic' 段参数非法
        """
        periodic_config = (config or {}).get('periodic', {})
        if validate_config:
            _validate_config({'periodic': periodic_config})

        self.overrun_threshold_ms = periodic_config.get(
            'overrun_threshold_ms', PERIODIC_CONFIG['overrun_threshold_ms'])
        self.report_interval_sec = periodic_config.get(
            'report_interval_sec', PERIODIC_CONFIG['report_interval_sec'])
        self.overrun_report_interval_sec = periodic_config.get(
            'overrun_report_interval_sec', PERIODIC_CONFIG['overrun_report_interval_sec'])
        self.report_enabled = periodic_config.get(
            'report_enabled', PERIODIC_CONFIG['report_enabled'])

        self._report_interval_ns = self.report_interval_sec * NS_PER_SEC
        self._overrun_report_interval_ns = self.overrun_report_interval_sec * NS_PER_SEC

        self._sink = sink if sink is not None else LoggingDiagnosticsSink()
        self._clock = clock if clock is not None else _get_monotonic_time_ns

        self._tasks: List[IPeriodicTask] = []
        self._stats: Dict[int, TaskStats] = {}

        # 计时窗口从注册表创建时开始
        start_time = self._clock()
        self._last_report_time: int = start_time
        self._last_overrun_time: int = start_time

    # ------------------------------------------------------------------
    # 注册
    # ------------------------------------------------------------------

    def register(self, task: IPeriodicTask) -> IPeriodicTask:
        """
        注册任务，追加到执行顺序末尾

        Returns:
            传入的任务，便于链式构造

        Raises:
            ValueError: 任务没有 periodic() 方法，或已注册过
        """
        if not callable(getattr(task, 'periodic', None)):
            raise ValueError(f"Task {task!r} has no callable periodic() method")
        if id(task) in self._stats:
            raise ValueError(f"Task '{task.name}' is already registered")

        self._tasks.append(task)
        self._stats[id(task)] = TaskStats(name=task.name)
        logger.debug(f"Registered periodic task '{task.name}' (#{len(self._tasks)})")
        return task

    # ------------------------------------------------------------------
    # 执行
    # ------------------------------------------------------------------

    def run_all(self) -> None:
        """按注册顺序执行所有任务一次，并按节流规则输出诊断报告"""
        current_time = self._clock()
        should_report = (self.report_enabled and
                         (current_time - self._last_report_time) >= self._report_interval_ns)
        should_report_overrun = (
            (current_time - self._last_overrun_time) >= self._overrun_report_interval_ns)

        report_lines = ["Periodic task loop times:\n"]
        overrun_lines = [
            f"WARNING: The following periodic tasks exceeded {self.overrun_threshold_ms:g}ms:\n"
        ]
        overrun_occurred = False

        for task in self._tasks:
            start_time = self._clock()
            task.periodic()
            end_time = self._clock()

            elapsed_ms = (end_time - start_time) / NS_PER_MS
            overrun = elapsed_ms > self.overrun_threshold_ms
            self._stats[id(task)].record(elapsed_ms, overrun)

            line = f"  - {task.name}: {elapsed_ms:.3f} ms\n"
            if overrun:
                overrun_occurred = True
                overrun_lines.append(line)
            if should_report:
                report_lines.append(line)

        if overrun_occurred and should_report_overrun:
            self._sink.report(Severity.ERROR, ''.join(overrun_lines))
            logger.warning("Periodic task loop overrun")
            self._last_overrun_time = current_time

        if should_report:
            self._sink.report(Severity.WARNING, ''.join(report_lines))
            self._last_report_time = current_time

    # ------------------------------------------------------------------
    # 查询
    # ------------------------------------------------------------------

    @property
    def task_names(self) -> List[str]:
        return [task.name for task in self._tasks]

    def get_stats(self) -> List[Dict[str, Any]]:
        """
        获取各任务的执行时间统计

        Returns:
            按注册顺序排列的统计列表，'index' 为注册序号；同名任务各自保留
        """
        return [dict(self._stats[id(task)].to_dict(), index=index)
                for index, task in enumerate(self._tasks)]

    def get_task_stats(self, task: IPeriodicTask) -> Optional[TaskStats]:
        return self._stats.get(id(task))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[IPeriodicTask]:
        return iter(list(self._tasks))


__all__ = ['PeriodicRegistry', 'TaskStats']
