"""
周期任务 (虚拟子系统)

用于没有物理执行器、但需要每个控制周期运行一次的逻辑。
任务构造与注册分离:

    task = MyTask()
    registry.register(task)
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional


class PeriodicTask(ABC):
    """周期任务基类

    名称默认取子类类名，可在构造时覆盖。
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name if name else type(self).__name__

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def periodic(self) -> None:
        """每个控制周期调用一次，应同步完成且不阻塞"""
        pass

    def __repr__(self) -> str:
        return f'{type(self).__name__}(name={self._name!r})'


class FunctionTask(PeriodicTask):
    """将无参函数包装为周期任务"""

    def __init__(self, func: Callable[[], None], name: Optional[str] = None):
        if not callable(func):
            raise ValueError(f"FunctionTask requires a callable, got {type(func)}")
        super().__init__(name if name else getattr(func, '__name__', type(self).__name__))
        self._func = func

    def periodic(self) -> None:
        self._func()


__all__ = ['PeriodicTask', 'FunctionTask']
