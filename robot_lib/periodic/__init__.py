"""周期任务 (虚拟子系统) 模块"""
from .task import PeriodicTask, FunctionTask
from .registry import PeriodicRegistry, TaskStats

__all__ = ['PeriodicTask', 'FunctionTask', 'PeriodicRegistry', 'TaskStats']
