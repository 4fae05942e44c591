"""周期任务配置

虚拟子系统注册表的配置参数：
- 单周期执行时间预算 (超时阈值)
- 完整耗时报告的上报间隔
- 超时警告的上报间隔

上报节流说明:
==================================

    控制循环 50Hz ──→ 每周期累积耗时 ──→ 节流器 ──→ 诊断输出
                                        │
                                        ├─ 完整报告: 最多每 10s 一次
                                        └─ 超时警告: 最多每 5s 一次 (仅在发生超时时)
"""

# 周期任务配置
PERIODIC_CONFIG = {
    'overrun_threshold_ms': 20.0,         # 单任务单周期执行时间预算 (ms)
    'report_interval_sec': 10.0,          # 完整耗时报告最小间隔 (秒)
    'overrun_report_interval_sec': 5.0,   # 超时警告最小间隔 (秒)
    'report_enabled': True,               # 是否输出完整耗时报告
}

# 周期任务配置验证规则
PERIODIC_VALIDATION_RULES = {
    'periodic.overrun_threshold_ms': (0.1, 1000.0, '超时阈值 (ms)'),
    'periodic.report_interval_sec': (0.0, 3600.0, '完整报告间隔 (秒)'),
    'periodic.overrun_report_interval_sec': (0.0, 3600.0, '超时警告间隔 (秒)'),
    'periodic.report_enabled': (None, None, '完整报告开关 (bool)'),
}

__all__ = [
    'PERIODIC_CONFIG',
    'PERIODIC_VALIDATION_RULES',
]
