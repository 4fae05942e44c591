"""配置模块

提供统一的配置接口，支持：
- 默认配置 (DEFAULT_CONFIG)
- 配置验证 (validate_config)

配置文件结构:
- periodic_config.py: 周期任务 (虚拟子系统) 配置
- field_config.py: 场地几何配置
- validation.py: 配置验证逻辑
- utils.py: 配置合并工具

使用示例:
    from robot_lib.config import DEFAULT_CONFIG, merged_config, validate_config

    config = merged_config(DEFAULT_CONFIG, {'periodic': {'overrun_threshold_ms': 10.0}})
    errors = validate_config(config, raise_on_error=False)
"""

from .default_config import DEFAULT_CONFIG, get_config_value
from .validation import (
    validate_config,
    ConfigValidationError,
    CONFIG_VALIDATION_RULES,
)
from .utils import deep_update, merged_config
from .periodic_config import PERIODIC_CONFIG
from .field_config import FIELD_CONFIG

__all__ = [
    'DEFAULT_CONFIG',
    'get_config_value',
    'validate_config',
    'ConfigValidationError',
    'CONFIG_VALIDATION_RULES',
    'deep_update',
    'merged_config',
    'PERIODIC_CONFIG',
    'FIELD_CONFIG',
]
