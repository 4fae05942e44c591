"""
配置验证

规则格式: 'section.key': (min, max, description)
- min/max 均为 None 时表示布尔开关，只做类型检查
- 否则要求数值类型且位于 [min, max] 区间

配置中缺失的键不报错，组件会使用默认值。
"""
from typing import Dict, Any, List, Tuple
import logging

from .default_config import get_config_value
from .periodic_config import PERIODIC_VALIDATION_RULES
from .field_config import FIELD_VALIDATION_RULES

logger = logging.getLogger(__name__)


class ConfigValidationError(ValueError):
    """配置验证失败"""
    pass


CONFIG_VALIDATION_RULES = {
    **PERIODIC_VALIDATION_RULES,
    **FIELD_VALIDATION_RULES,
}

_MISSING = object()


def validate_range_rules(config: Dict[str, Any],
                         rules: Dict[str, Tuple[Any, Any, str]]) -> List[Tuple[str, str]]:
    """按范围规则检查配置，返回 (key, message) 列表"""
    errors = []
    for key_path, (min_val, max_val, description) in rules.items():
        value = get_config_value(config, key_path, default=_MISSING)
        if value is _MISSING:
            continue

        if min_val is None and max_val is None:
            if not isinstance(value, bool):
                errors.append((key_path, f'{description} 类型错误: 期望 bool，实际 {type(value).__name__}'))
            continue

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append((key_path, f'{description} 类型错误: 期望数值，实际 {type(value).__name__}'))
            continue

        if min_val is not None and value < min_val:
            errors.append((key_path, f'{description} 超出范围: {value} < {min_val}'))
        elif max_val is not None and value > max_val:
            errors.append((key_path, f'{description} 超出范围: {value} > {max_val}'))
    return errors


def validate_logical_consistency(config: Dict[str, Any]) -> List[Tuple[str, str]]:
    """检查跨字段的逻辑约束"""
    errors = []
    layout_file = get_config_value(config, 'field.layout_file', default=None)
    if layout_file is not None and not isinstance(layout_file, str):
        errors.append(('field.layout_file', f'场地布局文件 类型错误: 期望 str，实际 {type(layout_file).__name__}'))
    return errors


def validate_config(config: Dict[str, Any], raise_on_error: bool = True) -> List[Tuple[str, str]]:
    """
    验证配置

    Args:
        config: 配置字典
        raise_on_error: 为 True 时有错误即抛出 ConfigValidationError

    Returns:
        错误列表 [(key, message), ...]，为空表示通过
    """
    if not isinstance(config, dict):
        raise ConfigValidationError(f"Configuration must be a dictionary, got {type(config)}")

    errors = validate_range_rules(config, CONFIG_VALIDATION_RULES)
    errors.extend(validate_logical_consistency(config))

    if errors:
        message = '\n'.join(f'  - {key}: {msg}' for key, msg in errors)
        if raise_on_error:
            raise ConfigValidationError(f'配置验证失败:\n{message}')
        logger.warning(f'配置验证发现问题:\n{message}')
    return errors


__all__ = [
    'ConfigValidationError',
    'CONFIG_VALIDATION_RULES',
    'validate_config',
    'validate_range_rules',
    'validate_logical_consistency',
]
