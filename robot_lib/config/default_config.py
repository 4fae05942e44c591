"""默认配置"""
from typing import Dict, Any, Optional

from .periodic_config import PERIODIC_CONFIG
from .field_config import FIELD_CONFIG


DEFAULT_CONFIG = {
    'periodic': PERIODIC_CONFIG,
    'field': FIELD_CONFIG,
}


_MISSING = object()


def _lookup(config: Dict[str, Any], keys) -> Any:
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return _MISSING
    return value


def get_config_value(config: Dict[str, Any], key_path: str, default: Any = None,
                     fallback_config: Optional[Dict[str, Any]] = None) -> Any:
    """
    从配置字典中获取值，支持点分隔的路径

    查找顺序: config -> fallback_config -> default

    Args:
        config: 配置字典
        key_path: 点分隔路径，如 'periodic.overrun_threshold_ms'
        default: 都找不到时的默认值
        fallback_config: 备选配置 (通常为 DEFAULT_CONFIG)
    """
    keys = key_path.split('.')
    value = _lookup(config, keys)
    if value is not _MISSING:
        return value
    if fallback_config is not None:
        value = _lookup(fallback_config, keys)
        if value is not _MISSING:
            return value
    return default


__all__ = ['DEFAULT_CONFIG', 'get_config_value']
