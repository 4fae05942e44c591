"""配置工具函数"""
from typing import Dict, Any
import collections.abc
import copy


def deep_update(source: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    深度递归更新字典

    将 overrides 中的配置合并到 source 中。
    如果有嵌套字典，则递归合并，而不是直接替换。

    Args:
        source: 基础配置字典 (将被原地修改，同时也作为返回值)
        overrides: 覆盖配置字典

    Returns:
        Dict[str, Any]: 更新后的 source 字典
    """
    for key, value in overrides.items():
        if isinstance(value, collections.abc.Mapping) and value:
            target = source.get(key, {})
            if not isinstance(target, collections.abc.Mapping):
                target = {}
            source[key] = deep_update(target, value)
        else:
            source[key] = value
    return source


def merged_config(base: Dict[str, Any], overrides: Dict[str, Any] = None) -> Dict[str, Any]:
    """返回 base 的深拷贝并合并 overrides，不修改 base"""
    result = copy.deepcopy(base)
    if overrides:
        deep_update(result, overrides)
    return result
