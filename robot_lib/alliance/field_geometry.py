"""
场地几何

场地尺寸在进程启动时加载一次，之后视为常量；
外部数据源在运行中变化不会影响已加载的 FieldGeometry。

YAML 布局文件格式 (两种均可):

    length: 17.548
    width: 8.052

    field:
      length: 17.548
      width: 8.052
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import os

import yaml

from ..config.field_config import FIELD_CONFIG

logger = logging.getLogger(__name__)


class FieldGeometryError(ValueError):
    """场地几何数据无效"""
    pass


@dataclass(frozen=True)
class FieldGeometry:
    """场地尺寸 (米)"""
    length: float
    width: float

    def __post_init__(self):
        length = float(self.length)
        width = float(self.width)
        if not (length > 0.0 and width > 0.0):
            raise FieldGeometryError(
                f"Field dimensions must be positive, got length={length}, width={width}")
        object.__setattr__(self, 'length', length)
        object.__setattr__(self, 'width', width)

    @property
    def center(self):
        """场地中心点 (x, y)"""
        return self.length / 2.0, self.width / 2.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FieldGeometry':
        section = data.get('field', data) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            raise FieldGeometryError(f"Field layout must be a mapping, got {type(data).__name__}")
        missing = [key for key in ('length', 'width') if key not in section]
        if missing:
            raise FieldGeometryError(f"Field layout missing keys: {missing}")
        try:
            length = float(section['length'])
            width = float(section['width'])
        except (TypeError, ValueError) as e:
            raise FieldGeometryError(f"Invalid field dimensions: {e}") from e
        return cls(length=length, width=width)


def load_field_layout(path: str) -> FieldGeometry:
    """
    从 YAML 布局文件加载场地尺寸

    Raises:
        FieldGeometryError: 文件不存在、解析失败或内容无效
    """
    if not os.path.exists(path):
        raise FieldGeometryError(f"Field layout file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise FieldGeometryError(f"Failed to parse field layout {path}: {e}") from e

    geometry = FieldGeometry.from_dict(data)
    logger.info(f"Loaded field layout from {path}: "
                f"length={geometry.length:.3f}m, width={geometry.width:.3f}m")
    return geometry


def load_field_geometry(config: Optional[Dict[str, Any]] = None) -> FieldGeometry:
    """
    根据配置加载场地尺寸

    优先使用 field.layout_file，其次 field.length / field.width，
    缺失的键使用 FIELD_CONFIG 默认值。
    """
    field_config = (config or {}).get('field', {})
    layout_file = field_config.get('layout_file', FIELD_CONFIG['layout_file'])
    if layout_file:
        return load_field_layout(layout_file)

    geometry = FieldGeometry(
        length=field_config.get('length', FIELD_CONFIG['length']),
        width=field_config.get('width', FIELD_CONFIG['width']),
    )
    logger.debug(f"Using configured field dimensions: "
                 f"length={geometry.length:.3f}m, width={geometry.width:.3f}m")
    return geometry


__all__ = ['FieldGeometry', 'FieldGeometryError', 'load_field_layout', 'load_field_geometry']
