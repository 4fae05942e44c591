"""场地几何配置

场地尺寸只在进程启动时加载一次，之后视为常量。

坐标系说明:
==================================

    (0, width) ┌───────────────────────────────┐ (length, width)
               │                               │
               │   BLUE          │        RED  │
               │   ●──→          │      ←──●   │
               │                               │
    (0, 0)     └───────────────────────────────┘ (length, 0)
              X →

- 规范坐标系为 BLUE 联盟坐标系
- RED 联盟: x' = length - x, y' = width - y, 航向 + π
"""

# 场地配置 (默认值为当前赛季标准场地，单位: 米)
FIELD_CONFIG = {
    'length': 17.548,       # 场地长度 (米)
    'width': 8.052,         # 场地宽度 (米)
    'layout_file': None,    # 场地布局 YAML 文件，设置后覆盖 length/width
}

# 场地配置验证规则
FIELD_VALIDATION_RULES = {
    'field.length': (0.01, 100.0, '场地长度 (米)'),
    'field.width': (0.01, 100.0, '场地宽度 (米)'),
}

__all__ = [
    'FIELD_CONFIG',
    'FIELD_VALIDATION_RULES',
]
