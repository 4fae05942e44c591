"""联盟坐标变换模块"""
from .field_geometry import (
    FieldGeometry, FieldGeometryError, load_field_layout, load_field_geometry,
)
from .sources import FixedAllianceSource, CallableAllianceSource, parse_alliance
from .transform import AllianceTransform

__all__ = [
    'FieldGeometry', 'FieldGeometryError', 'load_field_layout', 'load_field_geometry',
    'FixedAllianceSource', 'CallableAllianceSource', 'parse_alliance',
    'AllianceTransform',
]
