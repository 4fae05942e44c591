"""核心模块"""
from .enums import Alliance, Severity
from .interfaces import IAllianceSource, IFieldGeometry, IPeriodicTask, IDiagnosticsSink
from .constants import (
    PI, TWO_PI, HALF_PI, QUARTER_PI, NORMALIZE_EPSILON,
    normalize_angle, normalize_degrees, wrap_degrees_360,
)
