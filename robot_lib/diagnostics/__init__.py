"""诊断输出模块"""
from .sink import LoggingDiagnosticsSink, CallbackDiagnosticsSink

__all__ = ['LoggingDiagnosticsSink', 'CallbackDiagnosticsSink']
