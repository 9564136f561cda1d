"""Utilities for the ballot encoding engine."""

from .utils import (
    setup_logging,
    PerformanceMonitor,
    PerformanceMetrics,
    get_system_info
)

__all__ = [
    'setup_logging',
    'PerformanceMonitor',
    'PerformanceMetrics',
    'get_system_info'
]
