"""
基础设施层：日志、异常、时钟。
"""

from .clock import Clock, MockClock, SystemClock
from .exceptions import (
    APIError,
    ConfigError,
    ErrorHandler,
    NetworkError,
    SectorFormException,
    StoreError,
    ValidationError,
)
from .logging import LoggerManager, get_logger, set_log_level

__all__ = [
    "Clock",
    "MockClock",
    "SystemClock",
    "APIError",
    "ConfigError",
    "ErrorHandler",
    "NetworkError",
    "SectorFormException",
    "StoreError",
    "ValidationError",
    "LoggerManager",
    "get_logger",
    "set_log_level",
]
