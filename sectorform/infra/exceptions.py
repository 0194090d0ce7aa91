"""
基础设施层 - 异常模块

定义标准异常类和错误处理机制。
"""

from typing import Any, Dict, Optional


class SectorFormException(Exception):
    """表单客户端基础异常类"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigError(SectorFormException):
    """配置相关错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CONFIG_ERROR", {"config_key": config_key, **kwargs})


class ValidationError(SectorFormException):
    """数据验证错误"""
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field, "value": value, **kwargs})


class NetworkError(SectorFormException):
    """网络相关错误（连接失败、超时）"""
    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, **kwargs) -> None:
        super().__init__(message, "NETWORK_ERROR", {"url": url, "status_code": status_code, **kwargs})


class APIError(SectorFormException):
    """API调用错误（非 2xx 响应、响应体无法解析）"""
    def __init__(self, message: str, api_name: Optional[str] = None, response: Any = None, **kwargs) -> None:
        super().__init__(message, "API_ERROR", {"api_name": api_name, "response": response, **kwargs})


class StoreError(SectorFormException):
    """存储操作错误"""
    def __init__(self, message: str, operation: Optional[str] = None, path: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "STORE_ERROR", {"operation": operation, "path": path, **kwargs})


class ErrorHandler:
    """错误处理工具类"""

    def __init__(self, logger=None):
        if logger is None:
            from .logging import get_logger
            logger = get_logger(__name__)
        self.logger = logger

    def handle_and_log(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        处理并记录错误

        Args:
            error: 异常对象
            context: 错误上下文信息（如操作名、session id）
        """
        context = context or {}
        suffix = f" {context}" if context else ""

        if isinstance(error, SectorFormException):
            self.logger.error(f"业务异常 [{error.error_code}]: {error.message}{suffix}")
        else:
            self.logger.error(f"系统异常: {str(error)}{suffix}", exc_info=True)
