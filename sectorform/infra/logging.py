"""
基础设施层 - 日志模块

提供统一的日志配置和管理。
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict


_LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}

_CONSOLE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s] %(message)s'
_FILE_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggerManager:
    """统一日志管理器"""

    _loggers: Dict[str, logging.Logger] = {}
    _configured: bool = False
    _log_file: Optional[Path] = None
    _file_handler: Optional[logging.Handler] = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        获取或创建配置好的logger

        Args:
            name: logger名称，通常使用 __name__

        Returns:
            配置好的logger实例
        """
        if not cls._configured:
            cls._configure_logging()

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]

    @classmethod
    def _configure_logging(cls):
        """统一日志配置"""
        if cls._configured:
            return

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)

        # 避免重复添加处理器（Streamlit 每次 rerun 都会重新执行脚本）
        if not root_logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT))
            root_logger.addHandler(console_handler)

        if cls._log_file:
            cls._add_file_handler_internal(cls._log_file, root_logger)

        cls._configured = True

    @classmethod
    def _add_file_handler_internal(cls, log_file: Path, logger: logging.Logger) -> None:
        """内部方法：添加文件处理器"""
        if cls._file_handler is not None:
            return
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
            logger.addHandler(file_handler)
            cls._file_handler = file_handler
        except OSError as e:
            logger.warning(f"文件日志配置失败: {e}")

    @classmethod
    def set_log_file(cls, log_file: Path) -> None:
        """设置日志文件路径"""
        cls._log_file = log_file
        if cls._configured:
            cls._add_file_handler_internal(log_file, logging.getLogger())

    @classmethod
    def set_level(cls, level: str) -> None:
        """设置全局日志级别"""
        if not cls._configured:
            cls._configure_logging()
        if level.upper() in _LEVEL_MAP:
            logging.getLogger().setLevel(_LEVEL_MAP[level.upper()])

    @classmethod
    def reset(cls) -> None:
        """重置日志配置（测试用）"""
        if cls._file_handler is not None:
            logging.getLogger().removeHandler(cls._file_handler)
            cls._file_handler.close()
        cls._loggers.clear()
        cls._configured = False
        cls._log_file = None
        cls._file_handler = None


# 快捷函数
def get_logger(name: str) -> logging.Logger:
    """获取日志器的快捷方法"""
    return LoggerManager.get_logger(name)


def set_log_level(level: str) -> None:
    """设置日志级别的快捷方法"""
    LoggerManager.set_level(level)
