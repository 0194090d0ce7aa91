"""
基础设施层 - 时钟

提交时间戳统一从 Clock 获取，测试中替换为 MockClock。
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional


DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


class Clock(ABC):
    """时间服务抽象接口"""

    @abstractmethod
    def now(self) -> datetime:
        """获取当前本地时间"""
        ...

    def format_display(self, dt: Optional[datetime]) -> str:
        """格式化为界面显示用字符串"""
        if dt is None:
            return ""
        return dt.strftime(DISPLAY_FORMAT)


class SystemClock(Clock):
    """系统时钟实现（本地时区）"""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class MockClock(Clock):
    """测试用模拟时钟"""

    def __init__(self, fixed_time: Optional[datetime] = None):
        self._fixed_time = fixed_time or datetime(2024, 1, 1, 12, 0, 0)
        self._offset = timedelta()

    def now(self) -> datetime:
        return self._fixed_time + self._offset

    def advance(self, delta: timedelta) -> None:
        """推进时间"""
        self._offset += delta
