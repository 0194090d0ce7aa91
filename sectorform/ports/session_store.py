"""
SessionIdStore 端口（Port）：
保存一个不透明的 session id。空字符串与不存在等价。
"""
from __future__ import annotations

from typing import Optional, Protocol


class SessionIdStore(Protocol):
    def get(self) -> Optional[str]:
        """返回已保存的 session id，没有则返回 None"""
        ...

    def set(self, session_id: str) -> None:
        """保存 session id（覆盖旧值）"""
        ...

    def clear(self) -> None:
        """删除 session id；不存在时什么也不做"""
        ...
