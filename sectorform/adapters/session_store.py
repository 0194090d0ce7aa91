"""
会话存储：持久化一个 session id。

- QueryParamSessionStore：保存在浏览器 URL 的查询参数中（每个浏览器一份，刷新/书签后仍可恢复）
- SessionStore：保存在本地 JSON 文件中（单用户部署，进程内所有浏览器共享）

空字符串、文件不存在或内容损坏都视为“无会话”。
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import MutableMapping, Optional

from ..infra.exceptions import StoreError
from ..infra.logging import get_logger

logger = get_logger(__name__)

_KEY = "session_id"
QUERY_PARAM_KEY = "session"


def _normalize(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value)
    return value or None


class QueryParamSessionStore:
    """
    基于查询参数映射的会话存储。

    Args:
        params: 可变映射，页面中传入 st.query_params；测试中可传普通 dict
        key: 查询参数名
    """

    def __init__(self, params: MutableMapping[str, str], key: str = QUERY_PARAM_KEY):
        self.params = params
        self.key = key

    def get(self) -> Optional[str]:
        return _normalize(self.params.get(self.key))

    def set(self, session_id: str) -> None:
        value = _normalize(session_id)
        if value is None:
            raise StoreError("session id 不能为空", operation="set", path=f"?{self.key}=")
        self.params[self.key] = value
        logger.info(f"[会话] 已写入查询参数 {self.key}={value}")

    def clear(self) -> None:
        if self.params.pop(self.key, None) is not None:
            logger.info("[会话] 已从查询参数清除")


class SessionStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def get(self) -> Optional[str]:
        """返回已保存的 session id，没有则返回 None"""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"[会话] 读取 {self.path} 失败，按无会话处理: {e}")
            return None
        if not isinstance(data, dict):
            return None
        return _normalize(data.get(_KEY))

    def set(self, session_id: str) -> None:
        """保存 session id（覆盖旧值）"""
        value = _normalize(session_id)
        if value is None:
            raise StoreError("session id 不能为空", operation="set", path=str(self.path))
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps({_KEY: value}, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StoreError(f"保存会话失败: {e}", operation="set", path=str(self.path)) from e
        logger.info(f"[会话] 已保存 session_id={value}")

    def clear(self) -> None:
        """删除 session id；不存在时什么也不做"""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise StoreError(f"清除会话失败: {e}", operation="clear", path=str(self.path)) from e
        logger.info("[会话] 已清除")
