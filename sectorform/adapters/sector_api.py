"""
表单后端 REST API 客户端（aiohttp 实现）

用法：
    async with SectorApiClient(endpoint, timeout=30) as api:
        records = await api.fetch_sectors()
"""
from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import aiohttp

from ..domain import SectorRecord, Submission
from ..infra.exceptions import APIError, NetworkError
from ..infra.logging import get_logger

logger = get_logger(__name__)

API_NAME = "sector-form"
NEW_SUBMISSION_ID = "0"


class SectorApiClient:
    """SectorApi 端口的 HTTP 实现。不做重试。

    在 `async with` 内复用同一个 ClientSession；否则每个请求使用临时 session，
    这样同一个客户端可以跨多次 asyncio.run 使用（Streamlit 每次交互一个事件循环）。
    """

    def __init__(self, endpoint: str, timeout: float = 30):
        """
        Args:
            endpoint: API 基础地址，如 http://api.softartist.ee:8888
            timeout: 单次请求总超时（秒）
        """
        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _new_session(self) -> aiohttp.ClientSession:
        return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))

    async def _ensure_session(self):
        if not self.session:
            self.session = self._new_session()

    async def close(self) -> None:
        if self.session:
            await self.session.close()
            self.session = None

    def _url(self, path: str) -> str:
        return f"{self.endpoint}/{path.lstrip('/')}"

    async def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        url = self._url(path)
        logger.debug(f"[API] {method} {url} body={body}")

        if self.session:
            return await self._send(self.session, method, url, body)
        async with self._new_session() as session:
            return await self._send(session, method, url, body)

    async def _send(self, session: aiohttp.ClientSession, method: str, url: str, body: Optional[Dict[str, Any]]) -> Any:
        try:
            async with session.request(method, url, json=body) as response:
                text = await response.text()
                if response.status < 200 or response.status >= 300:
                    raise APIError(
                        f"{method} {url} 请求失败: {response.status}",
                        api_name=API_NAME,
                        response=text[:500],
                        status_code=response.status,
                    )
                logger.debug(f"[API] {method} {url} -> {response.status}")
                if not text.strip():
                    return None
                return json.loads(text)
        except aiohttp.ClientError as e:
            raise NetworkError(f"{method} {url} 网络请求错误: {e}", url=url) from e
        except asyncio.TimeoutError as e:
            raise NetworkError(f"{method} {url} 请求超时 ({self.timeout}s)", url=url) from e
        except json.JSONDecodeError as e:
            raise APIError(f"{method} {url} JSON 解析错误: {e}", api_name=API_NAME) from e

    async def fetch_sectors(self) -> List[SectorRecord]:
        data = await self._request("GET", "sectors")
        if not isinstance(data, list):
            raise APIError("GET /sectors 响应不是数组", api_name=API_NAME, response=data)
        try:
            return [SectorRecord.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise APIError(f"GET /sectors 记录格式错误: {e}", api_name=API_NAME, response=data) from e

    async def fetch_submission(self, session_id: str) -> Submission:
        path = f"submission/{quote(str(session_id), safe='')}"
        data = await self._request("GET", path)
        if not isinstance(data, dict):
            raise APIError(f"GET /{path} 响应不是对象", api_name=API_NAME, response=data)
        try:
            return Submission.from_dict(data)
        except (TypeError, ValueError) as e:
            raise APIError(f"GET /{path} 提交内容格式错误: {e}", api_name=API_NAME, response=data) from e

    async def create_submission(self, submission: Submission) -> str:
        data = await self._request("POST", f"submission/{NEW_SUBMISSION_ID}", submission.to_dict())
        session_id = data.get("session_id") if isinstance(data, dict) else None
        if session_id is None or str(session_id) == "":
            raise APIError("POST /submission/0 响应缺少 session_id", api_name=API_NAME, response=data)
        return str(session_id)

    async def update_submission(self, session_id: str, submission: Submission) -> None:
        # 响应体不使用
        await self._request("PUT", f"submission/{quote(str(session_id), safe='')}", submission.to_dict())
