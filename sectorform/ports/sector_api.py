"""
SectorApi 端口（Port）：
定义表单后端 REST API 的抽象接口。

失败统一以异常表示：NetworkError（连接/超时）、APIError（非 2xx 或响应体异常）。
"""
from __future__ import annotations

from typing import List, Protocol

from ..domain import SectorRecord, Submission


class SectorApi(Protocol):
    """表单后端 API"""

    async def fetch_sectors(self) -> List[SectorRecord]:
        """GET /sectors"""
        ...

    async def fetch_submission(self, session_id: str) -> Submission:
        """GET /submission/{session_id}"""
        ...

    async def create_submission(self, submission: Submission) -> str:
        """POST /submission/0，返回新的 session_id"""
        ...

    async def update_submission(self, session_id: str, submission: Submission) -> None:
        """PUT /submission/{session_id}"""
        ...
