"""
表单控制器（Application Service）

负责：加载行业列表、按会话回填表单、校验、提交（新建或更新）、销毁会话。

状态只有两种：无会话 / 会话有效，由会话存储中是否存在 session id 决定。
API 失败只记录日志，不展示给用户，也不重试。
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from ..domain import (
    DEFAULT_DEPTH_MARKER,
    DisplaySector,
    FormState,
    build_display_sectors,
    validate_form,
)
from ..infra.clock import Clock, SystemClock
from ..infra.exceptions import ErrorHandler, SectorFormException
from ..infra.logging import get_logger
from ..ports.sector_api import SectorApi
from ..ports.session_store import SessionIdStore

logger = get_logger(__name__)


class FormController:
    def __init__(
        self,
        api: SectorApi,
        session_store: SessionIdStore,
        *,
        clock: Optional[Clock] = None,
        depth_marker: str = DEFAULT_DEPTH_MARKER,
        strict_tree: bool = False,
    ):
        self.api = api
        self.session_store = session_store
        self.clock = clock or SystemClock()
        self.depth_marker = depth_marker
        self.strict_tree = strict_tree
        self._state = FormState()
        self._sectors: List[DisplaySector] = []
        self._errors = ErrorHandler(logger)

    # ------------------------------------------------------------------
    # 只读视图
    # ------------------------------------------------------------------

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def sectors(self) -> List[DisplaySector]:
        return list(self._sectors)

    @property
    def active_session_id(self) -> Optional[str]:
        return self.session_store.get()

    @property
    def has_active_session(self) -> bool:
        return self.active_session_id is not None

    def update(
        self,
        *,
        username: Optional[str] = None,
        agree_of_terms: Optional[bool] = None,
        selected_sector_ids: Optional[Iterable[int]] = None,
    ) -> None:
        """接收用户输入（None 表示不修改该字段）"""
        if username is not None:
            self._state.username = username
        if agree_of_terms is not None:
            self._state.agree_of_terms = bool(agree_of_terms)
        if selected_sector_ids is not None:
            self._state.selected_sector_ids = {int(s) for s in selected_sector_ids}

    # ------------------------------------------------------------------
    # 加载
    # ------------------------------------------------------------------

    async def initialize(self) -> None:
        """页面加载：拉取行业列表，有会话则回填表单"""
        await self.load_sectors()
        session_id = self.active_session_id
        if session_id is not None:
            await self.load_values_by_session(session_id)

    async def load_sectors(self) -> bool:
        """拉取行业并生成显示列表；失败时保留原列表"""
        try:
            records = await self.api.fetch_sectors()
            sectors = build_display_sectors(records, marker=self.depth_marker, strict=self.strict_tree)
        except SectorFormException as e:
            self._errors.handle_and_log(e, {"operation": "load_sectors"})
            return False
        self._sectors = sectors
        logger.info(f"[表单] 已加载 {len(sectors)} 个行业")
        return True

    async def load_values_by_session(self, session_id: str) -> bool:
        """按 session id 回填用户名/行业/条款；失败时表单不变"""
        try:
            submission = await self.api.fetch_submission(session_id)
        except SectorFormException as e:
            self._errors.handle_and_log(e, {"operation": "load_values_by_session", "session_id": session_id})
            return False
        self._state.apply_submission(submission)
        logger.info(f"[表单] 已从会话 {session_id} 回填表单")
        return True

    # ------------------------------------------------------------------
    # 校验与提交
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        self._state.errors = validate_form(self._state)
        if self._state.errors:
            self._state.submitted_at = None
            return False
        return True

    async def submit(self) -> bool:
        """
        校验通过后提交：
        - 无会话：POST /submission/0，保存返回的 session id，再按该 id 回填
        - 有会话：PUT /submission/{id}

        submitted_at 仅在请求成功后记录。
        """
        if not self.validate():
            return False

        submission = self._state.to_submission()
        session_id = self.active_session_id
        try:
            if session_id is not None:
                await self.api.update_submission(session_id, submission)
                logger.info(f"[表单] 已更新会话 {session_id} 的提交")
            else:
                new_session_id = await self.api.create_submission(submission)
                self.session_store.set(new_session_id)
                logger.info(f"[表单] 已创建会话 {new_session_id}")
                await self.load_values_by_session(new_session_id)
        except SectorFormException as e:
            self._errors.handle_and_log(e, {"operation": "submit", "session_id": session_id})
            self._state.submitted_at = None
            return False

        self._state.submitted_at = self.clock.now()
        return True

    # ------------------------------------------------------------------
    # 重置
    # ------------------------------------------------------------------

    def init_values(self) -> None:
        """表单恢复默认值（不影响会话）"""
        self._state = FormState()

    def destroy_session(self) -> None:
        self.session_store.clear()
        self.init_values()
