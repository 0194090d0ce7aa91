"""
组装：从 Settings 创建日志配置、会话存储、API 客户端和表单控制器。
"""
from __future__ import annotations

from typing import Optional

from ..adapters.sector_api import SectorApiClient
from ..adapters.session_store import SessionStore
from ..config import Settings, get_settings
from ..infra.logging import LoggerManager
from ..ports.session_store import SessionIdStore
from .form_controller import FormController


def configure_logging(settings: Settings) -> None:
    LoggerManager.set_level(settings.log_level)
    if settings.log_file:
        LoggerManager.set_log_file(settings.log_file)


def create_session_store(settings: Optional[Settings] = None) -> SessionStore:
    """文件会话存储（session_backend=file 时页面使用，也供 scripts/reset_session.py 使用）"""
    settings = settings or get_settings()
    return SessionStore(settings.session_file)


def create_form_controller(
    settings: Optional[Settings] = None,
    session_store: Optional[SessionIdStore] = None,
) -> FormController:
    """
    Args:
        settings: 配置，默认 get_settings()
        session_store: 会话存储；页面为每个浏览器传入各自的存储，未传时使用文件存储
    """
    settings = settings or get_settings()
    configure_logging(settings)
    return FormController(
        api=SectorApiClient(settings.api_endpoint, timeout=settings.request_timeout),
        session_store=session_store if session_store is not None else create_session_store(settings),
        depth_marker=settings.depth_marker,
        strict_tree=settings.strict_tree,
    )
