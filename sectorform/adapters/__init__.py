from .sector_api import SectorApiClient
from .session_store import QueryParamSessionStore, SessionStore

__all__ = ["QueryParamSessionStore", "SectorApiClient", "SessionStore"]
