from .sector_api import SectorApi
from .session_store import SessionIdStore

__all__ = ["SectorApi", "SessionIdStore"]
