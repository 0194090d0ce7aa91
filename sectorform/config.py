"""
配置管理

优先级（低 -> 高）：默认值 -> config/sectorform.yaml -> 环境变量（含 config/.env.local）。
配置在初始化时确定，之后不再变化。
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import yaml
from dotenv import load_dotenv

from .infra.exceptions import ConfigError

# sectorform/config.py -> sectorform -> root
PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "sectorform.yaml"
DEFAULT_ENV_FILE = CONFIG_DIR / ".env.local"

DEFAULT_API_ENDPOINT = "http://api.softartist.ee:8888"
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"

# yaml 键 -> 环境变量名
_ENV_KEYS = {
    "api_endpoint": "SECTORFORM_API_ENDPOINT",
    "request_timeout": "SECTORFORM_REQUEST_TIMEOUT",
    "data_dir": "SECTORFORM_DATA_DIR",
    "session_backend": "SECTORFORM_SESSION_BACKEND",
    "session_file": "SECTORFORM_SESSION_FILE",
    "log_level": "SECTORFORM_LOG_LEVEL",
    "log_file": "SECTORFORM_LOG_FILE",
    "depth_marker": "SECTORFORM_DEPTH_MARKER",
    "strict_tree": "SECTORFORM_STRICT_TREE",
}

# browser: session id 保存在各浏览器的 URL 查询参数中；file: 保存在 session_file（所有浏览器共享）
SESSION_BACKENDS = ("browser", "file")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    api_endpoint: str = DEFAULT_API_ENDPOINT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    data_dir: Path = DEFAULT_DATA_DIR
    session_backend: str = "browser"
    session_file: Path = DEFAULT_DATA_DIR / "session.json"
    log_level: str = "INFO"
    log_file: Optional[Path] = DEFAULT_DATA_DIR / "logs" / "sectorform.log"
    depth_marker: str = "----"
    strict_tree: bool = False


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"读取配置文件失败: {e}", config_key=str(path)) from e
    if not isinstance(data, dict):
        raise ConfigError("配置文件顶层必须是映射", config_key=str(path))
    return data


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    s = str(value).strip().lower()
    if s in ("1", "true", "yes", "on"):
        return True
    if s in ("0", "false", "no", "off", ""):
        return False
    raise ConfigError(f"无法解析布尔值: {value!r}", config_key=key)


def _to_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"request_timeout 必须是数字: {value!r}", config_key="request_timeout") from e
    if timeout <= 0:
        raise ConfigError(f"request_timeout 必须大于 0: {value!r}", config_key="request_timeout")
    return timeout


def _to_endpoint(value: Any) -> str:
    endpoint = str(value or "").strip().rstrip("/")
    parsed = urlparse(endpoint)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"api_endpoint 不是合法的 http(s) URL: {value!r}", config_key="api_endpoint")
    return endpoint


def load_settings(config_path: Optional[Path] = None, env_file: Optional[Path] = None) -> Settings:
    """
    组装配置

    Args:
        config_path: yaml 配置文件路径，默认 config/sectorform.yaml（不存在则忽略）
        env_file: dotenv 文件路径，默认 config/.env.local（已存在的环境变量不会被覆盖）
    """
    load_dotenv(env_file or DEFAULT_ENV_FILE)

    raw: Dict[str, Any] = dict(_load_yaml(config_path or DEFAULT_CONFIG_FILE))
    for key, env_name in _ENV_KEYS.items():
        v = os.getenv(env_name)
        if v is not None:
            raw[key] = v

    data_dir = Path(raw.get("data_dir") or DEFAULT_DATA_DIR)
    session_file = Path(raw["session_file"]) if raw.get("session_file") else data_dir / "session.json"
    log_file = Path(raw["log_file"]) if raw.get("log_file") else data_dir / "logs" / "sectorform.log"

    log_level = str(raw.get("log_level") or "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"未知日志级别: {log_level}", config_key="log_level")

    session_backend = str(raw.get("session_backend") or "browser").strip().lower()
    if session_backend not in SESSION_BACKENDS:
        raise ConfigError(f"未知会话存储方式: {session_backend}", config_key="session_backend")

    marker = raw.get("depth_marker")
    return Settings(
        api_endpoint=_to_endpoint(raw.get("api_endpoint") or DEFAULT_API_ENDPOINT),
        request_timeout=_to_timeout(raw.get("request_timeout", DEFAULT_REQUEST_TIMEOUT)),
        data_dir=data_dir,
        session_backend=session_backend,
        session_file=session_file,
        log_level=log_level,
        log_file=log_file,
        depth_marker="----" if marker is None else str(marker),
        strict_tree=_to_bool("strict_tree", raw.get("strict_tree", False)),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """进程级配置（首次调用时加载）"""
    return load_settings()
