"""
测试 scripts/reset_session.py
"""
import importlib.util
import sys
from pathlib import Path

import pytest

# 添加项目根目录到路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sectorform.adapters.session_store import SessionStore


def _load_script():
    spec = importlib.util.spec_from_file_location("reset_session", project_root / "scripts" / "reset_session.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def session_file(tmp_path, monkeypatch):
    path = tmp_path / "session.json"
    monkeypatch.setenv("SECTORFORM_SESSION_FILE", str(path))
    return path


@pytest.fixture
def reset_session():
    return _load_script()


def test_show_does_not_clear(reset_session, session_file, tmp_path, capsys):
    SessionStore(session_file).set("s1")
    assert reset_session.main(["--show", "--config", str(tmp_path / "none.yaml")]) == 0
    assert "s1" in capsys.readouterr().out
    assert SessionStore(session_file).get() == "s1"


def test_force_clears(reset_session, session_file, tmp_path):
    SessionStore(session_file).set("s1")
    assert reset_session.main(["--force", "--config", str(tmp_path / "none.yaml")]) == 0
    assert SessionStore(session_file).get() is None


def test_prompt_declined(reset_session, session_file, tmp_path, monkeypatch):
    SessionStore(session_file).set("s1")
    monkeypatch.setattr("builtins.input", lambda _: "n")
    assert reset_session.main(["--config", str(tmp_path / "none.yaml")]) == 1
    assert SessionStore(session_file).get() == "s1"


def test_nothing_to_clear(reset_session, session_file, tmp_path):
    assert reset_session.main(["--force", "--config", str(tmp_path / "none.yaml")]) == 0
