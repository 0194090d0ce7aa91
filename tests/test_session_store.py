"""
单元测试：会话存储
"""
import sys
from pathlib import Path

import pytest

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent))

from sectorform.adapters.session_store import QueryParamSessionStore, SessionStore
from sectorform.infra.exceptions import StoreError


class TestSessionStore:
    """会话存储测试类"""

    @pytest.fixture
    def store(self, tmp_path):
        return SessionStore(tmp_path / "data" / "session.json")

    def test_get_absent(self, store):
        """从未设置时返回 None"""
        assert store.get() is None

    def test_set_then_get(self, store):
        store.set("abc123")
        assert store.get() == "abc123"

    def test_set_overwrites(self, store):
        store.set("first")
        store.set("second")
        assert store.get() == "second"

    def test_value_is_opaque_string(self, store):
        store.set(42)
        assert store.get() == "42"

    def test_clear(self, store):
        store.set("abc123")
        store.clear()
        assert store.get() is None
        assert not store.path.exists()

    def test_clear_when_absent_is_noop(self, store):
        store.clear()
        assert store.get() is None

    def test_persists_across_instances(self, store):
        store.set("s1")
        assert SessionStore(store.path).get() == "s1"

    def test_corrupt_file_treated_as_absent(self, store):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text("{not json", encoding="utf-8")
        assert store.get() is None

    def test_set_failure_raises_store_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        # 父路径是普通文件，无法创建目录
        store = SessionStore(blocker / "session.json")
        with pytest.raises(StoreError):
            store.set("s1")

    def test_empty_id_treated_as_absent(self, store):
        store.path.parent.mkdir(parents=True, exist_ok=True)
        store.path.write_text('{"session_id": ""}', encoding="utf-8")
        assert store.get() is None

    def test_set_empty_raises_store_error(self, store):
        with pytest.raises(StoreError):
            store.set("")
        assert store.get() is None


class TestQueryParamSessionStore:
    """查询参数会话存储测试类"""

    @pytest.fixture
    def params(self):
        return {}

    @pytest.fixture
    def store(self, params):
        return QueryParamSessionStore(params)

    def test_get_absent(self, store):
        assert store.get() is None

    def test_set_then_get(self, store, params):
        store.set("abc123")
        assert store.get() == "abc123"
        assert params == {"session": "abc123"}

    def test_clear(self, store, params):
        store.set("abc123")
        store.clear()
        assert store.get() is None
        assert "session" not in params

    def test_clear_when_absent_is_noop(self, store):
        store.clear()
        assert store.get() is None

    def test_empty_param_treated_as_absent(self, params, store):
        params["session"] = ""
        assert store.get() is None

    def test_set_empty_raises_store_error(self, store):
        with pytest.raises(StoreError):
            store.set("")

    def test_stores_are_independent(self):
        a = QueryParamSessionStore({})
        b = QueryParamSessionStore({})
        a.set("s1")
        assert b.get() is None
