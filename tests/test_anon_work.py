"""Tests for anonymous work storage."""

import json
from unittest.mock import AsyncMock, Mock

import pytest

from uigen.auth.models import AnonymousWorkSnapshot, AuthResult, ChatMessage, Project
from uigen.auth.orchestrator import AuthOrchestrator
from uigen.util.anon_work import FileAnonWorkStore, MemoryAnonWorkStore, has_anon_work
from uigen.util.navigation import HistoryNavigator


class TestMemoryAnonWorkStore:
    def test_empty_by_default(self):
        store = MemoryAnonWorkStore()
        assert store.retrieve() is None
        assert has_anon_work(store) is False

    def test_save_overwrites(self):
        store = MemoryAnonWorkStore()
        store.save([{"role": "user", "content": "one"}], {})
        store.save([{"role": "user", "content": "two"}], {"files": []})

        snapshot = store.retrieve()
        assert [m.content for m in snapshot.messages] == ["two"]
        assert snapshot.file_system_data == {"files": []}

    def test_clear_is_idempotent(self):
        store = MemoryAnonWorkStore()
        store.save([{"role": "user", "content": "hi"}], {})
        store.clear()
        store.clear()
        assert store.retrieve() is None

    def test_empty_messages_do_not_count(self):
        store = MemoryAnonWorkStore(AnonymousWorkSnapshot(messages=[], file_system_data={"a": 1}))
        assert store.retrieve() is not None
        assert has_anon_work(store) is False


class TestFileAnonWorkStore:
    def test_default_path_from_env(self, tmp_path, monkeypatch):
        target = tmp_path / "anon.json"
        monkeypatch.setenv("UIGEN_ANON_WORK_PATH", str(target))
        assert FileAnonWorkStore().path == target.resolve()

    def test_missing_file_returns_none(self, tmp_path):
        store = FileAnonWorkStore(tmp_path / "nope.json")
        assert store.retrieve() is None

    def test_save_and_retrieve(self, tmp_path):
        path = tmp_path / "nested" / "anon.json"
        store = FileAnonWorkStore(path)
        store.save(
            [{"role": "user", "content": "Hello", "id": "m1"}, ChatMessage(role="assistant", content="Hi")],
            {"files": {"/App.jsx": "export default () => null"}},
        )

        on_disk = json.loads(path.read_text())
        assert on_disk["messages"][0] == {"role": "user", "content": "Hello", "id": "m1"}
        assert "fileSystemData" in on_disk

        snapshot = store.retrieve()
        assert [m.role for m in snapshot.messages] == ["user", "assistant"]
        assert snapshot.messages[0].extra == {"id": "m1"}
        assert snapshot.file_system_data == {"files": {"/App.jsx": "export default () => null"}}
        assert has_anon_work(store) is True

    def test_no_temp_files_left_behind(self, tmp_path):
        store = FileAnonWorkStore(tmp_path / "anon.json")
        store.save([{"role": "user", "content": "x"}], {})
        store.save([{"role": "user", "content": "y"}], {})
        assert sorted(p.name for p in tmp_path.iterdir()) == ["anon.json"]

    def test_corrupt_file_returns_none(self, tmp_path):
        path = tmp_path / "anon.json"
        path.write_text("{not json")
        assert FileAnonWorkStore(path).retrieve() is None

    def test_non_object_returns_none(self, tmp_path):
        path = tmp_path / "anon.json"
        path.write_text("[1, 2, 3]")
        assert FileAnonWorkStore(path).retrieve() is None

    def test_clear_removes_file(self, tmp_path):
        path = tmp_path / "anon.json"
        store = FileAnonWorkStore(path)
        store.save([{"role": "user", "content": "x"}], {})
        store.clear()
        store.clear()
        assert not path.exists()
        assert store.retrieve() is None

    @pytest.mark.parametrize(
        "content",
        [
            {"messages": ["hello"], "fileSystemData": {}},
            {"messages": {"role": "user"}, "fileSystemData": {}},
            {"messages": [{"role": "user", "content": "hi"}], "fileSystemData": ["App.jsx"]},
        ],
    )
    def test_wrong_shape_returns_none(self, tmp_path, content):
        path = tmp_path / "anon.json"
        path.write_text(json.dumps(content))
        store = FileAnonWorkStore(path)
        assert store.retrieve() is None
        assert has_anon_work(store) is False

    @pytest.mark.asyncio
    async def test_malformed_file_does_not_break_sign_in(self, tmp_path):
        path = tmp_path / "anon.json"
        path.write_text(json.dumps({"messages": ["hello"], "fileSystemData": {}}))
        credentials = Mock()
        credentials.sign_in = AsyncMock(return_value=AuthResult(success=True))
        projects = Mock()
        projects.list_projects = AsyncMock(return_value=[Project(id="p1", name="Existing")])
        projects.create_project = AsyncMock()
        nav = HistoryNavigator()
        orchestrator = AuthOrchestrator(credentials, FileAnonWorkStore(path), projects, nav)

        result = await orchestrator.sign_in("a@example.com", "password123")

        assert result.success is True
        projects.create_project.assert_not_called()
        assert nav.history == ["/p1"]
        assert path.exists()
