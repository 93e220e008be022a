"""Tests for post-sign-in project reconciliation."""

import random
import re
from datetime import datetime

import pytest

from uigen.auth.collaborators import ProjectRepository
from uigen.auth.models import Project, ProjectCreate
from uigen.auth.reconcile import (
    NEW_DESIGN_NUMBER_LIMIT,
    anon_design_name,
    new_design_name,
    reconcile_after_auth,
)
from uigen.util.anon_work import MemoryAnonWorkStore
from uigen.util.navigation import HistoryNavigator


class FakeRepository(ProjectRepository):
    """Repository that records calls and assigns sequential ids."""

    def __init__(self, existing=None):
        self.existing = list(existing or [])
        self.created: list[ProjectCreate] = []
        self.list_calls = 0

    async def list_projects(self):
        self.list_calls += 1
        return list(self.existing)

    async def create_project(self, project):
        self.created.append(project)
        return Project(id=f"created-{len(self.created)}", name=project.name)


FIXED_NOW = datetime(2024, 5, 17, 15, 4, 5)


class TestNames:
    def test_anon_design_name_uses_time(self):
        assert anon_design_name(FIXED_NOW) == "Design from 03:04:05 PM"

    def test_new_design_name_range(self):
        rng = random.Random(1234)
        for _ in range(200):
            name = new_design_name(rng)
            match = re.fullmatch(r"New Design #(\d{1,5})", name)
            assert match
            assert 0 <= int(match.group(1)) < NEW_DESIGN_NUMBER_LIMIT

    def test_new_design_name_without_rng(self):
        assert re.fullmatch(r"New Design #\d+", new_design_name())


class TestReconcile:
    @pytest.mark.asyncio
    async def test_anonymous_work_becomes_project(self):
        store = MemoryAnonWorkStore()
        store.save([{"role": "user", "content": "Hello"}], {"files": []})
        snapshot = store.retrieve()
        repo = FakeRepository(existing=[Project(id="old", name="Old")])
        nav = HistoryNavigator()

        project = await reconcile_after_auth(store, repo, nav, clock=lambda: FIXED_NOW)

        assert project.id == "created-1"
        assert len(repo.created) == 1
        created = repo.created[0]
        assert created.name == "Design from 03:04:05 PM"
        assert created.messages is snapshot.messages
        assert created.data == {"files": []}
        assert store.retrieve() is None
        assert repo.list_calls == 0
        assert nav.history == ["/created-1"]

    @pytest.mark.asyncio
    async def test_message_order_preserved(self):
        store = MemoryAnonWorkStore()
        store.save(
            [
                {"role": "user", "content": "first"},
                {"role": "assistant", "content": "second"},
                {"role": "user", "content": "third"},
            ],
            {},
        )
        repo = FakeRepository()

        await reconcile_after_auth(store, repo, HistoryNavigator())

        contents = [m.content for m in repo.created[0].messages]
        assert contents == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_no_anonymous_work_opens_most_recent(self):
        store = MemoryAnonWorkStore()
        repo = FakeRepository(existing=[Project(id="p1", name="A"), Project(id="p2", name="B")])
        nav = HistoryNavigator()

        project = await reconcile_after_auth(store, repo, nav)

        assert project.id == "p1"
        assert repo.created == []
        assert nav.history == ["/p1"]

    @pytest.mark.asyncio
    async def test_no_projects_creates_empty_design(self):
        repo = FakeRepository()
        nav = HistoryNavigator()

        await reconcile_after_auth(MemoryAnonWorkStore(), repo, nav, rng=random.Random(7))

        created = repo.created[0]
        assert re.fullmatch(r"New Design #\d+", created.name)
        assert created.messages == []
        assert created.data == {}
        assert nav.history == ["/created-1"]

    @pytest.mark.asyncio
    async def test_empty_snapshot_left_in_place(self):
        store = MemoryAnonWorkStore()
        store.save([], {"files": ["App.jsx"]})
        repo = FakeRepository(existing=[Project(id="existing", name="E")])
        nav = HistoryNavigator()

        await reconcile_after_auth(store, repo, nav)

        assert repo.created == []
        assert store.retrieve() is not None
        assert nav.history == ["/existing"]
