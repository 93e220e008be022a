"""Storage for work done before the user signs in.

Only one snapshot is kept at a time; saving overwrites the previous one.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from uigen.auth.collaborators import AnonymousWorkStore
from uigen.auth.models import AnonymousWorkSnapshot, ChatMessage
from uigen.util.config import resolve_anon_work_path

logger = logging.getLogger(__name__)


def _build_snapshot(messages: list[Any], file_system_data: dict[str, Any]) -> AnonymousWorkSnapshot:
    return AnonymousWorkSnapshot(
        messages=[m if isinstance(m, ChatMessage) else ChatMessage.from_dict(m) for m in messages],
        file_system_data=file_system_data,
    )


class MemoryAnonWorkStore(AnonymousWorkStore):
    """In-process single-slot store."""

    def __init__(self, snapshot: AnonymousWorkSnapshot | None = None):
        self._snapshot = snapshot

    def save(self, messages: list[Any], file_system_data: dict[str, Any]) -> None:
        self._snapshot = _build_snapshot(messages, file_system_data)

    def retrieve(self) -> AnonymousWorkSnapshot | None:
        return self._snapshot

    def clear(self) -> None:
        self._snapshot = None


class FileAnonWorkStore(AnonymousWorkStore):
    """Single-slot store backed by a JSON file."""

    def __init__(self, path: Path | None = None):
        self.path, _ = resolve_anon_work_path(path)

    def save(self, messages: list[Any], file_system_data: dict[str, Any]) -> None:
        """Write the snapshot, replacing any previous one."""
        snapshot = _build_snapshot(messages, file_system_data)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".anon_work_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(snapshot.to_dict(), f)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def retrieve(self) -> AnonymousWorkSnapshot | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.warning("Ignoring unreadable anonymous work file %s", self.path, exc_info=True)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring anonymous work file %s: not a JSON object", self.path)
            return None
        try:
            return AnonymousWorkSnapshot.from_dict(data)
        except ValueError as e:
            logger.warning("Ignoring malformed anonymous work file %s: %s", self.path, e)
            return None

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


def has_anon_work(store: AnonymousWorkStore) -> bool:
    """True when the store holds a snapshot with at least one message."""
    snapshot = store.retrieve()
    return snapshot is not None and snapshot.has_messages
