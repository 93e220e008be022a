"""In-memory project storage for the development server."""

import itertools
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

_sequence = itertools.count()


@dataclass
class StoredProject:
    """A project with its chat history and file system data."""

    name: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    messages: list[dict[str, Any]] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    # Insertion order, breaks ties between equal timestamps
    seq: int = field(default_factory=lambda: next(_sequence))


class ProjectStore:
    """Thread-safe project store."""

    def __init__(self):
        self._projects: dict[str, StoredProject] = {}
        self._lock = threading.RLock()

    def create_project(
        self,
        name: str,
        messages: list[dict[str, Any]] | None = None,
        data: dict[str, Any] | None = None,
    ) -> StoredProject:
        """Create a new project.

        Args:
            name: Project name
            messages: Chat history, oldest first
            data: Serialized virtual file system

        Returns:
            Newly created StoredProject
        """
        with self._lock:
            project = StoredProject(
                name=name,
                messages=list(messages or []),
                data=dict(data or {}),
            )
            self._projects[project.id] = project
            return project

    def get_project(self, project_id: str) -> StoredProject | None:
        with self._lock:
            return self._projects.get(project_id)

    def list_projects(self) -> list[StoredProject]:
        """List all projects, most recently updated first."""
        with self._lock:
            return sorted(
                self._projects.values(),
                key=lambda p: (p.updated_at, p.seq),
                reverse=True,
            )

    def touch(self, project_id: str) -> bool:
        """Mark a project as just updated.

        Returns:
            True if the project exists
        """
        with self._lock:
            project = self._projects.get(project_id)
            if project is None:
                return False
            project.updated_at = datetime.now(timezone.utc)
            project.seq = next(_sequence)
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._projects)


# Global project store instance
_project_store: ProjectStore | None = None


def get_project_store() -> ProjectStore:
    """Get the global project store instance."""
    global _project_store
    if _project_store is None:
        _project_store = ProjectStore()
    return _project_store


def reset_project_store() -> None:
    """Reset the global project store (for testing)."""
    global _project_store
    _project_store = None
