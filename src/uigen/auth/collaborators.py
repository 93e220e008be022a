"""Interfaces for the services the sign-in flow depends on.

Each collaborator is injected into AuthOrchestrator, so a live backend is
never required to exercise the flow.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import AnonymousWorkSnapshot, AuthResult, Project, ProjectCreate


class CredentialService(ABC):
    """Verifies credentials against an auth backend."""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthResult:
        """Sign in an existing user. May raise on transport failure."""

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> AuthResult:
        """Register a new user. May raise on transport failure."""


class AnonymousWorkStore(ABC):
    """Single-slot holder for work done before authentication."""

    @abstractmethod
    def retrieve(self) -> AnonymousWorkSnapshot | None:
        """Return the stored snapshot, or None. Has no side effects."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored snapshot. Safe to call when empty."""


class ProjectRepository(ABC):
    """Lists and creates projects for the authenticated user."""

    @abstractmethod
    async def list_projects(self) -> list[Project]:
        """Return the user's projects, most recently updated first."""

    @abstractmethod
    async def create_project(self, project: ProjectCreate) -> Project:
        """Persist a new project and return it with its assigned id."""


class Navigator(ABC):
    """Moves the application view to a path."""

    @abstractmethod
    def go_to(self, path: str) -> None:
        """Navigate to ``path``."""
