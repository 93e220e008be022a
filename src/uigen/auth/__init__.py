"""Post-authentication project reconciliation."""

from uigen.auth.models import (
    AnonymousWorkSnapshot,
    AuthResult,
    ChatMessage,
    Project,
    ProjectCreate,
)
from uigen.auth.collaborators import (
    AnonymousWorkStore,
    CredentialService,
    Navigator,
    ProjectRepository,
)
from uigen.auth.reconcile import reconcile_after_auth
from uigen.auth.orchestrator import AuthOrchestrator

__all__ = [
    "AnonymousWorkSnapshot",
    "AuthResult",
    "ChatMessage",
    "Project",
    "ProjectCreate",
    "AnonymousWorkStore",
    "CredentialService",
    "Navigator",
    "ProjectRepository",
    "reconcile_after_auth",
    "AuthOrchestrator",
]
