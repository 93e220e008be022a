"""Data types shared by the sign-in flow and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class ChatMessage:
    """A single chat message. Only role and content are interpreted."""

    role: str
    content: Any = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ChatMessage":
        if not isinstance(data, dict):
            raise ValueError(f"Chat message must be an object, got {type(data).__name__}")
        extra = {k: v for k, v in data.items() if k not in ("role", "content")}
        return cls(role=data.get("role", ""), content=data.get("content", ""), extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "content": self.content, **self.extra}


@dataclass
class AnonymousWorkSnapshot:
    """Chat messages and file system state captured before sign-in."""

    messages: list[ChatMessage] = field(default_factory=list)
    file_system_data: dict[str, Any] = field(default_factory=dict)

    @property
    def has_messages(self) -> bool:
        return len(self.messages) > 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnonymousWorkSnapshot":
        """Parse the stored shape ``{"messages": [...], "fileSystemData": {...}}``.

        Raises:
            ValueError: If the data does not have that shape
        """
        messages = data.get("messages") or []
        file_system_data = data.get("fileSystemData") or {}
        if not isinstance(messages, list):
            raise ValueError("messages must be a list")
        if not isinstance(file_system_data, dict):
            raise ValueError("fileSystemData must be an object")
        return cls(
            messages=[m if isinstance(m, ChatMessage) else ChatMessage.from_dict(m) for m in messages],
            file_system_data=file_system_data,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "messages": [m.to_dict() for m in self.messages],
            "fileSystemData": self.file_system_data,
        }


@dataclass
class Project:
    """A persisted project owned by the signed-in user."""

    id: str
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def path(self) -> str:
        """Application path for this project."""
        return f"/{self.id}"


@dataclass
class ProjectCreate:
    """Input for creating a project."""

    name: str
    messages: list[Any] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "messages": [m.to_dict() if isinstance(m, ChatMessage) else m for m in self.messages],
            "data": self.data,
        }


@dataclass
class AuthResult:
    """Outcome of a credential check."""

    success: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "AuthResult":
        return cls(success=True)

    @classmethod
    def failure(cls, error: str | None = None) -> "AuthResult":
        return cls(success=False, error=error)
