"""Environment-driven configuration for uigen."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_SERVER_URL = "http://localhost:8000"
DEFAULT_APP_URL = "http://localhost:3000"


def resolve_server_url(server_url: str | None = None) -> str:
    """Base URL of the uigen API backend."""
    if server_url:
        return server_url.rstrip("/")
    return os.environ.get("UIGEN_SERVER_URL", DEFAULT_SERVER_URL).rstrip("/")


def resolve_app_url(app_url: str | None = None) -> str:
    """Base URL of the browser application that project paths are opened under."""
    if app_url:
        return app_url.rstrip("/")
    return os.environ.get("UIGEN_APP_URL", DEFAULT_APP_URL).rstrip("/")


def resolve_anon_work_path(path: Path | None = None) -> tuple[Path, str]:
    """Resolve where anonymous work is kept, preferring explicit overrides.

    Returns:
        Tuple of (resolved_path, reason)
    """
    if path:
        return Path(path).expanduser().resolve(), "argument"

    env_path = os.environ.get("UIGEN_ANON_WORK_PATH")
    if env_path:
        return Path(env_path).expanduser().resolve(), "env:UIGEN_ANON_WORK_PATH"

    return Path.home() / ".uigen" / "anon_work.json", "default"
