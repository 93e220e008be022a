"""Services layer for the uigen server."""

from .project_store import (
    StoredProject,
    ProjectStore,
    get_project_store,
    reset_project_store,
)
from .credential_check import check_credentials

__all__ = [
    # Project store
    "StoredProject",
    "ProjectStore",
    "get_project_store",
    "reset_project_store",
    # Credentials
    "check_credentials",
]
