"""REST API client for the uigen backend."""

from datetime import datetime
from typing import Any

import httpx

from uigen.auth.collaborators import CredentialService, ProjectRepository
from uigen.auth.models import AuthResult, Project, ProjectCreate
from uigen.util.config import resolve_server_url


class APIClient(CredentialService, ProjectRepository):
    """Async client for the uigen REST API.

    Serves as both the credential service and the project repository of the
    sign-in flow.
    """

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Base URL of the uigen server (defaults to UIGEN_SERVER_URL)
            transport: Optional httpx transport, mainly for tests
        """
        self.base_url = resolve_server_url(base_url)
        self._client = httpx.AsyncClient(timeout=30.0, transport=transport)

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.close()

    def _url(self, path: str) -> str:
        """Build full URL for API path."""
        return f"{self.base_url}/api/v1{path}"

    def _parse_datetime(self, value: str | None) -> datetime | None:
        """Parse ISO datetime string."""
        if not value:
            return None
        return datetime.fromisoformat(value.replace("Z", "+00:00"))

    # Health check
    async def health_check(self) -> dict[str, Any]:
        """Check server health."""
        resp = await self._client.get(f"{self.base_url}/health")
        resp.raise_for_status()
        return resp.json()

    # Auth
    async def sign_in(self, email: str, password: str) -> AuthResult:
        """Sign in with email and password."""
        return await self._post_credentials("/auth/sign-in", email, password)

    async def sign_up(self, email: str, password: str) -> AuthResult:
        """Register with email and password."""
        return await self._post_credentials("/auth/sign-up", email, password)

    async def _post_credentials(self, path: str, email: str, password: str) -> AuthResult:
        resp = await self._client.post(
            self._url(path),
            json={"email": email, "password": password},
        )
        # Rejected credentials come back as 4xx with a result body
        if resp.is_client_error:
            try:
                data = resp.json()
            except ValueError:
                data = None
            if isinstance(data, dict) and "success" in data:
                return self._parse_auth_result(data)
        resp.raise_for_status()
        return self._parse_auth_result(resp.json())

    def _parse_auth_result(self, data: dict) -> AuthResult:
        """Parse auth response data."""
        return AuthResult(
            success=bool(data.get("success", False)),
            error=data.get("error"),
        )

    # Projects
    async def list_projects(self) -> list[Project]:
        """List projects, most recently updated first."""
        resp = await self._client.get(self._url("/projects"))
        resp.raise_for_status()
        data = resp.json()
        return [self._parse_project(p) for p in data.get("projects", [])]

    async def get_project(self, project_id: str) -> Project:
        """Get a project by ID."""
        resp = await self._client.get(self._url(f"/projects/{project_id}"))
        resp.raise_for_status()
        return self._parse_project(resp.json())

    async def create_project(self, project: ProjectCreate) -> Project:
        """Create a new project."""
        resp = await self._client.post(self._url("/projects"), json=project.to_dict())
        resp.raise_for_status()
        return self._parse_project(resp.json())

    def _parse_project(self, data: dict) -> Project:
        """Parse project response data."""
        return Project(
            id=data["id"],
            name=data.get("name", ""),
            created_at=self._parse_datetime(data.get("created_at")),
            updated_at=self._parse_datetime(data.get("updated_at")),
        )
