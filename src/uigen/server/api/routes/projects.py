"""Project endpoints."""

from fastapi import APIRouter, HTTPException

from uigen.server.api.schemas import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectListResponse,
)
from uigen.server.services import StoredProject, get_project_store

router = APIRouter()


def _project_to_response(project: StoredProject) -> ProjectResponse:
    """Convert a StoredProject to a ProjectResponse."""
    return ProjectResponse(
        id=project.id,
        name=project.name,
        messages=project.messages,
        data=project.data,
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


@router.post("", response_model=ProjectResponse, status_code=201)
async def create_project(request: ProjectCreateRequest) -> ProjectResponse:
    """Create a new project from a chat history and file system snapshot."""
    store = get_project_store()
    project = store.create_project(
        name=request.name,
        messages=request.messages,
        data=request.data,
    )
    return _project_to_response(project)


@router.get("", response_model=ProjectListResponse)
async def list_projects() -> ProjectListResponse:
    """List projects, most recently updated first."""
    projects = get_project_store().list_projects()
    return ProjectListResponse(
        projects=[_project_to_response(p) for p in projects],
        total=len(projects),
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: str) -> ProjectResponse:
    """Get details of a specific project."""
    project = get_project_store().get_project(project_id)
    if project is None:
        raise HTTPException(status_code=404, detail=f"Project {project_id} not found")
    return _project_to_response(project)
