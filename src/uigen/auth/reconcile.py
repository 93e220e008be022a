"""Decide which project a user lands in right after signing in.

Work done anonymously takes priority: if the anonymous store holds a
snapshot with at least one message, it becomes a new project and the store
is cleared. Otherwise the most recent existing project is opened, and a
fresh empty project is created only when the user has none.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable

from .collaborators import AnonymousWorkStore, Navigator, ProjectRepository
from .models import Project, ProjectCreate

logger = logging.getLogger(__name__)

# New Design #N uses 0 <= N < NEW_DESIGN_NUMBER_LIMIT
NEW_DESIGN_NUMBER_LIMIT = 100000


def anon_design_name(now: datetime) -> str:
    """Name for a project created from anonymous work."""
    return f"Design from {now.strftime('%I:%M:%S %p')}"


def new_design_name(rng: random.Random | None = None) -> str:
    """Name for a fresh, empty project."""
    number = (rng or random).randrange(NEW_DESIGN_NUMBER_LIMIT)
    return f"New Design #{number}"


async def reconcile_after_auth(
    anon_store: AnonymousWorkStore,
    projects: ProjectRepository,
    navigator: Navigator,
    *,
    clock: Callable[[], datetime] = datetime.now,
    rng: random.Random | None = None,
) -> Project:
    """Pick (or create) the landing project and navigate to it.

    Args:
        anon_store: Holder of the pre-authentication snapshot
        projects: Repository for the authenticated user's projects
        navigator: Receives the final project path
        clock: Source of the current time for anonymous design names
        rng: Source of randomness for new design names

    Returns:
        The project that was navigated to
    """
    snapshot = anon_store.retrieve()

    if snapshot is not None and snapshot.has_messages:
        project = await projects.create_project(
            ProjectCreate(
                name=anon_design_name(clock()),
                messages=snapshot.messages,
                data=snapshot.file_system_data,
            )
        )
        anon_store.clear()
        logger.info("Saved anonymous work as project %s", project.id)
        navigator.go_to(project.path)
        return project

    existing = await projects.list_projects()
    if existing:
        project = existing[0]
        logger.info("Opening most recent project %s", project.id)
        navigator.go_to(project.path)
        return project

    project = await projects.create_project(
        ProjectCreate(name=new_design_name(rng), messages=[], data={})
    )
    logger.info("Created first project %s", project.id)
    navigator.go_to(project.path)
    return project
