# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Project and task access API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from taskr.api.deps import get_current_user, get_db, get_permission_checker
from taskr.models import Project, Task, User
from taskr.rbac import PermissionChecker
from taskr.schemas.team import AccessSchema
from taskr.services import access_service, team_service

router = APIRouter()


@router.get(
    "/projects/{project_id}/access",
    response_model=AccessSchema,
    summary="Check access to a project",
)
def check_project_access(
    project_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    checker: PermissionChecker = Depends(get_permission_checker),
) -> AccessSchema:
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    return AccessSchema(
        allowed=access_service.can_access_project(db, current_user, project, checker),
        role=team_service.resolve_team_role(db, current_user, project.user_id),
    )


@router.get(
    "/tasks/{task_id}/access",
    response_model=AccessSchema,
    summary="Check access to a task",
)
def check_task_access(
    task_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    checker: PermissionChecker = Depends(get_permission_checker),
) -> AccessSchema:
    task = db.get(Task, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")

    return AccessSchema(
        allowed=access_service.can_access_task(db, current_user, task, checker),
        role=team_service.resolve_team_role(db, current_user, task.project.user_id),
    )
