# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Project and task access checks for team members."""

from sqlalchemy.orm import Session

from taskr.models import Project, Task, User
from taskr.rbac import PermissionChecker, get_default_checker
from taskr.services.team_service import resolve_team_role


def can_access_project(
    db: Session,
    user: User,
    project: Project,
    checker: PermissionChecker | None = None,
) -> bool:
    """Check if a user may access a project in its owner's account.

    A member counts as assigned to a project when any of its tasks is
    assigned to them.
    """
    checker = checker or get_default_checker()
    role = resolve_team_role(db, user, project.user_id)
    if role is None:
        return False

    is_assigned = (
        db.query(Task)
        .filter(Task.project_id == project.id, Task.assigned_to == user.id)
        .first()
        is not None
    )
    return checker.can_access_project(role, project.user_id, user.id, is_assigned)


def can_access_task(
    db: Session,
    user: User,
    task: Task,
    checker: PermissionChecker | None = None,
) -> bool:
    """Check if a user may access a task in its project owner's account."""
    checker = checker or get_default_checker()
    owner_id = task.project.user_id
    role = resolve_team_role(db, user, owner_id)
    if role is None:
        return False

    return checker.can_access_task(
        role, owner_id, user.id, is_assigned=task.assigned_to == user.id
    )
