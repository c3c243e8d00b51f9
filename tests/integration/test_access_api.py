# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for project and task access endpoints."""

from taskr.api.deps import get_permission_checker
from taskr.main import app
from taskr.rbac import PermissionChecker, RolePermissionTable


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_project_access_for_admin(client, admin, project):
    response = client.get(
        f"/api/v1/projects/{project.id}/access",
        headers={"X-User-Id": str(admin.id)},
    )
    assert response.status_code == 200
    assert response.json() == {"allowed": True, "role": "ADMIN"}


def test_task_access_for_unassigned_member(client, member, task):
    response = client.get(
        f"/api/v1/tasks/{task.id}/access",
        headers={"X-User-Id": str(member.id)},
    )
    assert response.status_code == 200
    assert response.json() == {"allowed": False, "role": "MEMBER"}


def test_task_access_for_assigned_member(client, db_session, member, task):
    task.assigned_to = member.id
    db_session.commit()

    response = client.get(
        f"/api/v1/tasks/{task.id}/access",
        headers={"X-User-Id": str(member.id)},
    )
    assert response.json()["allowed"] is True


def test_outsider_has_no_role(client, outsider, project):
    response = client.get(
        f"/api/v1/projects/{project.id}/access",
        headers={"X-User-Id": str(outsider.id)},
    )
    assert response.json() == {"allowed": False, "role": None}


def test_missing_project(client, owner):
    response = client.get(
        "/api/v1/projects/00000000-0000-0000-0000-000000000000/access",
        headers={"X-User-Id": str(owner.id)},
    )
    assert response.status_code == 404


def test_checker_override_applies_to_routes(client, owner):
    app.dependency_overrides[get_permission_checker] = lambda: PermissionChecker(
        RolePermissionTable.from_mapping({})
    )
    response = client.get("/api/v1/team-members", headers={"X-User-Id": str(owner.id)})
    assert response.status_code == 403
