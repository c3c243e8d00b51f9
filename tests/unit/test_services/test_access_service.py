# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for access_service."""

from taskr.models import Task
from taskr.services import access_service


def test_owner_accesses_project_and_task(db_session, owner, project, task):
    assert access_service.can_access_project(db_session, owner, project) is True
    assert access_service.can_access_task(db_session, owner, task) is True


def test_admin_accesses_unassigned_work(db_session, admin, project, task):
    assert access_service.can_access_project(db_session, admin, project) is True
    assert access_service.can_access_task(db_session, admin, task) is True


def test_member_denied_unassigned_work(db_session, member, project, task):
    assert access_service.can_access_project(db_session, member, project) is False
    assert access_service.can_access_task(db_session, member, task) is False


def test_member_accesses_assigned_task_and_its_project(
    db_session, member, project, task
):
    task.assigned_to = member.id
    db_session.commit()

    assert access_service.can_access_task(db_session, member, task) is True
    assert access_service.can_access_project(db_session, member, project) is True


def test_member_assigned_elsewhere_denied(db_session, member, project, task):
    other = Task(project_id=project.id, title="Other", assigned_to=member.id)
    db_session.add(other)
    db_session.commit()

    assert access_service.can_access_task(db_session, member, task) is False
    assert access_service.can_access_task(db_session, member, other) is True


def test_outsider_denied_even_when_assigned(db_session, outsider, project, task):
    task.assigned_to = outsider.id
    db_session.commit()

    assert access_service.can_access_task(db_session, outsider, task) is False
    assert access_service.can_access_project(db_session, outsider, project) is False
