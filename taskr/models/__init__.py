# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from taskr.models.base import Base, TimestampMixin
from taskr.models.enums import TeamMemberStatus
from taskr.models.project import Project, Task
from taskr.models.team_member import TeamMember
from taskr.models.user import User

__all__ = [
    "Base",
    "Project",
    "Task",
    "TeamMember",
    "TeamMemberStatus",
    "TimestampMixin",
    "User",
]
