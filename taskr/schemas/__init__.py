# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""
from taskr.schemas.team import (
    AccessSchema,
    AssignableMemberSchema,
    PermissionEntrySchema,
    RoleSchema,
    TeamMemberInviteSchema,
    TeamMemberRoleUpdateSchema,
    TeamMemberSchema,
    TeamPermissionsSchema,
)

__all__ = [
    "AccessSchema",
    "AssignableMemberSchema",
    "PermissionEntrySchema",
    "RoleSchema",
    "TeamMemberInviteSchema",
    "TeamMemberRoleUpdateSchema",
    "TeamMemberSchema",
    "TeamPermissionsSchema",
]
