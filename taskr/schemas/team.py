# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team member and role schemas."""
import datetime
import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from taskr.models.enums import TeamMemberStatus
from taskr.rbac import Permission, TeamRole, parse_role


def _normalize_role(value: object) -> object:
    # Unknown values fall through to enum validation and fail there
    return parse_role(value) or value


class PermissionEntrySchema(BaseModel):
    """A permission granted to a role, with its description."""

    permission: Permission
    description: str
    domain: str


class RoleSchema(BaseModel):
    """A team role with its label and permissions."""

    role: TeamRole
    display_name: str
    description: str
    permissions: list[PermissionEntrySchema]


class TeamMemberSchema(BaseModel):
    """Schema representing a team member."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    owner_id: uuid.UUID
    user_id: uuid.UUID | None
    email: str
    name: str | None
    role: TeamRole
    status: TeamMemberStatus
    invited_at: datetime.datetime
    accepted_at: datetime.datetime | None


class TeamMemberInviteSchema(BaseModel):
    """Schema for inviting a team member."""

    email: EmailStr
    name: str | None = Field(None, max_length=200)
    role: TeamRole = TeamRole.MEMBER

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v: object) -> object:
        return _normalize_role(v)


class TeamMemberRoleUpdateSchema(BaseModel):
    """Schema for changing a team member's role."""

    role: TeamRole

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v: object) -> object:
        return _normalize_role(v)


class TeamPermissionsSchema(BaseModel):
    """The caller's capabilities in the current team, for UI gating."""

    role: TeamRole | None
    can_access_team_members: bool
    can_manage_members: bool
    is_team_owner: bool
    permissions: list[Permission]


class AssignableMemberSchema(BaseModel):
    """Someone tasks in the current account can be assigned to."""

    id: uuid.UUID
    name: str | None
    email: str
    is_owner: bool


class AccessSchema(BaseModel):
    """Result of a resource access check."""

    allowed: bool
    role: TeamRole | None
