# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team roles."""

from enum import Enum


class TeamRole(str, Enum):
    """Role of a member within a team account.

    Role flow:
        MEMBER ⇄ ADMIN   (promotion by the owner only)
        OWNER            (frozen, never changed or removed)
    """

    OWNER = "OWNER"  # Account owner, exactly one per team
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


ROLE_DISPLAY_NAMES: dict[TeamRole, str] = {
    TeamRole.OWNER: "Account Owner",
    TeamRole.ADMIN: "Team Administrator",
    TeamRole.MEMBER: "Team Member",
}

ROLE_DESCRIPTIONS: dict[TeamRole, str] = {
    TeamRole.OWNER: (
        "Full access to everything. Can manage all team members, projects, "
        "and account settings."
    ),
    TeamRole.ADMIN: (
        "Can manage team members and has full access to all projects and "
        "tasks. Cannot access billing or account settings."
    ),
    TeamRole.MEMBER: (
        "Limited access to assigned projects and tasks only. Cannot invite "
        "team members or manage projects."
    ),
}


def parse_role(value: object) -> TeamRole | None:
    """Parse a persisted or transmitted role value.

    Returns None for anything that is not a known role, so callers can
    reject it at the boundary.
    """
    if isinstance(value, TeamRole):
        return value
    if not isinstance(value, str):
        return None
    try:
        return TeamRole(value.strip().upper())
    except ValueError:
        return None


def resolve_member_role(
    member_role: object | None, is_account_owner: bool = False
) -> TeamRole:
    """Resolve the effective role of a team member.

    Account owners are always OWNER. A member without a usable stored role
    falls back to MEMBER.
    """
    if is_account_owner:
        return TeamRole.OWNER
    return parse_role(member_role) or TeamRole.MEMBER


def get_role_display_name(role: object) -> str:
    parsed = parse_role(role)
    return ROLE_DISPLAY_NAMES[parsed] if parsed else "Unknown"


def get_role_description(role: object) -> str:
    parsed = parse_role(role)
    return ROLE_DESCRIPTIONS[parsed] if parsed else "Unknown role"
