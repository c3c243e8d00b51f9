# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Service for team membership with server-side permission enforcement."""

import logging
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session

from taskr.models import TeamMember, TeamMemberStatus, User
from taskr.models.base import utcnow
from taskr.rbac import Permission, PermissionChecker, TeamRole, get_default_checker
from taskr.rbac.roles import parse_role, resolve_member_role

logger = logging.getLogger(__name__)
security_logger = logging.getLogger("taskr.security")


class TeamServiceError(Exception):
    """Base exception for team service errors."""


class PermissionDeniedError(TeamServiceError):
    """Raised when the acting role may not perform an operation."""


class TeamMemberNotFoundError(TeamServiceError):
    """Raised when a team member or invitation does not exist."""


class TeamMemberConflictError(TeamServiceError):
    """Raised when a membership would duplicate an existing one."""


class InvalidRoleError(TeamServiceError):
    """Raised for unknown roles or roles that cannot be assigned."""


class InvalidInvitationError(TeamServiceError):
    """Raised when an invitation targets someone who cannot be invited."""


def _checker(checker: PermissionChecker | None) -> PermissionChecker:
    return checker or get_default_checker()


def role_label(role: object) -> str | None:
    """Plain role value for log lines; None when the role is unknown."""
    parsed = parse_role(role)
    return parsed.value if parsed else None


def _require_permission(
    checker: PermissionChecker, role: TeamRole | None, permission: Permission
) -> None:
    if not checker.has_permission(role, permission):
        security_logger.warning(
            f"Permission denied: role={role_label(role)} "
            f"required={permission.value}"
        )
        raise PermissionDeniedError(f"Permission denied: {permission.value}")


def get_default_team_owner_id(db: Session, user: User) -> uuid.UUID:
    """Get the account a user acts in when no team is selected.

    A user with an accepted membership works in the inviting owner's account;
    everyone else works in their own.
    """
    member = (
        db.query(TeamMember)
        .filter(
            TeamMember.user_id == user.id,
            TeamMember.status == TeamMemberStatus.ACCEPTED,
        )
        .order_by(TeamMember.invited_at)
        .first()
    )
    return member.owner_id if member else user.id


def resolve_team_role(
    db: Session, user: User, owner_id: uuid.UUID
) -> TeamRole | None:
    """Resolve a user's role within the account owned by owner_id.

    Returns None when the user has no access to the account: inactive users,
    non-members, and pending or declined invitations.
    """
    if not user.is_active:
        return None
    if user.id == owner_id:
        return resolve_member_role(None, is_account_owner=True)

    member = (
        db.query(TeamMember)
        .filter(
            TeamMember.owner_id == owner_id,
            TeamMember.user_id == user.id,
            TeamMember.status == TeamMemberStatus.ACCEPTED,
        )
        .first()
    )
    if not member:
        return None
    role = resolve_member_role(member.role)
    if role is TeamRole.OWNER:
        # Only the account owner holds OWNER
        logger.warning(f"Team member {member.id} stores OWNER role; ignoring")
        return None
    return role


def list_team_members(db: Session, owner_id: uuid.UUID) -> list[TeamMember]:
    """List all members of an account, newest invitation first."""
    return (
        db.query(TeamMember)
        .filter(TeamMember.owner_id == owner_id)
        .order_by(TeamMember.invited_at.desc())
        .all()
    )


def list_assignable_members(db: Session, owner_id: uuid.UUID) -> list[dict]:
    """List the people tasks in an account can be assigned to.

    The account owner comes first, followed by accepted members ordered by
    name.
    """
    result = []
    owner = db.get(User, owner_id)
    if owner:
        result.append(
            {"id": owner.id, "name": owner.name, "email": owner.email, "is_owner": True}
        )

    members = (
        db.query(TeamMember)
        .filter(
            TeamMember.owner_id == owner_id,
            TeamMember.status == TeamMemberStatus.ACCEPTED,
        )
        .order_by(TeamMember.name)
        .all()
    )
    for member in members:
        user = member.user
        result.append(
            {
                "id": user.id if user else member.id,
                "name": (user.name if user else None) or member.name,
                "email": user.email if user else member.email,
                "is_owner": False,
            }
        )
    return result


def get_team_member(
    db: Session, owner_id: uuid.UUID, member_id: uuid.UUID
) -> TeamMember:
    """Get a member of the given account or raise TeamMemberNotFoundError."""
    member = (
        db.query(TeamMember)
        .filter(TeamMember.id == member_id, TeamMember.owner_id == owner_id)
        .first()
    )
    if not member:
        raise TeamMemberNotFoundError(f"Team member {member_id} not found")
    return member


def invite_team_member(
    db: Session,
    actor_role: TeamRole | None,
    owner_id: uuid.UUID,
    email: str,
    name: str | None = None,
    role: TeamRole | str = TeamRole.MEMBER,
    checker: PermissionChecker | None = None,
) -> TeamMember:
    """Invite someone into an account.

    An invitation is treated as a change from MEMBER to the requested role,
    so only the owner can invite admins. Invitees that already have a user
    account are accepted immediately.
    """
    checker = _checker(checker)
    new_role = parse_role(role)
    if new_role is None:
        raise InvalidRoleError(f"Invalid role: {role}")
    if new_role is TeamRole.OWNER:
        raise InvalidRoleError("Cannot invite a member as OWNER")

    _require_permission(checker, actor_role, Permission.INVITE_TEAM_MEMBERS)
    if not checker.can_change_role(TeamRole.MEMBER, new_role, actor_role):
        security_logger.warning(
            f"Invite denied: role={role_label(actor_role)} "
            f"cannot invite as {new_role.value}"
        )
        raise PermissionDeniedError(f"Cannot invite a member as {new_role.value}")

    email = email.strip().lower()
    owner = db.get(User, owner_id)
    if owner and owner.email.lower() == email:
        raise InvalidInvitationError("Cannot invite yourself as a team member")

    existing = (
        db.query(TeamMember)
        .filter(TeamMember.owner_id == owner_id, TeamMember.email == email)
        .first()
    )
    if existing:
        raise TeamMemberConflictError(
            "Team member with this email already exists"
        )

    invitee = db.query(User).filter(func.lower(User.email) == email).first()
    member = TeamMember(
        owner_id=owner_id,
        email=email,
        name=name,
        role=new_role,
    )
    if invitee:
        member.user_id = invitee.id
        member.status = TeamMemberStatus.ACCEPTED
        member.accepted_at = utcnow()
    else:
        member.status = TeamMemberStatus.PENDING

    db.add(member)
    db.commit()
    db.refresh(member)
    logger.info(
        f"Invited {email} to account {owner_id} as {new_role.value} "
        f"({member.status.value})"
    )
    return member


def change_member_role(
    db: Session,
    actor_role: TeamRole | None,
    member: TeamMember,
    new_role: TeamRole | str,
    checker: PermissionChecker | None = None,
) -> TeamMember:
    """Change a member's role after checking the actor's authority."""
    checker = _checker(checker)
    parsed = parse_role(new_role)
    if parsed is None:
        raise InvalidRoleError(f"Invalid role: {new_role}")
    # TODO: ownership transfer needs its own confirmation flow
    if parsed is TeamRole.OWNER:
        raise InvalidRoleError("Ownership transfer is not supported")

    _require_permission(checker, actor_role, Permission.CHANGE_TEAM_ROLES)
    if not checker.can_change_role(member.role, parsed, actor_role):
        security_logger.warning(
            f"Role change denied: role={role_label(actor_role)} member={member.id} "
            f"{member.role.value}->{parsed.value}"
        )
        raise PermissionDeniedError("Cannot change role")

    previous = member.role
    member.role = parsed
    db.commit()
    db.refresh(member)
    logger.info(
        f"Changed role of team member {member.id}: "
        f"{previous.value} -> {parsed.value}"
    )
    return member


def remove_team_member(
    db: Session,
    actor_role: TeamRole | None,
    member: TeamMember,
    checker: PermissionChecker | None = None,
) -> None:
    """Remove a member the actor is allowed to manage."""
    checker = _checker(checker)
    _require_permission(checker, actor_role, Permission.REMOVE_TEAM_MEMBERS)
    if not checker.can_manage_user(actor_role, member.role):
        security_logger.warning(
            f"Removal denied: role={role_label(actor_role)} member={member.id} "
            f"({member.role.value})"
        )
        raise PermissionDeniedError("Cannot manage this user")

    member_id, owner_id = member.id, member.owner_id
    db.delete(member)
    db.commit()
    logger.info(f"Removed team member {member_id} from account {owner_id}")


def _get_pending_invitation(
    db: Session, user: User, member_id: uuid.UUID
) -> TeamMember:
    member = (
        db.query(TeamMember)
        .filter(
            TeamMember.id == member_id,
            TeamMember.email == user.email.lower(),
            TeamMember.status == TeamMemberStatus.PENDING,
        )
        .first()
    )
    if not member:
        raise TeamMemberNotFoundError("Team invitation not found")
    return member


def accept_invitation(db: Session, user: User, member_id: uuid.UUID) -> TeamMember:
    """Accept a pending invitation addressed to the user's email."""
    member = _get_pending_invitation(db, user, member_id)
    member.status = TeamMemberStatus.ACCEPTED
    member.user_id = user.id
    member.accepted_at = utcnow()
    db.commit()
    db.refresh(member)
    logger.info(f"User {user.id} accepted invitation {member.id}")
    return member


def decline_invitation(db: Session, user: User, member_id: uuid.UUID) -> TeamMember:
    """Decline a pending invitation addressed to the user's email."""
    member = _get_pending_invitation(db, user, member_id)
    member.status = TeamMemberStatus.DECLINED
    db.commit()
    db.refresh(member)
    logger.info(f"User {user.id} declined invitation {member.id}")
    return member


def get_team_permissions_summary(
    role: TeamRole | None, checker: PermissionChecker | None = None
) -> dict:
    """Summarize what a role may do in the team for UI gating.

    The summary is advisory; every mutating endpoint re-checks on its own.
    """
    checker = _checker(checker)
    permissions = checker.get_role_permissions(role)
    return {
        "role": role,
        "can_access_team_members": Permission.VIEW_TEAM_MEMBERS in permissions,
        "can_manage_members": bool(
            permissions
            & {
                Permission.INVITE_TEAM_MEMBERS,
                Permission.REMOVE_TEAM_MEMBERS,
                Permission.CHANGE_TEAM_ROLES,
            }
        ),
        "is_team_owner": role is TeamRole.OWNER,
        "permissions": sorted(p.value for p in permissions),
    }
