# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team member API endpoints."""

import uuid
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from taskr.api.deps import (
    get_current_user,
    get_db,
    get_permission_checker,
    get_team_owner_id,
    get_team_role,
    require_permission,
)
from taskr.models import User
from taskr.rbac import Permission, PermissionChecker, TeamRole
from taskr.schemas.team import (
    AssignableMemberSchema,
    TeamMemberInviteSchema,
    TeamMemberRoleUpdateSchema,
    TeamMemberSchema,
    TeamPermissionsSchema,
)
from taskr.services import team_service
from taskr.services.team_service import (
    InvalidInvitationError,
    InvalidRoleError,
    PermissionDeniedError,
    TeamMemberConflictError,
    TeamMemberNotFoundError,
    TeamServiceError,
)

router = APIRouter()

_ERROR_STATUS = {
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    TeamMemberNotFoundError: status.HTTP_404_NOT_FOUND,
    TeamMemberConflictError: status.HTTP_409_CONFLICT,
    InvalidRoleError: status.HTTP_400_BAD_REQUEST,
    InvalidInvitationError: status.HTTP_400_BAD_REQUEST,
}


def _raise_http(error: TeamServiceError) -> NoReturn:
    status_code = _ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST)
    raise HTTPException(status_code=status_code, detail=str(error)) from error


@router.get(
    "/team-members/permissions",
    response_model=TeamPermissionsSchema,
    summary="Get the caller's team permissions",
)
def get_team_permissions(
    role: TeamRole = Depends(get_team_role),
    checker: PermissionChecker = Depends(get_permission_checker),
) -> TeamPermissionsSchema:
    """Summarize what the caller may do in the current team.

    Intended for UI gating only; mutating endpoints re-check.
    """
    return TeamPermissionsSchema(
        **team_service.get_team_permissions_summary(role, checker)
    )


@router.get(
    "/team-members/assignable",
    response_model=list[AssignableMemberSchema],
    summary="List members tasks can be assigned to",
)
def list_assignable_members(
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_team_owner_id),
    role: TeamRole = Depends(require_permission(Permission.ASSIGN_TASKS)),
):
    """List the account owner and accepted members. Requires assign_tasks."""
    return team_service.list_assignable_members(db, owner_id)


@router.get(
    "/team-members",
    response_model=list[TeamMemberSchema],
    summary="List team members",
)
def list_team_members(
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_team_owner_id),
    role: TeamRole = Depends(require_permission(Permission.VIEW_TEAM_MEMBERS)),
):
    """List members of the current team. Requires view_team_members."""
    return team_service.list_team_members(db, owner_id)


@router.post(
    "/team-members",
    response_model=TeamMemberSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Invite a team member",
)
def invite_team_member(
    member_in: TeamMemberInviteSchema,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_team_owner_id),
    role: TeamRole = Depends(require_permission(Permission.INVITE_TEAM_MEMBERS)),
    checker: PermissionChecker = Depends(get_permission_checker),
):
    """Invite a member into the current team. Only the owner may invite admins."""
    try:
        return team_service.invite_team_member(
            db,
            role,
            owner_id,
            email=member_in.email,
            name=member_in.name,
            role=member_in.role,
            checker=checker,
        )
    except TeamServiceError as e:
        _raise_http(e)


@router.put(
    "/team-members/{member_id}",
    response_model=TeamMemberSchema,
    summary="Change a team member's role",
)
def update_team_member_role(
    member_id: uuid.UUID,
    role_in: TeamMemberRoleUpdateSchema,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_team_owner_id),
    role: TeamRole = Depends(require_permission(Permission.CHANGE_TEAM_ROLES)),
    checker: PermissionChecker = Depends(get_permission_checker),
):
    """Change the role of a member. The owner's role can never change."""
    try:
        member = team_service.get_team_member(db, owner_id, member_id)
        return team_service.change_member_role(
            db, role, member, role_in.role, checker=checker
        )
    except TeamServiceError as e:
        _raise_http(e)


@router.delete(
    "/team-members/{member_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a team member",
)
def remove_team_member(
    member_id: uuid.UUID,
    db: Session = Depends(get_db),
    owner_id: uuid.UUID = Depends(get_team_owner_id),
    role: TeamRole = Depends(require_permission(Permission.REMOVE_TEAM_MEMBERS)),
    checker: PermissionChecker = Depends(get_permission_checker),
) -> None:
    """Remove a member the caller is allowed to manage."""
    try:
        member = team_service.get_team_member(db, owner_id, member_id)
        team_service.remove_team_member(db, role, member, checker=checker)
    except TeamServiceError as e:
        _raise_http(e)


@router.post(
    "/team-members/accept/{member_id}",
    response_model=TeamMemberSchema,
    summary="Accept a team invitation",
)
def accept_invitation(
    member_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return team_service.accept_invitation(db, current_user, member_id)
    except TeamServiceError as e:
        _raise_http(e)


@router.post(
    "/team-members/decline/{member_id}",
    response_model=TeamMemberSchema,
    summary="Decline a team invitation",
)
def decline_invitation(
    member_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    try:
        return team_service.decline_invitation(db, current_user, member_id)
    except TeamServiceError as e:
        _raise_http(e)
