# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import uuid

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from taskr.database import get_db
from taskr.models import User
from taskr.rbac import Permission, PermissionChecker, TeamRole, get_default_checker
from taskr.services import team_service

__all__ = [
    "get_current_user",
    "get_db",
    "get_permission_checker",
    "get_team_owner_id",
    "get_team_role",
    "require_permission",
]


def get_permission_checker() -> PermissionChecker:
    """Get the permission checker used for enforcement."""
    return get_default_checker()


def get_current_user(
    db: Session = Depends(get_db),
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> User:
    """Get the current user from the id set by the authentication layer."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        user_id = uuid.UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user id",
        ) from None

    user = db.get(User, user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def get_team_owner_id(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    x_team_owner_id: str | None = Header(default=None, alias="X-Team-Owner-Id"),
) -> uuid.UUID:
    """Get the account the request acts on.

    Without the header, members act in the account that accepted them and
    everyone else in their own.
    """
    if not x_team_owner_id:
        return team_service.get_default_team_owner_id(db, current_user)
    try:
        return uuid.UUID(x_team_owner_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="X-Team-Owner-Id must be a valid UUID",
        ) from None


def get_team_role(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    owner_id: uuid.UUID = Depends(get_team_owner_id),
) -> TeamRole:
    """Get the caller's role in the current team."""
    role = team_service.resolve_team_role(db, current_user, owner_id)
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not a member of this team",
        )
    return role


def require_permission(*permissions: Permission):
    """Dependency for permission-based authorization. Yields the caller's role.

    The caller must hold every listed permission.
    """

    def dependency(
        role: TeamRole = Depends(get_team_role),
        checker: PermissionChecker = Depends(get_permission_checker),
    ) -> TeamRole:
        granted, missing = checker.check_permissions_subset(role, permissions)
        if not granted:
            required = ", ".join(sorted(p.value for p in missing))
            team_service.security_logger.warning(
                f"Permission denied: role={team_service.role_label(role)} "
                f"required={required}"
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {required}",
            )
        return role

    return dependency
