# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role catalogue API endpoints."""

from fastapi import APIRouter, Depends

from taskr.api.deps import get_current_user, get_permission_checker
from taskr.models import User
from taskr.rbac import (
    PERMISSION_DESCRIPTIONS,
    PermissionChecker,
    TeamRole,
    get_permission_domain,
    get_role_description,
    get_role_display_name,
)
from taskr.schemas.team import PermissionEntrySchema, RoleSchema

router = APIRouter()


@router.get("/roles", response_model=list[RoleSchema], summary="List team roles")
def list_roles(
    current_user: User = Depends(get_current_user),
    checker: PermissionChecker = Depends(get_permission_checker),
) -> list[RoleSchema]:
    """List every team role with its label, description and permissions."""
    return [
        RoleSchema(
            role=role,
            display_name=get_role_display_name(role),
            description=get_role_description(role),
            permissions=[
                PermissionEntrySchema(
                    permission=permission,
                    description=PERMISSION_DESCRIPTIONS[permission],
                    domain=get_permission_domain(permission),
                )
                for permission in sorted(
                    checker.get_role_permissions(role), key=lambda p: p.value
                )
            ],
        )
        for role in TeamRole
    ]
