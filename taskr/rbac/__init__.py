# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team role and permission model."""

from taskr.rbac.permissions import (
    PERMISSION_DESCRIPTIONS,
    PERMISSION_DOMAINS,
    Permission,
    get_permission_domain,
)
from taskr.rbac.policy import (
    PermissionChecker,
    RolePermissionTable,
    default_role_permissions,
    get_default_checker,
)
from taskr.rbac.roles import (
    ROLE_DESCRIPTIONS,
    ROLE_DISPLAY_NAMES,
    TeamRole,
    get_role_description,
    get_role_display_name,
    parse_role,
    resolve_member_role,
)

__all__ = [
    "PERMISSION_DESCRIPTIONS",
    "PERMISSION_DOMAINS",
    "ROLE_DESCRIPTIONS",
    "ROLE_DISPLAY_NAMES",
    "Permission",
    "PermissionChecker",
    "RolePermissionTable",
    "TeamRole",
    "default_role_permissions",
    "get_default_checker",
    "get_permission_domain",
    "get_role_description",
    "get_role_display_name",
    "parse_role",
    "resolve_member_role",
]
