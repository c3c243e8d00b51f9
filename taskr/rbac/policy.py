# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role/permission policy for team accounts.

The checker answers three kinds of questions:

- capability lookups (``has_permission``) against a read-only
  :class:`RolePermissionTable`,
- relational authority (``can_manage_user``, ``can_change_role``), which is a
  strict role hierarchy and does not consult the table,
- resource access for projects and tasks.

Every check fails closed: an unrecognized role yields an empty permission set
or ``False`` instead of raising.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from taskr.rbac.permissions import Permission
from taskr.rbac.roles import TeamRole, parse_role


@dataclass(frozen=True)
class RolePermissionTable:
    """Immutable mapping of each role to the permissions it holds."""

    grants: Mapping[TeamRole, frozenset[Permission]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[TeamRole, Iterable[Permission]]
    ) -> "RolePermissionTable":
        """Build a table, freezing every permission set."""
        frozen = {TeamRole(role): frozenset(perms) for role, perms in mapping.items()}
        return cls(grants=MappingProxyType(frozen))

    def permissions_for(self, role: object) -> frozenset[Permission]:
        parsed = parse_role(role)
        if parsed is None:
            return frozenset()
        return self.grants.get(parsed, frozenset())


_ASSIGNED_ONLY = frozenset(
    {
        Permission.VIEW_ASSIGNED_PROJECTS,
        Permission.EDIT_ASSIGNED_PROJECTS,
        Permission.VIEW_ASSIGNED_TASKS,
        Permission.EDIT_ASSIGNED_TASKS,
        Permission.VIEW_ASSIGNED_REPORTS,
    }
)

_ADMIN_EXCLUDED = frozenset(
    {
        Permission.MANAGE_BILLING,
        Permission.MANAGE_ACCOUNT_SETTINGS,
    }
)


def default_role_permissions() -> RolePermissionTable:
    """Build the stock role table.

    OWNER holds every permission, ADMIN everything except billing and
    account settings, MEMBER only the assigned-work permissions.
    """
    return RolePermissionTable.from_mapping(
        {
            TeamRole.OWNER: frozenset(Permission),
            TeamRole.ADMIN: frozenset(Permission) - _ADMIN_EXCLUDED,
            TeamRole.MEMBER: _ASSIGNED_ONLY,
        }
    )


class PermissionChecker:
    """Answers capability and authority questions for team roles."""

    def __init__(self, table: RolePermissionTable) -> None:
        self.table = table

    def get_role_permissions(self, role: object) -> frozenset[Permission]:
        """Get the permission set of a role (empty for unknown roles)."""
        return self.table.permissions_for(role)

    def has_permission(self, role: object, permission: object) -> bool:
        """Check if a role holds a permission.

        Args:
            role: TeamRole or role string
            permission: Permission or permission string

        Returns:
            True only if the permission is in the role's set
        """
        try:
            perm = Permission(permission)
        except ValueError:
            return False
        return perm in self.get_role_permissions(role)

    def check_permissions_subset(
        self, role: object, required: Iterable[Permission]
    ) -> tuple[bool, set[Permission]]:
        """Check that a role holds all required permissions.

        Returns:
            Tuple of (all_granted, missing_permissions)
        """
        missing = set(required) - self.get_role_permissions(role)
        return len(missing) == 0, missing

    def can_manage_user(self, manager_role: object, target_role: object) -> bool:
        """Check if a member with manager_role may manage one with target_role."""
        manager = parse_role(manager_role)
        target = parse_role(target_role)
        if manager is None or target is None:
            return False

        if target is TeamRole.OWNER:
            return False
        if manager is TeamRole.OWNER:
            return True
        if manager is TeamRole.ADMIN and target is TeamRole.MEMBER:
            return True
        return False

    def can_change_role(
        self, current_role: object, new_role: object, changer_role: object
    ) -> bool:
        """Check if changer_role may move a member from current_role to new_role."""
        current = parse_role(current_role)
        new = parse_role(new_role)
        changer = parse_role(changer_role)
        if current is None or new is None or changer is None:
            return False

        # OWNER is frozen
        if current is TeamRole.OWNER:
            return False
        if new is TeamRole.ADMIN and changer is not TeamRole.OWNER:
            return False
        if changer is TeamRole.OWNER:
            return True
        if changer is TeamRole.ADMIN and new is TeamRole.MEMBER:
            return True
        return False

    def can_access_project(
        self,
        role: object,
        project_owner_id: Any,
        user_id: Any,
        is_assigned: bool = False,
    ) -> bool:
        """Check project access. Members only see assigned or own projects."""
        return self._can_access(role, project_owner_id, user_id, is_assigned)

    def can_access_task(
        self,
        role: object,
        task_owner_id: Any,
        user_id: Any,
        is_assigned: bool = False,
    ) -> bool:
        """Check task access. Members only see assigned or own tasks."""
        return self._can_access(role, task_owner_id, user_id, is_assigned)

    def _can_access(
        self, role: object, owner_id: Any, user_id: Any, is_assigned: bool
    ) -> bool:
        parsed = parse_role(role)
        if parsed in (TeamRole.OWNER, TeamRole.ADMIN):
            return True
        if parsed is TeamRole.MEMBER:
            return is_assigned or (user_id is not None and owner_id == user_id)
        return False


_default_checker: PermissionChecker | None = None


def get_default_checker() -> PermissionChecker:
    """Get the process-wide checker built from the stock table."""
    global _default_checker
    if _default_checker is None:
        _default_checker = PermissionChecker(default_role_permissions())
    return _default_checker
