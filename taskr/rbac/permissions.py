# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team permission tags."""

from enum import Enum


class Permission(str, Enum):
    """Capabilities checked against a member's role."""

    # Team management
    INVITE_TEAM_MEMBERS = "invite_team_members"
    REMOVE_TEAM_MEMBERS = "remove_team_members"
    CHANGE_TEAM_ROLES = "change_team_roles"
    VIEW_TEAM_MEMBERS = "view_team_members"

    # Project management
    CREATE_PROJECTS = "create_projects"
    EDIT_ALL_PROJECTS = "edit_all_projects"
    DELETE_ALL_PROJECTS = "delete_all_projects"
    VIEW_ALL_PROJECTS = "view_all_projects"
    EDIT_ASSIGNED_PROJECTS = "edit_assigned_projects"
    VIEW_ASSIGNED_PROJECTS = "view_assigned_projects"

    # Task management
    CREATE_TASKS = "create_tasks"
    EDIT_ALL_TASKS = "edit_all_tasks"
    DELETE_ALL_TASKS = "delete_all_tasks"
    ASSIGN_TASKS = "assign_tasks"
    VIEW_ALL_TASKS = "view_all_tasks"
    EDIT_ASSIGNED_TASKS = "edit_assigned_tasks"
    VIEW_ASSIGNED_TASKS = "view_assigned_tasks"

    # Account & billing
    MANAGE_BILLING = "manage_billing"
    MANAGE_ACCOUNT_SETTINGS = "manage_account_settings"

    # Reports
    VIEW_ALL_REPORTS = "view_all_reports"
    VIEW_ASSIGNED_REPORTS = "view_assigned_reports"


PERMISSION_DOMAINS: dict[str, frozenset[Permission]] = {
    "team": frozenset(
        {
            Permission.INVITE_TEAM_MEMBERS,
            Permission.REMOVE_TEAM_MEMBERS,
            Permission.CHANGE_TEAM_ROLES,
            Permission.VIEW_TEAM_MEMBERS,
        }
    ),
    "project": frozenset(
        {
            Permission.CREATE_PROJECTS,
            Permission.EDIT_ALL_PROJECTS,
            Permission.DELETE_ALL_PROJECTS,
            Permission.VIEW_ALL_PROJECTS,
            Permission.EDIT_ASSIGNED_PROJECTS,
            Permission.VIEW_ASSIGNED_PROJECTS,
        }
    ),
    "task": frozenset(
        {
            Permission.CREATE_TASKS,
            Permission.EDIT_ALL_TASKS,
            Permission.DELETE_ALL_TASKS,
            Permission.ASSIGN_TASKS,
            Permission.VIEW_ALL_TASKS,
            Permission.EDIT_ASSIGNED_TASKS,
            Permission.VIEW_ASSIGNED_TASKS,
        }
    ),
    "billing": frozenset(
        {
            Permission.MANAGE_BILLING,
            Permission.MANAGE_ACCOUNT_SETTINGS,
        }
    ),
    "reporting": frozenset(
        {
            Permission.VIEW_ALL_REPORTS,
            Permission.VIEW_ASSIGNED_REPORTS,
        }
    ),
}

PERMISSION_DESCRIPTIONS: dict[Permission, str] = {
    Permission.INVITE_TEAM_MEMBERS: "Invite new members to the team",
    Permission.REMOVE_TEAM_MEMBERS: "Remove members from the team",
    Permission.CHANGE_TEAM_ROLES: "Change the role of team members",
    Permission.VIEW_TEAM_MEMBERS: "View the team member list",
    Permission.CREATE_PROJECTS: "Create projects",
    Permission.EDIT_ALL_PROJECTS: "Edit any project in the account",
    Permission.DELETE_ALL_PROJECTS: "Delete any project in the account",
    Permission.VIEW_ALL_PROJECTS: "View every project in the account",
    Permission.EDIT_ASSIGNED_PROJECTS: "Edit projects the member is assigned to",
    Permission.VIEW_ASSIGNED_PROJECTS: "View projects the member is assigned to",
    Permission.CREATE_TASKS: "Create tasks",
    Permission.EDIT_ALL_TASKS: "Edit any task in the account",
    Permission.DELETE_ALL_TASKS: "Delete any task in the account",
    Permission.ASSIGN_TASKS: "Assign tasks to team members",
    Permission.VIEW_ALL_TASKS: "View every task in the account",
    Permission.EDIT_ASSIGNED_TASKS: "Edit tasks assigned to the member",
    Permission.VIEW_ASSIGNED_TASKS: "View tasks assigned to the member",
    Permission.MANAGE_BILLING: "Manage subscription and billing",
    Permission.MANAGE_ACCOUNT_SETTINGS: "Manage account settings",
    Permission.VIEW_ALL_REPORTS: "View reports for the whole account",
    Permission.VIEW_ASSIGNED_REPORTS: "View reports for assigned work",
}


def get_permission_domain(permission: Permission) -> str:
    """Get the domain a permission is grouped under."""
    for domain, members in PERMISSION_DOMAINS.items():
        if permission in members:
            return domain
    raise KeyError(permission)
