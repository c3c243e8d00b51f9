# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for team roles and permission tags."""

import pytest

from taskr.rbac import (
    PERMISSION_DESCRIPTIONS,
    PERMISSION_DOMAINS,
    Permission,
    TeamRole,
    get_permission_domain,
    get_role_description,
    get_role_display_name,
    parse_role,
    resolve_member_role,
)


class TestParseRole:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("OWNER", TeamRole.OWNER),
            ("admin", TeamRole.ADMIN),
            ("  Member ", TeamRole.MEMBER),
            (TeamRole.ADMIN, TeamRole.ADMIN),
        ],
    )
    def test_known_values(self, value, expected):
        assert parse_role(value) is expected

    @pytest.mark.parametrize("value", ["", "GUEST", None, 3, ["ADMIN"]])
    def test_unknown_values(self, value):
        assert parse_role(value) is None


class TestResolveMemberRole:
    def test_account_owner_wins(self):
        assert resolve_member_role("MEMBER", is_account_owner=True) is TeamRole.OWNER

    def test_stored_role(self):
        assert resolve_member_role("ADMIN") is TeamRole.ADMIN

    def test_defaults_to_member(self):
        assert resolve_member_role(None) is TeamRole.MEMBER
        assert resolve_member_role("bogus") is TeamRole.MEMBER


class TestRoleLabels:
    def test_display_names(self):
        assert get_role_display_name(TeamRole.OWNER) == "Account Owner"
        assert get_role_display_name("ADMIN") == "Team Administrator"
        assert get_role_display_name(TeamRole.MEMBER) == "Team Member"
        assert get_role_display_name("GUEST") == "Unknown"

    def test_descriptions(self):
        assert "billing" in get_role_description(TeamRole.ADMIN)
        assert get_role_description("GUEST") == "Unknown role"


class TestPermissionTags:
    def test_domains_partition_permissions(self):
        seen: set[Permission] = set()
        for perms in PERMISSION_DOMAINS.values():
            assert not (seen & perms)
            seen |= perms
        assert seen == set(Permission)

    def test_every_permission_described(self):
        assert set(PERMISSION_DESCRIPTIONS) == set(Permission)

    def test_permission_domain(self):
        assert get_permission_domain(Permission.MANAGE_BILLING) == "billing"
        assert get_permission_domain(Permission.ASSIGN_TASKS) == "task"
