# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class TeamMemberStatus(str, Enum):
    """Team membership status.

    Status flow:
        PENDING → ACCEPTED
            ↓
        DECLINED
    """

    PENDING = "PENDING"  # Invited, not yet accepted
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
