# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from taskr.services import access_service, team_service

__all__ = [
    "access_service",
    "team_service",
]
