# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from taskr.api.v1 import access, roles, team_members

api_router = APIRouter()

# Role catalogue
api_router.include_router(roles.router, tags=["roles"])

# Team member routes
api_router.include_router(team_members.router, tags=["team-members"])

# Project and task access checks
api_router.include_router(access.router, tags=["access"])
