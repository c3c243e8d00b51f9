# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskr.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from taskr.models.project import Project
    from taskr.models.team_member import TeamMember


class User(Base, TimestampMixin):
    """An authenticated user. Every user owns their own team account."""

    __tablename__ = "users"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    owned_team_members: Mapped[list[TeamMember]] = relationship(
        "TeamMember",
        foreign_keys="[TeamMember.owner_id]",
        back_populates="owner",
        cascade="all, delete-orphan",
    )
    memberships: Mapped[list[TeamMember]] = relationship(
        "TeamMember",
        foreign_keys="[TeamMember.user_id]",
        back_populates="user",
    )
    projects: Mapped[list[Project]] = relationship(
        "Project",
        back_populates="user",
        cascade="all, delete-orphan",
    )
