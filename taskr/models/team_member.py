# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Team member model."""

from __future__ import annotations

import datetime
import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskr.models.base import Base, TimestampMixin, utcnow
from taskr.models.enums import TeamMemberStatus
from taskr.rbac.roles import TeamRole

if TYPE_CHECKING:
    from taskr.models.user import User


class TeamMember(Base, TimestampMixin):
    """Membership of a user (or a pending invitee) in an owner's account."""

    __tablename__ = "team_members"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    owner_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Set once the invitee has a user account
    user_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    role: Mapped[TeamRole] = mapped_column(
        Enum(TeamRole, name="team_role"),
        default=TeamRole.MEMBER,
        nullable=False,
    )
    status: Mapped[TeamMemberStatus] = mapped_column(
        Enum(TeamMemberStatus, name="team_member_status"),
        default=TeamMemberStatus.PENDING,
        nullable=False,
    )
    invited_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    accepted_at: Mapped[datetime.datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        UniqueConstraint("owner_id", "email", name="_team_member_owner_email_uc"),
    )

    owner: Mapped[User] = relationship(
        "User", foreign_keys=[owner_id], back_populates="owned_team_members"
    )
    user: Mapped[User | None] = relationship(
        "User", foreign_keys=[user_id], back_populates="memberships"
    )
