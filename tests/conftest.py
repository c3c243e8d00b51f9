# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from taskr.database import get_db
from taskr.main import app
from taskr.models import Project, Task, TeamMember, TeamMemberStatus, User
from taskr.models.base import Base
from taskr.rbac import TeamRole

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    """Factory for persisted users."""

    def _make_user(email: str, is_active: bool = True) -> User:
        user = User(email=email, name=email.split("@")[0], is_active=is_active)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_member(db_session):
    """Factory for memberships of a user in an owner's account."""

    def _make_member(
        owner: User,
        user: User | None,
        role: TeamRole,
        status: TeamMemberStatus = TeamMemberStatus.ACCEPTED,
        email: str | None = None,
    ) -> TeamMember:
        member = TeamMember(
            owner_id=owner.id,
            user_id=user.id if user else None,
            email=email or user.email,
            name=user.name if user else None,
            role=role,
            status=status,
        )
        db_session.add(member)
        db_session.commit()
        db_session.refresh(member)
        return member

    return _make_member


@pytest.fixture
def owner(make_user) -> User:
    return make_user("owner@example.com")


@pytest.fixture
def admin(make_user, make_member, owner) -> User:
    user = make_user("admin@example.com")
    make_member(owner, user, TeamRole.ADMIN)
    return user


@pytest.fixture
def member(make_user, make_member, owner) -> User:
    user = make_user("member@example.com")
    make_member(owner, user, TeamRole.MEMBER)
    return user


@pytest.fixture
def outsider(make_user) -> User:
    return make_user("outsider@example.com")


@pytest.fixture
def project(db_session, owner) -> Project:
    project = Project(user_id=owner.id, name="Website relaunch")
    db_session.add(project)
    db_session.commit()
    db_session.refresh(project)
    return project


@pytest.fixture
def task(db_session, project) -> Task:
    task = Task(project_id=project.id, title="Draft sitemap")
    db_session.add(task)
    db_session.commit()
    db_session.refresh(task)
    return task
