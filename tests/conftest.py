"""
Shared fixtures for the Inverso API tests.

Every test gets a fresh in-memory SQLite database and a TestClient wired to it.
"""

import os

# Must be set before the application modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ.pop("ADMIN_EMAIL", None)

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from auth.utils import create_access_token, get_password_hash
from database.config import get_db, init_db
from database.models import Base, User, UserRole, Creator, Brand
from database.marketplace_models import Campaign, CampaignApplication, CampaignStatusDB, ApplicationStatusDB
from server import app


# ====================
# Database
# ====================


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Session for arranging data and asserting on it directly."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


# ====================
# Factories
# ====================


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user.id})}"}


class Factory:
    """Builds persisted users, profiles, campaigns and applications."""

    def __init__(self, db):
        self.db = db
        self._seq = 0

    def _next(self) -> int:
        self._seq += 1
        return self._seq

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def user(self, role=UserRole.CREATOR, email=None, password="secret123") -> User:
        n = self._next()
        return self._save(User(
            email=email or f"user{n}@example.com",
            password_hash=get_password_hash(password),
            role=role,
        ))

    def creator(self, user=None, **fields) -> Creator:
        user = user or self.user(UserRole.CREATOR)
        n = self._next()
        defaults = {
            "username": f"creator{n}",
            "display_name": f"Creator {n}",
            "categories": [],
        }
        defaults.update(fields)
        return self._save(Creator(user_id=user.id, **defaults))

    def brand(self, user=None, **fields) -> Brand:
        user = user or self.user(UserRole.BRAND)
        n = self._next()
        defaults = {"company_name": f"Brand {n}", "industry": "fashion"}
        defaults.update(fields)
        return self._save(Brand(user_id=user.id, **defaults))

    def campaign(self, brand=None, **fields) -> Campaign:
        brand = brand or self.brand()
        start = datetime(2026, 1, 1, 9, 0)
        defaults = {
            "title": "Summer launch",
            "description": "Promote the summer collection",
            "budget": 5000.0,
            "start_date": start,
            "end_date": start + timedelta(days=30),
            "deliverables": ["1 reel", "3 stories"],
            "status": CampaignStatusDB.ACTIVE,
        }
        defaults.update(fields)
        return self._save(Campaign(brand_id=brand.id, **defaults))

    def application(self, campaign, creator, status=ApplicationStatusDB.PENDING, **fields) -> CampaignApplication:
        return self._save(CampaignApplication(
            campaign_id=campaign.id,
            creator_id=creator.id,
            status=status,
            portfolio=[],
            **fields
        ))


@pytest.fixture
def factory(db):
    return Factory(db)


@pytest.fixture
def admin(factory):
    return factory.user(UserRole.ADMIN, email="admin@example.com")


@pytest.fixture
def brand(factory):
    return factory.brand()


@pytest.fixture
def creator(factory):
    return factory.creator()


@pytest.fixture
def brand_headers(brand):
    return auth_headers(brand.user)


@pytest.fixture
def creator_headers(creator):
    return auth_headers(creator.user)


@pytest.fixture
def admin_headers(admin):
    return auth_headers(admin)


@pytest.fixture
def headers_for():
    """Bearer headers for any user: headers_for(user)."""
    return auth_headers
