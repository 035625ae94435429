"""
Pytest configuration and fixtures for tests.

Postgres is replaced with in-memory SQLite (one shared connection),
Redis with fakeredis and Celery runs tasks eagerly.
"""

import os

# Environment must be set before any app module is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CELERY_TASK_ALWAYS_EAGER", "1")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

from decimal import Decimal

import fakeredis
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_redis
from app.celery_worker import celery_app
from app.data.database import Base, get_db
from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.domain.enums import ProductStatus, UserRole
from app.main import create_app
from app.services.lock_service import LockService
from app.services.session_service import SessionService
from app.utils.security import hash_password

import app.data.models  # noqa: F401  (register all tables)

celery_app.conf.task_always_eager = True


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = TestingSession()
    yield session
    session.close()


# ============================================================================
# Redis Fixtures
# ============================================================================

@pytest.fixture
def fake_redis():
    client = fakeredis.FakeRedis(decode_responses=True)
    yield client
    client.flushall()


@pytest.fixture
def lock_service(fake_redis):
    return LockService(client=fake_redis)


@pytest.fixture
def session_service(fake_redis):
    return SessionService(client=fake_redis)


# ============================================================================
# API Fixtures
# ============================================================================

@pytest.fixture
def client(db_session, fake_redis):
    app = create_app()

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = lambda: fake_redis
    return TestClient(app)


# ============================================================================
# Factories
# ============================================================================

@pytest.fixture
def make_user(db_session):
    counter = {"n": 0}

    def _make_user(role=UserRole.client, password="secret", email=None):
        counter["n"] += 1
        user = UserModel(
            username=f"user{counter['n']}",
            email=email or f"user{counter['n']}@example.com",
            password_hash=hash_password(password),
            role=role,
        )
        db_session.add(user)
        db_session.commit()
        return user

    return _make_user


@pytest.fixture
def make_product(db_session):
    counter = {"n": 0}

    def _make_product(price="100.00", quantity=10, name=None, status=ProductStatus.active):
        counter["n"] += 1
        product = ProductModel(
            batch_number=counter["n"],
            name=name or f"Product {counter['n']}",
            price=Decimal(price),
            quantity_available=quantity,
            status=status,
        )
        db_session.add(product)
        db_session.commit()
        return product

    return _make_product


@pytest.fixture
def auth_headers(session_service):
    def _auth_headers(user):
        token = session_service.create_session(user.id)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture
def user(make_user):
    return make_user()


@pytest.fixture
def admin(make_user):
    return make_user(role=UserRole.admin)
