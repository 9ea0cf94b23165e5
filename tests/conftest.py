import os

# Settings are read at import time; provide test values before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite:///./store_ledger_test.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-store-ledger")

import pytest
from datetime import datetime, timedelta, UTC
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from jose import jwt

from app.database import get_db
from app.models.base import Base
from app.config import settings
# Import all model classes to ensure they're registered with SQLAlchemy
from app.models.role import UserRole
from app.models.user import User
from app.models.store import Store
from app.models.store_access import StoreAccessGrant
from app.models.transaction import Transaction
# Import FastAPI app AFTER model imports
from app.main import app

# Test database (SQLite in-memory for speed)
# Use StaticPool to ensure all connections share the same in-memory database
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create fresh database for each test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """FastAPI test client with test database"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def create_test_token(user_id: str = "test-user-123", expired: bool = False, **claims) -> str:
    """
    Generate valid JWT token for testing.

    Args:
        user_id: User ID to embed in 'sub' claim
        expired: If True, create expired token
        claims: Extra profile claims (email, first_name, ...)

    Returns:
        Encoded JWT token
    """
    if expired:
        exp = datetime.now(UTC) - timedelta(minutes=5)
    else:
        exp = datetime.now(UTC) + timedelta(minutes=15)

    payload = {"sub": user_id, "exp": exp, "iat": datetime.now(UTC), **claims}

    token = jwt.encode(payload, settings.SECRET_KEY, algorithm="HS256")
    return token


def headers_for(user_id: str) -> dict:
    """Authorization headers for an arbitrary user"""
    return {"Authorization": f"Bearer {create_test_token(user_id=user_id)}"}


def make_user(db_session, user_id: str, role: UserRole = UserRole.STORE_OWNER) -> User:
    user = User(id=user_id, role=role)
    db_session.add(user)
    db_session.commit()
    return user


def make_store(db_session, owner: User, name: str = "Test Store") -> Store:
    store = Store(name=name, owner_id=owner.id)
    db_session.add(store)
    db_session.commit()
    return store


@pytest.fixture
def mock_jwt_token():
    """Generate valid JWT token"""
    return create_test_token()


@pytest.fixture
def auth_headers(mock_jwt_token):
    """Authorization headers for authenticated requests"""
    return {"Authorization": f"Bearer {mock_jwt_token}"}


@pytest.fixture
def user_a_headers():
    """Authorization headers for user A"""
    return headers_for("user-a")


@pytest.fixture
def user_b_headers():
    """Authorization headers for user B"""
    return headers_for("user-b")


@pytest.fixture
def admin_user(db_session):
    """User row with the Admin role"""
    return make_user(db_session, "admin-user", role=UserRole.ADMIN)


@pytest.fixture
def admin_headers(admin_user):
    """Authorization headers for the admin user"""
    return headers_for(admin_user.id)


@pytest.fixture
def clerk_user(db_session):
    """User row with the Clerk role"""
    return make_user(db_session, "clerk-user", role=UserRole.CLERK)


@pytest.fixture
def clerk_headers(clerk_user):
    """Authorization headers for the clerk user"""
    return headers_for(clerk_user.id)


@pytest.fixture
def store(client, user_a_headers):
    """Store created through the API by user A"""
    response = client.post("/api/stores", headers=user_a_headers, json={"name": "Corner Shop"})
    assert response.status_code == 201
    return response.json()
