import os

# Must be set before app.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_ENV", "development")

import pytest
from fastapi.testclient import TestClient

from app.core.database import Base, SessionLocal, engine
from app.core.password import get_password_hash
from app.domain.entities.AdminEntity import AdminEntity
from app.main import app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_tables():
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin(db):
    entity = AdminEntity(
        username="admin",
        email=ADMIN_EMAIL,
        password=get_password_hash(ADMIN_PASSWORD),
    )
    db.add(entity)
    db.commit()
    db.refresh(entity)
    return entity


@pytest.fixture
def admin_headers(client, admin):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": response.json()["accessToken"]}


@pytest.fixture
def registration_payload():
    return {
        "fullName": "John Smith",
        "email": "john@example.com",
        "phone": "(555) 987-6543",
        "age": 52,
        "zipCode": "10001",
        "healthInfo": "Type 2 diabetes, well controlled",
        "consent": True,
    }


@pytest.fixture
def interest_payload():
    return {
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "mobileNumber": "555-123-4567",
        "zipCode": "94110",
        "age": 45,
        "currentDiagnosis": "HCC",
        "currentHealthStatus": "stable",
    }
