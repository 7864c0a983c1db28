import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from mddroner.api import deps
from mddroner.api.routes import auth, bookings, misc, pricing
from mddroner.db import models
from mddroner.db.session import Base, get_db


@pytest.fixture()
def db_session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


class FakeNotifier:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, str]] = []
        self.error = error

    def __call__(self, title: str, content: str) -> None:
        self.calls.append((title, content))
        if self.error is not None:
            raise self.error


@pytest.fixture()
def notifier():
    return FakeNotifier()


class Caller:
    """Identity returned by the overridden ``get_current_user`` dependency."""

    def __init__(self) -> None:
        self.user: models.User | None = None

    def as_admin(self) -> None:
        self.user = models.User(id=1, login="admin", role=models.UserRole.admin)

    def as_user(self) -> None:
        self.user = models.User(id=2, login="customer", role=models.UserRole.user)

    def as_anonymous(self) -> None:
        self.user = None


@pytest.fixture()
def api_client(notifier):
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    TestingSessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )
    Base.metadata.create_all(bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    caller = Caller()

    test_app = FastAPI()
    test_app.include_router(auth.router, prefix="/api/v1")
    test_app.include_router(bookings.router, prefix="/api/v1")
    test_app.include_router(pricing.router, prefix="/api/v1")
    test_app.include_router(misc.router, prefix="/api/v1")

    test_app.dependency_overrides[get_db] = override_get_db
    test_app.dependency_overrides[deps.get_current_user] = lambda: caller.user
    test_app.dependency_overrides[deps.get_notifier] = lambda: notifier

    with TestClient(test_app) as client:
        yield client, TestingSessionLocal, caller

    test_app.dependency_overrides.clear()
