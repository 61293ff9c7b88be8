import os
from contextlib import ExitStack
from datetime import datetime, timedelta, timezone
from typing import Callable, Generator

import pytest
from dotenv import load_dotenv
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

load_dotenv(".env.test", override=True)


def _apply_test_env() -> None:
    os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    os.environ.setdefault("DB_AUTO_CREATE", "0")


_apply_test_env()

from offset_pagination.core.config import Settings
from offset_pagination.db.base import Base
from offset_pagination.db.models.customer import Customer
from offset_pagination.db.session import get_db
from offset_pagination.main import create_app


@pytest.fixture(scope="function")
def engine():
    eng = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture(scope="function")
def seed_customers(db_session) -> Callable[[int], None]:
    def _seed(count: int) -> None:
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(1, count + 1):
            db_session.add(Customer(name=f"Customer {i}", created_at=start + timedelta(hours=i)))
        db_session.commit()

    return _seed


@pytest.fixture(scope="function")
def make_client(db_session) -> Generator[Callable[..., TestClient], None, None]:
    def override_get_db():
        yield db_session

    with ExitStack() as stack:

        def _make(**overrides) -> TestClient:
            app = create_app(Settings(**{"DB_AUTO_CREATE": False, **overrides}))
            app.dependency_overrides[get_db] = override_get_db
            return stack.enter_context(TestClient(app))

        yield _make


@pytest.fixture(scope="function")
def client(make_client) -> TestClient:
    return make_client()
