from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from offset_pagination.db.base import Base
from offset_pagination.db.models.customer import Customer


@pytest.fixture(scope="function")
def db_session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)

    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False, future=True)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def seed_customers(db_session):
    def _seed(count: int) -> None:
        start = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for i in range(1, count + 1):
            db_session.add(Customer(name=f"Customer {i}", created_at=start + timedelta(hours=i)))
        db_session.commit()

    return _seed
