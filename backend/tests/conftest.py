import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from deposit_api.db import get_db, init_db
from deposit_api.main import app
from deposit_api.models.company import Company
from deposit_api.models.product import Product
from deposit_api.models.user import User

# (name, packaging, registeredAt, active); ids follow insertion order
PRODUCTS = [
    ("Fanta Orange 330ml", "can", "2024-01-01T10:00:00.000Z", True),
    ("Coca Cola 1.5L", "pet", "2024-02-01T10:00:00.000Z", False),
    ("Sprite 500ml", "glass", "2024-03-01T10:00:00.000Z", True),
    ("Apple Juice 1L", "tetra", "2024-04-01T10:00:00.000Z", False),
    ("Beer 330ml", "glass", "2024-05-01T10:00:00.000Z", True),
]


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def _client_for(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def engine():
    eng = _memory_engine()
    init_db(reset=True, bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    s = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def seeded(db):
    db.add(Company(id=1, name="Beverage Corp", registered_at="2024-01-15T10:00:00.000Z"))
    db.add(Company(id=2, name="Premium Drinks Ltd", registered_at="2024-02-20T14:30:00.000Z"))
    db.flush()
    db.add(User(id=1, company_id=1, first_name="John", last_name="Smith",
                email="john.smith@beveragecorp.com", created_at="2024-07-21T04:05:00.000Z"))
    db.add(User(id=2, company_id=2, first_name="Sarah", last_name="Johnson",
                email="sarah.johnson@premiumdrinks.com", created_at="2024-11-10T06:09:00.000Z"))
    db.flush()
    for name, packaging, registered_at, active in PRODUCTS:
        db.add(Product(company_id=1, registered_by_id=1, name=name, packaging=packaging,
                       deposit=25, volume=330, registered_at=registered_at, active=active))
    db.commit()
    return db


@pytest.fixture
def client(engine):
    yield _client_for(engine)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client():
    """Client whose storage has no tables, so every statement fails."""
    eng = _memory_engine()
    yield _client_for(eng)
    app.dependency_overrides.clear()
    eng.dispose()
