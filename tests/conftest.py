from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.data.database import Base, init_db, make_engine, make_session_factory
from app.domain.schemas import UserCreate
from app.services.catalog_service import CatalogService
from app.services.user_service import UserService


class FakeNotifier:
    """Zbiera powiadomienia zamiast wysylac je do brokera."""

    def __init__(self):
        self.sent = []

    def send_order_notification(self, user_id, order_id):
        self.sent.append((user_id, order_id))


@pytest.fixture
def engine():
    engine = make_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def client(session_factory, notifier):
    app = create_app(session_factory, notifier=notifier)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def customer(db):
    return UserService(db).create_user(UserCreate(name="Alice", email="alice@example.com"))


@pytest.fixture
def catalog(db):
    """Dwa lokale: pizzeria (A=10.00, B=5.00) i sushi (C=7.50)."""
    svc = CatalogService(db)
    pizzeria = svc.create_vendor("Pizzeria")
    sushi = svc.create_vendor("Sushi Bar")

    return {
        "pizzeria": pizzeria.id,
        "sushi": sushi.id,
        "A": svc.create_item(pizzeria.id, "Margherita", Decimal("10.00")).id,
        "B": svc.create_item(pizzeria.id, "Garlic bread", Decimal("5.00")).id,
        "C": svc.create_item(sushi.id, "Salmon roll", Decimal("7.50")).id,
    }
