# app/api/__init__.py
from fastapi import FastAPI
from sqlalchemy.orm import sessionmaker

from app.api.routers import users, vendors, items, tables, cart, orders, health
from app.services.notification_service import NotificationService


def create_app(session_factory: sessionmaker, notifier: NotificationService | None = None) -> FastAPI:
    """
    Fabryka sesji i notifier sa wstrzykiwane, brak globalnego polaczenia z baza.
    W testach: sqlite w pamieci + falszywy notifier.
    """
    app = FastAPI(
        title="Restaurant Ordering Service",
        version="1.0.0",
    )
    app.state.session_factory = session_factory
    app.state.notifier = notifier or NotificationService()

    # Include routers
    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(vendors.router)
    app.include_router(items.router)
    app.include_router(tables.router)
    app.include_router(cart.router)
    app.include_router(orders.router)

    return app
