# app/data/database.py
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.domain.errors import ServiceError, StorageError
from app.utils.settings import DB_STATEMENT_TIMEOUT_MS
from app.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def make_engine(url: str, **kwargs) -> Engine:
    #statement timeout tylko dla postgresa, sqlite (testy) nie ma takiej opcji
    if url.startswith("postgresql") and DB_STATEMENT_TIMEOUT_MS > 0:
        connect_args = kwargs.setdefault("connect_args", {})
        connect_args.setdefault("options", f"-c statement_timeout={DB_STATEMENT_TIMEOUT_MS}")

    return create_engine(url, pool_pre_ping=True, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=True, expire_on_commit=True)


def init_db(engine: Engine) -> None:
    #import modeli zeby zarejestrowaly sie w Base.metadata
    import app.data.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency FastAPI: jedna sesja (i jedna transakcja) na request.
    Fabryka sesji jest wstrzykiwana przez create_app, nie ma globalnego singletona.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session, action: str) -> Iterator[None]:
    """
    Commit na koncu bloku, rollback przy dowolnym bledzie.
    Bledy SQLAlchemy sa opakowane w StorageError, bledy serwisow leca dalej bez zmian.
    """
    try:
        yield
        db.commit()
    except ServiceError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Database error, transaction rolled back", action=action, error=str(e))
        raise StorageError(f"Failed to {action}") from e
