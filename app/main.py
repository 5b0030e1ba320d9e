# app/main.py
from app.api import create_app
from app.data.database import Base, init_db, make_engine, make_session_factory
from app.utils.settings import DATABASE_URL
from app.utils.logging import configure_logging, get_logger
import uvicorn

configure_logging()
logger = get_logger(__name__)

engine = make_engine(DATABASE_URL)
SessionLocal = make_session_factory(engine)

logger.info("Initializing database...")
try:
    init_db(engine)
    logger.info("Database tables ready", tables=list(Base.metadata.tables.keys()))
except Exception as e:
    logger.error("Failed to create tables", error=str(e))
    raise

app = create_app(SessionLocal)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
