import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from ..config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's worker threads.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.sqlalchemy_url,
    connect_args=_connect_args(settings.sqlalchemy_url),
    future=True,
    echo=False,
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
Base = declarative_base()


def init_db() -> None:
    from . import models  # noqa: F401  registers tables on Base.metadata

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready", extra={"dialect": engine.dialect.name})


def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
