from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from prompthook.config import settings
from prompthook.logging_config import get_logger

logger = get_logger("database")


def make_engine(url: str, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create missing tables for every registered model."""
    import prompthook.models  # noqa: F401

    target = bind or engine
    Base.metadata.create_all(bind=target)
    logger.info("Database tables ensured", extra={"context": {"url": str(target.url)}})
