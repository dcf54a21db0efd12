from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from config.settings import get_settings
from src.db.models import Base


def get_engine(db_url: str = None) -> Engine:
    """Creates a synchronous engine; defaults to the configured database URL."""
    return create_engine(db_url or get_settings().database_url, echo=False)


def get_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Creates missing tables."""
    Base.metadata.create_all(engine)
