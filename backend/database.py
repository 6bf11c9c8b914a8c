# backend/database.py

import os

from sqlalchemy import create_engine, make_url, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from backend.core.config import DATABASE_URL, DATABASE_SSLMODE
from backend.core.log import get_logger
from backend.models import Base


logger = get_logger(__name__)


def _prepare_sqlite_dir(url: str):
    database = make_url(url).database
    if url.startswith("sqlite") and database and database != ":memory:":
        os.makedirs(os.path.dirname(os.path.abspath(database)), exist_ok=True)


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    if url.startswith("postgresql"):
        return {"sslmode": DATABASE_SSLMODE}
    return {}


_prepare_sqlite_dir(DATABASE_URL)

engine = create_engine(
    DATABASE_URL,
    connect_args=_connect_args(DATABASE_URL)
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db(bind: Engine = engine):
    """
    Creates any missing tables. Used for local SQLite runs and tests;
    production schemas are provisioned outside this service.
    """
    Base.metadata.create_all(bind=bind)


def check_connection(bind: Engine = engine) -> bool:
    """
    Runs a single round trip against the store and logs the outcome.
    Never raises: the service keeps running when the store is unreachable.
    """
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("database_connection_failed", url=bind.url.render_as_string(hide_password=True), error=str(e))
        return False
    logger.info("database_connected", url=bind.url.render_as_string(hide_password=True))
    return True


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
