import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from deposit_api.config import settings
from deposit_api.utils.log import get_logger

log = get_logger("db")

DATABASE_URL = settings.DATABASE_URL
engine = create_engine(
    DATABASE_URL,
    future=True,
    echo=False,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)
# widest value an SQLite INTEGER column or bound parameter can hold
SQL_INTEGER_MAX = 2 ** 63 - 1

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def _ensure_sqlite_directory(bind: Engine) -> None:
    url = make_url(str(bind.url))
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    parent = os.path.dirname(os.path.abspath(url.database))
    os.makedirs(parent, exist_ok=True)


def init_db(reset: Optional[bool] = None, bind: Optional[Engine] = None) -> None:
    """
    Initialize DB schema.

    Tables are created with CREATE TABLE IF NOT EXISTS semantics, so existing
    data is left in place. When `reset` is true (or RESET_DB is set and `reset`
    is not given) all tables are dropped first.

    Ensure all model modules are imported so metadata is populated.
    """
    from deposit_api.models import company, product, user  # noqa: F401

    bind = bind or engine
    if reset is None:
        reset = settings.RESET_DB

    _ensure_sqlite_directory(bind)

    if reset:
        log.warning("Resetting database (RESET_DB set)...")
        Base.metadata.drop_all(bind=bind)

    log.info("Creating database tables...")
    Base.metadata.create_all(bind=bind)
    log.info("Database initialized.")


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
