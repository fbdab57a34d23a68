# db.py
# Role: Database bootstrap for the bakery ledger.
#       Defines the SQLAlchemy engine, session factory, and declarative Base.

"""
Database setup for the bakery ledger.

- Uses the URL from config.DATABASE_URL (SQLite file by default).
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config import DATABASE_URL


def make_engine(url: str = DATABASE_URL, **kwargs):
    """
    Build an engine for the given URL.

    For SQLite, we need check_same_thread=False for FastAPI (threaded request handling).
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


engine = make_engine()

# Standard session factory used via dependency injection (see bakery/deps.py:get_db)
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

# Declarative base class for ORM models
Base = declarative_base()
