# build_report_service/core/database_session.py
"""
Engine and session factory for the build report database.

Configuration:
- DATABASE_URL: SQLAlchemy URL (default: sqlite:///./build_reports.db)
"""

import os
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

DEFAULT_DATABASE_URL = "sqlite:///./build_reports.db"


def get_database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


@lru_cache(maxsize=None)
def get_engine(database_url: str | None = None) -> Engine:
    url = database_url or get_database_url()
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, future=True, connect_args=connect_args)


def get_sessionmaker(database_url: str | None = None) -> sessionmaker:
    return sessionmaker(bind=get_engine(database_url), autoflush=False, expire_on_commit=False)
