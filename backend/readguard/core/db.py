"""Database configuration.

- Engine and session factory are built lazily from READGUARD_DATABASE_URL so
  that importing models (and declaring readable attributes) never needs a DB.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from readguard.core.env import load_env_if_present


DATABASE_URL_ENV: Final[str] = "READGUARD_DATABASE_URL"


def get_database_url() -> str:
    load_env_if_present()
    url = os.environ.get(DATABASE_URL_ENV)
    if not url:
        raise RuntimeError(
            f"Missing required env var {DATABASE_URL_ENV}. "
            "Example: sqlite+pysqlite:///./readguard.db"
        )
    return url


def create_db_engine(url: str | None = None) -> Engine:
    return create_engine(url or get_database_url(), pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    return create_db_engine()


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), class_=Session, autoflush=False, autocommit=False)
