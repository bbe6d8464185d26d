"""Create the schema and a few demo accounts (development helper).

Usage:
  export READGUARD_DATABASE_URL=sqlite+pysqlite:///./readguard.db
  python scripts/seed_demo.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from sqlalchemy import func, select


ROOT = Path(__file__).resolve().parents[1]
BACKEND_DIR = ROOT / "backend"
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from readguard.core.base import Base  # noqa: E402
from readguard.core.db import get_engine, get_session_factory  # noqa: E402
from readguard.models.account import Account  # noqa: E402


logger = logging.getLogger("readguard.scripts.seed_demo")

DEMO_ACCOUNTS = [
    dict(name="Ann", email="ann@example.com", password="ann-secret", addr_city="Oslo", addr_zip="0150"),
    dict(name="Bob", email="bob@example.com", password="bob-secret", addr_city="Bergen", addr_zip="5003"),
]


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
    Base.metadata.create_all(get_engine())

    with get_session_factory()() as session:
        existing = session.execute(select(func.count()).select_from(Account)).scalar_one()
        if existing:
            logger.info("accounts table already has %d rows; nothing to do", existing)
            return 0
        session.add_all(Account(**row) for row in DEMO_ACCOUNTS)
        session.commit()

    logger.info("seeded %d demo accounts", len(DEMO_ACCOUNTS))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
