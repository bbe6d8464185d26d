"""API dependencies.

- Every route is read-only; the method check needs no database session.
- Records leave the API only through a `RecordReader` bound to the caller's
  role. The reader keeps per-request counts for the access log.
"""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from typing import Any

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from readguard.core.db import get_session_factory
from readguard.readable.sanitizer import attribute_names
from readguard.security.auth import Principal, get_current_principal


READ_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def get_db_session() -> Generator[Session, None, None]:
    session: Session = get_session_factory()()
    try:
        session.autoflush = False
        yield session
    finally:
        session.close()


def enforce_read_method(request: Request) -> None:
    if request.method not in READ_METHODS:
        raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED, detail="Read-only API.")


@dataclass(slots=True)
class RecordReader:
    """Sanitizes records for one role and counts what it exposed and withheld."""

    role: str
    records: int = 0
    exposed: int = 0
    withheld: int = 0

    def read(self, record: Any) -> dict[str, Any]:
        body = record.sanitized_hash(self.role)
        self.records += 1
        self.exposed += len(body)
        self.withheld += len(attribute_names(record)) - len(body)
        return body

    def log_fields(self) -> dict[str, Any]:
        return {
            "role": self.role,
            "records": self.records,
            "attributes_exposed": self.exposed,
            "attributes_withheld": self.withheld,
        }


def get_record_reader(
    request: Request, principal: Principal = Depends(get_current_principal)
) -> RecordReader:
    reader = RecordReader(role=principal.role)
    # Picked up by the access-log middleware once the response is ready.
    request.state.record_reader = reader
    return reader
