"""Read-only repository base.

- Repositories are the only layer that queries the database.
- Request paths only read; any DML or pending session change is rejected.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.engine import Result
from sqlalchemy.orm import Session
from sqlalchemy.sql import Executable
from sqlalchemy.sql.selectable import Select


class RepositoryReadOnlyViolation(RuntimeError):
    """Raised when a repository detects a write or mutation attempt."""


T = TypeVar("T")


class BaseRepository(Generic[T]):
    def __init__(self, session: Session) -> None:
        self._session = session

    def _assert_clean_uow(self) -> None:
        s = self._session
        if s.new or s.dirty or s.deleted:
            raise RepositoryReadOnlyViolation(
                "Repository layer is read-only: session has pending changes "
                f"(new={len(s.new)}, dirty={len(s.dirty)}, deleted={len(s.deleted)})."
            )

    def _execute(self, stmt: Executable, *, params: Optional[dict[str, Any]] = None) -> Result[Any]:
        """Execute a SELECT against the session; anything else is refused."""
        if not isinstance(stmt, Select):
            raise RepositoryReadOnlyViolation(
                f"Repository layer is read-only: only SELECT statements are allowed (got {type(stmt)!r})."
            )
        self._assert_clean_uow()
        result = self._session.execute(stmt, params or {})
        self._assert_clean_uow()
        return result
