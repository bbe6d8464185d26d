"""Account repository (read-only)."""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import Select, select

from readguard.models.account import Account
from readguard.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    def list_accounts(self, *, limit: int = 200, offset: int = 0) -> Sequence[Account]:
        stmt: Select = select(Account).order_by(Account.id).offset(offset).limit(limit)
        return self._execute(stmt).scalars().all()

    def get_account(self, account_id: int) -> Optional[Account]:
        stmt: Select = select(Account).where(Account.id == account_id)
        return self._execute(stmt).scalars().first()
