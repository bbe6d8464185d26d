from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from readguard.models.account import Account
from readguard.repositories.account_repo import AccountRepository
from readguard.repositories.base import RepositoryReadOnlyViolation


ROOT = Path(__file__).resolve().parents[2]
REPO_DIR = ROOT / "backend" / "readguard" / "repositories"

FORBIDDEN_SUBSTRINGS = [
    ".commit(",
    ".add(",
    ".delete(",
    ".flush(",
    "insert(",
    "update(",
    "delete(",
]


def test_repository_code_has_no_obvious_writes():
    files = list(REPO_DIR.glob("**/*.py"))
    assert files, "No repository files found."

    offenders: list[str] = []
    for f in files:
        txt = f.read_text(encoding="utf-8", errors="ignore")
        for s in FORBIDDEN_SUBSTRINGS:
            if s in txt:
                offenders.append(f"{f.relative_to(ROOT)} contains {s!r}")

    assert not offenders, "Read-only repository violations:\n" + "\n".join(offenders)


def test_repository_reads_accounts(db_session: Session):
    db_session.add_all([Account(name="Ann"), Account(name="Bob")])
    db_session.commit()

    repo = AccountRepository(db_session)
    names = [a.name for a in repo.list_accounts()]
    assert names == ["Ann", "Bob"]
    first = repo.list_accounts(limit=1)[0]
    assert repo.get_account(first.id).name == "Ann"
    assert repo.get_account(999999) is None


def test_repository_rejects_dml(db_session: Session):
    repo = AccountRepository(db_session)
    with pytest.raises(RepositoryReadOnlyViolation):
        repo._execute(update(Account).values(name="x"))
    with pytest.raises(RepositoryReadOnlyViolation):
        repo._execute(delete(Account))


def test_repository_rejects_pending_changes(db_session: Session):
    db_session.add(Account(name="Pending"))
    with pytest.raises(RepositoryReadOnlyViolation):
        AccountRepository(db_session).list_accounts()
