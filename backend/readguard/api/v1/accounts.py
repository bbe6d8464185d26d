"""Account endpoints: every record is filtered to the caller's readable attributes."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from readguard.api.deps import RecordReader, enforce_read_method, get_db_session, get_record_reader
from readguard.models.account import Account
from readguard.repositories.account_repo import AccountRepository
from readguard.schemas.account import ReadableAttributesResponse, SanitizedAccountList
from readguard.security.auth import Principal, get_current_principal


router = APIRouter(dependencies=[Depends(enforce_read_method)])


@router.get("/accounts", response_model=SanitizedAccountList)
def list_accounts(
    limit: int = Query(200, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    reader: RecordReader = Depends(get_record_reader),
    db: Session = Depends(get_db_session),
) -> SanitizedAccountList:
    accounts = AccountRepository(db).list_accounts(limit=limit, offset=offset)
    return SanitizedAccountList(role=reader.role, items=[reader.read(a) for a in accounts])


@router.get("/accounts/readable", response_model=ReadableAttributesResponse)
def readable_account_attributes(
    principal: Principal = Depends(get_current_principal),
) -> ReadableAttributesResponse:
    """Specifiers (names and prefixes) the caller's role may read. No DB access."""
    return ReadableAttributesResponse(
        role=principal.role,
        attributes=sorted(Account.readable_attributes(principal.role)),
    )


@router.get("/accounts/{account_id}")
def get_account(
    account_id: int,
    reader: RecordReader = Depends(get_record_reader),
    db: Session = Depends(get_db_session),
) -> dict[str, Any]:
    account = AccountRepository(db).get_account(account_id)
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found.")
    return reader.read(account)
