"""API v1 root router."""

from __future__ import annotations

from fastapi import APIRouter

from readguard.api.v1.accounts import router as accounts_router


router = APIRouter()
router.include_router(accounts_router, tags=["accounts"])
