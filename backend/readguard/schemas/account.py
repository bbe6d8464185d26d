"""Response envelopes for sanitized accounts.

Item bodies are whatever survives role filtering, so they stay free-form.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SanitizedAccountList(BaseModel):
    role: str
    items: list[dict[str, Any]] = Field(default_factory=list)


class ReadableAttributesResponse(BaseModel):
    role: str
    attributes: list[str]
