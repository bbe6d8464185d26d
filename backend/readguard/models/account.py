"""Account model.

Read access per role:
- default: name only.
- user: name, email and the whole address family (`addr_*`).
- admin: everything user can read, plus id and password.

Timestamps are never readable.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from readguard.core.base import Base, IntegerPrimaryKeyMixin, TimestampMixin
from readguard.readable import AttrReadableMixin, readable
from readguard.security.roles import Role


class Account(AttrReadableMixin, IntegerPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "accounts"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    password: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    addr_city: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    addr_zip: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    __readable__ = (
        readable("name", as_=[Role.DEFAULT, Role.USER, Role.ADMIN]),
        readable("email", "addr_", as_=[Role.USER, Role.ADMIN]),
        readable("id", "password", as_=Role.ADMIN),
    )
