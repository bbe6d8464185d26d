"""Declarative-model integration for role-based attribute read access.

Declare readable attributes in the class body with `__readable__`, or
imperatively with `attr_readable` once the class exists:

    class Account(AttrReadableMixin, Base):
        __tablename__ = "accounts"
        ...
        __readable__ = (
            readable("name", "password", as_="admin"),
            readable("name", as_=["default", "user"]),
        )

    Account.readable_attributes("admin")   # frozenset({"name", "password"})
    Account.readable_attributes("other")   # frozenset()
    account.sanitized_hash("user")         # {"name": "..."}

Names ending in "_" are prefixes: `readable("addr_")` exposes `addr_city`,
`addr_zip` and any other `addr_*` attribute.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any

from readguard.readable import ownership
from readguard.readable.registry import ReadableRegistry
from readguard.readable.sanitizer import sanitize_record
from readguard.readable.specifiers import token_name
from readguard.security.roles import DEFAULT_ROLE, normalize_roles


@dataclass(frozen=True, slots=True)
class ReadableDeclaration:
    attribute_names: tuple[str, ...]
    roles: tuple[Hashable, ...]


def readable(*attribute_names: Any, as_: Any = DEFAULT_ROLE) -> ReadableDeclaration:
    """One class-body declaration; `as_` is a role or a list of roles."""
    return ReadableDeclaration(
        attribute_names=tuple(token_name(a) for a in attribute_names),
        roles=normalize_roles(as_),
    )


class AttrReadableMixin:
    """Adds per-role readable-attribute declarations and sanitized hashes."""

    __readable__ = ()  # tuple[ReadableDeclaration, ...]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Only this class's own body; inherited declarations arrive via the registry.
        for decl in cls.__dict__.get("__readable__", ()):
            ownership.declare(cls, decl.attribute_names, decl.roles)

    @classmethod
    def attr_readable(cls, *attribute_names: Any, as_: Any = DEFAULT_ROLE) -> None:
        """Whitelist `attribute_names` for reading by the role(s) in `as_`."""
        ownership.declare(cls, attribute_names, as_)

    @classmethod
    def readable_attributes(cls, role: Hashable = DEFAULT_ROLE) -> frozenset[str]:
        return ownership.whitelist_for(cls, role)

    @classmethod
    def readable_registry(cls) -> ReadableRegistry:
        """This class's own registry (copied from its parent on first access)."""
        return ownership.owned_registry(cls)

    @classmethod
    def sanitized_hash_from_model(cls, record: Any, role: Hashable = DEFAULT_ROLE) -> dict[str, Any]:
        """Readable attribute/value pairs of `record` under this class's declarations."""
        return sanitize_record(record, cls.readable_attributes(role))

    @classmethod
    def sanitized_hash_from_hash(
        cls, mapping: Mapping[Any, Any], role: Hashable = DEFAULT_ROLE
    ) -> dict[Any, Any]:
        return ownership.sanitized_from_mapping(cls, mapping, role)

    def sanitized_hash(self, role: Hashable = DEFAULT_ROLE) -> dict[str, Any]:
        """Only the attributes (and values) `role` may read."""
        return type(self).sanitized_hash_from_model(self, role)
