"""Role identifiers for attribute read access.

Roles are open-ended: any hashable token (usually a string) is a valid role
and needs no registration here. `Role` only names the roles the bundled API
models declare against.
"""

from __future__ import annotations

from collections.abc import Hashable
from enum import Enum
from typing import Any, Final


DEFAULT_ROLE: Final[str] = "default"


class Role(str, Enum):
    """Well-known roles (str-valued, so they hash and compare like their value)."""

    DEFAULT = DEFAULT_ROLE
    USER = "user"
    ADMIN = "admin"


def canonical_role(role: Hashable) -> Hashable:
    """Collapse `Role` members onto their plain string value."""
    if isinstance(role, Role):
        return role.value
    return role


def normalize_roles(roles: Any) -> tuple[Hashable, ...]:
    """Wrap a single role, or flatten a list/tuple/set of roles, into a tuple.

    Strings are single roles and are never iterated character by character.
    """
    if roles is None:
        return (DEFAULT_ROLE,)
    if isinstance(roles, (list, tuple, set, frozenset)):
        return tuple(canonical_role(r) for r in roles)
    return (canonical_role(roles),)
