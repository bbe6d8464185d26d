"""Per-class, per-role whitelist of readable attribute specifiers.

Lifecycle:
- A registry belongs to exactly one record class. It is created on the first
  declaration for that class and lives as long as the class does.
- Declarations only ever add (set union). There is no removal.

Concurrency contract:
- Complete all declarations (normally at class-definition time) before
  serving concurrent sanitize calls. After that the registry is read-only and
  needs no locking.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable
from typing import Any

from readguard.readable.specifiers import token_name
from readguard.security.roles import DEFAULT_ROLE, canonical_role, normalize_roles


logger = logging.getLogger("readguard.readable")


class ReadableRegistry:
    """Mapping of role -> set of specifier strings."""

    __slots__ = ("_whitelists",)

    def __init__(self, whitelists: dict[Hashable, set[str]] | None = None) -> None:
        self._whitelists: dict[Hashable, set[str]] = {}
        for role, specs in (whitelists or {}).items():
            self._whitelists[role] = set(specs)

    def _whitelist_for_update(self, role: Hashable) -> set[str]:
        """Insert-or-return the mutable set for `role` (declarations only)."""
        specs = self._whitelists.get(role)
        if specs is None:
            specs = set()
            self._whitelists[role] = specs
        return specs

    def declare(self, attribute_names: Iterable[Any], roles: Any = DEFAULT_ROLE) -> None:
        """Union `attribute_names` into the whitelist of every role in `roles`."""
        to_add = [token_name(name) for name in attribute_names]
        if not to_add:
            return
        for role in normalize_roles(roles):
            self._whitelist_for_update(role).update(to_add)
            logger.debug("readable attributes declared role=%r attributes=%s", role, to_add)

    def whitelist_for(self, role: Hashable = DEFAULT_ROLE) -> frozenset[str]:
        """Accumulated specifiers for `role`; empty for undeclared roles."""
        specs = self._whitelists.get(canonical_role(role))
        if not specs:
            return frozenset()
        return frozenset(specs)

    def roles(self) -> frozenset[Hashable]:
        return frozenset(self._whitelists)

    def copy(self) -> "ReadableRegistry":
        # Per-role sets are copied, never shared.
        return ReadableRegistry(self._whitelists)

    def __contains__(self, role: object) -> bool:
        return canonical_role(role) in self._whitelists

    def __len__(self) -> int:
        return len(self._whitelists)

    def __repr__(self) -> str:
        inner = ", ".join(f"{r!r}: {sorted(s)}" for r, s in self._whitelists.items())
        return f"ReadableRegistry({{{inner}}})"

