"""Attribute specifier classification.

A specifier is the raw string stored in a role whitelist. It is either an
exact attribute name or, when it ends with PREFIX_SEPARATOR, a prefix pattern
covering a family of attributes (``addr_`` covers ``addr_city``, ``addr_zip``).
Classification happens at sanitize time; the registry only stores strings.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final


PREFIX_SEPARATOR: Final[str] = "_"


@dataclass(frozen=True, slots=True)
class SplitWhitelist:
    exact: frozenset[str]
    prefixes: tuple[str, ...]

    def matches(self, key: str) -> bool:
        if key in self.exact:
            return True
        return matching_prefix(key, self.prefixes) is not None


def token_name(token: Any) -> str:
    """String form of a declared name or candidate key.

    Enum members use their value and mapped column attributes (`Account.name`)
    their key; anything else goes through `str()`.
    """
    if isinstance(token, Enum):
        return str(token.value)
    if isinstance(token, str):
        return token
    key = getattr(token, "key", None)
    if isinstance(key, str):
        return key
    return str(token)


def is_prefix(specifier: str) -> bool:
    return specifier.endswith(PREFIX_SEPARATOR)


def split_whitelist(whitelist: Iterable[str]) -> SplitWhitelist:
    """Partition specifiers into exact names and prefix patterns.

    Prefixes are sorted so that matching is deterministic regardless of the
    iteration order of the underlying set.
    """
    exact: set[str] = set()
    prefixes: set[str] = set()
    for spec in whitelist:
        if is_prefix(spec):
            prefixes.add(spec)
        else:
            exact.add(spec)
    return SplitWhitelist(exact=frozenset(exact), prefixes=tuple(sorted(prefixes)))


def matching_prefix(key: str, prefixes: Iterable[str]) -> str | None:
    """First prefix pattern that `key` starts with, or None."""
    for prefix in prefixes:
        if key.startswith(prefix):
            return prefix
    return None
