"""Registry ownership per record class, and the role-level functional API.

Each class owns its registry as `_readable_registry` in its own `__dict__`.
A subclass reads its nearest ancestor's declarations until it declares something
itself or asks for its registry; at that point the inherited registry is copied
and only the copy is ever mutated. Public accessors only hand out registries
the class owns, so a parent (or an unrelated class) is never changed through
another class.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from readguard.readable.registry import ReadableRegistry
from readguard.readable.sanitizer import sanitize_mapping, sanitize_record
from readguard.security.roles import DEFAULT_ROLE


REGISTRY_ATTR = "_readable_registry"


def _registry_in_effect(cls: type) -> ReadableRegistry | None:
    """Own or nearest inherited registry; read paths only, never handed out."""
    for klass in cls.__mro__:
        registry = klass.__dict__.get(REGISTRY_ATTR)
        if registry is not None:
            return registry
    return None


def owned_registry(cls: type) -> ReadableRegistry:
    """Registry owned by `cls`, copied from the inherited one on first use."""
    registry = cls.__dict__.get(REGISTRY_ATTR)
    if registry is None:
        inherited = _registry_in_effect(cls)
        registry = inherited.copy() if inherited is not None else ReadableRegistry()
        setattr(cls, REGISTRY_ATTR, registry)
    return registry


def declare(cls: type, attribute_names: Iterable[Any], roles: Any = DEFAULT_ROLE) -> None:
    owned_registry(cls).declare(attribute_names, roles)


def whitelist_for(cls: type, role: Hashable = DEFAULT_ROLE) -> frozenset[str]:
    registry = _registry_in_effect(cls)
    if registry is None:
        return frozenset()
    return registry.whitelist_for(role)


def sanitized_from_record(record: Any, role: Hashable = DEFAULT_ROLE) -> dict[str, Any]:
    """Readable attributes of `record` for `role`, per the record's class."""
    return sanitize_record(record, whitelist_for(type(record), role))


def sanitized_from_mapping(
    cls: type, mapping: Mapping[Any, Any], role: Hashable = DEFAULT_ROLE
) -> dict[Any, Any]:
    """Entries of `mapping` readable by `role` under the declarations of `cls`."""
    return sanitize_mapping(mapping, whitelist_for(cls, role))
