"""readguard: role-based read access to record attributes."""

from readguard.readable import (
    AttrReadableMixin,
    ReadableRegistry,
    readable,
    sanitized_from_mapping,
    sanitized_from_record,
)
from readguard.security.roles import DEFAULT_ROLE, Role

__all__ = [
    "AttrReadableMixin",
    "DEFAULT_ROLE",
    "ReadableRegistry",
    "Role",
    "readable",
    "sanitized_from_mapping",
    "sanitized_from_record",
]
