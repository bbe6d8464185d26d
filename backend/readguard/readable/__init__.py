"""Role-based read access to record attributes."""

from readguard.readable.errors import ReadableError, UnsupportedRecordError
from readguard.readable.mixin import AttrReadableMixin, ReadableDeclaration, readable
from readguard.readable.ownership import (
    declare,
    owned_registry,
    sanitized_from_mapping,
    sanitized_from_record,
    whitelist_for,
)
from readguard.readable.registry import ReadableRegistry
from readguard.readable.sanitizer import attribute_names, sanitize, sanitize_mapping, sanitize_record
from readguard.readable.specifiers import PREFIX_SEPARATOR, is_prefix, split_whitelist, token_name

__all__ = [
    "AttrReadableMixin",
    "PREFIX_SEPARATOR",
    "ReadableDeclaration",
    "ReadableError",
    "ReadableRegistry",
    "UnsupportedRecordError",
    "attribute_names",
    "declare",
    "is_prefix",
    "owned_registry",
    "readable",
    "sanitize",
    "sanitize_mapping",
    "sanitize_record",
    "sanitized_from_mapping",
    "sanitized_from_record",
    "split_whitelist",
    "token_name",
    "whitelist_for",
]
