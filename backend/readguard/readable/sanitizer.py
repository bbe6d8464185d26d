"""Whitelist-based sanitization of records and mappings.

Only name/value pairs whose name matches the role whitelist survive:
- exact specifiers match the attribute name identically;
- prefix specifiers (ending in "_") match any name starting with them.

Everything else is dropped silently. The result is always a fresh dict keyed
by the candidate key (not by the specifier), in candidate-key order.

When several prefixes match the same key the first one in sorted order is
taken. The value is fetched from the same source by the same key either way,
so the choice never changes the output.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from sqlalchemy import inspect as sa_inspect

from readguard.readable.errors import UnsupportedRecordError
from readguard.readable.specifiers import split_whitelist, token_name


def sanitize(
    candidate_keys: Iterable[Any],
    source: Mapping[Any, Any] | Callable[[Any], Any],
    whitelist: Iterable[str],
) -> dict[Any, Any]:
    """Filter `candidate_keys` against `whitelist`, fetching values from `source`.

    `source` is either a mapping or a one-argument lookup callable.
    """
    split = split_whitelist(whitelist)
    if not split.exact and not split.prefixes:
        return {}

    lookup = source.__getitem__ if isinstance(source, Mapping) else source
    result: dict[Any, Any] = {}
    for key in candidate_keys:
        if split.matches(token_name(key)):
            result[key] = lookup(key)
    return result


def attribute_names(record: Any) -> list[str]:
    """Stable, ordered list of attribute names for `record`.

    Supported collaborators:
    - SQLAlchemy mapped instances (column attributes in mapper order);
    - dataclass instances (field order);
    - any object with an `attribute_names` method or sequence attribute.
    """
    state = sa_inspect(record, raiseerr=False)
    mapper = getattr(state, "mapper", None)
    if mapper is not None:
        return [attr.key for attr in mapper.column_attrs]

    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return [f.name for f in dataclasses.fields(record)]

    names = getattr(record, "attribute_names", None)
    if names is not None:
        if callable(names):
            names = names()
        return [str(n) for n in names]

    raise UnsupportedRecordError(
        f"Cannot determine attribute names for {type(record).__name__!r}: "
        "expected a mapped SQLAlchemy instance, a dataclass, or an object with "
        "`attribute_names`."
    )


def sanitize_record(record: Any, whitelist: Iterable[str]) -> dict[str, Any]:
    """Sanitize a live record: its attribute names, values by attribute access."""
    return sanitize(attribute_names(record), lambda key: getattr(record, key), whitelist)


def sanitize_mapping(mapping: Mapping[Any, Any], whitelist: Iterable[str]) -> dict[Any, Any]:
    """Sanitize a plain mapping: its own keys and values."""
    return sanitize(list(mapping.keys()), mapping, whitelist)
