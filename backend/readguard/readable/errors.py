from __future__ import annotations

"""Controlled errors for attribute read-access filtering.

Registry lookups and sanitization are total: unknown roles and empty
whitelists produce empty results, never errors. The only failure is a record
that cannot tell us which attributes it has.
"""


class ReadableError(RuntimeError):
    """Base error for the readable-attribute layer."""


class UnsupportedRecordError(ReadableError, TypeError):
    """Raised when an object exposes no list of attribute names to filter."""
