"""SQLAlchemy models package.

Importing this package registers every mapped class (and its readable
attribute declarations) before any request is served.
"""

from readguard.models import account  # noqa: F401
