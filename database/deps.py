"""Dependency helpers that expose read/write DB session generators.

`get_db_write` is used by endpoints that persist (pattern views bump
popularity, batch generation) and `get_db_read` by catalog queries.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()
