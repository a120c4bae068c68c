"""Exceptions for the SQLAlchemy persistence layer.

Query-time store failures are not raised from here: the data source wraps
``SQLAlchemyError`` in the core ``DataSourceError`` so callers handle every
store the same way.
"""

from __future__ import annotations

from pagequery_core.primitives.exceptions import InfrastructureError


class SQLAlchemyPersistenceError(InfrastructureError):
    """Base for configuration and transaction errors of this adapter."""


class SessionManagementError(SQLAlchemyPersistenceError):
    """A session could not be opened or closed."""


class UnitOfWorkError(SQLAlchemyPersistenceError):
    """Commit or rollback failed, or the session was used outside its unit."""


class MappingError(SQLAlchemyPersistenceError):
    """A mapped class or relationship cannot back a data source."""


class CompilationError(SQLAlchemyPersistenceError):
    """A serialized condition or sort key has no SQL rendering."""
