"""Database infrastructure module."""

from .session import (
    Base,
    build_engine,
    build_session_factory,
    create_tables,
    init_db,
    close_db,
    get_session_factory,
)
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "init_db",
    "close_db",
    "get_session_factory",
    "SQLAlchemyUnitOfWork",
]
