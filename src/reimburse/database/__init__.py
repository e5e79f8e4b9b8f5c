"""Database layer for the ownership configuration store."""

from reimburse.database.base import Database
from reimburse.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
