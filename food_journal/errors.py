"""Domain exceptions raised by the storage layer."""

from __future__ import annotations

from typing import Optional


class FoodJournalError(Exception):
    """Base class for all food journal errors."""


class StorageInitError(FoodJournalError):
    """The backing store could not be opened or the schema could not be committed."""


class QueryError(FoodJournalError):
    """A read or write statement failed (bad SQL, I/O, constraint violation)."""

    def __init__(self, message: str, sql: Optional[str] = None):
        super().__init__(message)
        self.sql = sql
