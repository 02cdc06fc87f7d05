"""Database layer — SQLite with ACID transactions and repository pattern."""

from food_journal.db.database import Database, open_storage
from food_journal.db.journal_repo import JournalRepository
from food_journal.db.user_repo import UserRepository

__all__ = ["Database", "open_storage", "JournalRepository", "UserRepository"]
