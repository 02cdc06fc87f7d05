"""Repository for the ``users`` table."""

from __future__ import annotations

from typing import Optional

from food_journal.db.database import Database
from food_journal.models.user import User


class UserRepository:
    """Minimal user persistence so journal rows have a valid owner."""

    def __init__(self, db: Database):
        self._db = db

    def create(self, email: str, password: str = "") -> User:
        """Insert a new user. Raises ``QueryError`` on duplicate email."""
        with self._db.transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO users (email, password) VALUES (?, ?)",
                (email, password),
            )
        return User(id=cursor.lastrowid, email=email, password=password)

    def get_by_id(self, user_id: int) -> Optional[User]:
        row = self._db.fetchone("SELECT * FROM users WHERE id = ?", (user_id,))
        return User.from_row(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        row = self._db.fetchone("SELECT * FROM users WHERE email = ?", (email,))
        return User.from_row(row) if row else None
