"""Repository for the ``journals`` table — user-scoped CRUD with ACID transactions."""

from __future__ import annotations

from typing import Optional

from food_journal.db.database import Database
from food_journal.errors import QueryError
from food_journal.models.journal import (
    DEFAULT_RATING,
    MAX_RATING,
    MIN_RATING,
    Category,
    CategoryLike,
    JournalEntry,
    category_value,
    now_iso,
)


def _stored_category(category: CategoryLike) -> str:
    """Category value to persist.  Rejects "All" and anything outside the fixed set."""
    try:
        return Category(category_value(category)).value
    except ValueError:
        raise QueryError(f"Invalid journal category: {category!r}") from None


def _stored_rating(rating: Optional[int]) -> int:
    if rating is None:
        return DEFAULT_RATING
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise QueryError(f"Rating must be an integer, got {rating!r}")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise QueryError(f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}")
    return rating


class JournalRepository:
    """
    Persistence for journal entries.

    Write operations trust their caller: ``image`` must be a non-empty handle
    and ``description`` must be non-empty after trimming.  The store does not
    check either.  Category and rating are validated here before any SQL runs
    and raise ``QueryError``; stores created by this package also carry table
    CHECK constraints for both.
    """

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def create(
        self,
        user_id: int,
        image: str,
        description: str,
        category: CategoryLike,
        rating: Optional[int] = DEFAULT_RATING,
    ) -> int:
        """Insert an entry stamped with the current time and return its id."""
        category_val, rating_val = _stored_category(category), _stored_rating(rating)
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """INSERT INTO journals
                   (userId, image, description, category, date, rating)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (user_id, image, description, category_val, now_iso(), rating_val),
            )
        return cursor.lastrowid

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, entry_id: int) -> Optional[JournalEntry]:
        row = self._db.fetchone("SELECT * FROM journals WHERE id = ?", (entry_id,))
        return JournalEntry.from_row(row) if row else None

    def list_for_user(self, user_id: int) -> list[JournalEntry]:
        """All entries owned by ``user_id``, newest first."""
        rows = self._db.fetchall(
            "SELECT * FROM journals WHERE userId = ? ORDER BY date DESC, id DESC",
            (user_id,),
        )
        return [JournalEntry.from_row(r) for r in rows]

    def count_for_user(self, user_id: int) -> int:
        row = self._db.fetchone(
            "SELECT COUNT(*) AS n FROM journals WHERE userId = ?", (user_id,)
        )
        return row["n"] if row else 0

    # -- Update ----------------------------------------------------------------

    def update(
        self,
        entry_id: int,
        image: str,
        description: str,
        category: CategoryLike,
        rating: Optional[int] = DEFAULT_RATING,
    ) -> bool:
        """Rewrite the mutable fields.  ``userId`` and ``date`` never change.

        Returns False when no entry has ``entry_id``.
        """
        category_val, rating_val = _stored_category(category), _stored_rating(rating)
        with self._db.transaction() as conn:
            cursor = conn.execute(
                """UPDATE journals
                   SET image = ?, description = ?, category = ?, rating = ?
                   WHERE id = ?""",
                (image, description, category_val, rating_val, entry_id),
            )
        return cursor.rowcount > 0

    # -- Delete ----------------------------------------------------------------

    def delete(self, entry_id: int) -> bool:
        with self._db.transaction() as conn:
            cursor = conn.execute("DELETE FROM journals WHERE id = ?", (entry_id,))
        return cursor.rowcount > 0
