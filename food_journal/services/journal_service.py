"""Journal service — the facade the presentation layer talks to.

Composes the journal repository with the pure query helpers.  Input
validation (non-empty image handle, trimmed non-empty description) is the
caller's job; see ``JournalRepository``.
"""

from __future__ import annotations

import logging
from typing import Optional

from food_journal.db.database import Database
from food_journal.db.journal_repo import JournalRepository
from food_journal.models.journal import ALL, DEFAULT_RATING, CategoryLike, JournalEntry
from food_journal.query.filters import filter_entries
from food_journal.query.statistics import JournalStats, compute_statistics

logger = logging.getLogger(__name__)


class JournalService:
    """
    Facade for journal CRUD plus browse/statistics views.

    The storage handle is injected so tests can pass a temporary database.
    """

    def __init__(self, db: Database):
        self._db = db
        self._journal_repo = JournalRepository(db)

    # -- CRUD ------------------------------------------------------------------

    def list_entries(self, user_id: int) -> list[JournalEntry]:
        return self._journal_repo.list_for_user(user_id)

    def create_entry(
        self,
        user_id: int,
        image: str,
        description: str,
        category: CategoryLike,
        rating: Optional[int] = DEFAULT_RATING,
    ) -> int:
        entry_id = self._journal_repo.create(user_id, image, description, category, rating)
        logger.info(f"Created journal entry {entry_id} for user {user_id}")
        return entry_id

    def update_entry(
        self,
        entry_id: int,
        image: str,
        description: str,
        category: CategoryLike,
        rating: Optional[int] = DEFAULT_RATING,
    ) -> bool:
        changed = self._journal_repo.update(entry_id, image, description, category, rating)
        if changed:
            logger.info(f"Updated journal entry {entry_id}")
        else:
            logger.debug(f"Update skipped, no journal entry {entry_id}")
        return changed

    def delete_entry(self, entry_id: int) -> bool:
        deleted = self._journal_repo.delete(entry_id)
        if deleted:
            logger.info(f"Deleted journal entry {entry_id}")
        return deleted

    # -- Views -----------------------------------------------------------------

    def browse(
        self,
        user_id: int,
        category: CategoryLike = ALL,
        search_text: str = "",
    ) -> list[JournalEntry]:
        return filter_entries(self.list_entries(user_id), category, search_text)

    def statistics_for(self, user_id: int) -> JournalStats:
        return compute_statistics(self.list_entries(user_id))
