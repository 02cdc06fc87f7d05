"""Domain models for the food journal."""

from food_journal.models.journal import ALL, Category, JournalEntry
from food_journal.models.user import User

__all__ = ["ALL", "Category", "JournalEntry", "User"]
