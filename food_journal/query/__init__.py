"""Read-time query and aggregation helpers (pure functions)."""

from food_journal.query.filters import filter_entries
from food_journal.query.statistics import NOT_APPLICABLE, JournalStats, compute_statistics

__all__ = ["filter_entries", "compute_statistics", "JournalStats", "NOT_APPLICABLE"]
