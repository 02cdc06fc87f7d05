"""Pure-function filtering of journal entries by category and search text."""

from __future__ import annotations

from typing import Iterable

from food_journal.models.journal import ALL, CategoryLike, JournalEntry, category_value


def matches_category(entry: JournalEntry, category: CategoryLike) -> bool:
    wanted = category_value(category)
    if wanted == ALL:
        return True
    return entry.category is not None and entry.category.value == wanted


def matches_search(entry: JournalEntry, search_text: str) -> bool:
    """Case-insensitive substring match on the description."""
    if not search_text:
        return True
    return search_text.lower() in entry.description.lower()


def filter_entries(
    entries: Iterable[JournalEntry],
    category: CategoryLike = ALL,
    search_text: str = "",
) -> list[JournalEntry]:
    """Keep entries matching both the category and the search text, in input order."""
    return [
        e for e in entries
        if matches_category(e, category) and matches_search(e, search_text)
    ]
