"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()

from food_journal.models.journal import Category, JournalEntry


def make_entry(entry_id: int, category: Category, description: str, rating=3, date=None) -> JournalEntry:
    return JournalEntry(
        id=entry_id,
        user_id=1,
        image=f"file:///photos/{entry_id}.jpg",
        description=description,
        date=date or f"2024-05-{entry_id:02d}T12:00:00.000Z",
        category=category,
        rating=rating,
    )


@pytest.fixture
def sample_entries() -> list[JournalEntry]:
    """Mixed entries in newest-first order, as the store returns them."""
    return [
        make_entry(5, Category.LUNCH, "Grilled Chicken salad", rating=5),
        make_entry(4, Category.DINNER, "Chicken curry with rice", rating=4),
        make_entry(3, Category.LUNCH, "Tomato soup", rating=2),
        make_entry(2, Category.BREAKFAST, "Oatmeal", rating=None),
        make_entry(1, Category.SNACKS, "crispy CHICKEN bites", rating=3),
    ]
