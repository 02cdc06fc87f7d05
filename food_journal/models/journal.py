"""Journal entry domain model — one photographed, rated meal."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

DEFAULT_RATING = 3
MIN_RATING = 1
MAX_RATING = 5

# Filter-only sentinel; never a stored category.
ALL = "All"


class Category(str, Enum):
    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACKS = "Snacks"


CategoryLike = Union[Category, str]


def category_value(category: CategoryLike) -> str:
    return category.value if isinstance(category, Category) else str(category)


def parse_category(raw: Optional[str]) -> Optional[Category]:
    """Stored category, or None for values written before the CHECK existed."""
    try:
        return Category(raw)
    except ValueError:
        return None


def now_iso() -> str:
    """UTC timestamp with millisecond precision, e.g. ``2024-05-01T12:30:00.123Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class JournalEntry:
    """A persisted journal record owned by exactly one user."""

    id: int
    user_id: int
    image: str
    description: str
    date: str
    category: Optional[Category]
    rating: Optional[int] = DEFAULT_RATING

    @property
    def effective_rating(self) -> int:
        if self.rating and MIN_RATING <= self.rating <= MAX_RATING:
            return self.rating
        return DEFAULT_RATING

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "image": self.image,
            "description": self.description,
            "date": self.date,
            "category": self.category.value if self.category else None,
            "rating": self.rating,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "JournalEntry":
        return cls(
            id=row["id"],
            user_id=row["userId"],
            image=row.get("image") or "",
            description=row.get("description") or "",
            date=row.get("date") or "",
            category=parse_category(row.get("category")),
            rating=row.get("rating"),
        )
