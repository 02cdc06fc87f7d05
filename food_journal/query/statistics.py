"""Pure-function aggregation over journal entries.

No storage access: callers pass the entries they already loaded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from food_journal.models.journal import Category, JournalEntry

NOT_APPLICABLE = "N/A"


@dataclass
class JournalStats:
    """Per-category counts, total and mean rating for a set of entries."""

    counts: dict[Category, int] = field(
        default_factory=lambda: {c: 0 for c in Category}
    )
    total: int = 0
    average_rating: Optional[float] = None

    def count(self, category: Category) -> int:
        return self.counts.get(category, 0)

    def average_display(self) -> str:
        if self.average_rating is None:
            return NOT_APPLICABLE
        return f"{self.average_rating:.1f}"

    def to_dict(self) -> dict[str, object]:
        out: dict[str, object] = {c.value: self.count(c) for c in Category}
        out["Total"] = self.total
        out["AverageRating"] = self.average_display()
        return out


def _mean_one_decimal(total: int, n: int) -> float:
    # Half-up, so 3.25 -> 3.3 rather than banker's 3.2.
    mean = Decimal(total) / Decimal(n)
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def compute_statistics(entries: Iterable[JournalEntry]) -> JournalStats:
    """Count entries per category and average their ratings (missing → 3)."""
    stats = JournalStats()
    rating_sum = 0
    for entry in entries:
        if entry.category is not None:
            stats.counts[entry.category] = stats.counts.get(entry.category, 0) + 1
        stats.total += 1
        rating_sum += entry.effective_rating
    if stats.total:
        stats.average_rating = _mean_one_decimal(rating_sum, stats.total)
    return stats
