#!/usr/bin/env python3
"""Quick check of a user's journal: entries (optionally filtered) and stats."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from food_journal.db.database import open_storage
from food_journal.db.user_repo import UserRepository
from food_journal.models.journal import ALL
from food_journal.services.journal_service import JournalService


def main():
    parser = argparse.ArgumentParser(description="Show journal entries and statistics")
    parser.add_argument("email", help="Email of the journal owner")
    parser.add_argument("--category", default=ALL, help="Breakfast, Lunch, Dinner, Snacks or All")
    parser.add_argument("--search", default="", help="Case-insensitive description filter")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    db = open_storage(Path(args.db_path) if args.db_path else None)
    user = UserRepository(db).get_by_email(args.email)
    if user is None:
        print(f"No user with email {args.email}")
        db.close()
        sys.exit(1)

    service = JournalService(db)
    entries = service.browse(user.id, args.category, args.search)

    print(f"=== Entries ({args.category}) ===")
    print(f"Total: {len(entries)}")
    for e in entries:
        print(f"  {e.id:>4} | {e.date[:16]} | {e.category.value if e.category else '-':<9} | {'*' * e.effective_rating:<5} | {e.description[:40]}")

    print("\n=== Stats ===")
    for key, value in service.statistics_for(user.id).to_dict().items():
        print(f"  {key:<14} {value}")
    db.close()


if __name__ == "__main__":
    main()
