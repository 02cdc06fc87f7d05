#!/usr/bin/env python3
"""Initialize the journal database and optionally seed it from a YAML file.

Seed format::

    users:
      - email: alice@example.com
        password: secret
        entries:
          - image: file:///photos/oats.jpg
            description: Oatmeal with berries
            category: Breakfast
            rating: 4
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from food_journal.config import configure_logging
from food_journal.db.database import Database, open_storage
from food_journal.db.journal_repo import JournalRepository
from food_journal.db.user_repo import UserRepository
from food_journal.errors import FoodJournalError


def main():
    parser = argparse.ArgumentParser(description="Initialize the journal database")
    parser.add_argument("--seed", type=str, help="YAML file with users and entries")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    configure_logging()
    db_path = Path(args.db_path) if args.db_path else None
    db = open_storage(db_path)
    print(f"Database initialized at: {db.path}")

    if args.seed:
        _seed(db, Path(args.seed))

    db.close()
    print("Done.")


def _seed(db: Database, path: Path):
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    users = UserRepository(db)
    journals = JournalRepository(db)
    for u in data.get("users", []):
        try:
            user = users.get_by_email(u["email"]) or users.create(u["email"], u.get("password", ""))
            print(f"  User: {user.email} (id={user.id})")
        except FoodJournalError as e:
            print(f"  Skipping {u.get('email', '?')}: {e}")
            continue
        for e in u.get("entries", []):
            try:
                entry_id = journals.create(
                    user.id,
                    e["image"],
                    e["description"].strip(),
                    e.get("category", "Snacks"),
                    e.get("rating"),
                )
                print(f"    Created entry {entry_id}: {e['description'][:40]}")
            except (FoodJournalError, KeyError) as exc:
                print(f"    Skipping entry: {exc}")


if __name__ == "__main__":
    main()
