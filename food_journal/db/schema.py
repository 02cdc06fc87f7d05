"""Database schema DDL — table definitions for the food journal store."""

# Applied on every connection, outside any transaction (journal_mode cannot
# change inside one).
CONNECTION_PRAGMAS = (
    "PRAGMA foreign_keys = ON",
    "PRAGMA journal_mode = WAL",
)

CATEGORY_VALUES = ("Breakfast", "Lunch", "Dinner", "Snacks")

_CATEGORY_CHECK = ", ".join(f"'{c}'" for c in CATEGORY_VALUES)

# ==========================================================================
# Tables (run together inside one transaction)
# ==========================================================================
SCHEMA_STATEMENTS = (
    """CREATE TABLE IF NOT EXISTS users (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        email       TEXT UNIQUE,
        password    TEXT
    )""",
    f"""CREATE TABLE IF NOT EXISTS journals (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        userId      INTEGER,
        image       TEXT,
        description TEXT,
        date        TEXT,
        category    TEXT CHECK(category IN ({_CATEGORY_CHECK})),
        rating      INTEGER DEFAULT 3 CHECK(rating BETWEEN 1 AND 5),
        FOREIGN KEY(userId) REFERENCES users(id)
    )""",
)

# Indexes are created after migrations so they can reference migrated columns.
INDEX_STATEMENTS = (
    "CREATE INDEX IF NOT EXISTS idx_journals_user_date ON journals(userId, date DESC)",
)

# --------------------------------------------------------------------------
# Migrations for stores created by older builds: (table, column, ALTER)
# --------------------------------------------------------------------------
COLUMN_MIGRATIONS = (
    ("journals", "rating", "ALTER TABLE journals ADD COLUMN rating INTEGER DEFAULT 3"),
)
