"""Food journal: local SQLite store, journal CRUD and statistics."""

__version__ = "0.1.0"
