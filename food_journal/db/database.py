"""Storage handle: connection lifecycle, one-time schema setup, ACID helpers."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Optional

from food_journal.db.schema import (
    COLUMN_MIGRATIONS,
    CONNECTION_PRAGMAS,
    INDEX_STATEMENTS,
    SCHEMA_STATEMENTS,
)
from food_journal.errors import QueryError, StorageInitError

logger = logging.getLogger(__name__)


class Database:
    """
    SQLite storage handle with explicit ACID transaction support.

    Owns exactly one connection.  ``ensure_ready()`` opens it and creates the
    schema once; repositories receive the handle and go through
    ``transaction()`` for writes and ``fetchone``/``fetchall`` for reads.
    Every ``sqlite3.Error`` leaving those helpers is re-raised as
    ``QueryError``.
    """

    def __init__(self, path: Optional[Path | str] = None):
        from food_journal.config import get_db_path
        if path is None:
            self.path: Path = get_db_path()
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    # -- connection lifecycle --------------------------------------------------

    @property
    def ready(self) -> bool:
        return self._conn is not None

    def _ensure_dir(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _open(self) -> sqlite3.Connection:
        self._ensure_dir()
        conn = sqlite3.connect(str(self.path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        for pragma in CONNECTION_PRAGMAS:
            conn.execute(pragma)
        return conn

    def _initialise(self) -> sqlite3.Connection:
        """Open a connection and create the schema in one transaction."""
        conn: Optional[sqlite3.Connection] = None
        try:
            conn = self._open()
            conn.execute("BEGIN")
            for stmt in SCHEMA_STATEMENTS:
                conn.execute(stmt)
            self._migrate(conn)
            for stmt in INDEX_STATEMENTS:
                conn.execute(stmt)
            conn.commit()
        except (sqlite3.Error, OSError) as exc:
            logger.error(f"Database initialization failed for {self.path}: {exc}")
            self._discard(conn)
            raise StorageInitError(f"Cannot initialise store at {self.path}: {exc}") from exc
        except Exception:
            self._discard(conn)
            raise
        logger.info(f"Database initialized at {self.path}")
        return conn

    @staticmethod
    def _discard(conn: Optional[sqlite3.Connection]) -> None:
        if conn is None:
            return
        if conn.in_transaction:
            conn.rollback()
        conn.close()

    @staticmethod
    def _migrate(conn: sqlite3.Connection) -> None:
        for table, column, ddl in COLUMN_MIGRATIONS:
            columns = {row["name"] for row in conn.execute(f"PRAGMA table_info({table})")}
            if column not in columns:
                logger.info(f"Migrating {table}: adding column {column}")
                conn.execute(ddl)

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = self._initialise()
        return self._conn

    def ensure_ready(self) -> None:
        """Open the store and create the schema.  Later calls are no-ops."""
        self.connection()

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """ACID transaction: commits on success, rolls back on exception."""
        conn = self.connection()
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            logger.error(f"Transaction rolled back: {exc}")
            raise QueryError(str(exc)) from exc
        except Exception:
            conn.rollback()
            raise

    # -- low-level query helpers -----------------------------------------------

    @staticmethod
    def _query_error(exc: sqlite3.Error, sql: str) -> QueryError:
        logger.error(f"SQL execution error: {exc}")
        return QueryError(str(exc), sql=sql)

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        conn = self.connection()
        try:
            return conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise self._query_error(exc, sql) from exc

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        conn = self.connection()
        try:
            row = conn.execute(sql, params).fetchone()
        except sqlite3.Error as exc:
            raise self._query_error(exc, sql) from exc
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        conn = self.connection()
        try:
            rows = conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise self._query_error(exc, sql) from exc
        return [dict(r) for r in rows]


# -- composition root ----------------------------------------------------------

def open_storage(path: Optional[Path | str] = None) -> Database:
    """Build a storage handle and initialise it.  Call once at startup."""
    db = Database(path)
    db.ensure_ready()
    return db
