"""
Central configuration loader.
Reads from environment variables (via .env); nothing here touches the database.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")


def _get(key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    val = os.getenv(key, default)
    if required and not val:
        raise EnvironmentError(f"Missing required environment variable: {key}")
    return val


# ---------------------------------------------------------------------------
# Storage config
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StorageConfig:
    db_path: Path
    log_level: str


def get_storage_config() -> StorageConfig:
    return StorageConfig(
        db_path=get_db_path(),
        log_level=_get("FOOD_JOURNAL_LOG_LEVEL", default="INFO").upper(),  # type: ignore[union-attr]
    )


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
def get_repo_root() -> Path:
    return _REPO_ROOT


def get_db_path() -> Path:
    override = _get("FOOD_JOURNAL_DB_PATH")
    if override:
        return Path(override).expanduser()
    return _REPO_ROOT / "data" / "FoodJournal.db"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging for scripts. Library modules only create loggers."""
    logging.basicConfig(
        level=level or get_storage_config().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
