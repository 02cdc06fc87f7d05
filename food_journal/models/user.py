"""User model — identity owned by the external session collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class User:
    """A journal owner.  ``password`` is an opaque credential string."""

    email: str
    password: str = ""
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "User":
        return cls(
            id=row["id"],
            email=row["email"],
            password=row.get("password") or "",
        )
