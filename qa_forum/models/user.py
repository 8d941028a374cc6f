"""
models/user.py
--------------
Domain model for forum participants.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from qa_forum.models.rows import require_int, require_str


@dataclass
class User:
    """
    Represents a forum participant.

    Attributes:
        fname: First name.
        lname: Last name.
        id: Database primary key (None until the user is first saved).
    """
    fname: str
    lname: str
    id: Optional[int] = None

    TABLE = "users"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        """Map a ``users`` row onto a User."""
        return cls(
            id=require_int(row, "id", cls.TABLE),
            fname=require_str(row, "fname", cls.TABLE),
            lname=require_str(row, "lname", cls.TABLE),
        )

    @property
    def full_name(self) -> str:
        return f"{self.fname} {self.lname}"

    def __str__(self) -> str:
        return f"#{self.id} {self.full_name}"
