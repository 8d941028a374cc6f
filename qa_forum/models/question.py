"""
models/question.py
------------------
Domain model for questions asked on the forum.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from qa_forum.models.rows import require_int, require_str


@dataclass
class Question:
    """
    Represents a question. Owned by exactly one user.

    Attributes:
        title: Short headline.
        body: Full question text.
        author_id: Id of the authoring user (not checked on write).
        id: Database primary key (None until first saved).
    """
    title: str
    body: str
    author_id: int
    id: Optional[int] = None

    TABLE = "questions"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Question":
        """Map a ``questions`` row onto a Question."""
        return cls(
            id=require_int(row, "id", cls.TABLE),
            title=require_str(row, "title", cls.TABLE),
            body=require_str(row, "body", cls.TABLE),
            author_id=require_int(row, "author_id", cls.TABLE),
        )

    def __str__(self) -> str:
        return f"#{self.id} {self.title}"
