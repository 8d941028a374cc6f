"""
models/question_follow.py
-------------------------
Association model: a user following (watching) a question.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from qa_forum.models.rows import require_int


@dataclass
class QuestionFollow:
    """Links one user to one question they follow. Duplicates are not prevented."""
    user_id: int
    question_id: int
    id: Optional[int] = None

    TABLE = "question_follows"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "QuestionFollow":
        return cls(
            id=require_int(row, "id", cls.TABLE),
            user_id=require_int(row, "user_id", cls.TABLE),
            question_id=require_int(row, "question_id", cls.TABLE),
        )
