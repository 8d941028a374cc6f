"""
models/question_like.py
-----------------------
Association model: a user liking a question.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from qa_forum.models.rows import require_int


@dataclass
class QuestionLike:
    """Links one user to one question they like. Duplicates are not prevented."""
    user_id: int
    question_id: int
    id: Optional[int] = None

    TABLE = "question_likes"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "QuestionLike":
        return cls(
            id=require_int(row, "id", cls.TABLE),
            user_id=require_int(row, "user_id", cls.TABLE),
            question_id=require_int(row, "question_id", cls.TABLE),
        )
