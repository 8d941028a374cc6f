"""
models/ - Domain Models
=======================
One dataclass per entity. Each maps a backend row onto itself through an
explicit ``from_row`` function; none of them talks to storage.
"""

from qa_forum.models.question import Question
from qa_forum.models.question_follow import QuestionFollow
from qa_forum.models.question_like import QuestionLike
from qa_forum.models.reply import Reply, ReplyNode, build_reply_forest
from qa_forum.models.user import User

__all__ = [
    "Question",
    "QuestionFollow",
    "QuestionLike",
    "Reply",
    "ReplyNode",
    "User",
    "build_reply_forest",
]
