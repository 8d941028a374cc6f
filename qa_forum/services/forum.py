"""
services/forum.py
-----------------
Entry point for callers: one Forum per process, built at startup around a
single storage backend that every repository shares by reference.
"""

from contextlib import AbstractContextManager
from typing import Optional

from qa_forum.db.backend import StorageBackend
from qa_forum.db.connection import get_backend
from qa_forum.models.question import Question
from qa_forum.models.question_follow import QuestionFollow
from qa_forum.models.reply import Reply
from qa_forum.models.user import User
from qa_forum.repositories.question_follow_repo import QuestionFollowRepository
from qa_forum.repositories.question_like_repo import QuestionLikeRepository
from qa_forum.repositories.question_repo import QuestionRepository
from qa_forum.repositories.reply_repo import ReplyRepository
from qa_forum.repositories.user_repo import UserRepository
from qa_forum.utils.logger import get_logger

logger = get_logger(__name__)


class Forum:
    """Groups the entity repositories over one backend."""

    def __init__(self, backend: StorageBackend):
        self.backend = backend
        self.users = UserRepository(backend)
        self.questions = QuestionRepository(backend)
        self.replies = ReplyRepository(backend)
        self.follows = QuestionFollowRepository(backend)
        self.likes = QuestionLikeRepository(backend)

    @classmethod
    def from_config(cls) -> "Forum":
        """Build a Forum over the shared backend described by configuration."""
        return cls(get_backend())

    def transaction(self) -> AbstractContextManager:
        """Run several saves atomically: ``with forum.transaction(): ...``."""
        return self.backend.transaction()

    def ask_question(self, author: User, title: str, body: str, follow: bool = True) -> Question:
        """
        Create a question and, by default, make its author follow it.

        Both rows are written in one transaction.
        """
        question = Question(title=title, body=body, author_id=author.id)
        with self.transaction():
            self.questions.save(question)
            if follow:
                self.follows.save(QuestionFollow(user_id=author.id, question_id=question.id))
        logger.info(f"User #{author.id} asked question #{question.id}")
        return question

    def reply_to(
        self,
        author: User,
        question: Question,
        body: str,
        parent: Optional[Reply] = None,
    ) -> Reply:
        """
        Post a reply to a question, nested under ``parent`` when given.

        Raises:
            ValueError: If ``parent`` belongs to another question.
        """
        if parent is not None and parent.question_id != question.id:
            raise ValueError(
                f"Reply #{parent.id} belongs to question #{parent.question_id}, "
                f"not #{question.id}"
            )
        reply = Reply(
            body=body,
            author_id=author.id,
            question_id=question.id,
            parent_reply_id=parent.id if parent is not None else None,
        )
        return self.replies.save(reply)
