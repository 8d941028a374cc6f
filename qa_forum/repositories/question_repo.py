"""
repositories/question_repo.py
-----------------------------
Data access layer for questions and their relationships.
All SQL queries related to the `questions` table live here.
"""

from qa_forum.models.question import Question
from qa_forum.models.reply import Reply
from qa_forum.models.user import User
from qa_forum.repositories.base import BaseRepository
from qa_forum.repositories.question_follow_repo import QuestionFollowRepository
from qa_forum.repositories.question_like_repo import QuestionLikeRepository
from qa_forum.repositories.reply_repo import ReplyRepository
from qa_forum.repositories.user_repo import UserRepository


class QuestionRepository(BaseRepository[Question]):
    """Repository for CRUD operations on the questions table."""

    model = Question
    columns = ("title", "body", "author_id")

    # ── READ ──────────────────────────────────────────────

    def find_by_author_id(self, author_id: int) -> list[Question]:
        """
        Fetch every question written by a user, in insertion order.

        The author is looked up first, so a missing author fails instead of
        looking like a user with no questions.

        Raises:
            RecordNotFoundError: If no user has this id.
        """
        UserRepository(self.backend).find_by_id(author_id)
        sql = "SELECT * FROM questions WHERE author_id = %s ORDER BY id;"
        return self._many(self.backend.execute(sql, (author_id,)))

    def most_liked(self, n: int) -> list[Question]:
        return QuestionLikeRepository(self.backend).most_liked_questions(n)

    def most_followed(self, n: int) -> list[Question]:
        return QuestionFollowRepository(self.backend).most_followed_questions(n)

    # ── RELATIONSHIPS ─────────────────────────────────────

    def author(self, question: Question) -> User:
        return UserRepository(self.backend).find_by_id(question.author_id)

    def replies(self, question: Question) -> list[Reply]:
        """Every reply under the question, any depth, as a flat list."""
        return ReplyRepository(self.backend).find_by_question_id(question.id)

    def followers(self, question: Question) -> list[User]:
        return QuestionFollowRepository(self.backend).followers_for_question_id(question.id)

    def likers(self, question: Question) -> list[User]:
        return QuestionLikeRepository(self.backend).likers_for_question_id(question.id)

    def num_likes(self, question: Question) -> int:
        return QuestionLikeRepository(self.backend).num_likes_for_question_id(question.id)
