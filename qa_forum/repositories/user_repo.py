"""
repositories/user_repo.py
-------------------------
Data access layer for user records and the queries that start from a user.
"""

from typing import Optional

from qa_forum.models.question import Question
from qa_forum.models.reply import Reply
from qa_forum.models.user import User
from qa_forum.repositories.base import BaseRepository
from qa_forum.repositories.question_follow_repo import QuestionFollowRepository
from qa_forum.repositories.question_like_repo import QuestionLikeRepository
from qa_forum.utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for CRUD operations on the users table."""

    model = User
    columns = ("fname", "lname")

    # ── READ ──────────────────────────────────────────────

    def find_all_by_name(self, fname: str, lname: str) -> list[User]:
        """All users with this first and last name, oldest first."""
        sql = "SELECT * FROM users WHERE fname = %s AND lname = %s ORDER BY id;"
        return self._many(self.backend.execute(sql, (fname, lname)))

    def find_by_name(self, fname: str, lname: str) -> User:
        """
        Fetch the one user with this name.

        Names are not unique; use ``find_all_by_name`` when several users may
        share one.

        Raises:
            RecordNotFoundError: If nobody has this name.
            AmbiguousMatchError: If more than one user has this name.
        """
        return self._one(
            self.find_all_by_name(fname, lname),
            {"fname": fname, "lname": lname},
            mapper=lambda user: user,
        )

    # ── RELATIONSHIPS ─────────────────────────────────────

    def authored_questions(self, user: User) -> list[Question]:
        # circular: question_repo imports this module
        from qa_forum.repositories.question_repo import QuestionRepository
        return QuestionRepository(self.backend).find_by_author_id(user.id)

    def authored_replies(self, user: User) -> list[Reply]:
        from qa_forum.repositories.reply_repo import ReplyRepository
        return ReplyRepository(self.backend).find_by_user_id(user.id)

    def followed_questions(self, user: User) -> list[Question]:
        return QuestionFollowRepository(self.backend).followed_questions_for_user_id(user.id)

    def liked_questions(self, user: User) -> list[Question]:
        return QuestionLikeRepository(self.backend).liked_questions_for_user_id(user.id)

    # ── AGGREGATES ────────────────────────────────────────

    def average_karma(self, user: User) -> Optional[float]:
        """
        Average number of likes per liked question among the user's questions.

        Questions with no likes count in neither the numerator nor the
        denominator.

        Returns:
            The average as a float, or None when none of the user's questions
            has been liked.
        """
        sql = """
            SELECT
                COUNT(question_likes.id) AS num_likes,
                COUNT(DISTINCT questions.id) AS num_liked_questions
            FROM questions
            JOIN question_likes ON questions.id = question_likes.question_id
            WHERE questions.author_id = %s;
        """
        row = self.backend.execute(sql, (user.id,))[0]
        if not row["num_liked_questions"]:
            logger.debug(f"User #{user.id} has no liked questions; karma undefined")
            return None
        return row["num_likes"] / row["num_liked_questions"]
