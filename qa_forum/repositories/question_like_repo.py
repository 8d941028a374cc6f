"""
repositories/question_like_repo.py
----------------------------------
Data access layer for the like association between users and questions.
All SQL queries related to the `question_likes` table live here.
"""

from qa_forum.models.question import Question
from qa_forum.models.question_like import QuestionLike
from qa_forum.models.user import User
from qa_forum.repositories.base import BaseRepository


class QuestionLikeRepository(BaseRepository[QuestionLike]):
    """Like rows, per-question counts and the most-liked ranking."""

    model = QuestionLike
    columns = ("user_id", "question_id")

    def likers_for_question_id(self, question_id: int) -> list[User]:
        """Users who liked a question, one entry per like row."""
        sql = """
            SELECT users.*
            FROM users
            JOIN question_likes ON users.id = question_likes.user_id
            JOIN questions ON question_likes.question_id = questions.id
            WHERE questions.id = %s
            ORDER BY question_likes.id;
        """
        return self._many(self.backend.execute(sql, (question_id,)), User.from_row)

    def num_likes_for_question_id(self, question_id: int) -> int:
        """
        Count the likes on a question.

        An existing question nobody liked yields 0; a missing question is an
        error rather than a zero. Like rows whose user no longer exists are
        not counted.

        Raises:
            RecordNotFoundError: If the question does not exist.
        """
        sql = """
            SELECT COUNT(users.id) AS num_likes
            FROM questions
            LEFT OUTER JOIN question_likes ON questions.id = question_likes.question_id
            LEFT OUTER JOIN users ON users.id = question_likes.user_id
            WHERE questions.id = %s
            GROUP BY questions.id;
        """
        rows = self.backend.execute(sql, (question_id,))
        return self._one(
            rows, {"id": question_id}, Question.TABLE, lambda row: int(row["num_likes"])
        )

    def liked_questions_for_user_id(self, user_id: int) -> list[Question]:
        """Questions a user liked, one entry per like row."""
        sql = """
            SELECT questions.*
            FROM questions
            JOIN question_likes ON question_likes.question_id = questions.id
            JOIN users ON users.id = question_likes.user_id
            WHERE users.id = %s
            ORDER BY question_likes.id;
        """
        return self._many(self.backend.execute(sql, (user_id,)), Question.from_row)

    def most_liked_questions(self, n: int) -> list[Question]:
        """
        Top-n questions by number of distinct likers.

        Ties are ordered by question id so results are deterministic.
        Questions without likes are not ranked.
        """
        sql = """
            SELECT questions.*
            FROM questions
            JOIN question_likes ON questions.id = question_likes.question_id
            JOIN users ON users.id = question_likes.user_id
            GROUP BY questions.id
            ORDER BY COUNT(DISTINCT users.id) DESC, questions.id ASC
            LIMIT %s;
        """
        rows = self.backend.execute(sql, (self._check_limit(n),))
        return self._many(rows, Question.from_row)
