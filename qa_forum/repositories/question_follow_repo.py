"""
repositories/question_follow_repo.py
------------------------------------
Data access layer for the follow association between users and questions.
All SQL queries related to the `question_follows` table live here.
"""

from qa_forum.models.question import Question
from qa_forum.models.question_follow import QuestionFollow
from qa_forum.models.user import User
from qa_forum.repositories.base import BaseRepository


class QuestionFollowRepository(BaseRepository[QuestionFollow]):
    """Follow rows and the queries that traverse them."""

    model = QuestionFollow
    columns = ("user_id", "question_id")

    def followers_for_question_id(self, question_id: int) -> list[User]:
        """Users following a question, one entry per follow row."""
        sql = """
            SELECT users.*
            FROM question_follows
            JOIN questions ON questions.id = question_follows.question_id
            JOIN users ON users.id = question_follows.user_id
            WHERE questions.id = %s
            ORDER BY question_follows.id;
        """
        return self._many(self.backend.execute(sql, (question_id,)), User.from_row)

    def followed_questions_for_user_id(self, user_id: int) -> list[Question]:
        """Questions a user follows, one entry per follow row."""
        sql = """
            SELECT questions.*
            FROM question_follows
            JOIN questions ON questions.id = question_follows.question_id
            JOIN users ON users.id = question_follows.user_id
            WHERE users.id = %s
            ORDER BY question_follows.id;
        """
        return self._many(self.backend.execute(sql, (user_id,)), Question.from_row)

    def num_followers_for_question_id(self, question_id: int) -> int:
        """
        Count follow rows of an existing question (0 when nobody follows it).

        Raises:
            RecordNotFoundError: If the question does not exist.
        """
        sql = """
            SELECT COUNT(users.id) AS num_followers
            FROM questions
            LEFT OUTER JOIN question_follows ON questions.id = question_follows.question_id
            LEFT OUTER JOIN users ON users.id = question_follows.user_id
            WHERE questions.id = %s
            GROUP BY questions.id;
        """
        rows = self.backend.execute(sql, (question_id,))
        return self._one(
            rows, {"id": question_id}, Question.TABLE, lambda row: int(row["num_followers"])
        )

    def most_followed_questions(self, n: int) -> list[Question]:
        """
        Top-n questions by number of distinct followers.

        Ties are ordered by question id so results are deterministic.
        Questions nobody follows are not ranked.
        """
        sql = """
            SELECT questions.*
            FROM questions
            JOIN question_follows ON questions.id = question_follows.question_id
            JOIN users ON users.id = question_follows.user_id
            GROUP BY questions.id
            ORDER BY COUNT(DISTINCT users.id) DESC, questions.id ASC
            LIMIT %s;
        """
        rows = self.backend.execute(sql, (self._check_limit(n),))
        return self._many(rows, Question.from_row)
