"""
repositories/reply_repo.py
--------------------------
Data access layer for replies and navigation of the reply tree.
All SQL queries related to the `replies` table live here.
"""

from qa_forum.exceptions import NoParentReplyError, ReplyCycleError
from qa_forum.models.question import Question
from qa_forum.models.reply import Reply
from qa_forum.models.user import User
from qa_forum.repositories.base import BaseRepository
from qa_forum.repositories.user_repo import UserRepository


class ReplyRepository(BaseRepository[Reply]):
    """Repository for CRUD operations on the replies table."""

    model = Reply
    columns = ("body", "parent_reply_id", "author_id", "question_id")

    # ── UPDATE ────────────────────────────────────────────

    def _update(self, reply: Reply) -> None:
        self._check_acyclic(reply)
        super()._update(reply)

    def _check_acyclic(self, reply: Reply) -> None:
        """
        Refuse a parent that is the reply itself or one of its descendants.

        Ancestors are followed until a top-level reply or a dangling parent id.
        """
        sql = "SELECT parent_reply_id FROM replies WHERE id = %s;"
        seen = set()
        current = reply.parent_reply_id
        while current is not None and current not in seen:
            if current == reply.id:
                raise ReplyCycleError(
                    f"Reply #{reply.id} cannot be nested under reply "
                    f"#{reply.parent_reply_id}: it would become its own ancestor"
                )
            seen.add(current)
            rows = self.backend.execute(sql, (current,))
            if not rows:
                break
            current = rows[0]["parent_reply_id"]

    # ── READ ──────────────────────────────────────────────

    def find_by_user_id(self, user_id: int) -> list[Reply]:
        """All replies written by a user."""
        sql = "SELECT * FROM replies WHERE author_id = %s ORDER BY id;"
        return self._many(self.backend.execute(sql, (user_id,)))

    def find_by_question_id(self, question_id: int) -> list[Reply]:
        """
        All replies under a question at any depth, as a flat list.

        Use ``models.reply.build_reply_forest`` to nest them.
        """
        sql = "SELECT * FROM replies WHERE question_id = %s ORDER BY id;"
        return self._many(self.backend.execute(sql, (question_id,)))

    def find_by_parent_id(self, parent_id: int) -> list[Reply]:
        """Direct children of a reply (empty when it has none)."""
        sql = "SELECT * FROM replies WHERE parent_reply_id = %s ORDER BY id;"
        return self._many(self.backend.execute(sql, (parent_id,)))

    # ── RELATIONSHIPS ─────────────────────────────────────

    def author(self, reply: Reply) -> User:
        return UserRepository(self.backend).find_by_id(reply.author_id)

    def question(self, reply: Reply) -> Question:
        # circular: question_repo imports this module
        from qa_forum.repositories.question_repo import QuestionRepository
        return QuestionRepository(self.backend).find_by_id(reply.question_id)

    def parent_reply(self, reply: Reply) -> Reply:
        """
        The reply this one answers.

        Raises:
            NoParentReplyError: If the reply is top-level.
            RecordNotFoundError: If the parent id points at a missing row.
        """
        if reply.parent_reply_id is None:
            raise NoParentReplyError(reply.id)
        return self.find_by_id(reply.parent_reply_id)

    def child_replies(self, reply: Reply) -> list[Reply]:
        return self.find_by_parent_id(reply.id)
