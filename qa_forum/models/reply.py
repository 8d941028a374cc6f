"""
models/reply.py
---------------
Domain model for replies, plus reconstruction of a question's reply forest
from the flat list the repository returns.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from qa_forum.models.rows import optional_int, require_int, require_str


@dataclass
class Reply:
    """
    Represents a reply to a question, optionally nested under another reply.

    Attributes:
        body: Reply text.
        author_id: Id of the authoring user.
        question_id: Id of the question the reply belongs to.
        parent_reply_id: Id of the reply this one answers (None for top-level).
        id: Database primary key (None until first saved).
    """
    body: str
    author_id: int
    question_id: int
    parent_reply_id: Optional[int] = None
    id: Optional[int] = None

    TABLE = "replies"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Reply":
        """Map a ``replies`` row onto a Reply."""
        return cls(
            id=require_int(row, "id", cls.TABLE),
            body=require_str(row, "body", cls.TABLE),
            parent_reply_id=optional_int(row, "parent_reply_id", cls.TABLE),
            author_id=require_int(row, "author_id", cls.TABLE),
            question_id=require_int(row, "question_id", cls.TABLE),
        )

    @property
    def is_top_level(self) -> bool:
        return self.parent_reply_id is None


@dataclass
class ReplyNode:
    """A reply together with its direct children."""
    reply: Reply
    children: list["ReplyNode"] = field(default_factory=list)

    def walk(self, depth: int = 0) -> Iterable[tuple[int, Reply]]:
        """Yield ``(depth, reply)`` pairs depth-first, parents before children."""
        stack = [(depth, self)]
        while stack:
            level, node = stack.pop()
            yield level, node.reply
            stack.extend((level + 1, child) for child in reversed(node.children))


def build_reply_forest(replies: Iterable[Reply]) -> list[ReplyNode]:
    """
    Nest a flat list of replies into trees rooted at top-level replies.

    Replies whose parent is not in the list are treated as roots, so a partial
    list still yields every reply exactly once. Children keep the input order.
    Parent links are assumed acyclic.

    Args:
        replies: Replies of one question, e.g. from ``find_by_question_id``.

    Returns:
        Root nodes in input order.
    """
    nodes = [ReplyNode(reply) for reply in replies]
    by_id = {node.reply.id: node for node in nodes}
    roots = []
    for node in nodes:
        parent = by_id.get(node.reply.parent_reply_id)
        if parent is None or parent is node:
            roots.append(node)
        else:
            parent.children.append(node)
    return roots
