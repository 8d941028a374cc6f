"""
qa_forum - data-access layer for a question-and-answer forum.

Users ask questions, reply to them (replies nest under replies) and follow or
like questions. Start from ``Forum``:

    from qa_forum import Forum, User
    forum = Forum.from_config()
    ada = forum.users.save(User(fname="Ada", lname="Lovelace"))
"""

from qa_forum.models import Question, QuestionFollow, QuestionLike, Reply, User
from qa_forum.services.forum import Forum

__all__ = ["Forum", "Question", "QuestionFollow", "QuestionLike", "Reply", "User"]
