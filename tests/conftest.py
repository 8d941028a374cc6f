"""
Pytest fixtures - in-memory SQLite backend, provisioned schema, Forum handle.
Each test gets a fresh database; nothing touches the configured one.
"""

import pytest

from qa_forum.db.init_db import create_tables
from qa_forum.db.sqlite_backend import SQLiteBackend
from qa_forum.models import Question, Reply, User
from qa_forum.services.forum import Forum


@pytest.fixture
def backend():
    backend = SQLiteBackend(":memory:")
    create_tables(backend)
    yield backend
    backend.close()


@pytest.fixture
def forum(backend) -> Forum:
    return Forum(backend)


@pytest.fixture
def ada(forum: Forum) -> User:
    return forum.users.save(User(fname="Ada", lname="Lovelace"))


@pytest.fixture
def charles(forum: Forum) -> User:
    return forum.users.save(User(fname="Charles", lname="Babbage"))


@pytest.fixture
def question(forum: Forum, ada: User) -> Question:
    return forum.questions.save(
        Question(title="Analytical Engine", body="Can it compose music?", author_id=ada.id)
    )


@pytest.fixture
def thread(forum: Forum, ada: User, charles: User, question: Question) -> dict:
    """
    A reply forest under ``question``:

        top         (charles)
        ├── child   (ada)
        │   └── grandchild (charles)
        └── sibling (ada)
        other_top   (ada)
    """
    save = forum.replies.save
    top = save(Reply(body="Probably", author_id=charles.id, question_id=question.id))
    child = save(Reply(body="Why?", author_id=ada.id, question_id=question.id,
                       parent_reply_id=top.id))
    grandchild = save(Reply(body="Symbols", author_id=charles.id, question_id=question.id,
                            parent_reply_id=child.id))
    sibling = save(Reply(body="Agreed", author_id=ada.id, question_id=question.id,
                         parent_reply_id=top.id))
    other_top = save(Reply(body="Yes", author_id=ada.id, question_id=question.id))
    return {
        "top": top,
        "child": child,
        "grandchild": grandchild,
        "sibling": sibling,
        "other_top": other_top,
    }
