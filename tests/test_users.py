"""
User repository tests - save contract, lookups, relationships, karma.
"""

import pytest

from qa_forum.exceptions import AmbiguousMatchError, RecordNotFoundError
from qa_forum.models import Question, QuestionFollow, QuestionLike, User


def _count(backend, table: str) -> int:
    return backend.execute(f"SELECT COUNT(*) AS n FROM {table};")[0]["n"]


def test_save_assigns_id_and_round_trips(forum, ada: User):
    assert isinstance(ada.id, int) and ada.id > 0
    assert forum.users.find_by_id(ada.id) == ada


def test_save_new_users_get_distinct_ids(ada: User, charles: User):
    assert charles.id > 0
    assert charles.id != ada.id


def test_second_save_updates_instead_of_inserting(forum, backend, ada: User):
    original_id = ada.id
    ada.fname = "Augusta"
    forum.users.save(ada)

    assert ada.id == original_id
    assert _count(backend, "users") == 1
    assert forum.users.find_by_id(original_id).fname == "Augusta"


def test_save_records_last_insert_id(backend, forum):
    grace = forum.users.save(User(fname="Grace", lname="Hopper"))
    assert backend.last_insert_id() == grace.id


def test_update_of_vanished_row_fails(forum):
    ghost = User(fname="Nobody", lname="Here", id=999)
    with pytest.raises(RecordNotFoundError):
        forum.users.save(ghost)


def test_find_by_id_missing(forum):
    with pytest.raises(RecordNotFoundError) as exc:
        forum.users.find_by_id(42)
    assert exc.value.table == "users"
    assert exc.value.criteria == {"id": 42}


def test_find_by_name(forum, ada: User, charles: User):
    assert forum.users.find_by_name("Charles", "Babbage") == charles


def test_find_by_name_missing(forum, ada: User):
    with pytest.raises(RecordNotFoundError):
        forum.users.find_by_name("Alan", "Turing")


def test_find_by_name_refuses_to_guess_between_namesakes(forum, ada: User):
    twin = forum.users.save(User(fname="Ada", lname="Lovelace"))

    with pytest.raises(AmbiguousMatchError) as exc:
        forum.users.find_by_name("Ada", "Lovelace")
    assert exc.value.count == 2
    assert forum.users.find_all_by_name("Ada", "Lovelace") == [ada, twin]


def test_find_all_by_name_empty(forum):
    assert forum.users.find_all_by_name("Alan", "Turing") == []


def test_authored_questions(forum, ada: User, charles: User, question: Question):
    assert forum.users.authored_questions(ada) == [question]
    assert forum.users.authored_questions(charles) == []


def test_authored_replies_are_keyed_by_author(forum, charles: User, thread: dict):
    replies = forum.users.authored_replies(charles)
    assert [r.id for r in replies] == [thread["top"].id, thread["grandchild"].id]


def test_followed_and_liked_questions(forum, ada: User, charles: User, question: Question):
    forum.follows.save(QuestionFollow(user_id=charles.id, question_id=question.id))
    forum.likes.save(QuestionLike(user_id=charles.id, question_id=question.id))

    assert forum.users.followed_questions(charles) == [question]
    assert forum.users.liked_questions(charles) == [question]
    assert forum.users.followed_questions(ada) == []
    assert forum.users.liked_questions(ada) == []


def test_average_karma_ignores_unliked_questions(forum, ada: User, charles: User):
    first, second, _unliked = [
        forum.questions.save(Question(title=title, body="...", author_id=ada.id))
        for title in ("one", "two", "three")
    ]
    for user_id, question_id in [(ada.id, first.id), (charles.id, first.id), (charles.id, second.id)]:
        forum.likes.save(QuestionLike(user_id=user_id, question_id=question_id))

    assert forum.users.average_karma(ada) == pytest.approx(1.5)


def test_average_karma_is_none_without_liked_questions(forum, ada: User, charles: User, question: Question):
    assert forum.users.average_karma(ada) is None
    assert forum.users.average_karma(charles) is None
