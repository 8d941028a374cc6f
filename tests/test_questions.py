"""
Question repository tests - lookups, relationships and the rankings.
"""

import pytest

from qa_forum.exceptions import RecordNotFoundError
from qa_forum.models import Question, QuestionFollow, QuestionLike, User


@pytest.fixture
def questions(forum, ada: User) -> list[Question]:
    return [
        forum.questions.save(Question(title=f"Q{i}", body="...", author_id=ada.id))
        for i in range(1, 5)
    ]


@pytest.fixture
def users(forum) -> list[User]:
    return [forum.users.save(User(fname=f"U{i}", lname="Test")) for i in range(1, 5)]


def _like(forum, user: User, question: Question) -> None:
    forum.likes.save(QuestionLike(user_id=user.id, question_id=question.id))


def _follow(forum, user: User, question: Question) -> None:
    forum.follows.save(QuestionFollow(user_id=user.id, question_id=question.id))


@pytest.mark.parametrize("repo", ["users", "questions", "replies", "follows", "likes"])
def test_find_by_id_missing_for_every_entity(forum, repo: str):
    with pytest.raises(RecordNotFoundError):
        getattr(forum, repo).find_by_id(12345)


def test_save_and_update(forum, question: Question):
    question.title = "Difference Engine"
    forum.questions.save(question)
    assert forum.questions.find_by_id(question.id).title == "Difference Engine"


def test_find_by_author_id_for_author_without_questions(forum, charles: User, question: Question):
    assert forum.questions.find_by_author_id(charles.id) == []


def test_find_by_author_id_for_missing_author(forum):
    with pytest.raises(RecordNotFoundError) as exc:
        forum.questions.find_by_author_id(404)
    assert exc.value.table == "users"


def test_find_by_author_id_keeps_insertion_order(forum, ada: User, questions: list[Question]):
    assert forum.questions.find_by_author_id(ada.id) == questions


def test_author(forum, ada: User, question: Question):
    assert forum.questions.author(question) == ada


def test_replies_returns_whole_forest_flat(forum, question: Question, thread: dict):
    replies = forum.questions.replies(question)
    assert [r.id for r in replies] == sorted(r.id for r in thread.values())


def test_followers_and_likers(forum, ada: User, charles: User, question: Question):
    _follow(forum, charles, question)
    _follow(forum, ada, question)
    _like(forum, charles, question)

    assert forum.questions.followers(question) == [charles, ada]
    assert forum.questions.likers(question) == [charles]
    assert forum.questions.num_likes(question) == 1


def test_most_liked_orders_by_like_count(forum, questions: list[Question], users: list[User]):
    q1, q2, q3, _q4 = questions
    for user in users[:3]:
        _like(forum, user, q1)
    _like(forum, users[0], q2)
    for user in users[:2]:
        _like(forum, user, q3)

    assert forum.questions.most_liked(2) == [q1, q3]
    assert forum.questions.most_liked(10) == [q1, q3, q2]


def test_most_liked_counts_distinct_likers(forum, questions: list[Question], users: list[User]):
    q1, q2 = questions[:2]
    _like(forum, users[0], q1)
    _like(forum, users[0], q1)
    _like(forum, users[0], q2)
    _like(forum, users[1], q2)

    assert forum.questions.most_liked(1) == [q2]


def test_most_liked_breaks_ties_by_id(forum, questions: list[Question], users: list[User]):
    q1, q2, q3 = questions[:3]
    for question in (q3, q1, q2):
        _like(forum, users[0], question)

    assert forum.questions.most_liked(3) == [q1, q2, q3]


def test_most_followed(forum, questions: list[Question], users: list[User]):
    q1, q2 = questions[:2]
    _follow(forum, users[0], q1)
    for user in users:
        _follow(forum, user, q2)

    assert forum.questions.most_followed(1) == [q2]
    assert forum.questions.most_followed(5) == [q2, q1]


def test_rankings_with_zero_limit(forum, questions: list[Question], users: list[User]):
    _like(forum, users[0], questions[0])
    assert forum.questions.most_liked(0) == []
    assert forum.questions.most_followed(0) == []


@pytest.mark.parametrize("n", [-1, 1.5, "3", True])
def test_rankings_reject_bad_limits(forum, n):
    with pytest.raises(ValueError):
        forum.questions.most_liked(n)
    with pytest.raises(ValueError):
        forum.questions.most_followed(n)
