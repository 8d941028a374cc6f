"""
Reply repository tests - tree navigation and parent validation.
"""

import pytest

from qa_forum.exceptions import NoParentReplyError, RecordNotFoundError, ReplyCycleError
from qa_forum.models import Question, Reply, User, build_reply_forest


def test_find_by_question_id_is_flat(forum, question: Question, thread: dict):
    replies = forum.replies.find_by_question_id(question.id)
    assert len(replies) == 5
    assert {r.id for r in replies} == {r.id for r in thread.values()}


def test_find_by_parent_id_returns_every_child(forum, thread: dict):
    children = forum.replies.find_by_parent_id(thread["top"].id)
    assert children == [thread["child"], thread["sibling"]]


def test_child_replies(forum, thread: dict):
    assert forum.replies.child_replies(thread["child"]) == [thread["grandchild"]]
    assert forum.replies.child_replies(thread["grandchild"]) == []


def test_parent_reply(forum, thread: dict):
    assert forum.replies.parent_reply(thread["grandchild"]) == thread["child"]
    assert forum.replies.parent_reply(thread["child"]) == thread["top"]


def test_parent_reply_of_top_level_reply_fails(forum, thread: dict):
    assert thread["top"].is_top_level
    with pytest.raises(NoParentReplyError) as exc:
        forum.replies.parent_reply(thread["top"])
    assert isinstance(exc.value, RecordNotFoundError)
    assert exc.value.reply_id == thread["top"].id


def test_dangling_parent_is_stored_but_not_resolvable(forum, ada: User, question: Question):
    orphan = forum.replies.save(
        Reply(body="?", author_id=ada.id, question_id=question.id, parent_reply_id=999)
    )
    assert forum.replies.find_by_id(orphan.id).parent_reply_id == 999
    with pytest.raises(RecordNotFoundError):
        forum.replies.parent_reply(orphan)


def test_find_by_user_id(forum, ada: User, thread: dict):
    replies = forum.replies.find_by_user_id(ada.id)
    assert replies == [thread["child"], thread["sibling"], thread["other_top"]]


def test_author_and_question(forum, charles: User, question: Question, thread: dict):
    assert forum.replies.author(thread["top"]) == charles
    assert forum.replies.question(thread["top"]) == question


def test_update_body(forum, thread: dict):
    reply = thread["sibling"]
    reply.body = "Strongly agreed"
    forum.replies.save(reply)
    assert forum.replies.find_by_id(reply.id).body == "Strongly agreed"


def test_reparent_under_unrelated_branch(forum, thread: dict):
    sibling = thread["sibling"]
    sibling.parent_reply_id = thread["other_top"].id
    forum.replies.save(sibling)
    assert forum.replies.child_replies(thread["other_top"]) == [sibling]


def test_reparent_under_descendant_is_refused(forum, thread: dict):
    top = thread["top"]
    top.parent_reply_id = thread["grandchild"].id

    with pytest.raises(ReplyCycleError):
        forum.replies.save(top)
    assert forum.replies.find_by_id(top.id).parent_reply_id is None


def test_reply_cannot_be_its_own_parent(forum, thread: dict):
    child = thread["child"]
    child.parent_reply_id = child.id
    with pytest.raises(ReplyCycleError):
        forum.replies.save(child)


def test_forest_from_repository(forum, question: Question, thread: dict):
    roots = build_reply_forest(forum.replies.find_by_question_id(question.id))

    assert [node.reply for node in roots] == [thread["top"], thread["other_top"]]
    top = roots[0]
    assert [node.reply for node in top.children] == [thread["child"], thread["sibling"]]
    assert [(depth, reply.body) for depth, reply in top.walk()] == [
        (0, "Probably"),
        (1, "Why?"),
        (2, "Symbols"),
        (1, "Agreed"),
    ]
