"""Test configuration and shared builders."""

from datetime import datetime, timedelta
from uuid import uuid4

from devflow.domain.model import Answer, Question, User
from devflow.domain.value import (
    AnswerId,
    ClerkId,
    QuestionId,
    TagName,
    UserId,
    Username,
)

QUESTION_BODY = "<p>How do I make this work reliably in production?</p>"
ANSWER_BODY = "<p>Use a context manager and close it explicitly.</p>"


def make_user(username: str = "alice", clerk_id: str | None = None) -> User:
    """Build a user with sensible defaults."""
    return User(
        id=UserId(uuid4()),
        clerk_id=ClerkId(clerk_id or f"user_{username}"),
        name=username.title(),
        username=Username(username),
        email=f"{username}@example.com",
        joined_at=datetime.now(),
    )


def make_question(
    author_id: UserId,
    title: str = "How to use asyncio queues",
    tags: tuple[str, ...] = ("python",),
    content: str = QUESTION_BODY,
    age_minutes: int = 0,
    **fields,
) -> Question:
    """Build a question; ``age_minutes`` pushes ``created_at`` into the past."""
    created_at = datetime.now() - timedelta(minutes=age_minutes)
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        content=content,
        tag_names=[TagName(tag) for tag in tags],
        author_id=author_id,
        created_at=created_at,
        updated_at=created_at,
        **fields,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId,
    content: str = ANSWER_BODY,
    age_minutes: int = 0,
    **fields,
) -> Answer:
    """Build an answer; ``age_minutes`` pushes ``created_at`` into the past."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        author_id=author_id,
        content=content,
        created_at=datetime.now() - timedelta(minutes=age_minutes),
        **fields,
    )
