"""Shared response models for question use cases."""

from datetime import datetime

from pydantic import BaseModel

from devflow.domain.model import Question, User


class AuthorInfo(BaseModel):
    """Author summary shown next to questions and answers."""

    user_id: str
    clerk_id: str
    name: str
    picture: str | None


class QuestionItem(BaseModel):
    """Question item in list responses."""

    question_id: str
    title: str
    tag_names: list[str]
    author: AuthorInfo | None
    upvotes: int
    downvotes: int
    views: int
    answer_count: int
    created_at: datetime


def author_info(user: User | None) -> AuthorInfo | None:
    if user is None:
        return None
    return AuthorInfo(
        user_id=str(user.id),
        clerk_id=user.clerk_id,
        name=user.name,
        picture=user.picture,
    )


def question_item(question: Question, author: User | None) -> QuestionItem:
    return QuestionItem(
        question_id=str(question.id),
        title=question.title,
        tag_names=[tag.root for tag in question.tag_names],
        author=author_info(author),
        upvotes=question.upvotes,
        downvotes=question.downvotes,
        views=question.views,
        answer_count=question.answer_count,
        created_at=question.created_at,
    )
