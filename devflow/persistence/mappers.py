"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from devflow.domain.model import Answer, Question, Tag, User
from devflow.domain.value import (
    AnswerId,
    ClerkId,
    QuestionId,
    TagId,
    TagName,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _voters(value: Optional[Iterable[Any]]) -> frozenset[UserId]:
    return frozenset(UserId(_uuid(v)) for v in value or ())


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        clerk_id=ClerkId(row["clerk_id"]),
        name=row["name"],
        username=Username(row["username"]),
        email=row["email"],
        picture=row.get("picture"),
        bio=row.get("bio"),
        location=row.get("location"),
        portfolio_website=row.get("portfolio_website"),
        reputation=row["reputation"],
        joined_at=row["joined_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_question(row: Dict[str, Any], tag_names: list[str]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict
        tag_names: Names of the question's tags (from question_tags)

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        tag_names=[TagName(name) for name in tag_names],
        author_id=UserId(_uuid(row["author_id"])),
        views=row["views"],
        answer_count=row["answer_count"],
        upvoters=_voters(row.get("upvoters")),
        downvoters=_voters(row.get("downvoters")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Tag names live in the question_tags junction table and are excluded.
    Voter sets become arrays.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = question.model_dump(exclude={"tag_names"})
    data["upvoters"] = list(question.upvoters)
    data["downvoters"] = list(question.downvoters)
    return data


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        upvoters=_voters(row.get("upvoters")),
        downvoters=_voters(row.get("downvoters")),
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict.

    Args:
        answer: Answer domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = answer.model_dump()
    data["upvoters"] = list(answer.upvoters)
    data["downvoters"] = list(answer.downvoters)
    return data


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    ``question_count`` is an aggregate column added by the query; rows
    without it map to zero.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        description=row.get("description"),
        question_count=row.get("question_count") or 0,
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Args:
        tag: Tag domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return tag.model_dump(exclude={"question_count"})
