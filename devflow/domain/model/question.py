"""Question aggregate root.

Questions are the primary content type. They carry up to three tags and
collect answers and votes.
"""

from datetime import datetime

from pydantic import Field

from devflow.domain.model.votable import Votable
from devflow.domain.value import QuestionId, TagName, UserId


class Question(Votable):
    """Question aggregate root.

    ``content`` is HTML produced by the rich-text editor and is stored as-is.
    ``answer_count`` is denormalised and maintained by the answer flow.
    """

    id: QuestionId
    title: str = Field(min_length=5, max_length=130)
    content: str = Field(min_length=20)
    tag_names: list[TagName] = Field(min_length=1, max_length=3)
    author_id: UserId
    views: int = Field(default=0, ge=0)
    answer_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
