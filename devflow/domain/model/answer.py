"""Answer entity."""

from datetime import datetime

from pydantic import Field

from devflow.domain.model.votable import Votable
from devflow.domain.value import AnswerId, QuestionId, UserId


class Answer(Votable):
    """Answer to a question."""

    id: AnswerId
    question_id: QuestionId
    author_id: UserId
    content: str = Field(min_length=20)
    created_at: datetime = Field(default_factory=datetime.now)
