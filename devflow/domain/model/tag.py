"""Tag entity for categorizing questions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devflow.domain.model.common import DomainModel
from devflow.domain.value import TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Tags are created on first use when a question is asked. ``question_count``
    is derived from the question/tag association and is read-only here.
    """

    id: TagId
    name: TagName
    description: Optional[str] = Field(default=None, max_length=500)
    question_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
