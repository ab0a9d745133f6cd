"""Domain model entities for DevFlow."""

from devflow.domain.model.answer import Answer
from devflow.domain.model.question import Question
from devflow.domain.model.tag import Tag
from devflow.domain.model.user import User
from devflow.domain.model.votable import Votable

__all__ = [
    "User",
    "Question",
    "Answer",
    "Tag",
    "Votable",
]
