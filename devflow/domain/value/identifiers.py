"""Strongly typed identifiers for DevFlow domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
QuestionId = NewType("QuestionId", UUID)
AnswerId = NewType("AnswerId", UUID)
TagId = NewType("TagId", UUID)

# Identifier assigned by the external identity provider (e.g. "user_2abc...")
ClerkId = NewType("ClerkId", str)
