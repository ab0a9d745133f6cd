"""User aggregate root.

Accounts live in the external identity provider; this is the local profile
keyed by the provider's user id.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from devflow.domain.model.common import DomainModel
from devflow.domain.value import ClerkId, UserId, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    clerk_id: ClerkId
    name: str = Field(min_length=1, max_length=100)
    username: Username
    email: str
    picture: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=100)
    portfolio_website: Optional[str] = None
    reputation: int = Field(default=0, ge=0)
    joined_at: datetime = Field(default_factory=datetime.now)
