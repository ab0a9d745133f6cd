"""Create user use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from devflow.domain.service import UserService
from devflow.domain.value import ClerkId, Username


class CreateUserRequest(BaseModel):
    """Create user request, sent by the identity provider on sign-up."""

    clerk_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    username: str
    email: str
    picture: str | None = None


class CreateUserResponse(BaseModel):
    """Create user response."""

    user_id: str
    clerk_id: str
    username: str
    joined_at: datetime


class CreateUserUseCase:
    """Use case for creating the local profile of a new account."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute create user flow.

        Args:
            request: Account details from the identity provider

        Returns:
            Created user

        Raises:
            ConflictError: If the clerk id or username is taken
            ValueError: If the username is malformed
        """
        with logfire.span("create_user.execute", clerk_id=request.clerk_id):
            user = await self.user_service.create_user(
                clerk_id=ClerkId(request.clerk_id),
                name=request.name,
                username=Username(request.username),
                email=request.email,
                picture=request.picture,
            )

            return CreateUserResponse(
                user_id=str(user.id),
                clerk_id=user.clerk_id,
                username=user.username.root,
                joined_at=user.joined_at,
            )
