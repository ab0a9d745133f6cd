"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from devflow.application import views
from devflow.domain.service import UserService
from devflow.domain.value import UserId, Username


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From authenticated user
    name: str | None = Field(default=None, min_length=1, max_length=100)
    username: str | None = None
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    portfolio_website: str | None = None
    path: str | None = None


class UpdateUserProfileResponse(BaseModel):
    """Update user profile response."""

    user_id: str
    clerk_id: str
    name: str
    username: str
    bio: str | None
    location: str | None
    portfolio_website: str | None
    affected_views: list[str]


class UpdateUserProfileUseCase:
    """Use case for editing one's own profile.

    Name, username, bio, location and website are editable. Reputation and
    the identity provider id are not.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(
        self, request: UpdateUserProfileRequest
    ) -> UpdateUserProfileResponse:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If the user doesn't exist
            ConflictError: If the new username is taken
        """
        user = await self.user_service.update_profile(
            user_id=UserId(UUID(request.user_id)),
            name=request.name,
            username=Username(request.username) if request.username else None,
            bio=request.bio,
            location=request.location,
            portfolio_website=request.portfolio_website,
        )

        return UpdateUserProfileResponse(
            user_id=str(user.id),
            clerk_id=user.clerk_id,
            name=user.name,
            username=user.username.root,
            bio=user.bio,
            location=user.location,
            portfolio_website=user.portfolio_website,
            affected_views=views.affected_views(
                views.profile_view(user.clerk_id), path=request.path
            ),
        )
