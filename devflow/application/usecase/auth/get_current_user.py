"""Get current user use case."""

from pydantic import BaseModel

from devflow.domain.service import JWTService, UserService
from devflow.domain.value import ClerkId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    clerk_id: str
    name: str
    username: str
    picture: str | None
    reputation: int


class GetCurrentUserUseCase:
    """Use case for resolving the bearer of a session token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Look the user up by the token's subject (identity provider id)

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        # Verify token (raises JWTError if invalid)
        payload = self.jwt_service.verify_token(request.token)

        # Load user (raises NotFoundError if not found)
        user = await self.user_service.get_by_clerk_id(ClerkId(payload.sub))

        return GetCurrentUserResponse(
            user_id=str(user.id),
            clerk_id=user.clerk_id,
            name=user.name,
            username=user.username.root,
            picture=user.picture,
            reputation=user.reputation,
        )
