"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from devflow.domain.service import AnswerService, QuestionService, UserService
from devflow.domain.value import ClerkId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    clerk_id: str


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    clerk_id: str
    name: str
    username: str
    picture: str | None
    bio: str | None
    location: str | None
    portfolio_website: str | None
    reputation: int
    joined_at: datetime
    total_questions: int
    total_answers: int


class GetUserProfileUseCase:
    """Use case for a user's public profile page."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.user_service = user_service
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Request with the identity provider user id

        Returns:
            Profile with question and answer totals

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_service.get_by_clerk_id(ClerkId(request.clerk_id))

        total_questions = await self.question_service.count_by_author(user.id)
        total_answers = await self.answer_service.count_by_author(user.id)

        return GetUserProfileResponse(
            user_id=str(user.id),
            clerk_id=user.clerk_id,
            name=user.name,
            username=user.username.root,
            picture=user.picture,
            bio=user.bio,
            location=user.location,
            portfolio_website=user.portfolio_website,
            reputation=user.reputation,
            joined_at=user.joined_at,
            total_questions=total_questions,
            total_answers=total_answers,
        )
