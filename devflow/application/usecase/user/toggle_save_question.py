"""Toggle saved question use case."""

from uuid import UUID

from pydantic import BaseModel

from devflow.application import views
from devflow.domain.service import QuestionService, UserService
from devflow.domain.value import QuestionId, UserId


class ToggleSaveQuestionRequest(BaseModel):
    """Toggle saved question request."""

    user_id: str  # From authenticated user
    question_id: str
    path: str | None = None


class ToggleSaveQuestionResponse(BaseModel):
    """Toggle saved question response."""

    question_id: str
    saved: bool
    affected_views: list[str]


class ToggleSaveQuestionUseCase:
    """Use case for adding a question to, or removing it from, a collection."""

    def __init__(
        self, user_service: UserService, question_service: QuestionService
    ) -> None:
        """Initialize toggle save question use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
        """
        self.user_service = user_service
        self.question_service = question_service

    async def execute(
        self, request: ToggleSaveQuestionRequest
    ) -> ToggleSaveQuestionResponse:
        """Execute toggle flow.

        Raises:
            NotFoundError: If the user or question doesn't exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        question = await self.question_service.get_by_id(
            QuestionId(UUID(request.question_id))
        )

        saved = await self.user_service.toggle_saved_question(user.id, question.id)

        return ToggleSaveQuestionResponse(
            question_id=str(question.id),
            saved=saved,
            affected_views=views.affected_views(views.COLLECTION, path=request.path),
        )
