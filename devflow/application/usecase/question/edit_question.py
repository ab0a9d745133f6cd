"""Edit question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from devflow.application import views
from devflow.domain.service import QuestionService
from devflow.domain.value import QuestionId, UserId


class EditQuestionRequest(BaseModel):
    """Edit question request."""

    question_id: str
    user_id: str  # From authenticated user
    title: str = Field(min_length=5, max_length=130)
    content: str = Field(min_length=20)
    path: str | None = None


class EditQuestionResponse(BaseModel):
    """Edit question response."""

    question_id: str
    title: str
    content: str
    updated_at: datetime
    affected_views: list[str]


class EditQuestionUseCase:
    """Use case for editing a question's title and content.

    Only the author can edit. Tags are fixed once the question is asked.
    """

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize edit question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: EditQuestionRequest) -> EditQuestionResponse:
        """Execute edit question flow.

        Args:
            request: Request with the new title and content

        Returns:
            Updated question details

        Raises:
            NotFoundError: If the question doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        question = await self.question_service.edit_question(
            question_id=QuestionId(UUID(request.question_id)),
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            content=request.content,
        )

        return EditQuestionResponse(
            question_id=str(question.id),
            title=question.title,
            content=question.content,
            updated_at=question.updated_at,
            affected_views=views.affected_views(
                views.question_view(question.id), path=request.path
            ),
        )
