"""View question use case."""

from uuid import UUID

from pydantic import BaseModel

from devflow.domain.service import QuestionService
from devflow.domain.value import QuestionId


class ViewQuestionRequest(BaseModel):
    """View question request."""

    question_id: str


class ViewQuestionResponse(BaseModel):
    """View question response."""

    question_id: str
    views: int


class ViewQuestionUseCase:
    """Use case for counting a page view of a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize view question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: ViewQuestionRequest) -> ViewQuestionResponse:
        """Increment the question's view counter.

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question = await self.question_service.increment_views(
            QuestionId(UUID(request.question_id))
        )
        return ViewQuestionResponse(question_id=str(question.id), views=question.views)
