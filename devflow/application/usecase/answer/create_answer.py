"""Create answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from devflow.application import views
from devflow.domain.service import AnswerService, QuestionService
from devflow.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    author_id: str  # User ID from authenticated user
    content: str = Field(min_length=20)
    path: str | None = None


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    content: str
    created_at: datetime
    affected_views: list[str]


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Steps:
        1. Verify question exists via question service
        2. Create answer via answer service
        3. Update question's answer count via question service

        Args:
            request: Create answer request

        Returns:
            Created answer details

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question_id = QuestionId(UUID(request.question_id))

        # Verify question exists
        question = await self.question_service.get_by_id(question_id)

        answer = await self.answer_service.create_answer(
            question_id=question.id,
            author_id=UserId(UUID(request.author_id)),
            content=request.content,
        )

        # Update question's answer count
        await self.question_service.increment_answer_count(question.id)

        return CreateAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            content=answer.content,
            created_at=answer.created_at,
            affected_views=views.affected_views(
                views.question_view(question.id), path=request.path
            ),
        )
