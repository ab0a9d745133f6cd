"""Delete answer use case."""

from uuid import UUID

from pydantic import BaseModel

from devflow.application import views
from devflow.domain.service import AnswerService, QuestionService
from devflow.domain.value import AnswerId, UserId


class DeleteAnswerRequest(BaseModel):
    """Delete answer request."""

    answer_id: str
    user_id: str  # From authenticated user
    path: str | None = None


class DeleteAnswerResponse(BaseModel):
    """Delete answer response."""

    answer_id: str
    question_id: str
    affected_views: list[str]


class DeleteAnswerUseCase:
    """Use case for deleting one's own answer."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
    ) -> None:
        """Initialize delete answer use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
        """
        self.answer_service = answer_service
        self.question_service = question_service

    async def execute(self, request: DeleteAnswerRequest) -> DeleteAnswerResponse:
        """Execute delete answer flow.

        Raises:
            NotFoundError: If the answer doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        answer = await self.answer_service.delete_answer(
            AnswerId(UUID(request.answer_id)), UserId(UUID(request.user_id))
        )
        await self.question_service.decrement_answer_count(answer.question_id)

        return DeleteAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            affected_views=views.affected_views(
                views.question_view(answer.question_id), path=request.path
            ),
        )
