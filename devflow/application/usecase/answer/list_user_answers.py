"""List user answers use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from devflow.application.pagination import (
    PageInfo,
    page_info,
    page_offset,
    resolve_page_size,
)
from devflow.config import PaginationSettings
from devflow.domain.service import AnswerService, QuestionService, UserService
from devflow.domain.value import UserId


class UserAnswerItem(BaseModel):
    """Answer on a profile page, with the question it answers."""

    answer_id: str
    question_id: str
    question_title: str | None
    upvotes: int
    downvotes: int
    created_at: datetime


class ListUserAnswersRequest(BaseModel):
    """List user answers request."""

    user_id: str
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)


class ListUserAnswersResponse(PageInfo):
    """List user answers response."""

    answers: list[UserAnswerItem]


class ListUserAnswersUseCase:
    """Use case for a profile's answers tab, most upvoted first."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list user answers use case.

        Args:
            answer_service: Answer domain service
            question_service: Question domain service
            user_service: User domain service
            pagination: Page size defaults
        """
        self.answer_service = answer_service
        self.question_service = question_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: ListUserAnswersRequest) -> ListUserAnswersResponse:
        """Execute list user answers flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        page_size = resolve_page_size(
            request.page_size,
            self.pagination.user_answers_page_size,
            self.pagination.max_page_size,
        )

        answers, total = await self.answer_service.list_by_author(
            user.id, limit=page_size, offset=page_offset(request.page, page_size)
        )
        # Batch fetch the answered questions to avoid N+1
        questions = await self.question_service.get_by_ids(
            [answer.question_id for answer in answers]
        )

        info = page_info(request.page, page_size, total, len(answers))
        return ListUserAnswersResponse(
            **info.model_dump(),
            answers=[
                UserAnswerItem(
                    answer_id=str(answer.id),
                    question_id=str(answer.question_id),
                    question_title=(
                        questions[answer.question_id].title
                        if answer.question_id in questions
                        else None
                    ),
                    upvotes=answer.upvotes,
                    downvotes=answer.downvotes,
                    created_at=answer.created_at,
                )
                for answer in answers
            ],
        )
