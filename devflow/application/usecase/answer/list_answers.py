"""List answers use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from devflow.application.pagination import (
    PageInfo,
    page_info,
    page_offset,
    resolve_page_size,
)
from devflow.application.usecase.question.common import AuthorInfo, author_info
from devflow.config import PaginationSettings
from devflow.domain.repository import AnswerSort
from devflow.domain.service import AnswerService, UserService
from devflow.domain.value import QuestionId, UserId


class AnswerItem(BaseModel):
    """Answer item in response."""

    answer_id: str
    question_id: str
    content: str
    author: AuthorInfo | None
    upvotes: int
    downvotes: int
    created_at: datetime
    has_upvoted: bool
    has_downvoted: bool


class ListAnswersRequest(BaseModel):
    """List answers request."""

    question_id: str
    sort: AnswerSort = AnswerSort.OLD
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    viewer_id: str | None = None  # Current user ID (if authenticated)


class ListAnswersResponse(PageInfo):
    """List answers response."""

    answers: list[AnswerItem]


class ListAnswersUseCase:
    """Use case for listing a question's answers."""

    def __init__(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list answers use case.

        Args:
            answer_service: Answer domain service
            user_service: User domain service
            pagination: Page size defaults
        """
        self.answer_service = answer_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: ListAnswersRequest) -> ListAnswersResponse:
        """Execute list answers flow.

        Args:
            request: List answers request with sort and pagination

        Returns:
            One page of answers with their authors
        """
        page_size = resolve_page_size(
            request.page_size,
            self.pagination.answers_page_size,
            self.pagination.max_page_size,
        )
        answers, total = await self.answer_service.list_for_question(
            QuestionId(UUID(request.question_id)),
            sort=request.sort,
            limit=page_size,
            offset=page_offset(request.page, page_size),
        )
        authors = await self.user_service.get_users_by_ids(
            [answer.author_id for answer in answers]
        )
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        info = page_info(request.page, page_size, total, len(answers))
        return ListAnswersResponse(
            **info.model_dump(),
            answers=[
                AnswerItem(
                    answer_id=str(answer.id),
                    question_id=str(answer.question_id),
                    content=answer.content,
                    author=author_info(authors.get(answer.author_id)),
                    upvotes=answer.upvotes,
                    downvotes=answer.downvotes,
                    created_at=answer.created_at,
                    has_upvoted=answer.has_upvoted(viewer_id),
                    has_downvoted=answer.has_downvoted(viewer_id),
                )
                for answer in answers
            ],
        )
