"""Get question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from devflow.domain.service import QuestionService, UserService
from devflow.domain.value import QuestionId, UserId

from .common import AuthorInfo, author_info


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetQuestionResponse(BaseModel):
    """Get question response."""

    question_id: str
    title: str
    content: str
    tag_names: list[str]
    author: AuthorInfo | None
    upvotes: int
    downvotes: int
    views: int
    answer_count: int
    created_at: datetime
    updated_at: datetime
    has_upvoted: bool
    has_downvoted: bool
    has_saved: bool


class GetQuestionUseCase:
    """Use case for loading a question page."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Args:
            request: Request with question ID and optional viewer

        Returns:
            Question with author and, for a signed-in viewer, their vote and
            saved state

        Raises:
            NotFoundError: If the question doesn't exist
        """
        question = await self.question_service.get_by_id(
            QuestionId(UUID(request.question_id))
        )
        authors = await self.user_service.get_users_by_ids([question.author_id])

        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        has_saved = (
            await self.user_service.has_saved_question(viewer_id, question.id)
            if viewer_id
            else False
        )

        return GetQuestionResponse(
            question_id=str(question.id),
            title=question.title,
            content=question.content,
            tag_names=[tag.root for tag in question.tag_names],
            author=author_info(authors.get(question.author_id)),
            upvotes=question.upvotes,
            downvotes=question.downvotes,
            views=question.views,
            answer_count=question.answer_count,
            created_at=question.created_at,
            updated_at=question.updated_at,
            has_upvoted=question.has_upvoted(viewer_id),
            has_downvoted=question.has_downvoted(viewer_id),
            has_saved=has_saved,
        )
