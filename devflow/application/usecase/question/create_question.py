"""Create question use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from devflow.application import views
from devflow.domain.service import QuestionService, TagService, UserService
from devflow.domain.value import TagName, UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str = Field(min_length=5, max_length=130)
    content: str = Field(min_length=20)
    tag_names: list[str] = Field(min_length=1, max_length=3)
    author_id: str  # User ID from authenticated user
    path: str | None = None  # Page the question was asked from


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    tag_names: list[str]
    created_at: datetime
    affected_views: list[str]


class CreateQuestionUseCase:
    """Use case for asking a new question."""

    def __init__(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Steps:
        1. Verify the author exists
        2. Resolve tags, creating new ones on first use
        3. Save the question
        4. Link the question to its tags

        Args:
            request: Create question request

        Returns:
            Created question details

        Raises:
            NotFoundError: If the author doesn't exist
            ValueError: If a tag name is invalid
        """
        with logfire.span(
            "create_question.execute",
            author_id=request.author_id,
            tags=request.tag_names,
        ):
            author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

            tags = await self.tag_service.get_or_create_tags(
                [TagName(name) for name in request.tag_names]
            )

            question = await self.question_service.create_question(
                title=request.title,
                content=request.content,
                tag_names=[tag.name for tag in tags],
                author_id=author.id,
            )

            await self.tag_service.link_question(tags, question.id)

            return CreateQuestionResponse(
                question_id=str(question.id),
                title=question.title,
                tag_names=[tag.root for tag in question.tag_names],
                created_at=question.created_at,
                affected_views=views.affected_views(views.HOME, path=request.path),
            )
