"""List questions use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from devflow.application.pagination import (
    PageInfo,
    page_info,
    page_offset,
    resolve_page_size,
)
from devflow.config import PaginationSettings
from devflow.domain.repository import QuestionCriteria, QuestionFilter, SortField, SortKey
from devflow.domain.repository.question import NEWEST_FIRST
from devflow.domain.service import QuestionService, TagService, UserService
from devflow.domain.value import ClerkId, TagId, UserId

from .common import QuestionItem, question_item

# Profile pages list an author's questions by popularity
AUTHOR_ORDERING = (SortKey(SortField.VIEWS), SortKey(SortField.UPVOTES))


class TagInfo(BaseModel):
    """Tag summary returned with a tag's question listing."""

    tag_id: str
    name: str
    description: str | None
    question_count: int
    created_at: datetime


class ListQuestionsRequest(BaseModel):
    """List questions request.

    At most one scope applies, checked in order: ``author_id``, ``saved_by``,
    ``tag_id``; otherwise all questions are listed.
    """

    filter: QuestionFilter | None = None
    search: str | None = Field(default=None, max_length=200)
    author_id: str | None = None  # User ID whose questions to list
    saved_by: str | None = None  # Clerk ID whose collection to list
    tag_id: str | None = None
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)


class ListQuestionsResponse(PageInfo):
    """List questions response."""

    questions: list[QuestionItem]
    tag: TagInfo | None = None


class ListQuestionsUseCase:
    """Use case for the question listings (home, collection, tag, profile)."""

    def __init__(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            tag_service: Tag domain service
            user_service: User domain service
            pagination: Page size defaults
        """
        self.question_service = question_service
        self.tag_service = tag_service
        self.user_service = user_service
        self.pagination = pagination

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with scope, filter and pagination

        Returns:
            One page of questions

        Raises:
            NotFoundError: If ``saved_by`` or ``tag_id`` names a missing user/tag
        """
        page_size = resolve_page_size(
            request.page_size,
            self.pagination.questions_page_size,
            self.pagination.max_page_size,
        )
        search = request.search.strip() if request.search else None
        question_filter = request.filter
        unanswered_only = bool(question_filter and question_filter.unanswered_only)
        ordering = question_filter.ordering if question_filter else NEWEST_FIRST
        tag_info = None

        with logfire.span(
            "list_questions.execute",
            filter=question_filter.value if question_filter else None,
            search=search,
            author_id=request.author_id,
            saved_by=request.saved_by,
            tag_id=request.tag_id,
            page=request.page,
            page_size=page_size,
        ):
            if request.author_id:
                criteria = QuestionCriteria(author_id=UserId(UUID(request.author_id)))
                ordering = AUTHOR_ORDERING
            elif request.saved_by:
                user = await self.user_service.get_by_clerk_id(ClerkId(request.saved_by))
                saved_ids = await self.user_service.get_saved_question_ids(user.id)
                criteria = QuestionCriteria(
                    question_ids=frozenset(saved_ids),
                    unanswered_only=unanswered_only,
                    search=search,
                )
            elif request.tag_id:
                tag = await self.tag_service.get_by_id(TagId(UUID(request.tag_id)))
                tag_info = TagInfo(
                    tag_id=str(tag.id),
                    name=tag.name.root,
                    description=tag.description,
                    question_count=tag.question_count,
                    created_at=tag.created_at,
                )
                criteria = QuestionCriteria(
                    tag=tag.name, unanswered_only=unanswered_only, search=search
                )
                ordering = NEWEST_FIRST
            else:
                criteria = QuestionCriteria(
                    unanswered_only=unanswered_only,
                    search=search,
                    search_content=True,
                )

            questions, total = await self.question_service.list_questions(
                criteria,
                ordering=ordering,
                limit=page_size,
                offset=page_offset(request.page, page_size),
            )
            authors = await self.user_service.get_users_by_ids(
                [q.author_id for q in questions]
            )

            info = page_info(request.page, page_size, total, len(questions))
            return ListQuestionsResponse(
                **info.model_dump(),
                questions=[question_item(q, authors.get(q.author_id)) for q in questions],
                tag=tag_info,
            )
