"""List tags use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from devflow.application.pagination import (
    PageInfo,
    page_info,
    page_offset,
    resolve_page_size,
)
from devflow.config import PaginationSettings
from devflow.domain.repository import TagSort
from devflow.domain.service import TagService


class TagItem(BaseModel):
    """Tag item in response."""

    tag_id: str
    name: str
    description: str | None
    question_count: int
    created_at: datetime


class ListTagsRequest(BaseModel):
    """List tags request."""

    search: str | None = Field(default=None, max_length=50)
    sort: TagSort = TagSort.POPULAR
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)


class ListTagsResponse(PageInfo):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for the tags page."""

    def __init__(self, tag_service: TagService, pagination: PaginationSettings) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
            pagination: Page size defaults
        """
        self.tag_service = tag_service
        self.pagination = pagination

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            One page of tags with their question counts
        """
        page_size = resolve_page_size(
            request.page_size,
            self.pagination.tags_page_size,
            self.pagination.max_page_size,
        )
        search = request.search.strip() if request.search else None

        with logfire.span(
            "list_tags.execute",
            search=search,
            sort=request.sort.value,
            page=request.page,
            page_size=page_size,
        ):
            tags, total = await self.tag_service.list_tags(
                search=search,
                sort=request.sort,
                limit=page_size,
                offset=page_offset(request.page, page_size),
            )

            tag_items = [
                TagItem(
                    tag_id=str(tag.id),
                    name=tag.name.root,
                    description=tag.description,
                    question_count=tag.question_count,
                    created_at=tag.created_at,
                )
                for tag in tags
            ]

            info = page_info(request.page, page_size, total, len(tag_items))
            return ListTagsResponse(**info.model_dump(), tags=tag_items)
