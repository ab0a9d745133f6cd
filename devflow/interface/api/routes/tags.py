"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from devflow.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)
from devflow.domain.repository.tag import TagSort

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List tags",
    description="Search and page through tags with their question counts.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    search: str | None = Query(default=None, max_length=50),
    sort: TagSort = Query(default=TagSort.POPULAR),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
) -> ListTagsResponse:
    """List tags.

    Args:
        use_case: List tags use case (injected)
        search: Case-insensitive substring of the tag name
        sort: Sort order ('popular', 'recent', 'name' or 'old')
        page: Page number (1-based)
        page_size: Items per page

    Returns:
        One page of tags

    Example:
        GET /tags?search=py&sort=name
    """
    with logfire.span("api.list_tags", search=search, sort=sort.value, page=page):
        request = ListTagsRequest(
            search=search, sort=sort, page=page, page_size=page_size
        )
        return await use_case.execute(request)
