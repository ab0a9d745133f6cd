"""Page-based pagination helpers."""

from pydantic import BaseModel


class PageInfo(BaseModel):
    """Pagination fields shared by list responses."""

    page: int
    page_size: int
    total: int
    is_next: bool


def page_offset(page: int, page_size: int) -> int:
    """Number of items to skip for a 1-based page."""
    return (page - 1) * page_size


def resolve_page_size(requested: int | None, default: int, maximum: int) -> int:
    """Use the requested page size if given, capped at ``maximum``."""
    if requested is None:
        return default
    return min(requested, maximum)


def page_info(page: int, page_size: int, total: int, returned: int) -> PageInfo:
    """Build pagination fields; ``is_next`` is true when items remain."""
    return PageInfo(
        page=page,
        page_size=page_size,
        total=total,
        is_next=total > page_offset(page, page_size) + returned,
    )
