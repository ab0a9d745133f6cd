"""Rendered views made stale by a mutation.

Use cases that change data return the paths of the pages whose cached
copies the front end should revalidate. The service never touches a cache
itself.
"""

from typing import Optional

HOME = "/"
COLLECTION = "/collection"


def question_view(question_id: object) -> str:
    return f"/question/{question_id}"


def tag_view(tag_id: object) -> str:
    return f"/tags/{tag_id}"


def profile_view(clerk_id: str) -> str:
    return f"/profile/{clerk_id}"


def affected_views(*views: str, path: Optional[str] = None) -> list[str]:
    """Combine the caller's path with canonical views, dropping duplicates.

    Args:
        *views: Canonical views touched by the mutation
        path: Page the caller was on, if any

    Returns:
        Ordered list of distinct view paths
    """
    candidates = [path, *views] if path else list(views)
    return list(dict.fromkeys(candidates))
