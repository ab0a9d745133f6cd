"""Answer routes.

Answers are created and listed under ``/questions/{id}/answers``.
"""

from uuid import UUID

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie, Query

from devflow.application.usecase.answer import (
    DeleteAnswerRequest,
    DeleteAnswerResponse,
    DeleteAnswerUseCase,
    VoteAnswerRequest,
    VoteAnswerResponse,
    VoteAnswerUseCase,
)
from devflow.application.usecase.auth import GetCurrentUserUseCase
from devflow.interface.api.auth import require_user
from devflow.interface.api.routing import TransactionalRoute
from devflow.interface.api.routes.questions import VoteAPIRequest
from devflow.interface.error import to_http_exception

router = APIRouter(prefix="/answers", tags=["answers"], route_class=TransactionalRoute)


@router.post("/{answer_id}/vote", response_model=VoteAnswerResponse)
async def vote_answer(
    answer_id: UUID,
    request: VoteAPIRequest,
    vote_answer_use_case: FromDishka[VoteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> VoteAnswerResponse:
    """Upvote or downvote an answer.

    Requires authentication.

    Args:
        answer_id: Answer to vote on
        request: Vote action and the caller's current vote state
        vote_answer_use_case: Vote answer use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Refreshed vote counts and the caller's new vote state
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await vote_answer_use_case.execute(
            VoteAnswerRequest(
                answer_id=str(answer_id),
                user_id=user.user_id,
                has_upvoted=request.has_upvoted,
                has_downvoted=request.has_downvoted,
                action=request.action,
                path=request.path,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "vote on answer") from e


@router.delete("/{answer_id}", response_model=DeleteAnswerResponse)
async def delete_answer(
    answer_id: UUID,
    delete_answer_use_case: FromDishka[DeleteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    path: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteAnswerResponse:
    """Delete an answer. Only the author can delete."""
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await delete_answer_use_case.execute(
            DeleteAnswerRequest(answer_id=str(answer_id), user_id=user.user_id, path=path)
        )
    except Exception as e:
        raise to_http_exception(e, "delete answer") from e
