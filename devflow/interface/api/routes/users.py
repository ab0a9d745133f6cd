"""User routes: accounts, profiles and collections."""

import hmac
from uuid import UUID

import logfire
from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel, Field

from devflow.application.usecase.answer import (
    ListUserAnswersRequest,
    ListUserAnswersResponse,
    ListUserAnswersUseCase,
)
from devflow.application.usecase.auth import GetCurrentUserUseCase
from devflow.application.usecase.user import (
    CreateUserRequest,
    CreateUserResponse,
    CreateUserUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ToggleSaveQuestionRequest,
    ToggleSaveQuestionResponse,
    ToggleSaveQuestionUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)
from devflow.config import AuthSettings
from devflow.interface.api.auth import require_user
from devflow.interface.api.routing import TransactionalRoute
from devflow.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=TransactionalRoute)


class CreateUserAPIRequest(BaseModel):
    """Account created event sent by the identity provider."""

    clerk_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    username: str
    email: str
    picture: str | None = None


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile. Omitted fields are unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    username: str | None = None
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    portfolio_website: str | None = None
    path: str | None = None


class ToggleSaveAPIRequest(BaseModel):
    """API request for saving or unsaving a question."""

    path: str | None = None


@router.post("", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
    auth_settings: FromDishka[AuthSettings],
    x_webhook_secret: str | None = Header(default=None),
) -> CreateUserResponse:
    """Create a user when the identity provider reports a new account.

    Args:
        request: Account data from the identity provider
        create_user_use_case: Create user use case from DI
        auth_settings: Auth settings holding the webhook secret
        x_webhook_secret: Shared secret header

    Returns:
        Created user

    Raises:
        HTTPException: 401 for a bad secret, 409 if clerk id or username
            is taken
    """
    if not x_webhook_secret or not hmac.compare_digest(
        x_webhook_secret, auth_settings.webhook_secret
    ):
        logfire.warn("Rejected user webhook with bad secret")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook secret",
        )

    try:
        return await create_user_use_case.execute(
            CreateUserRequest(**request.model_dump())
        )
    except Exception as e:
        raise to_http_exception(e, "create user") from e


@router.patch("/me", response_model=UpdateUserProfileResponse)
async def update_my_profile(
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateUserProfileResponse:
    """Update current user's profile.

    Example:
        PATCH /users/me
        Cookie: auth_token=...

        Request:
        {
            "bio": "Backend developer",
            "location": "Lisbon"
        }
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(user_id=user.user_id, **request.model_dump())
        )
    except Exception as e:
        raise to_http_exception(e, "update profile") from e


@router.post("/me/saved/{question_id}", response_model=ToggleSaveQuestionResponse)
async def toggle_save_question(
    question_id: UUID,
    toggle_save_question_use_case: FromDishka[ToggleSaveQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    request: ToggleSaveAPIRequest | None = None,
    auth_token: str | None = Cookie(default=None),
) -> ToggleSaveQuestionResponse:
    """Save a question to the current user's collection, or remove it."""
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await toggle_save_question_use_case.execute(
            ToggleSaveQuestionRequest(
                user_id=user.user_id,
                question_id=str(question_id),
                path=request.path if request else None,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "save question") from e


@router.get("/{clerk_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    clerk_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get user profile by identity provider id.

    Raises:
        HTTPException: If user not found
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(clerk_id=clerk_id)
        )
    except Exception as e:
        raise to_http_exception(e, "get profile") from e


@router.get("/{user_id}/answers", response_model=ListUserAnswersResponse)
async def list_user_answers(
    user_id: UUID,
    list_user_answers_use_case: FromDishka[ListUserAnswersUseCase],
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
) -> ListUserAnswersResponse:
    """List a user's answers, most upvoted first."""
    try:
        return await list_user_answers_use_case.execute(
            ListUserAnswersRequest(
                user_id=str(user_id), page=page, page_size=page_size
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list answers") from e
