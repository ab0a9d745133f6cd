"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .toggle_save_question import (
    ToggleSaveQuestionRequest,
    ToggleSaveQuestionResponse,
    ToggleSaveQuestionUseCase,
)
from .update_user_profile import (
    UpdateUserProfileRequest,
    UpdateUserProfileResponse,
    UpdateUserProfileUseCase,
)

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ToggleSaveQuestionRequest",
    "ToggleSaveQuestionResponse",
    "ToggleSaveQuestionUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileResponse",
    "UpdateUserProfileUseCase",
]
