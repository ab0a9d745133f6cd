"""Question routes, including a question's votes, views and answers."""

from uuid import UUID

from dishka.integrations.fastapi import FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from devflow.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersResponse,
    ListAnswersUseCase,
)
from devflow.application.usecase.auth import GetCurrentUserUseCase
from devflow.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    EditQuestionRequest,
    EditQuestionResponse,
    EditQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    ViewQuestionRequest,
    ViewQuestionResponse,
    ViewQuestionUseCase,
    VoteQuestionRequest,
    VoteQuestionResponse,
    VoteQuestionUseCase,
)
from devflow.domain.repository.answer import AnswerSort
from devflow.domain.repository.question import QuestionFilter
from devflow.domain.value import VoteAction
from devflow.interface.api.auth import optional_user, require_user
from devflow.interface.api.routing import TransactionalRoute
from devflow.interface.error import to_http_exception

router = APIRouter(prefix="/questions", tags=["questions"], route_class=TransactionalRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    title: str = Field(min_length=5, max_length=130)
    content: str = Field(min_length=20)
    tag_names: list[str] = Field(min_length=1, max_length=3)
    path: str | None = None


class EditQuestionAPIRequest(BaseModel):
    """API request for editing a question. Tags are not editable."""

    title: str = Field(min_length=5, max_length=130)
    content: str = Field(min_length=20)
    path: str | None = None


class VoteAPIRequest(BaseModel):
    """API request for voting.

    ``has_upvoted`` and ``has_downvoted`` are the caller's view of its
    current vote, as rendered on the page.
    """

    action: VoteAction
    has_upvoted: bool = False
    has_downvoted: bool = False
    path: str | None = None


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str = Field(min_length=20)
    path: str | None = None


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Ask a new question.

    Requires authentication.

    Args:
        request: Question data
        create_question_use_case: Create question use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created question details

    Raises:
        HTTPException: If not authenticated or validation fails
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                title=request.title,
                content=request.content,
                tag_names=request.tag_names,
                author_id=user.user_id,
                path=request.path,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create question") from e


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    filter: QuestionFilter | None = Query(default=None),
    search: str | None = Query(default=None, max_length=200),
    author_id: UUID | None = Query(default=None),
    saved_by: str | None = Query(default=None),
    tag_id: UUID | None = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
) -> ListQuestionsResponse:
    """List questions.

    At most one scope applies, checked in this order: ``author_id``,
    ``saved_by`` (a user's collection, by clerk id), ``tag_id``. Without a
    scope all questions are listed and ``search`` also matches content.

    Args:
        list_questions_use_case: List questions use case from DI
        filter: Listing filter (ordering and predicate)
        search: Case-insensitive text search
        author_id: Only this user's questions
        saved_by: Only questions in this user's collection
        tag_id: Only questions with this tag
        page: Page number (1-based)
        page_size: Items per page

    Returns:
        One page of questions
    """
    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(
                filter=filter,
                search=search,
                author_id=str(author_id) if author_id else None,
                saved_by=saved_by,
                tag_id=str(tag_id) if tag_id else None,
                page=page,
                page_size=page_size,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list questions") from e


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question.

    Authentication is optional; signed-in viewers also get their vote and
    collection state.
    """
    viewer = await optional_user(auth_token, get_current_user_use_case)

    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(
                question_id=str(question_id),
                viewer_id=viewer.user_id if viewer else None,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "get question") from e


@router.patch("/{question_id}", response_model=EditQuestionResponse)
async def edit_question(
    question_id: UUID,
    request: EditQuestionAPIRequest,
    edit_question_use_case: FromDishka[EditQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> EditQuestionResponse:
    """Edit a question's title and content.

    Requires authentication. Only the author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the question does not exist
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await edit_question_use_case.execute(
            EditQuestionRequest(
                question_id=str(question_id),
                user_id=user.user_id,
                title=request.title,
                content=request.content,
                path=request.path,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "edit question") from e


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    path: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question with its answers, tag links and saves.

    Requires authentication. Only the author can delete.
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await delete_question_use_case.execute(
            DeleteQuestionRequest(
                question_id=str(question_id), user_id=user.user_id, path=path
            )
        )
    except Exception as e:
        raise to_http_exception(e, "delete question") from e


@router.post("/{question_id}/vote", response_model=VoteQuestionResponse)
async def vote_question(
    question_id: UUID,
    request: VoteAPIRequest,
    vote_question_use_case: FromDishka[VoteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> VoteQuestionResponse:
    """Upvote or downvote a question.

    Repeating the current vote retracts it; voting the other way switches it.

    Args:
        question_id: Question to vote on
        request: Vote action and the caller's current vote state
        vote_question_use_case: Vote question use case from DI
        get_current_user_use_case: Get current user use case from DI
        auth_token: JWT token from cookie

    Returns:
        Refreshed vote counts and the caller's new vote state

    Raises:
        HTTPException: 401 if not authenticated, 400 for an inconsistent
            vote state, 404 if the question does not exist
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await vote_question_use_case.execute(
            VoteQuestionRequest(
                question_id=str(question_id),
                user_id=user.user_id,
                has_upvoted=request.has_upvoted,
                has_downvoted=request.has_downvoted,
                action=request.action,
                path=request.path,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "vote on question") from e


@router.post("/{question_id}/view", response_model=ViewQuestionResponse)
async def view_question(
    question_id: UUID,
    view_question_use_case: FromDishka[ViewQuestionUseCase],
) -> ViewQuestionResponse:
    """Record a view of a question."""
    try:
        return await view_question_use_case.execute(
            ViewQuestionRequest(question_id=str(question_id))
        )
    except Exception as e:
        raise to_http_exception(e, "record view") from e


@router.post(
    "/{question_id}/answers",
    response_model=CreateAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_answer(
    question_id: UUID,
    request: CreateAnswerAPIRequest,
    create_answer_use_case: FromDishka[CreateAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreateAnswerResponse:
    """Answer a question.

    Requires authentication.
    """
    user = await require_user(auth_token, get_current_user_use_case)

    try:
        return await create_answer_use_case.execute(
            CreateAnswerRequest(
                question_id=str(question_id),
                author_id=user.user_id,
                content=request.content,
                path=request.path,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create answer") from e


@router.get("/{question_id}/answers", response_model=ListAnswersResponse)
async def list_answers(
    question_id: UUID,
    list_answers_use_case: FromDishka[ListAnswersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    sort: AnswerSort = Query(default=AnswerSort.OLD),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListAnswersResponse:
    """List a question's answers."""
    viewer = await optional_user(auth_token, get_current_user_use_case)

    try:
        return await list_answers_use_case.execute(
            ListAnswersRequest(
                question_id=str(question_id),
                sort=sort,
                page=page,
                page_size=page_size,
                viewer_id=viewer.user_id if viewer else None,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list answers") from e
