"""Delete question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from devflow.application import views
from devflow.domain.service import (
    AnswerService,
    QuestionService,
    TagService,
    UserService,
)
from devflow.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # From authenticated user
    path: str | None = None


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    question_id: str
    affected_views: list[str]


class DeleteQuestionUseCase:
    """Use case for deleting a question and everything hanging off it."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        tag_service: TagService,
        user_service: UserService,
    ) -> None:
        """Initialize delete question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            tag_service: Tag domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.tag_service = tag_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Steps:
        1. Check the question exists and the user is its author
        2. Delete its answers
        3. Detach it from its tags and from every collection
        4. Delete the question

        Args:
            request: Request with question ID and user

        Returns:
            Deleted question ID and stale views

        Raises:
            NotFoundError: If the question doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        question_id = QuestionId(UUID(request.question_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "delete_question.execute",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            # Ownership is checked before anything is removed
            await self.question_service.get_for_author(question_id, user_id)

            await self.answer_service.delete_for_question(question_id)
            await self.tag_service.unlink_question(question_id)
            await self.user_service.remove_question_from_collections(question_id)

            await self.question_service.delete_question(question_id, user_id)

            return DeleteQuestionResponse(
                question_id=str(question_id),
                affected_views=views.affected_views(
                    views.HOME, views.COLLECTION, path=request.path
                ),
            )
