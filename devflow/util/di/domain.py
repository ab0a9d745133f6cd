"""Domain layer DI providers."""

from dishka import Scope, provide

from devflow.config import AuthSettings
from devflow.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from devflow.domain.service import (
    AnswerService,
    JWTService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from devflow.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_vote_service(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            question_service=question_service, answer_service=answer_service
        )
