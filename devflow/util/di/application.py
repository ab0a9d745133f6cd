"""Application layer DI providers."""

from dishka import Scope, provide

from devflow.application.usecase.answer import (
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    ListAnswersUseCase,
    ListUserAnswersUseCase,
    VoteAnswerUseCase,
)
from devflow.application.usecase.auth import GetCurrentUserUseCase
from devflow.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    EditQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    ViewQuestionUseCase,
    VoteQuestionUseCase,
)
from devflow.application.usecase.tag import ListTagsUseCase
from devflow.application.usecase.user import (
    CreateUserUseCase,
    GetUserProfileUseCase,
    ToggleSaveQuestionUseCase,
    UpdateUserProfileUseCase,
)
from devflow.config import PaginationSettings
from devflow.domain.service import (
    AnswerService,
    JWTService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from devflow.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        user_service: UserService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service,
            tag_service=tag_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        tag_service: TagService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            tag_service=tag_service,
            user_service=user_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_edit_question_use_case(
        self, question_service: QuestionService
    ) -> EditQuestionUseCase:
        """Provide edit question use case."""
        return EditQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        tag_service: TagService,
        user_service: UserService,
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            tag_service=tag_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_question_use_case(
        self, vote_service: VoteService
    ) -> VoteQuestionUseCase:
        """Provide vote question use case."""
        return VoteQuestionUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_view_question_use_case(
        self, question_service: QuestionService
    ) -> ViewQuestionUseCase:
        """Provide view question use case."""
        return ViewQuestionUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service, question_service=question_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(
        self,
        answer_service: AnswerService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(
            answer_service=answer_service,
            user_service=user_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_answer_use_case(self, vote_service: VoteService) -> VoteAnswerUseCase:
        """Provide vote answer use case."""
        return VoteAnswerUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            answer_service=answer_service, question_service=question_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_user_answers_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        pagination: PaginationSettings,
    ) -> ListUserAnswersUseCase:
        """Provide list user answers use case."""
        return ListUserAnswersUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
            pagination=pagination,
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, tag_service: TagService, pagination: PaginationSettings
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service, pagination=pagination)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_user_profile_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_save_question_use_case(
        self, user_service: UserService, question_service: QuestionService
    ) -> ToggleSaveQuestionUseCase:
        """Provide toggle save question use case."""
        return ToggleSaveQuestionUseCase(
            user_service=user_service, question_service=question_service
        )
