"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.answer import (
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    SetAnswerAcceptedUseCase,
)
from forum.application.usecase.profile import (
    GetCurrentProfileUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from forum.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from forum.application.usecase.tag import ListTagsUseCase
from forum.application.usecase.vote import (
    CastVoteUseCase,
    RemoveVoteUseCase,
    ToggleVoteUseCase,
)
from forum.config import ForumSettings
from forum.domain.service import (
    AnswerService,
    JWTService,
    ProfileService,
    QuestionService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Profile use cases
    @provide(scope=Scope.REQUEST)
    def get_current_profile_use_case(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> GetCurrentProfileUseCase:
        """Provide get current profile use case."""
        return GetCurrentProfileUseCase(
            jwt_service=jwt_service, profile_service=profile_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_profile_use_case(
        self, profile_service: ProfileService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(profile_service=profile_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, profile_service: ProfileService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(profile_service=profile_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        profile_service: ProfileService,
        vote_service: VoteService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            profile_service=profile_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        profile_service: ProfileService,
        vote_service: VoteService,
        forum_settings: ForumSettings,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            profile_service=profile_service,
            vote_service=vote_service,
            page_size=forum_settings.questions_per_page,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

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
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    @provide(scope=Scope.REQUEST)
    def get_set_answer_accepted_use_case(
        self, answer_service: AnswerService, question_service: QuestionService
    ) -> SetAnswerAcceptedUseCase:
        """Provide set answer accepted use case."""
        return SetAnswerAcceptedUseCase(
            answer_service=answer_service, question_service=question_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            vote_service=vote_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(
            vote_service=vote_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(
        self,
        vote_service: VoteService,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(
            vote_service=vote_service,
            question_service=question_service,
            answer_service=answer_service,
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, question_service: QuestionService
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(question_service=question_service)
