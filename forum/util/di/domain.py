"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, ForumSettings
from forum.domain.repository import (
    AnswerRepository,
    ProfileRepository,
    QuestionRepository,
    TransactionManager,
    VoteRepository,
)
from forum.domain.service import (
    AnswerService,
    JWTService,
    ProfileService,
    QuestionService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Every service of a request shares one TransactionManager, so nested
    service calls join the same transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(
        self,
        profile_repository: ProfileRepository,
        transaction_manager: TransactionManager,
    ) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(
            profile_repository=profile_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        profile_service: ProfileService,
        transaction_manager: TransactionManager,
        forum_settings: ForumSettings,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            profile_service=profile_service,
            transaction_manager=transaction_manager,
            max_tags=forum_settings.max_tags,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
        profile_service: ProfileService,
        transaction_manager: TransactionManager,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_service=question_service,
            profile_service=profile_service,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        transaction_manager: TransactionManager,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
            transaction_manager=transaction_manager,
        )
