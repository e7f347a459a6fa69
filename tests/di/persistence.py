"""Mock persistence providers for testing."""

from dishka import Scope, provide

from forum.domain.repository import (
    AnswerRepository,
    ProfileRepository,
    QuestionRepository,
    TransactionManager,
    VoteRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryDatabase,
    InMemoryProfileRepository,
    InMemoryQuestionRepository,
    InMemoryTransactionManager,
    InMemoryVoteRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The database lives for the whole container, so state written in one
    request (or one E2E call) is visible to the next. Each test builds its
    own container and starts from an empty database.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database(self) -> InMemoryDatabase:
        """Provide the shared in-memory tables."""
        return InMemoryDatabase()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, database: InMemoryDatabase) -> TransactionManager:
        """Provide in-memory transaction manager."""
        return InMemoryTransactionManager(database)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, database: InMemoryDatabase) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(
        self, database: InMemoryDatabase
    ) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, database: InMemoryDatabase) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, database: InMemoryDatabase) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(database)
