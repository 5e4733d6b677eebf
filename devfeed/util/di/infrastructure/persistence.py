"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from devfeed.config import Settings
from devfeed.domain.repository import (
    CommentRepository,
    PollRepository,
    PollVoteRepository,
    PostRepository,
    PowerUpRepository,
    PreferencesRepository,
    StackRepository,
)
from devfeed.persistence.database import create_engine, create_session_factory
from devfeed.persistence.repository import (
    PostgresCommentRepository,
    PostgresPollRepository,
    PostgresPollVoteRepository,
    PostgresPostRepository,
    PostgresPowerUpRepository,
    PostgresPreferencesRepository,
    PostgresStackRepository,
)
from devfeed.util.di.base import ProviderBase
from devfeed.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using the platform's PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings.database, echo=settings.debug)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_poll_repository(self, session: AsyncSession) -> PollRepository:
        """Provide Poll repository."""
        return PostgresPollRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_power_up_repository(self, session: AsyncSession) -> PowerUpRepository:
        """Provide PowerUp repository."""
        return PostgresPowerUpRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_stack_repository(self, session: AsyncSession) -> StackRepository:
        """Provide Stack repository."""
        return PostgresStackRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_poll_vote_repository(self, session: AsyncSession) -> PollVoteRepository:
        """Provide PollVote repository."""
        return PostgresPollVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_preferences_repository(
        self, session: AsyncSession
    ) -> PreferencesRepository:
        """Provide Preferences repository."""
        return PostgresPreferencesRepository(session)
