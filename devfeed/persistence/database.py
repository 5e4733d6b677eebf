"""Database engine and session factory for the platform's PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from devfeed.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create async database engine.

    Behind a transaction-mode pooler a connection can change between
    statements, so asyncpg's prepared statement cache is turned off.

    Args:
        database: Database settings
        echo: Log SQL statements

    Returns:
        Configured async engine
    """
    connect_args = {"statement_cache_size": 0} if database.pooled else {}
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args=connect_args,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Sessions are committed or rolled back by the request-scoped provider.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
