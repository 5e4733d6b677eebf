"""PostgreSQL implementation of Preferences repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devfeed.domain.model import UserPreferences
from devfeed.domain.repository import PreferencesRepository
from devfeed.domain.value import UserId
from devfeed.persistence.mappers import preferences_to_dict, row_to_preferences
from devfeed.persistence.tables import profiles_table


class PostgresPreferencesRepository(PreferencesRepository):
    """Preferences stored on the platform's profiles table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> Optional[UserPreferences]:
        stmt = select(profiles_table).where(profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_preferences(row._asdict()) if row else None

    async def save(self, preferences: UserPreferences) -> UserPreferences:
        """Update the preference columns, creating the profile row if missing."""
        values = preferences_to_dict(preferences)
        existing = await self.find_by_user(preferences.user_id)

        if existing:
            stmt = (
                profiles_table.update()
                .where(profiles_table.c.id == preferences.user_id)
                .values(**values)
            )
        else:
            stmt = profiles_table.insert().values(**values)

        await self.session.execute(stmt)
        await self.session.flush()
        return preferences
