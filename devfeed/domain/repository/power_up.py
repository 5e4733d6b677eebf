"""Power-up repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from devfeed.domain.model.power_up import PowerUp
from devfeed.domain.value import PowerUpTarget, UserId


class PowerUpRepository(ABC):
    """Repository for PowerUp entity."""

    @abstractmethod
    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_id: UUID,
    ) -> Optional[PowerUp]:
        """Find a user's power-up on a specific item.

        Args:
            user_id: The user's ID
            target_type: Type of item (post or comment)
            target_id: ID of the item

        Returns:
            The power-up if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, power_up: PowerUp) -> PowerUp:
        """Save a power-up (create).

        Raises:
            IntegrityError: If the user already powered up this item
        """
        pass

    @abstractmethod
    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_id: UUID,
    ) -> bool:
        """Delete a user's power-up on an item.

        Returns:
            True if a power-up was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_target(self, target_type: PowerUpTarget, target_id: UUID) -> int:
        """Count power-ups on a single item."""
        pass

    @abstractmethod
    async def count_by_targets(
        self,
        target_type: PowerUpTarget,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Count power-ups on many items at once (batch query).

        Returns:
            Mapping with an entry for every requested ID (0 when none)
        """
        pass

    @abstractmethod
    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_ids: Sequence[UUID],
    ) -> List[PowerUp]:
        """Find a user's power-ups on multiple items (batch query)."""
        pass
