"""In-memory power-up repository for testing."""

from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from devfeed.domain.model.power_up import PowerUp
from devfeed.domain.repository.power_up import PowerUpRepository
from devfeed.domain.value import PowerUpTarget, UserId


class InMemoryPowerUpRepository(PowerUpRepository):
    """In-memory implementation of PowerUpRepository for testing."""

    def __init__(self) -> None:
        self._power_ups: list[PowerUp] = []

    async def find_by_user_and_target(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_id: UUID,
    ) -> Optional[PowerUp]:
        """Find a power-up by user and item."""
        target_uuid = UUID(str(target_id))
        for power_up in self._power_ups:
            if (
                power_up.user_id == user_id
                and power_up.target_type == target_type
                and power_up.target_id == target_uuid
            ):
                return power_up
        return None

    async def save(self, power_up: PowerUp) -> PowerUp:
        """Save a power-up.

        Raises:
            IntegrityError: If the user already powered up this item
        """
        existing = await self.find_by_user_and_target(
            power_up.user_id, power_up.target_type, power_up.target_id
        )
        if existing:
            raise IntegrityError("Duplicate power-up", None, Exception())

        self._power_ups.append(power_up)
        return power_up

    async def delete_by_user_and_target(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_id: UUID,
    ) -> bool:
        """Delete a power-up by user and item."""
        target_uuid = UUID(str(target_id))
        for i, power_up in enumerate(self._power_ups):
            if (
                power_up.user_id == user_id
                and power_up.target_type == target_type
                and power_up.target_id == target_uuid
            ):
                self._power_ups.pop(i)
                return True
        return False

    async def count_by_target(self, target_type: PowerUpTarget, target_id: UUID) -> int:
        """Count power-ups on an item."""
        target_uuid = UUID(str(target_id))
        return sum(
            1
            for p in self._power_ups
            if p.target_type == target_type and p.target_id == target_uuid
        )

    async def count_by_targets(
        self,
        target_type: PowerUpTarget,
        target_ids: Sequence[UUID],
    ) -> dict[UUID, int]:
        """Count power-ups on many items (0 for items without any)."""
        counts = {UUID(str(tid)): 0 for tid in target_ids}
        for p in self._power_ups:
            if p.target_type == target_type and p.target_id in counts:
                counts[p.target_id] += 1
        return counts

    async def find_by_user_and_targets(
        self,
        user_id: UserId,
        target_type: PowerUpTarget,
        target_ids: Sequence[UUID],
    ) -> list[PowerUp]:
        """Find a user's power-ups on multiple items (batch query)."""
        if not target_ids:
            return []

        target_uuids = {UUID(str(tid)) for tid in target_ids}
        return [
            p
            for p in self._power_ups
            if p.user_id == user_id
            and p.target_type == target_type
            and p.target_id in target_uuids
        ]
