"""Inventory ledger: applies signed deltas to a lesson's available seats.

Every adjustment is one conditional UPDATE, so the database row is the only
thing guarding the read-modify-write. Callers own the transaction; a batch is
committed or rolled back as a whole by whoever opened the session.
"""
import logging
from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lesson_service.errors import InsufficientInventoryError, InventoryCapacityError, LessonNotFoundError
from lesson_service.models.lesson import Lesson

logger = logging.getLogger(__name__)


class InventoryLedger:
    def __init__(self, session: AsyncSession):
        self._session = session

    async def adjust(self, lesson_id: UUID, delta: int) -> int:
        """Apply ``available += delta`` to one lesson and return the new count.

        Raises LessonNotFoundError, InsufficientInventoryError or
        InventoryCapacityError; nothing is written in those cases.
        """
        new_available = Lesson.available_inventory + delta
        stmt = (
            update(Lesson)
            .where(Lesson.id == lesson_id)
            .where(new_available >= 0)
            .where(new_available <= Lesson.total_inventory)
            .values(available_inventory=new_available)
            .returning(Lesson.available_inventory)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        available = result.scalar_one_or_none()
        if available is not None:
            return available
        raise await self._rejection(lesson_id, delta)

    async def apply(self, adjustments: Iterable[tuple[UUID, int]]) -> dict[UUID, int]:
        """Apply a batch of (lesson_id, delta) pairs and return the final count per lesson.

        Pairs are applied in lesson id order so that concurrent batches lock
        rows in the same order. The first failure propagates.
        """
        levels: dict[UUID, int] = {}
        for lesson_id, delta in sorted(adjustments, key=lambda pair: str(pair[0])):
            levels[lesson_id] = await self.adjust(lesson_id, delta)
        return levels

    async def _rejection(self, lesson_id: UUID, delta: int) -> Exception:
        result = await self._session.execute(
            select(Lesson.available_inventory, Lesson.total_inventory).where(Lesson.id == lesson_id)
        )
        row = result.one_or_none()
        if row is None:
            logger.warning("Inventory adjustment for unknown lesson_id=%s", lesson_id)
            return LessonNotFoundError(lesson_id)
        available, total = row
        if delta < 0:
            logger.warning(
                "Insufficient inventory for lesson_id=%s (available=%d requested=%d)",
                lesson_id, available, -delta,
            )
            return InsufficientInventoryError(lesson_id, available=available, requested=-delta)
        logger.warning(
            "Inventory release for lesson_id=%s exceeds total (available=%d total=%d released=%d)",
            lesson_id, available, total, delta,
        )
        return InventoryCapacityError(lesson_id, available=available, total=total, released=delta)
