import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from lesson_service.database import get_db
from lesson_service.errors import NoChangeError
from lesson_service.schemas.inventory import (
    BatchUpdateResponse,
    InventoryAdjustment,
    InventoryLevel,
    InventoryUpdate,
    InventoryUpdateResponse,
)
from lesson_service.services.ledger import InventoryLedger

logger = logging.getLogger(__name__)

router = APIRouter(tags=["inventory"])


@router.put("/updateLessons", response_model=BatchUpdateResponse)
async def update_lessons(adjustments: list[InventoryAdjustment], db: AsyncSession = Depends(get_db)):
    """Take (or, with a negative quantity, give back) seats across several lessons at once."""
    try:
        levels = await InventoryLedger(db).apply(
            (adjustment.lesson_id, -adjustment.quantity) for adjustment in adjustments
        )
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Spaces updated for %d lesson(s)", len(levels))
    return BatchUpdateResponse(
        message="Spaces updated",
        lessons=[
            InventoryLevel(lesson_id=lesson_id, available_inventory=available)
            for lesson_id, available in levels.items()
        ],
    )


@router.put("/updateInventory/{lesson_id}", response_model=InventoryUpdateResponse)
async def update_inventory(lesson_id: UUID, request: InventoryUpdate, db: AsyncSession = Depends(get_db)):
    if request.number_of_lessons_to_update == 0:
        raise NoChangeError()
    try:
        available = await InventoryLedger(db).adjust(lesson_id, -request.number_of_lessons_to_update)
        await db.commit()
    except Exception:
        await db.rollback()
        raise
    logger.info("Spaces updated successfully for lesson with ID %s", lesson_id)
    return InventoryUpdateResponse(
        message="Spaces updated successfully",
        lesson_id=lesson_id,
        available_inventory=available,
    )
