import logging

from sqlalchemy.ext.asyncio import AsyncSession

from lesson_service.models.order import Order, OrderItem
from lesson_service.schemas.order import OrderCreate
from lesson_service.services.ledger import InventoryLedger

logger = logging.getLogger(__name__)


async def submit_order(session: AsyncSession, request: OrderCreate) -> Order:
    """Take seats for every line item and persist the order in one transaction."""
    ledger = InventoryLedger(session)
    try:
        await ledger.apply(
            (item.lesson_id, -item.number_of_lessons) for item in request.lessons
        )
        order = Order(
            name=request.name,
            phone_number=request.phone_number,
            number_of_spaces=request.number_of_spaces,
            items=[
                OrderItem(lesson_id=item.lesson_id, number_of_lessons=item.number_of_lessons)
                for item in request.lessons
            ],
        )
        session.add(order)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    await session.refresh(order, ["created_at"])
    logger.info("Order saved: order_id=%s spaces=%d", order.id, order.number_of_spaces)
    return order
