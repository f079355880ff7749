from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lesson_service.database import get_db
from lesson_service.schemas.order import OrderCreate, OrderLineItem, OrderResponse
from lesson_service.services.ordering import submit_order

router = APIRouter(tags=["orders"])


@router.post("/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(request: OrderCreate, db: AsyncSession = Depends(get_db)):
    order = await submit_order(db, request)
    return OrderResponse(
        id=order.id,
        name=order.name,
        phone_number=order.phone_number,
        lessons=[
            OrderLineItem(lesson_id=item.lesson_id, number_of_lessons=item.number_of_lessons)
            for item in order.items
        ],
        number_of_spaces=order.number_of_spaces,
        created_at=order.created_at,
    )
