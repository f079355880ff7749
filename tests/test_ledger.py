import asyncio
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from lesson_service.errors import InsufficientInventoryError, InventoryCapacityError, LessonNotFoundError
from lesson_service.models.order import Order
from lesson_service.schemas.order import OrderCreate, OrderLineItem
from lesson_service.services.ledger import InventoryLedger
from lesson_service.services.ordering import submit_order


@pytest.mark.asyncio
async def test_adjust_decrements_and_returns_new_count(database, lessons, read_available):
    async with database.sessionmaker() as session:
        available = await InventoryLedger(session).adjust(lessons["math"].id, -2)
        await session.commit()

    assert available == 3
    assert await read_available(lessons["math"]) == 3


@pytest.mark.asyncio
async def test_adjust_releases_seats(database, lessons, read_available):
    async with database.sessionmaker() as session:
        available = await InventoryLedger(session).adjust(lessons["art"].id, 2)
        await session.commit()

    assert available == 4
    assert await read_available(lessons["art"]) == 4


@pytest.mark.asyncio
async def test_adjust_can_take_the_last_seat(database, lessons, read_available):
    async with database.sessionmaker() as session:
        available = await InventoryLedger(session).adjust(lessons["art"].id, -2)
        await session.commit()

    assert available == 0
    assert await read_available(lessons["art"]) == 0


@pytest.mark.asyncio
async def test_adjust_rejects_going_negative(database, lessons, read_available):
    async with database.sessionmaker() as session:
        with pytest.raises(InsufficientInventoryError) as exc_info:
            await InventoryLedger(session).adjust(lessons["art"].id, -3)
        await session.rollback()

    assert exc_info.value.available == 2
    assert exc_info.value.requested == 3
    assert exc_info.value.status_code == 409
    assert await read_available(lessons["art"]) == 2


@pytest.mark.asyncio
async def test_adjust_rejects_exceeding_total(database, lessons, read_available):
    async with database.sessionmaker() as session:
        with pytest.raises(InventoryCapacityError) as exc_info:
            await InventoryLedger(session).adjust(lessons["math"].id, 1)
        await session.rollback()

    assert exc_info.value.total == 5
    assert await read_available(lessons["math"]) == 5


@pytest.mark.asyncio
async def test_adjust_unknown_lesson(database, lessons):
    missing = uuid4()
    async with database.sessionmaker() as session:
        with pytest.raises(LessonNotFoundError) as exc_info:
            await InventoryLedger(session).adjust(missing, -1)

    assert exc_info.value.lesson_id == missing
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_adjust_zero_delta_returns_current_count(database, lessons):
    async with database.sessionmaker() as session:
        assert await InventoryLedger(session).adjust(lessons["art"].id, 0) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("delta", [-6, -5, -1, 0, 1])
async def test_adjust_never_leaves_inventory_out_of_bounds(database, lessons, read_available, delta):
    lesson = lessons["math"]
    async with database.sessionmaker() as session:
        try:
            await InventoryLedger(session).adjust(lesson.id, delta)
            await session.commit()
        except (InsufficientInventoryError, InventoryCapacityError):
            await session.rollback()

    available = await read_available(lesson)
    assert 0 <= available <= lesson.total_inventory


@pytest.mark.asyncio
async def test_apply_returns_level_per_lesson(database, lessons):
    async with database.sessionmaker() as session:
        levels = await InventoryLedger(session).apply([
            (lessons["math"].id, -1),
            (lessons["music"].id, -3),
        ])
        await session.commit()

    assert levels == {lessons["math"].id: 4, lessons["music"].id: 0}


@pytest.mark.asyncio
async def test_apply_is_rolled_back_as_a_whole(database, lessons, read_available):
    async with database.sessionmaker() as session:
        with pytest.raises(InsufficientInventoryError):
            await InventoryLedger(session).apply([
                (lessons["math"].id, -1),
                (lessons["music"].id, -1),
                (lessons["art"].id, -5),
            ])
        await session.rollback()

    assert await read_available(lessons["math"]) == 5
    assert await read_available(lessons["music"]) == 3
    assert await read_available(lessons["art"]) == 2


@pytest.mark.asyncio
async def test_concurrent_orders_never_oversell(database, lessons, read_available):
    lesson = lessons["math"]

    async def place(name: str):
        request = OrderCreate(
            name=name,
            phone_number="07000000000",
            lessons=[OrderLineItem(lesson_id=lesson.id, number_of_lessons=3)],
        )
        async with database.sessionmaker() as session:
            return await submit_order(session, request)

    results = await asyncio.gather(place("Ada"), place("Grace"), return_exceptions=True)

    placed = [result for result in results if isinstance(result, Order)]
    rejected = [result for result in results if isinstance(result, InsufficientInventoryError)]
    assert len(placed) == 1
    assert len(rejected) == 1
    assert await read_available(lesson) == 2
    async with database.sessionmaker() as session:
        assert await session.scalar(select(func.count()).select_from(Order)) == 1
