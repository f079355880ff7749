from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from lesson_service.database import get_db
from lesson_service.errors import NotFoundError
from lesson_service.models.lesson import Lesson
from lesson_service.schemas.lesson import LessonResponse

router = APIRouter(tags=["lessons"])


@router.get("/lessons", response_model=list[LessonResponse])
async def list_lessons(db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Lesson).order_by(Lesson.title))
    lessons = result.scalars().all()
    if not lessons:
        raise NotFoundError("No lessons found.")
    return [_to_response(lesson) for lesson in lessons]


@router.get("/search", response_model=list[LessonResponse])
async def search_lessons(q: str = Query(..., description="Matched against title and location"),
                         db: AsyncSession = Depends(get_db)):
    """Case-insensitive substring search; an empty result is a 200 with []."""
    result = await db.execute(
        select(Lesson)
        .where(or_(
            Lesson.title.icontains(q, autoescape=True),
            Lesson.location.icontains(q, autoescape=True),
        ))
        .order_by(Lesson.title)
    )
    return [_to_response(lesson) for lesson in result.scalars().all()]


def _to_response(lesson: Lesson) -> LessonResponse:
    return LessonResponse(
        id=lesson.id,
        title=lesson.title,
        location=lesson.location,
        price=lesson.price,
        subject=lesson.subject,
        image=lesson.image,
        total_inventory=lesson.total_inventory,
        available_inventory=lesson.available_inventory,
        updated_at=lesson.updated_at,
    )
