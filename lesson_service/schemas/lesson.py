from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LessonResponse(BaseModel):
    id: UUID
    title: str
    location: str
    price: float
    subject: str
    image: str | None = None
    total_inventory: int
    available_inventory: int
    updated_at: datetime | None = None

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)
