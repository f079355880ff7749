from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OrderLineItem(BaseModel):
    lesson_id: UUID = Field(alias="lessonID")
    number_of_lessons: int = Field(gt=0)

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class OrderCreate(BaseModel):
    name: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    lessons: list[OrderLineItem] = Field(min_length=1)

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    @property
    def number_of_spaces(self) -> int:
        return sum(item.number_of_lessons for item in self.lessons)


class OrderResponse(BaseModel):
    id: UUID
    name: str
    phone_number: str
    lessons: list[OrderLineItem]
    number_of_spaces: int
    created_at: datetime | None = None

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)
