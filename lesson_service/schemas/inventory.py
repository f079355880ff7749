from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InventoryAdjustment(BaseModel):
    """Seats taken from a lesson; a negative quantity gives seats back.

    The storefront also sends the lesson key as ``_id``.
    """

    lesson_id: UUID = Field(validation_alias=AliasChoices("lessonID", "_id"), serialization_alias="lessonID")
    quantity: int

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class InventoryUpdate(BaseModel):
    number_of_lessons_to_update: int

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class InventoryLevel(BaseModel):
    lesson_id: UUID = Field(alias="lessonID")
    available_inventory: int

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class InventoryUpdateResponse(BaseModel):
    message: str
    lesson_id: UUID = Field(alias="lessonID")
    available_inventory: int

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class BatchUpdateResponse(BaseModel):
    message: str
    lessons: list[InventoryLevel]
