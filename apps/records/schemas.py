from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Los cuerpos JSON usan camelCase (firstName, createdAt...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RecordRead(CamelModel):
    id: str
    created_at: datetime
    updated_at: datetime
