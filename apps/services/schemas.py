from decimal import Decimal
from typing import Optional

from pydantic import Field

from apps.records.schemas import CamelModel, RecordRead

# Límite de la columna INTEGER (int4 en Postgres)
MAX_DURATION = 2_147_483_647


class ServiceCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    duration: int = Field(..., gt=0, le=MAX_DURATION, description="Duración en minutos")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)


class ServiceUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    duration: Optional[int] = Field(None, gt=0, le=MAX_DURATION)
    price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)


class ServiceRead(RecordRead):
    name: str
    description: Optional[str] = None
    duration: int
    price: Decimal
