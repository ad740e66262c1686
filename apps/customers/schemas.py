from datetime import date
from typing import Optional

from pydantic import EmailStr, Field

from apps.records.schemas import CamelModel, RecordRead


class CustomerCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    birthdate: Optional[date] = None
    notes: Optional[str] = None


class CustomerUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=50)
    birthdate: Optional[date] = None
    notes: Optional[str] = None


class CustomerRead(RecordRead):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    birthdate: Optional[date] = None
    notes: Optional[str] = None
