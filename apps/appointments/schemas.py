import datetime
from typing import Literal, Optional

from pydantic import field_validator, model_validator

from apps.customers.schemas import CustomerRead
from apps.records.schemas import CamelModel, RecordRead
from apps.services.schemas import ServiceRead
from apps.staff.schemas import StaffRead

AppointmentStatus = Literal["scheduled", "confirmed", "completed", "cancelled"]


def _local_time(value: Optional[datetime.time]) -> Optional[datetime.time]:
    # La columna TIME no guarda zona horaria
    if value is not None and value.tzinfo is not None:
        raise ValueError("time must not carry a UTC offset")
    return value


class AppointmentCreate(CamelModel):
    date: datetime.date
    start_time: datetime.time
    end_time: datetime.time
    status: AppointmentStatus = "scheduled"
    notes: Optional[str] = None
    customer_id: str
    staff_id: str
    service_id: str

    @field_validator("start_time", "end_time")
    @classmethod
    def check_offsets(cls, value):
        return _local_time(value)

    @model_validator(mode="after")
    def check_times(self):
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self


class AppointmentUpdate(CamelModel):
    # El orden entre horas se valida en el repositorio contra los valores guardados
    date: Optional[datetime.date] = None
    start_time: Optional[datetime.time] = None
    end_time: Optional[datetime.time] = None
    status: Optional[AppointmentStatus] = None
    notes: Optional[str] = None
    customer_id: Optional[str] = None
    staff_id: Optional[str] = None
    service_id: Optional[str] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def check_offsets(cls, value):
        return _local_time(value)


class AppointmentRead(RecordRead):
    date: datetime.date
    start_time: datetime.time
    end_time: datetime.time
    status: str
    notes: Optional[str] = None
    customer_id: str
    staff_id: str
    service_id: str
    customer: Optional[CustomerRead] = None
    staff: Optional[StaffRead] = None
    service: Optional[ServiceRead] = None
