from apps.appointments.schemas import AppointmentCreate, AppointmentRead, AppointmentUpdate
from apps.records.router import build_record_router
from db.repositories import appointment_repository

router = build_record_router(
    "appointments", appointment_repository, AppointmentCreate, AppointmentUpdate, AppointmentRead
)
