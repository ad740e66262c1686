from db.models.customer import Customer
from db.models.staff import Staff
from db.models.service import Service
from db.models.appointment import Appointment, APPOINTMENT_STATUSES

__all__ = ["Customer", "Staff", "Service", "Appointment", "APPOINTMENT_STATUSES"]
