import uuid

from sqlalchemy import Column, String, Date, Time, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship

from db.database import Base
from db.models.customer import _utcnow

APPOINTMENT_STATUSES = ("scheduled", "confirmed", "completed", "cancelled")


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    status = Column(
        Enum(*APPOINTMENT_STATUSES, name="appointment_status"),
        nullable=False,
        default="scheduled",
    )
    notes = Column(Text, nullable=True)
    # Sin cascade: borrar un cliente, empleado o servicio con citas falla por FK
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False, index=True)
    staff_id = Column(String(36), ForeignKey("staff.id"), nullable=False, index=True)
    service_id = Column(String(36), ForeignKey("services.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=_utcnow)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    customer = relationship("Customer", back_populates="appointments")
    staff = relationship("Staff", back_populates="appointments")
    service = relationship("Service", back_populates="appointments")

    def __repr__(self):
        return f"<Appointment(id={self.id}, date={self.date}, status='{self.status}')>"
