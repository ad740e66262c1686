import uuid

from sqlalchemy import Column, String, Integer, Numeric, Text, DateTime
from sqlalchemy.orm import relationship

from db.database import Base
from db.models.customer import _utcnow


class Service(Base):
    __tablename__ = "services"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    # Duración en minutos
    duration = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime, nullable=False, default=_utcnow)
    updated_at = Column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    appointments = relationship("Appointment", back_populates="service")
