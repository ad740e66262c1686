from apps.records.router import build_record_router
from apps.services.schemas import ServiceCreate, ServiceRead, ServiceUpdate
from db.repositories import service_repository

router = build_record_router(
    "services", service_repository, ServiceCreate, ServiceUpdate, ServiceRead
)
