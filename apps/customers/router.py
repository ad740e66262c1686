from apps.customers.schemas import CustomerCreate, CustomerRead, CustomerUpdate
from apps.records.router import build_record_router
from db.repositories import customer_repository

router = build_record_router(
    "customers", customer_repository, CustomerCreate, CustomerUpdate, CustomerRead
)
