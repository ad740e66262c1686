from apps.records.router import build_record_router
from apps.staff.schemas import StaffCreate, StaffRead, StaffUpdate
from db.repositories import staff_repository

router = build_record_router("staff", staff_repository, StaffCreate, StaffUpdate, StaffRead)
