import asyncio
from decimal import Decimal

from dotenv import load_dotenv

load_dotenv()

from db.database import get_db_session, init_models, dispose_engine
from db.repositories import service_repository, staff_repository

# Catálogo inicial (se puede agregar/quitar)
SERVICIOS = [
    {
        "name": "Swedish Massage",
        "description": "Masaje relajante de cuerpo completo.",
        "duration": 60,
        "price": Decimal("85.00"),
    },
    {
        "name": "Deep Tissue Massage",
        "description": "Trabajo profundo sobre tensiones musculares.",
        "duration": 90,
        "price": Decimal("120.00"),
    },
    {
        "name": "Hot Stone Therapy",
        "description": None,
        "duration": 75,
        "price": Decimal("110.00"),
    },
    {
        "name": "Facial Treatment",
        "description": "Limpieza e hidratación facial.",
        "duration": 45,
        "price": Decimal("65.00"),
    },
]

EMPLEADOS = [
    {"first_name": "Maria", "last_name": "Garcia", "role": "Massage Therapist",
     "email": "maria.garcia@serenespa.com", "phone": "555-123-4567", "status": "active"},
    {"first_name": "Carlos", "last_name": "Rodriguez", "role": "Massage Therapist",
     "email": "carlos.rodriguez@serenespa.com", "phone": "555-234-5678", "status": "active"},
    {"first_name": "Lisa", "last_name": "Wang", "role": "Esthetician",
     "email": "lisa.wang@serenespa.com", "phone": "555-345-6789", "status": "active"},
    {"first_name": "John", "last_name": "Smith", "role": "Massage Therapist",
     "email": "john.smith@serenespa.com", "phone": "555-456-7890", "status": "inactive"},
]


async def seed(session) -> dict:
    """
    Inserta servicios y empleados solo si sus tablas están vacías.
    Devuelve cuántos registros se crearon por tabla.
    """
    creados = {"services": 0, "staff": 0}

    if not await service_repository.list_all(session):
        for servicio in SERVICIOS:
            await service_repository.create(session, dict(servicio))
            creados["services"] += 1
    else:
        print("Los servicios ya están registrados.")

    if not await staff_repository.list_all(session):
        for empleado in EMPLEADOS:
            await staff_repository.create(session, dict(empleado))
            creados["staff"] += 1
    else:
        print("Los empleados ya están registrados.")

    return creados


async def main():
    await init_models()
    async with get_db_session() as session:
        creados = await seed(session)
    print(f"Datos iniciales creados: {creados['services']} servicios, {creados['staff']} empleados.")
    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
