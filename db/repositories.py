import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from db.models import Customer, Staff, Service, Appointment

logger = logging.getLogger(__name__)


class RecordValidationError(Exception):
    """Los datos violan una restricción del registro (requerido, formato, único, referencia)."""


class RecordInUseError(RecordValidationError):
    """El registro no se puede borrar porque otros registros lo referencian."""


class StorageError(Exception):
    """Fallo inesperado de la base de datos."""


def _fault_message(error: SQLAlchemyError) -> str:
    orig = getattr(error, "orig", None)
    return str(orig) if orig is not None else str(error)


class RecordRepository:
    """
    Operaciones CRUD uniformes sobre una tabla.
    NotFound no es una excepción: get_by_id/update devuelven None y delete devuelve False.
    """

    def __init__(
        self,
        model,
        label: str,
        unique_fields: Sequence[str] = (),
        load_options: Sequence[Any] = (),
    ):
        self.model = model
        self.label = label
        self.unique_fields = tuple(unique_fields)
        self.load_options = tuple(load_options)
        self.tag = f"RECORD_REPO[{model.__tablename__}]"

    def _select(self):
        stmt = select(self.model)
        if self.load_options:
            stmt = stmt.options(*self.load_options)
        return stmt

    @asynccontextmanager
    async def _guard(self, session: AsyncSession, action: str):
        """Traduce los errores de SQLAlchemy a la taxonomía del repositorio."""
        try:
            yield
        except RecordValidationError:
            await session.rollback()
            raise
        except IntegrityError as e:
            await session.rollback()
            logger.warning(f"{self.tag}: Restricción violada en {action}: {_fault_message(e)}")
            if action == "delete":
                raise RecordInUseError(
                    f"{self.label} is still referenced by other records"
                ) from e
            raise RecordValidationError(_fault_message(e)) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"{self.tag}: Error de base de datos en {action}: {e}", exc_info=True)
            raise StorageError(_fault_message(e)) from e

    async def list_all(self, session: AsyncSession) -> List[Any]:
        async with self._guard(session, "list"):
            result = await session.execute(self._select())
            records = list(result.scalars().all())
        logger.info(f"{self.tag}: {len(records)} registros obtenidos.")
        return records

    async def get_by_id(self, session: AsyncSession, record_id: str) -> Optional[Any]:
        async with self._guard(session, "get"):
            stmt = (
                self._select()
                .where(self.model.id == record_id)
                .execution_options(populate_existing=True)
            )
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def create(self, session: AsyncSession, fields: Dict[str, Any]) -> Any:
        logger.info(f"{self.tag}: Creando registro con campos {sorted(fields)}")
        async with self._guard(session, "create"):
            self._check_columns(fields, creating=True)
            await self._check_unique(session, fields)
            await self._check_record(session, fields)
            record = self.model(**fields)
            session.add(record)
            await session.commit()
            record_id = record.id
        logger.info(f"{self.tag}: Registro creado (ID: {record_id})")
        return await self.get_by_id(session, record_id)

    async def update(
        self, session: AsyncSession, record_id: str, changes: Dict[str, Any]
    ) -> Optional[Any]:
        """
        Actualización parcial: solo se tocan las claves presentes en `changes`.
        Un None explícito limpia un campo opcional y se rechaza en uno obligatorio.
        """
        current = await self.get_by_id(session, record_id)
        if current is None:
            return None
        if not changes:
            return current

        logger.info(f"{self.tag}: Actualizando {record_id} con campos {sorted(changes)}")
        async with self._guard(session, "update"):
            self._check_columns(changes)
            await self._check_unique(session, changes, exclude_id=record_id)
            await self._check_record(session, changes, current=current)
            result = await session.execute(
                update(self.model).where(self.model.id == record_id).values(**changes)
            )
            updated = result.rowcount
            await session.commit()

        if updated == 0:
            # Borrado por otra petición entre la lectura y la escritura
            return None
        # Las relaciones cargadas antes del UPDATE quedan obsoletas
        session.expire(current)
        return await self.get_by_id(session, record_id)

    async def delete(self, session: AsyncSession, record_id: str) -> bool:
        async with self._guard(session, "delete"):
            result = await session.execute(
                delete(self.model).where(self.model.id == record_id)
            )
            deleted = result.rowcount
            await session.commit()
        logger.info(f"{self.tag}: Borrado {record_id}: {deleted} filas.")
        return deleted > 0

    def _check_columns(self, fields: Dict[str, Any], creating: bool = False) -> None:
        columns = self.model.__table__.columns
        for key, value in fields.items():
            column = columns.get(key)
            if column is None or key in ("id", "created_at", "updated_at"):
                raise RecordValidationError(f"Unknown or read-only field: {key}")
            if value is None and not column.nullable:
                raise RecordValidationError(f"{key} cannot be null")
        if creating:
            missing = [
                column.name
                for column in columns
                if not column.nullable
                and column.default is None
                and not column.primary_key
                and column.name not in fields
            ]
            if missing:
                raise RecordValidationError(f"Missing required fields: {', '.join(missing)}")

    async def _check_unique(
        self, session: AsyncSession, fields: Dict[str, Any], exclude_id: Optional[str] = None
    ) -> None:
        for field in self.unique_fields:
            value = fields.get(field)
            if value is None:
                continue
            column = getattr(self.model, field)
            stmt = select(self.model.id).where(column == value)
            if exclude_id is not None:
                stmt = stmt.where(self.model.id != exclude_id)
            result = await session.execute(stmt.limit(1))
            if result.scalar_one_or_none() is not None:
                raise RecordValidationError(
                    f"A {self.label.lower()} with {field} '{value}' already exists"
                )

    async def _check_record(
        self, session: AsyncSession, fields: Dict[str, Any], current: Optional[Any] = None
    ) -> None:
        """Validaciones propias de cada entidad; por defecto no hay ninguna."""


class AppointmentRepository(RecordRepository):
    """
    Las citas cargan cliente, empleado y servicio en cada lectura.
    Las referencias se validan antes de insertar; la FK de la base es el respaldo.
    """

    references = (
        ("customer_id", Customer, "Customer"),
        ("staff_id", Staff, "Staff member"),
        ("service_id", Service, "Service"),
    )

    def __init__(self):
        super().__init__(
            Appointment,
            "Appointment",
            load_options=(
                selectinload(Appointment.customer),
                selectinload(Appointment.staff),
                selectinload(Appointment.service),
            ),
        )

    async def _check_record(self, session, fields, current=None):
        for field, model, label in self.references:
            if field not in fields:
                continue
            if await session.get(model, fields[field]) is None:
                raise RecordValidationError(f"{label} {fields[field]} does not exist")

        for field in ("start_time", "end_time"):
            value = fields.get(field)
            if value is not None and value.tzinfo is not None:
                raise RecordValidationError(f"{field} must not carry a UTC offset")

        start_time = fields.get("start_time", current.start_time if current else None)
        end_time = fields.get("end_time", current.end_time if current else None)
        if start_time is not None and end_time is not None and end_time <= start_time:
            raise RecordValidationError("endTime must be after startTime")


customer_repository = RecordRepository(Customer, "Customer", unique_fields=("email",))
staff_repository = RecordRepository(Staff, "Staff member")
service_repository = RecordRepository(Service, "Service")
appointment_repository = AppointmentRepository()
