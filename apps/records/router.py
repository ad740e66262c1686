from typing import List, Type

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from apps.auth.auth import require_api_key
from db.database import get_session
from db.repositories import RecordRepository


def build_record_router(
    collection: str,
    repository: RecordRepository,
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    read_schema: Type[BaseModel],
) -> APIRouter:
    """
    Expone un repositorio en /api/{collection} con las cinco rutas CRUD.

    GET lista, GET /{id} detalle, POST crea (201), PUT /{id} actualiza parcialmente
    y DELETE /{id} borra. Los ids inexistentes devuelven 404.
    """
    entity = repository.label.split()[0].lower()

    def tag_entity(request: Request):
        # Nombre usado por los manejadores de error en "Invalid <entity> data"
        request.state.entity = entity

    router = APIRouter(
        prefix=f"/api/{collection}",
        dependencies=[Depends(tag_entity), Depends(require_api_key)],
    )
    not_found = f"{repository.label} not found"

    @router.get("", response_model=List[read_schema])
    async def list_records(db: AsyncSession = Depends(get_session)):
        return await repository.list_all(db)

    @router.get("/{record_id}", response_model=read_schema)
    async def get_record(record_id: str, db: AsyncSession = Depends(get_session)):
        record = await repository.get_by_id(db, record_id)
        if record is None:
            raise HTTPException(status_code=404, detail=not_found)
        return record

    @router.post("", response_model=read_schema, status_code=201)
    async def create_record(payload: create_schema, db: AsyncSession = Depends(get_session)):
        return await repository.create(db, payload.model_dump())

    @router.put("/{record_id}", response_model=read_schema)
    async def update_record(
        record_id: str, payload: update_schema, db: AsyncSession = Depends(get_session)
    ):
        # Solo los campos enviados; un null explícito también cuenta como enviado
        changes = payload.model_dump(exclude_unset=True)
        record = await repository.update(db, record_id, changes)
        if record is None:
            raise HTTPException(status_code=404, detail=not_found)
        return record

    @router.delete("/{record_id}")
    async def delete_record(record_id: str, db: AsyncSession = Depends(get_session)):
        deleted = await repository.delete(db, record_id)
        if not deleted:
            raise HTTPException(status_code=404, detail=not_found)
        return {"message": f"{repository.label} deleted successfully"}

    return router
