import secrets
from typing import Optional

from fastapi import Header, HTTPException

from apps.config.settings import settings


async def require_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    """
    Si API_KEY está configurada, las rutas de registros exigen la cabecera X-API-Key.
    Sin API_KEY la API queda abierta.
    """
    if not settings.api_key:
        return
    if not x_api_key or not secrets.compare_digest(x_api_key, settings.api_key):
        raise HTTPException(status_code=401, detail="Invalid API key")
