import platform
from datetime import datetime, timezone

from fastapi import APIRouter

from apps.config.settings import settings
from db.database import check_database_connection

router = APIRouter()


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/api/health")
async def health():
    return {"status": "OK", "message": "Server is running"}


@router.get("/api/health/database")
async def database_health():
    # Se consulta el pool en cada llamada, no un flag global
    connected, error = await check_database_connection()
    if connected:
        return {"status": "OK", "message": "Database connection is healthy", "connection": True}
    return {
        "status": "WARNING",
        "message": f"Database connection failed: {error}",
        "connection": False,
    }


@router.get("/api/environment")
@router.get("/environment")
async def environment():
    """Metadatos del despliegue para las herramientas de verificación."""
    connected, _ = await check_database_connection()
    return {
        "status": "OK",
        "environment": settings.environment,
        "pythonVersion": platform.python_version(),
        "timestamp": _now_iso(),
        "version": settings.version,
        "database": {"connected": connected, "name": settings.db_name},
        "deployment": {
            "platform": "Vercel" if settings.vercel else "Local",
            "region": settings.vercel_region,
            "url": settings.vercel_url or "unknown",
            "deploymentId": settings.vercel_deployment_id or "unknown",
        },
    }
