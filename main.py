import os
import sys
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import logging
from contextlib import asynccontextmanager

# === Configuración básica de logging ===
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# === Agregar la carpeta raíz al PYTHONPATH ===
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

# === Cargar variables de entorno desde .env ===
dotenv_path = os.getenv('DOTENV_PATH', '.env')
load_dotenv(dotenv_path)

# === Importar configuración, base de datos y routers ===
from apps.config.settings import settings
from apps.records.errors import register_exception_handlers
from apps.appointments.router import router as appointments_router
from apps.customers.router import router as customers_router
from apps.services.router import router as services_router
from apps.staff.router import router as staff_router
from apps.system.router import router as system_router
from db.database import init_models, dispose_engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: crea las tablas (y las reinicia si DB_RESET_ON_STARTUP está activo).
    Shutdown: cierra el pool de conexiones.
    """
    logger.info(f"La aplicación se está iniciando en modo {settings.environment}...")
    await init_models(drop=settings.db_reset_on_startup)

    yield

    logger.info("La aplicación se está apagando...")
    await dispose_engine()


# === Inicializar la app de FastAPI ===
app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)

# === Manejadores de errores: 400 / 404 / 409 / 500 con cuerpo {"message", "error"} ===
register_exception_handlers(app)

# === Configurar CORS ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,  # "*" por defecto; ALLOWED_ORIGINS para restringir
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Cabeceras de seguridad en producción ===
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-XSS-Protection": "1; mode=block",
    "X-Frame-Options": "DENY",
}


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    if settings.environment == "production":
        response.headers.update(SECURITY_HEADERS)
    return response


# === Incluir routers ===
app.include_router(appointments_router, tags=["Appointments"])
app.include_router(customers_router, tags=["Customers"])
app.include_router(staff_router, tags=["Staff"])
app.include_router(services_router, tags=["Services"])
app.include_router(system_router, tags=["System"])


# === Ruta raíz de prueba ===
@app.get("/")
def root():
    return {"message": f"API de {settings.app_name} está corriendo."}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        reload=settings.environment == "development",
    )
