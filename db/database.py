import logging
from contextlib import asynccontextmanager

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from apps.config.settings import settings

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url

if not DATABASE_URL:
    raise ValueError("DATABASE_URL no está configurada en las variables de entorno.")


def _engine_options(url: str) -> dict:
    """
    Opciones del engine según el driver.
    SQLite en memoria comparte una única conexión; los servidores usan un pool acotado.
    """
    if url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+aiosqlite://"):
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
    }


def create_engine_for(url: str, echo: bool = False):
    engine = create_async_engine(url, echo=echo, future=True, **_engine_options(url))

    if url.startswith("sqlite"):
        # SQLite no aplica claves foráneas si no se activan por conexión
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = create_engine_for(DATABASE_URL, echo=settings.db_echo)

Base = declarative_base()

SessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@asynccontextmanager
async def get_db_session():
    async with SessionLocal() as session:
        try:
            logger.debug(f"DB: Sesión CREADA (ID: {id(session)})")
            yield session
        except Exception as e:
            await session.rollback()
            logger.error(f"DB session rollback debido a error: {e}", exc_info=True)
            raise
        finally:
            logger.debug(f"DB: Sesión CERRADA (ID: {id(session)})")
            await session.close()


async def get_session():
    """Dependencia de FastAPI: una sesión por request."""
    async with get_db_session() as session:
        yield session


async def init_models(drop: bool = False, bind=None):
    """
    Crea las tablas registradas en Base.metadata.
    Con drop=True las elimina antes (solo desarrollo y pruebas).
    """
    # Registra los modelos en Base.metadata
    import db.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Todas las tablas eliminadas.")
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Tablas creadas correctamente.")


async def check_database_connection(bind=None) -> tuple:
    """
    Comprueba la conexión bajo demanda con un SELECT 1.
    Devuelve (conectado, mensaje_de_error).
    """
    try:
        async with (bind or engine).connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True, None
    except Exception as e:
        logger.warning(f"DB: Fallo en la comprobación de conexión: {e}")
        return False, str(e)


async def dispose_engine():
    await engine.dispose()
    logger.info("DB: Pool de conexiones cerrado.")
