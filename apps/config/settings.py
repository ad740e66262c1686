from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Serene Flow Spa Suite"
    environment: str = "development"
    version: str = "1.0.0"

    # Base de datos
    database_url: str = "sqlite+aiosqlite:///./serene_flow.db"
    db_name: str = "serene_flow_db"
    db_pool_size: int = 5
    db_max_overflow: int = 0
    db_echo: bool = False
    db_reset_on_startup: bool = False

    # HTTP
    allowed_origins: str = "*"
    api_key: Optional[str] = None

    # Cliente HTTP (apps/client)
    api_url: str = "http://localhost:5000/api"

    # Metadatos de despliegue (Vercel)
    vercel: Optional[str] = None
    vercel_region: str = "local"
    vercel_url: Optional[str] = None
    vercel_deployment_id: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


settings = Settings()
