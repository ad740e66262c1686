import asyncio
import os
from dotenv import load_dotenv

load_dotenv()

from db.database import init_models, dispose_engine


async def main():
    # En desarrollo se eliminan y recrean todas las tablas
    drop = os.getenv("ENVIRONMENT", "development") == "development" and os.getenv("DB_FORCE_SYNC") == "true"
    await init_models(drop=drop)
    if drop:
        print("Todas las tablas eliminadas.")
    print("Tablas creadas correctamente.")
    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
