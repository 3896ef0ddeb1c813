import asyncio
from estate_portal.database import engine, Base

# Import all models to ensure they are registered in Base.metadata
import estate_portal.models  # noqa: F401

async def init_models():
    async with engine.begin() as conn:
        # await conn.run_sync(Base.metadata.drop_all) # Optional: Reset DB
        await conn.run_sync(Base.metadata.create_all)
    print("Database tables created.")

if __name__ == "__main__":
    asyncio.run(init_models())
