from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from dotenv import load_dotenv
from menupub.models.base import Base
import os

# Load environment
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise ValueError("❌ DATABASE_URL is not set!")

# SQLite connections are tied to the event loop that opened them
engine_kwargs = {"echo": os.getenv("SQL_ECHO", "false").lower() == "true"}
if DATABASE_URL.startswith("sqlite"):
    engine_kwargs["poolclass"] = NullPool

# Create engine
engine = create_async_engine(DATABASE_URL, **engine_kwargs)

# Async session maker
async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

# Dependency
async def get_db():
    async with async_session() as session:
        yield session

async def create_db_and_tables():
    import menupub.models  # triggers __init__.py

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def drop_db_and_tables():
    import menupub.models

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

# Reusable engine getter
def get_async_engine():
    return engine
