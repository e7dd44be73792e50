from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from .config import settings


def build_engine(database_url: str, echo: bool = False):
    """Create an async engine; SQLite connections are not pooled across event loops."""
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo, future=True, poolclass=NullPool)
    return create_async_engine(database_url, echo=echo, future=True)


# Create Async Engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def create_tables(bind) -> None:
    # Import models so they are registered on SQLModel.metadata
    from . import models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def init_db():
    await create_tables(engine)


async def get_session() -> AsyncSession:
    async with async_session() as session:
        yield session
