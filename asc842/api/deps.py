"""FastAPI dependency injection."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from asc842.config import settings
from asc842.data.lease_store import LeaseStore

engine = create_async_engine(settings.database_url, echo=settings.debug)
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncSession:
    async with async_session() as session:
        yield session


def get_store(session: AsyncSession = Depends(get_db)) -> LeaseStore:
    return LeaseStore(session)
