"""Async SQLAlchemy engine and session factory."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from clearance_scout.config import settings
from clearance_scout.db.models import Base


def create_db_engine(database_url: str | None = None) -> AsyncEngine:
    url = database_url or settings.database_url
    kwargs = {"echo": settings.debug, "pool_pre_ping": True}
    if url.startswith("postgresql"):
        kwargs.update(pool_size=5, max_overflow=10, pool_recycle=1800)
    return create_async_engine(url, **kwargs)


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


engine = create_db_engine()
AsyncSessionLocal = create_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that is closed when the request finishes."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_models(bind: AsyncEngine | None = None):
    """Create all tables. Schema migrations are handled outside the service."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
