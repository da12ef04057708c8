"""FastAPI dependencies."""

from dataclasses import dataclass

from fastapi import Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from clearance_scout.cache.observation_cache import ObservationCache
from clearance_scout.db.session import get_db
from clearance_scout.db.storage import ScanStorage
from clearance_scout.geo.resolver import ZipResolver
from clearance_scout.scan.orchestrator import ScanOrchestrator


@dataclass
class Services:
    """Long-lived collaborators built once in the app lifespan."""

    storage: ScanStorage
    resolver: ZipResolver
    cache: ObservationCache
    orchestrator: ScanOrchestrator


async def get_database() -> AsyncSession:
    """Dependency for database session."""
    async for session in get_db():
        yield session
        break  # Only yield once, as FastAPI handles the session lifecycle


def get_services(request: Request) -> Services:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Services not initialized",
        )
    return services


async def get_user_id(x_user_id: str = Header(..., alias="X-User-Id")) -> str:
    """
    Dependency for the calling user's id.

    Raises:
        HTTPException: 401 if the header is blank
    """
    user_id = x_user_id.strip()
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing user id")
    return user_id
