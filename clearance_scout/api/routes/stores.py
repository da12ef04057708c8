"""Store lookup and ZIP resolution routes."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clearance_scout.api.deps import Services, get_database, get_services
from clearance_scout.db.models import StoreLocation
from clearance_scout.geo.locator import rank_by_distance
from clearance_scout.geo.resolver import normalize_zip
from clearance_scout.providers.registry import RADIUS, ProviderRegistry

router = APIRouter(prefix="/api", tags=["stores"])


class ZipResolutionResponse(BaseModel):
    zip_code: str
    lat: float
    lon: float
    source: str
    city: Optional[str]
    state: Optional[str]


class NearbyStoreResponse(BaseModel):
    id: str
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    phone: Optional[str]
    store_hours: Optional[str]
    distance_miles: float


class NearbyStoresResponse(BaseModel):
    retailer: str
    zip_code: str
    source: str
    selection: str
    stores: List[NearbyStoreResponse]


@router.get("/stores")
async def list_retailers():
    """List all supported retailers."""
    retailers = []
    for retailer in ProviderRegistry.retailers():
        profile = ProviderRegistry.get_profile(retailer)
        retailers.append(
            {"id": profile.retailer, "name": profile.display_name, "selection": profile.selection}
        )
    return {"retailers": retailers}


@router.get("/zip/{zip_code}", response_model=ZipResolutionResponse)
async def resolve_zip(zip_code: str, services: Services = Depends(get_services)):
    """Resolve a ZIP code to coordinates, reporting which tier answered."""
    normalized = normalize_zip(zip_code)
    if normalized is None:
        raise HTTPException(status_code=400, detail="ZIP code must be numeric and at most 5 digits")

    location = services.resolver.resolve(normalized)
    return ZipResolutionResponse(zip_code=normalized, **location.to_dict())


@router.get("/stores/{retailer}/nearby", response_model=NearbyStoresResponse)
async def nearby_stores(
    retailer: str,
    zip: str = Query(..., description="5-digit ZIP code"),
    limit: int = Query(10, ge=1, le=100),
    db: AsyncSession = Depends(get_database),
    services: Services = Depends(get_services),
):
    """Stores of a retailer ordered by distance from a ZIP code."""
    try:
        profile = ProviderRegistry.get_profile(retailer)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    normalized = normalize_zip(zip)
    if normalized is None:
        raise HTTPException(status_code=400, detail="ZIP code must be numeric and at most 5 digits")

    location = services.resolver.resolve(normalized)
    result = await db.execute(select(StoreLocation).where(StoreLocation.chain == retailer))
    stores = {store.id: store for store in result.scalars().all()}

    ranked = rank_by_distance(location.coordinates, stores.values())
    if profile.selection == RADIUS:
        radius = services.orchestrator.radius_miles
        ranked = [entry for entry in ranked if entry.distance_miles <= radius]

    return NearbyStoresResponse(
        retailer=retailer,
        zip_code=normalized,
        source=location.source,
        selection=profile.selection,
        stores=[
            NearbyStoreResponse(
                id=entry.store_id,
                name=stores[entry.store_id].name,
                address=stores[entry.store_id].address,
                city=stores[entry.store_id].city,
                state=stores[entry.store_id].state,
                zip_code=stores[entry.store_id].zip_code,
                phone=stores[entry.store_id].phone,
                store_hours=stores[entry.store_id].store_hours,
                distance_miles=round(entry.distance_miles, 2),
            )
            for entry in ranked[:limit]
        ],
    )
